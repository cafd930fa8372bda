# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
r"""Configuration object and factory function.

Based on the confuse YAML configuration module.

Config files are merged together from various sources. The default values are
embedded here in the file config_default.yaml. User's may override, or set
additional values, by placing a "config.yaml" file in the user configuration directory.

The user configuration directory would be:

Linux:
    `~/.config/droidbuild/`

MacOS:
    `~/.config/droidbuild/`
    or
    `~/Library/Application Support/droidbuild/`

Windows:
    `~\\AppData\\Roaming\\droidbuild\\`

Only the command line tool reads the configuration. The task functions in
:py:mod:`droidbuild.android` take everything as arguments.
"""

import os
from collections import ChainMap

import confuse

from droidbuild.exceptions import ConfigNotFoundError, ConfigValueError

_CONFIG = None


class Config(ChainMap):
    """The merged droidbuild configuration, with attribute access to sections.

    Sections not present read as an empty :py:class:`ConfigDict`.
    """

    def __init__(self, *maps):
        self.__dict__["maps"] = list(maps) or [{}]

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError("Config has no section {!r}".format(name)) from None

    def __setattr__(self, name, val):
        self[name] = val

    def __missing__(self, key):
        section = self[key] = ConfigDict()
        return section


class ConfigDict(dict):
    """A configuration section.

    Keys may be given as attributes, or as a dotted path into nested sections:

        >>> cf = config.get_config()
        >>> cf.android.mode
        'debug'
        >>> cf["gradle.launcher"] = "gradle"
    """

    def __repr__(self):
        return "ConfigDict({})".format(dict.__repr__(self))

    def _walk(self, key):
        section = self
        *parents, leaf = key.split(".")
        for part in parents:
            section = section.setdefault(part, ConfigDict())
        return section, leaf

    def __getitem__(self, key):
        section, leaf = self._walk(key)
        return dict.__getitem__(section, leaf)

    def __setitem__(self, key, value):
        section, leaf = self._walk(key)
        dict.__setitem__(section, leaf, value)

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError("No configuration key {!r}".format(name)) from None

    __setattr__ = __setitem__


def _convert(mapping):
    """Turn the plain nested dictionaries from confuse into ConfigDict."""
    section = ConfigDict()
    for key, value in mapping.items():
        if isinstance(value, dict):
            value = _convert(value)
        dict.__setitem__(section, key, value)
    return section


def get_config(initdict=None, _filename=None, **kwargs):
    """Get primary configuration.

    Sources are, from lowest to highest priority: the package
    config_default.yaml, the user's config.yaml, the file named by
    '_filename', the 'initdict' dictionary, and keyword parameters.

    The configuration is built once. Later calls return the same object and
    ignore their arguments.

    Raises:
        ConfigNotFoundError: the extra file does not exist.
        ConfigValueError: a configuration source could not be parsed.

    Returns:
        A :class:`Config` instance.
    """
    global _CONFIG
    if _CONFIG is None:
        try:
            cf = confuse.Configuration("droidbuild", "droidbuild")
            if _filename:
                if not os.path.isfile(_filename):
                    raise ConfigNotFoundError("No config file {!r}".format(_filename))
                cf.set_file(_filename)
            if isinstance(initdict, dict):
                cf.set(initdict)
            if kwargs:
                cf.set(kwargs)
            flat = cf.flatten()
        except confuse.ConfigError as err:
            raise ConfigValueError(str(err)) from err
        _CONFIG = Config(_convert(flat))
    return _CONFIG


def show_config(cf, _path=None):
    """Print the configuration as a list of paths and the end value.
    """
    path = _path or []
    keys = sorted(cf.keys())
    for key in keys:
        value = cf[key]
        path.append(key)
        if isinstance(value, dict):
            show_config(value, path)
        else:
            print(".".join(path), "=", repr(value))
        path.pop(-1)


# vim:ts=4:sw=4:softtabstop=4:smarttab:expandtab:fileencoding=utf-8
