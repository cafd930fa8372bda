# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""All common exceptions.

Process failures are not wrapped. A launcher that cannot be started raises the
OSError the subprocess layer raised, and a Gradle run that exits non-zero
raises :py:class:`subprocess.CalledProcessError` when waited on.
"""


class DroidBuildError(Exception):
    """Base class for errors raised by this package."""


# configuration errors
class ConfigError(DroidBuildError):
    """Base class for exceptions raised when querying a configuration.
    """


class ConfigNotFoundError(ConfigError):
    """A requested configuration file or value could not be found.
    """


class ConfigValueError(ConfigError):
    """The value in the configuration is illegal."""


# command line errors
class UsageError(DroidBuildError):
    """Bad command line usage."""


# vim:ts=4:sw=4:softtabstop=4:smarttab:expandtab:fileencoding=utf-8
