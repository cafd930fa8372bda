# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Command line interface for running Android Gradle tasks.

Runs one task, waits for Gradle, and exits with Gradle's exit status.
"""

import sys

from docopt import docopt, DocoptExit

from droidbuild import android
from droidbuild import config
from droidbuild import logging
from droidbuild.exceptions import ConfigError, UsageError
from droidbuild.process import CalledProcessError


USAGE = r"""droidbuild - run Gradle tasks for an Android app.

Usage:
    droidbuild [options] (assemble | build | install) [--] [<gradlearg>...]
    droidbuild [options] custom <taskname> [--] [<gradlearg>...]
    droidbuild [options] config
    droidbuild -h | --help

Options:
    -h --help         This help.
    -C <dir>          Android project directory, holding the gradlew launcher. [default: .]
    -a <appname>      Gradle application project. Default from configuration.
    -m <mode>         Build mode, debug or release. Default from configuration.
    -c <configfile>   Additional YAML config file to merge into configuration.
    -d                Debug mode. Log at DEBUG priority, also to stderr.
    -v                Verbose mode. Log at INFO priority, also to stderr.

Gradle arguments that start with a dash must follow a "--".

Example:

    droidbuild -C android -m release install -- -PreactNativeDevServerPort=8081

    That runs "./gradlew app:installRelease -PreactNativeDevServerPort=8081" in
    the android directory.
"""


def _get_arguments(argv):
    try:
        return docopt(USAGE, argv=argv)
    except DocoptExit as err:
        raise UsageError(str(err)) from None


def _select_verb(arguments):
    for verb in android.Verb:
        if arguments[verb.value]:
            return verb
    raise UsageError("No Gradle task selected.")


def _setup_logging(cf):
    if cf.flags.debug:
        return logging.get_logger("droidbuild", usestderr=True, priority="DEBUG")
    if cf.flags.verbose:
        return logging.get_logger("droidbuild", usestderr=True, priority="INFO")
    return None


def run(arguments):
    """Run the task selected by parsed docopt arguments.

    Returns:
        exit code
    """
    try:
        cf = config.get_config(_filename=arguments["-c"])
    except ConfigError as err:
        print("droidbuild: configuration error: {}".format(err), file=sys.stderr)
        return 2
    if arguments["-d"]:
        cf.flags.debug = 1
    if arguments["-v"]:
        cf.flags.verbose = 1
    _setup_logging(cf)
    if arguments["config"]:
        config.show_config(cf)
        return 0

    launcher = cf.gradle.launcher or None
    directory = arguments["-C"]
    extra = arguments["<gradlearg>"]
    try:
        if arguments["custom"]:
            args = list(cf.gradle.args or []) + extra
            proc = android.custom_task(directory, arguments["<taskname>"], args,
                                       launcher=launcher)
        else:
            verb = _select_verb(arguments)
            options = android.BuildOptions(directory,
                                           arguments["-a"] or cf.android.app,
                                           arguments["-m"] or cf.android.mode,
                                           tuple(cf.gradle.args or ()))
            factory = getattr(android.tasks, verb.value)
            proc = factory(options, extra).run(launcher=launcher)
    except OSError as err:
        print("droidbuild: could not start Gradle: {}".format(err), file=sys.stderr)
        return 2
    try:
        proc.syncwait()
    except CalledProcessError as cpe:
        return cpe.returncode
    return 0


def main(argv=None):
    try:
        arguments = _get_arguments(argv)
    except UsageError as err:
        print(err, file=sys.stderr)
        return 2
    try:
        return run(arguments)
    except KeyboardInterrupt:
        return 130


# vim:ts=4:sw=4:softtabstop=4:smarttab:expandtab:fileencoding=utf-8
