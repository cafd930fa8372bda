# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Gradle task wrappers for Android apps.

Each wrapper starts the project's Gradle launcher (``./gradlew``, or
``gradlew.bat`` on Windows) in the Android project directory and returns the
running :py:class:`droidbuild.process.GradleProcess` without waiting for it.

    >>> proc = android.assemble("/proj/android", "app", BuildMode.RELEASE,
    ...                         ["-PreactNativeDevServerPort=8081"])
    >>> proc.syncwait()

runs ``./gradlew app:assembleRelease -PreactNativeDevServerPort=8081`` in
``/proj/android``.

The :py:data:`tasks` object makes the same calls available as deferred
:py:class:`AndroidTask` objects for a task runner.

Launching the installed app, and setting up a tunnel between it and a
development server, are left to the framework using this module.
"""

import sys
from enum import Enum
from typing import List, NamedTuple, Optional, Sequence, Tuple

from droidbuild import process
from droidbuild.signals import task_start, task_spawned, task_error

GRADLEW = "./gradlew"
GRADLEW_WINDOWS = "gradlew.bat"

# Task priority, lower runs earlier.
FIRST = 1


class BuildMode(str, Enum):
    DEBUG = "debug"
    RELEASE = "release"

    def __str__(self):
        return self.value


class Verb(str, Enum):
    """The Gradle task prefixes that a task name can be built from."""
    ASSEMBLE = "assemble"
    BUILD = "build"
    INSTALL = "install"

    def __str__(self):
        return self.value


class BuildOptions(NamedTuple):
    """One build, assemble or install request.

    Attributes:
        source_dir: the Android project directory, holding the Gradle launcher.
        app_name: the Gradle application project, usually "app".
        mode: a BuildMode, or its string value.
        gradle_args: extra arguments given to Gradle before any others.
    """
    source_dir: str
    app_name: str
    mode: BuildMode = BuildMode.DEBUG
    gradle_args: Tuple[str, ...] = ()


def _text(value):
    if isinstance(value, Enum):
        return value.value
    return str(value)


def resolve_launcher(platform: str) -> str:
    """Name of the Gradle launcher on the given platform (a sys.platform value)."""
    if platform.startswith("win"):
        return GRADLEW_WINDOWS
    return GRADLEW


def to_pascal_case(text) -> str:
    text = _text(text)
    return text[:1].upper() + text[1:]


def task_name(app_name: str, verb, mode) -> str:
    """Gradle task name for a verb and build mode.

    Nothing is validated. An unknown mode is passed along for Gradle to
    reject.

        >>> task_name("app", Verb.INSTALL, BuildMode.DEBUG)
        'app:installDebug'
    """
    return "{}:{}{}".format(app_name, _text(verb), to_pascal_case(mode))


def gradle_argv(args: Sequence[str], launcher: Optional[str] = None) -> List[str]:
    """Full command line for running the Gradle launcher with args."""
    if launcher is None:
        launcher = resolve_launcher(sys.platform)
    return [launcher] + list(args)


def gradle(cwd, args: Sequence[str] = (), launcher: Optional[str] = None):
    """Start the Gradle launcher in directory cwd with the given arguments.

    The launcher is chosen for the current platform on every call unless given.
    Start failures (missing launcher or directory, permissions) raise the
    OSError from the process layer.
    """
    return process.spawn(gradle_argv(args, launcher), cwd=cwd)


#
# Gradle task wrappers
#

def assemble(cwd, app_name: str, mode, args: Sequence[str] = (),
             launcher: Optional[str] = None):
    """Assembles an Android app using Gradle."""
    return gradle(cwd, [task_name(app_name, Verb.ASSEMBLE, mode)] + list(args), launcher)


def build(cwd, app_name: str, mode, args: Sequence[str] = (),
          launcher: Optional[str] = None):
    """Assembles and tests an Android app using Gradle."""
    return gradle(cwd, [task_name(app_name, Verb.BUILD, mode)] + list(args), launcher)


def install(cwd, app_name: str, mode, args: Sequence[str] = (),
            launcher: Optional[str] = None):
    """Installs an Android app using Gradle."""
    return gradle(cwd, [task_name(app_name, Verb.INSTALL, mode)] + list(args), launcher)


def custom_task(cwd, custom_task_name: str, args: Sequence[str] = (),
                launcher: Optional[str] = None):
    """Runs any Gradle task, by its full name.

    For what assemble, build and install do not cover.
    """
    return gradle(cwd, [custom_task_name] + list(args), launcher)


#
# Android tasks
#

class AndroidTask:
    """A deferred Gradle run, for a task runner.

    Holds the request and which wrapper to call. Nothing is started until
    :py:meth:`run` is called.

    Attributes:
        priority: lower numbers should run first.
        description: human readable description.
        verb: a Verb selecting assemble, build or install.
        options: the BuildOptions.
        args: extra Gradle arguments, following those in options.
    """

    def __init__(self, priority: int, description: str, verb: Verb, options: BuildOptions,
                 args: Sequence[str] = ()):
        self.priority = priority
        self.description = description
        self.verb = Verb(verb)
        self.options = options
        self.args = tuple(args)

    def __repr__(self):
        return "{}({!r}, {!r}, {!r}, {!r}, {!r})".format(
            self.__class__.__name__, self.priority, self.description, self.verb,
            self.options, self.args)

    def __str__(self):
        return self.description

    def __lt__(self, other):
        return self.priority < other.priority

    @property
    def arguments(self) -> List[str]:
        """All extra Gradle arguments, in the order given to Gradle."""
        return list(self.options.gradle_args) + list(self.args)

    def run(self, launcher: Optional[str] = None):
        """Start the Gradle run, returning the GradleProcess."""
        operation = _OPERATIONS[self.verb]
        opts = self.options
        task_start.send(self)
        try:
            proc = operation(opts.source_dir, opts.app_name, opts.mode, self.arguments,
                             launcher=launcher)
        except OSError as err:
            task_error.send(self, exc=err)
            raise
        task_spawned.send(self, process=proc)
        return proc


_OPERATIONS = {
    Verb.ASSEMBLE: assemble,
    Verb.BUILD: build,
    Verb.INSTALL: install,
}


class AndroidTasks:
    """Factories for AndroidTask objects. Use the :py:data:`tasks` instance."""

    def assemble(self, options: BuildOptions, args: Sequence[str] = ()) -> AndroidTask:
        """Assemble task. Gradle gets options.gradle_args, then args."""
        return AndroidTask(FIRST, "Assemble Android App", Verb.ASSEMBLE, options, args)

    def build(self, options: BuildOptions, args: Sequence[str] = ()) -> AndroidTask:
        """Build task. Gradle gets options.gradle_args, then args."""
        return AndroidTask(FIRST, "Assembles and tests Android App", Verb.BUILD, options, args)

    def install(self, options: BuildOptions, args: Sequence[str] = ()) -> AndroidTask:
        """Install task. Gradle gets options.gradle_args, then args.

        A useful extra Gradle argument:

            -PreactNativeDevServerPort=8081

        points the installed app at a development server on port 8081.
        """
        return AndroidTask(FIRST, "Installs the assembled Android App", Verb.INSTALL, options,
                           args)


tasks = AndroidTasks()


# vim:ts=4:sw=4:softtabstop=4:smarttab:expandtab:fileencoding=utf-8
