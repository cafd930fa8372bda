# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
pytest configuration and common code lives here.
"""

import os
import sys

import pytest

from droidbuild import config
from droidbuild import process
from droidbuild.exitstatus import ExitStatus

# Stands in for a real Gradle wrapper. Records its arguments and working
# directory in the project directory.
FAKE_GRADLEW = r"""#!/bin/sh
pwd > gradle.cwd
: > gradle.args
for arg in "$@"; do
    printf '%s\n' "$arg" >> gradle.args
done
if [ -n "$FAKE_GRADLE_SLEEP" ]; then
    exec sleep "$FAKE_GRADLE_SLEEP"
fi
exit "${FAKE_GRADLE_EXIT:-0}"
"""

class FakeProject:
    """An Android project directory whose gradlew only records how it was called."""

    def __init__(self, path):
        self.path = path
        path.mkdir(parents=True, exist_ok=True)
        self.launcher = path / "gradlew"
        self.launcher.write_text(FAKE_GRADLEW)
        self.launcher.chmod(0o755)

    @property
    def args(self):
        return (self.path / "gradle.args").read_text().splitlines()

    @property
    def cwd(self):
        return os.path.realpath((self.path / "gradle.cwd").read_text().strip())


class FakeProcess:
    """Takes the place of GradleProcess when nothing should really run."""

    def __init__(self, argv, cwd, returncode=0):
        self.args = list(argv)
        self.cwd = cwd
        self.returncode = returncode

    def syncwait(self):
        if self.returncode:
            raise process.CalledProcessError(self.returncode, self.args)
        return ExitStatus(self.returncode, name=os.path.basename(self.args[0]))


class SpawnRecorder:
    """Replaces process.spawn, recording each command line and directory."""

    def __init__(self):
        self.calls = []
        self.processes = []
        self.returncode = 0
        self.error = None

    def __call__(self, argv, cwd=None):
        if self.error is not None:
            raise self.error
        self.calls.append((list(argv), cwd))
        proc = FakeProcess(argv, cwd, self.returncode)
        self.processes.append(proc)
        return proc

    @property
    def argv(self):
        return self.calls[-1][0]


@pytest.fixture
def project(tmp_path):
    return FakeProject(tmp_path / "android")


@pytest.fixture
def make_project(tmp_path):

    def _make(name):
        return FakeProject(tmp_path / name)

    return _make


@pytest.fixture
def spawned(monkeypatch):
    recorder = SpawnRecorder()
    monkeypatch.setattr(process, "spawn", recorder)
    monkeypatch.setattr(sys, "platform", "linux")
    return recorder


@pytest.fixture
def cf():
    config._CONFIG = None
    yield config.get_config()
    config._CONFIG = None

# vim:ts=4:sw=4:softtabstop=4:smarttab:expandtab:fileencoding=utf-8
