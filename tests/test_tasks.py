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
Unit tests for the deferred Android tasks.
"""

import pytest

from droidbuild import android
from droidbuild import signals
from droidbuild.android import AndroidTask, BuildMode, BuildOptions, Verb, tasks

FACTORIES = [
    ("assemble", "Assemble Android App", "app:assembleRelease"),
    ("build", "Assembles and tests Android App", "app:buildRelease"),
    ("install", "Installs the assembled Android App", "app:installRelease"),
]


@pytest.fixture
def options():
    return BuildOptions("/proj/android", "app", BuildMode.RELEASE)


class TestTaskFactories:

    @pytest.mark.parametrize("name, description, gradletask", FACTORIES)
    def test_descriptor(self, options, name, description, gradletask):
        task = getattr(tasks, name)(options)
        assert task.priority == 1
        assert task.priority == android.FIRST
        assert task.description == description
        assert str(task) == description

    @pytest.mark.parametrize("name, description, gradletask", FACTORIES)
    def test_factory_does_not_spawn(self, spawned, options, name, description, gradletask):
        getattr(tasks, name)(options, ["--offline"])
        assert spawned.calls == []

    @pytest.mark.parametrize("name, description, gradletask", FACTORIES)
    def test_run(self, spawned, options, name, description, gradletask):
        task = getattr(tasks, name)(options, ["-PreactNativeDevServerPort=8081", "--offline"])
        proc = task.run()
        assert spawned.calls == [
            (["./gradlew", gradletask, "-PreactNativeDevServerPort=8081", "--offline"],
             "/proj/android"),
        ]
        assert proc is spawned.processes[0]

    def test_options_args_come_first(self, spawned):
        options = BuildOptions("/p", "wear", "debug", ("--stacktrace",))
        tasks.install(options, ["--offline"]).run()
        assert spawned.argv == ["./gradlew", "wear:installDebug", "--stacktrace", "--offline"]

    def test_captured_arguments_are_copied(self, spawned, options):
        extra = ["--offline"]
        task = tasks.assemble(options, extra)
        extra.append("--late")
        task.run()
        assert spawned.argv == ["./gradlew", "app:assembleRelease", "--offline"]

    def test_run_with_launcher(self, spawned, options):
        tasks.build(options).run(launcher="gradlew.bat")
        assert spawned.argv == ["gradlew.bat", "app:buildRelease"]

    def test_verb_from_string(self, options):
        task = AndroidTask(2, "Build it", "build", options)
        assert task.verb is Verb.BUILD

    def test_sort_by_priority(self, options):
        later = AndroidTask(5, "later", Verb.INSTALL, options)
        first = tasks.assemble(options)
        assert sorted([later, first]) == [first, later]


class TestTaskSignals:

    def test_start_and_spawned(self, spawned, options):
        events = []

        def on_start(sender, **kwargs):
            events.append(("start", sender))

        def on_spawned(sender, process=None):
            events.append(("spawned", sender, process))

        task = tasks.assemble(options)
        with signals.task_start.connected_to(on_start), \
                signals.task_spawned.connected_to(on_spawned):
            proc = task.run()
        assert events == [("start", task), ("spawned", task, proc)]

    def test_error(self, spawned, options):
        errors = []

        def on_error(sender, exc=None):
            errors.append((sender, exc))

        spawned.error = PermissionError(13, "Permission denied", "./gradlew")
        task = tasks.install(options)
        with signals.task_error.connected_to(on_error):
            with pytest.raises(PermissionError):
                task.run()
        assert errors == [(task, spawned.error)]

# vim:ts=4:sw=4:softtabstop=4:smarttab:expandtab:fileencoding=utf-8
