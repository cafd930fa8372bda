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
Unit tests for the droidbuild command.
"""

from droidbuild import cli


class TestCommandLine:

    def test_assemble_defaults(self, spawned, cf):
        assert cli.main(["assemble"]) == 0
        assert spawned.calls == [(["./gradlew", "app:assembleDebug"], ".")]

    def test_install_with_gradle_args(self, spawned, cf):
        rv = cli.main(["-C", "android", "-m", "release", "-a", "wear", "install", "--",
                       "-PreactNativeDevServerPort=8081"])
        assert rv == 0
        assert spawned.calls == [
            (["./gradlew", "wear:installRelease", "-PreactNativeDevServerPort=8081"], "android"),
        ]

    def test_build(self, spawned, cf):
        assert cli.main(["-C", "android", "build"]) == 0
        assert spawned.argv == ["./gradlew", "app:buildDebug"]

    def test_custom(self, spawned, cf):
        assert cli.main(["-C", "android", "custom", "app:lint", "--", "--offline"]) == 0
        assert spawned.calls == [(["./gradlew", "app:lint", "--offline"], "android")]

    def test_configured_defaults(self, spawned, cf):
        cf.android.app = "tv"
        cf.android.mode = "release"
        cf.gradle.args = ["--stacktrace"]
        cf.gradle.launcher = "gradle"
        assert cli.main(["assemble", "--", "--offline"]) == 0
        assert spawned.argv == ["gradle", "tv:assembleRelease", "--stacktrace", "--offline"]

    def test_gradle_failure_exit_code(self, spawned, cf):
        spawned.returncode = 5
        assert cli.main(["install"]) == 5

    def test_spawn_failure(self, spawned, cf, capsys):
        spawned.error = FileNotFoundError(2, "No such file or directory", "./gradlew")
        assert cli.main(["-C", "/nowhere", "assemble"]) == 2
        assert "could not start Gradle" in capsys.readouterr().err

    def test_usage_error(self, spawned, cf):
        assert cli.main(["deploy"]) == 2
        assert spawned.calls == []

    def test_show_config(self, spawned, cf, capsys):
        assert cli.main(["config"]) == 0
        assert "android.mode = 'debug'" in capsys.readouterr().out
        assert spawned.calls == []

    def test_log_priority_from_flags(self, spawned, cf, monkeypatch):
        opened = []
        monkeypatch.setattr(cli.logging, "get_logger",
                            lambda name, **kwargs: opened.append(kwargs["priority"]))
        assert cli.main(["assemble"]) == 0
        assert opened == []
        cf.flags.verbose = 1
        assert cli.main(["assemble"]) == 0
        assert cli.main(["-d", "assemble"]) == 0
        assert opened == ["INFO", "DEBUG"]
        assert cf.flags.debug == 1

    def test_verbose_option(self, spawned, cf, monkeypatch):
        opened = []
        monkeypatch.setattr(cli.logging, "get_logger",
                            lambda name, **kwargs: opened.append(kwargs["priority"]))
        assert cli.main(["-v", "build"]) == 0
        assert opened == ["INFO"]
        assert cf.flags.verbose == 1

    def test_missing_config_file(self, spawned, tmp_path, capsys):
        from droidbuild import config
        config._CONFIG = None
        try:
            assert cli.main(["-c", str(tmp_path / "nope.yaml"), "assemble"]) == 2
        finally:
            config._CONFIG = None
        assert "configuration error" in capsys.readouterr().err

# vim:ts=4:sw=4:softtabstop=4:smarttab:expandtab:fileencoding=utf-8
