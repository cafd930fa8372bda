#!/usr/bin/env python3

# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Unit tests for droidbuild.exitstatus.
"""

import signal

from droidbuild.exitstatus import ExitStatus


def test_normal_exit():
    es = ExitStatus(0, name="gradlew")
    assert es
    assert es.exited()
    assert int(es) == 0
    assert es.signal is None
    assert str(es) == "gradlew: Exited normally."


def test_abnormal_exit():
    es = ExitStatus(1, name="gradlew")
    assert not es
    assert es.exited()
    assert es.status == 1
    assert str(es) == "gradlew: Exited abnormally with status 1."


def test_signalled():
    es = ExitStatus(-signal.SIGKILL)
    assert not es
    assert es.signalled()
    assert es.signal == signal.SIGKILL
    assert "signal" in str(es)
    assert repr(es) == "ExitStatus({}, name='gradle')".format(-signal.SIGKILL)

# vim:ts=4:sw=4:softtabstop=4:smarttab:expandtab
