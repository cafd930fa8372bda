# python3

# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#    http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import signal


class ExitStatus:
    """Exit status of a finished Gradle launcher process.

    Evaluates True only if the process exited normally with a zero status, the
    same as a typical posix shell.
    """
    EXITED = 1
    SIGNALED = 3

    def __init__(self, returncode, name="gradle"):
        """Exit status from a subprocess return code.

        Args:
            returncode: the return code from the subprocess module. Negative
                        values mean the process was killed by that signal.
            name: name of the process to report when stringified.
        """
        self.name = name
        if returncode < 0:
            self.state = ExitStatus.SIGNALED
            self._status = self._signal = -returncode
        else:
            self.state = ExitStatus.EXITED
            self._status = returncode
            self._signal = 0

    @property
    def status(self):
        return self._status

    @property
    def signal(self):
        if self._signal:
            return signal.Signals(self._signal)
        return None

    def exited(self):
        return self.state == ExitStatus.EXITED

    def signalled(self):
        return self.state == ExitStatus.SIGNALED

    def __int__(self):
        return self._status

    def __bool__(self):
        return self.state == ExitStatus.EXITED and not self._status

    def __repr__(self):
        return "{}({!r}, name={!r})".format(
            self.__class__.__name__,
            -self._signal if self.signalled() else self._status, self.name)

    def __str__(self):
        if self.state == ExitStatus.EXITED:
            if self._status == 0:
                return "{}: Exited normally.".format(self.name)
            return "{}: Exited abnormally with status {:d}.".format(self.name, self._status)
        return "{}: Exited by signal {:d}.".format(self.name, self._signal)


# vim:ts=4:sw=4:softtabstop=4:smarttab:expandtab
