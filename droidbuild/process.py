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
Simple, asynchronous process spawner for the Gradle launcher.

The spawned process shares the standard streams of this process, so Gradle's
progress and compiler diagnostics reach the user as they are written. Nothing
is captured.
"""

import os
import signal
import sys

import psutil

from subprocess import CalledProcessError  # noqa

from curio import subprocess

from droidbuild import logging
from droidbuild.exitstatus import ExitStatus
from droidbuild.reactor import get_kernel, CancelledError
from droidbuild.signals import process_start, process_exit

WINDOWS = sys.platform == "win32"


class GradleProcess:
    """A running launcher process.

    Wraps a curio Popen, so waiting is cooperative inside the kernel. Use
    :py:meth:`wait` from a coroutine, or :py:meth:`syncwait` from plain code.
    Cancelling a task blocked in :py:meth:`wait` kills the process.
    """

    def __init__(self, argv, cwd=None):
        self._popen = subprocess.Popen(argv, cwd=cwd, stdin=None, stdout=None, stderr=None,
                                       shell=False)
        self.progname = os.path.basename(argv[0])
        self.cwd = cwd

    def __repr__(self):
        return "{}(pid={}, args={!r}, cwd={!r})".format(
            self.__class__.__name__, self.pid, self.args, self.cwd)

    @property
    def pid(self):
        return self._popen.pid

    @property
    def args(self):
        return self._popen.args

    @property
    def returncode(self):
        return self._popen.returncode

    @property
    def exitstatus(self):
        """ExitStatus, or None if the process has not been reaped yet."""
        rc = self._popen.returncode
        if rc is None:
            return None
        return ExitStatus(rc, name=self.progname)

    def poll(self):
        return self._popen.poll()

    async def wait(self):
        """Wait for the process to exit.

        Returns:
            A true ExitStatus.

        Raises:
            CalledProcessError: Gradle exited with a non-zero status.
        """
        try:
            retcode = await self._popen.wait()
        except CancelledError:
            logging.notice("GradleProcess: wait cancelled, killing PID {}".format(self.pid))
            self.kill()
            raise
        es = ExitStatus(retcode, name=self.progname)
        process_exit.send(self, exitstatus=es)
        if retcode:
            logging.warning("GradleProcess: {}({}): {}".format(self.progname, self.pid, es))
            raise CalledProcessError(retcode, self.args)
        logging.info("GradleProcess: {}({}): {}".format(self.progname, self.pid, es))
        return es

    def syncwait(self):
        """Block until the process exits. Same results as :py:meth:`wait`."""
        return get_kernel().run(self.wait)

    def interrupt(self):
        """Ask Gradle to stop, as if Ctrl-C was typed."""
        self._send_signal(signal.SIGTERM if WINDOWS else signal.SIGINT)

    def kill(self):
        if self.poll() is not None:
            return
        try:
            psutil.Process(self.pid).kill()
        except psutil.NoSuchProcess:
            pass

    def _send_signal(self, sig):
        if self.poll() is not None:
            return
        try:
            psutil.Process(self.pid).send_signal(sig)
        except psutil.NoSuchProcess:
            pass


def spawn(argv, cwd=None):
    """Start argv in directory cwd, with stdio inherited from this process.

    Does not wait for it to finish.

    Raises:
        OSError: the program could not be started. Usually FileNotFoundError
                 for a missing launcher or directory, or PermissionError.
    """
    argv = [os.fspath(arg) for arg in argv]
    logging.notice("spawn: trying: {} in {}".format(argv, cwd))
    try:
        proc = GradleProcess(argv, cwd=cwd)
    except OSError as err:
        logging.exception_warning("spawn: {!r} failed".format(argv[0]), err)
        raise
    logging.notice("spawn: started: {!r} with PID: {}".format(proc.progname, proc.pid))
    process_start.send(proc, argv=argv, cwd=cwd)
    return proc


# vim:ts=4:sw=4:softtabstop=4:smarttab:expandtab:fileencoding=utf-8
