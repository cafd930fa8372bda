# python3

# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Asynchronous core. Unify the asynchronous functions here.
"""

import atexit

from droidbuild import logging

from curio import Kernel, CancelledError, TaskTimeout, TaskGroup, timeout_after  # noqa


_default_kernel = None


def get_kernel():
    """Return the package curio.Kernel object.

    This is a singleton object, shut down at interpreter exit.
    """
    global _default_kernel
    if _default_kernel is None:
        _default_kernel = Kernel()
        atexit.register(_shutdown_kernel)
    return _default_kernel


def _shutdown_kernel():
    global _default_kernel
    if _default_kernel is not None:
        kern = _default_kernel
        _default_kernel = None
        logging.info("Shutting down curio.Kernel at exit.")
        kern.run(None, shutdown=True)


def run(corofunc, *args):
    """Run a coroutine function to completion on the package kernel."""
    return get_kernel().run(corofunc, *args)


# vim:ts=4:sw=4:softtabstop=4:smarttab:expandtab:fileencoding=utf-8
