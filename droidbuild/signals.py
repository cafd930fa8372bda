# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Task and process lifecycle signals.

Based on the blinker package. A task orchestrator, or a user interface, may
subscribe to these to follow what is started and when it finishes.

    task_start      sender: AndroidTask, before its process is spawned.
    task_spawned    sender: AndroidTask, keyword `process`.
    task_error      sender: AndroidTask, keyword `exc`, spawn failed.
    process_start   sender: GradleProcess, keywords `argv` and `cwd`.
    process_exit    sender: GradleProcess, keyword `exitstatus`.
"""

from blinker import Namespace


_signals = Namespace()

# task descriptor events
task_start = _signals.signal('task-start')
task_spawned = _signals.signal('task-spawned')
task_error = _signals.signal('task-error')

# process events
process_start = _signals.signal('process-start')
process_exit = _signals.signal('process-exit')


# vim:ts=4:sw=4:softtabstop=4:smarttab:expandtab
