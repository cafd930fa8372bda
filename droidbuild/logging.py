# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Light logging module.

Messages go to the system's syslog service. Log destination configuration
should be done there. Gradle's own output is never logged here, it goes
straight to the user's terminal.

Configurable with the following environment variables:

DROIDBUILD_LOG_FACILITY
    Sets the syslog facility to use, default USER.

DROIDBUILD_LOG_PRIORITY
    Sets the syslog priority to log, default NOTICE.

DROIDBUILD_LOG_STDERR
    Set to include stderr in log output.

Windows has no syslog, so there messages are written to stderr with the stock
logging module.
"""

import logging
import os
import sys
import traceback
from typing import Dict, Optional

WINDOWS: bool = sys.platform == "win32"

if not WINDOWS:
    import syslog

FACILITY: str = os.environ.get("DROIDBUILD_LOG_FACILITY", "USER").upper()
PRIORITY: str = os.environ.get("DROIDBUILD_LOG_PRIORITY", "NOTICE").upper()
USESTDERR: bool = bool(os.environ.get("DROIDBUILD_LOG_STDERR"))

# syslog(3) priority values.
LOG_EMERG = 0
LOG_ALERT = 1
LOG_CRIT = 2
LOG_ERR = 3
LOG_WARNING = 4
LOG_NOTICE = 5
LOG_INFO = 6
LOG_DEBUG = 7

# Allow use of names, and useful aliases, to select logging level.
PRIORITIES = {
    "DEBUG": LOG_DEBUG,
    "INFO": LOG_INFO,
    "NOTICE": LOG_NOTICE,
    "WARNING": LOG_WARNING,
    "WARN": LOG_WARNING,
    "ERR": LOG_ERR,
    "ERROR": LOG_ERR,
    "CRIT": LOG_CRIT,
    "CRITICAL": LOG_CRIT,
    "ALERT": LOG_ALERT,
    "EMERG": LOG_EMERG,
}
PRIORITIES_REV = {
    LOG_DEBUG: "DEBUG",
    LOG_INFO: "INFO",
    LOG_NOTICE: "NOTICE",
    LOG_WARNING: "WARNING",
    LOG_ERR: "ERROR",
    LOG_CRIT: "CRITICAL",
    LOG_ALERT: "ALERT",
    LOG_EMERG: "EMERG",
}

# Stock logging levels, used on Windows.
_LEVEL_MAP = {
    LOG_EMERG: logging.CRITICAL,
    LOG_ALERT: logging.CRITICAL,
    LOG_CRIT: logging.CRITICAL,
    LOG_ERR: logging.ERROR,
    LOG_WARNING: logging.WARNING,
    LOG_NOTICE: logging.WARNING,
    LOG_INFO: logging.INFO,
    LOG_DEBUG: logging.DEBUG,
}

_priority = PRIORITIES.get(PRIORITY, LOG_NOTICE)
_stdlogger = logging.getLogger("droidbuild")


def openlog(ident=None, usestderr=USESTDERR, facility=FACILITY):
    """Open the system logger.

    Args:
      ident: log identifier, usually prefixes messages.
      usestderr: also log to stderr stream.
      facility: the logging facility to use. See syslog(1)
    """
    if WINDOWS:
        if not _stdlogger.handlers:
            _stdlogger.addHandler(logging.StreamHandler(sys.stderr))
        _stdlogger.setLevel(_LEVEL_MAP[_priority])
        return
    opts = syslog.LOG_PID | (syslog.LOG_PERROR if usestderr else 0)
    if isinstance(facility, str):
        facility = getattr(syslog, "LOG_" + facility.upper())
    if ident is None:  # openlog does not take None as an ident parameter.
        syslog.openlog(logoption=opts, facility=facility)
    else:
        syslog.openlog(ident=ident, logoption=opts, facility=facility)


def closelog():
    """Close the system logger."""
    if not WINDOWS:
        syslog.closelog()


def _emit(level, msg):
    if WINDOWS:
        _stdlogger.log(_LEVEL_MAP[level], msg)
    else:
        syslog.syslog(level, msg)


def debug(msg, *args):
    """Send a log message at DEBUG priority."""
    if _priority >= LOG_DEBUG:
        _emit(LOG_DEBUG, _encode(msg, args))


def info(msg, *args):
    """Send a log message at INFO priority."""
    if _priority >= LOG_INFO:
        _emit(LOG_INFO, _encode(msg, args))


def notice(msg, *args):
    """Send a log message at NOTICE priority."""
    if _priority >= LOG_NOTICE:
        _emit(LOG_NOTICE, _encode(msg, args))


def warning(msg, *args):
    """Send a log message at WARNING priority."""
    if _priority >= LOG_WARNING:
        _emit(LOG_WARNING, _encode(msg, args))


def error(msg, *args):
    """Send a log message at ERROR priority."""
    if _priority >= LOG_ERR:
        _emit(LOG_ERR, _encode(msg, args))


def critical(msg, *args):
    """Send a log message at CRITICAL priority."""
    if _priority >= LOG_CRIT:
        _emit(LOG_CRIT, _encode(msg, args))


def _encode(o, args):
    msg = str(o)
    if args:
        try:
            msg = msg % args
        except TypeError:
            msg = msg + " had format TypeError: " + str(args)
    if WINDOWS:
        return msg
    # Add UTF8 BOM to message per RFC-5424. str is UTF-8 encoded by syslog module.
    return "\ufeff" + msg.replace("\r\n", " ")


def set_priority(level):
    """Set the maximum priority that is logged.

    Args:
        level: one of the LOG_* levels.
    """
    global _priority
    _priority = level
    if WINDOWS:
        _stdlogger.setLevel(_LEVEL_MAP[level])
    else:
        syslog.setlogmask(syslog.LOG_UPTO(level))


def get_priority():
    """Get max log priority."""
    return _priority


def priority_debug():
    """Set global logging priority to DEBUG."""
    set_priority(LOG_DEBUG)


def priority_info():
    """Set global logging priority to INFO."""
    set_priority(LOG_INFO)


def priority_notice():
    """Set global logging priority to NOTICE."""
    set_priority(LOG_NOTICE)


def priority_warning():
    """Set global logging priority to WARNING."""
    set_priority(LOG_WARNING)


def exception_error(prefix, ex, *args):
    """Log a compact exception at ERROR priority."""
    msg = _encode(prefix, args)
    error(f"{msg}: {_format_exception(ex)}")


def exception_warning(prefix, ex, *args):
    """Log a compact exception at WARNING priority."""
    msg = _encode(prefix, args)
    warning(f"{msg}: {_format_exception(ex)}")


def _format_exception(ex):
    return " | ".join(line.strip() for line in traceback.format_exception_only(type(ex), ex))


class Logger:
    """Simple logger using only the system log.

    Users of this logging object will have ``name`` prefixed to every message.

    Args:
        name: name to prefix to logging messages. The program name will be used by
          default.
        usestderr: Also write log messages to stderr.
        facility: name of syslog facility. Default is "USER"
        priority: name of priority level to emit log messages at. Must be one of:
          "EMERG", "ALERT", "CRIT", "ERR", "WARNING", "NOTICE", "INFO", "DEBUG".
          Default is "NOTICE"
    """

    _LOGGERS: Dict[str, "Logger"] = {}  # cache of all open loggers

    def __init__(
        self,
        name: Optional[str] = None,
        usestderr: Optional[bool] = False,
        facility: Optional[str] = FACILITY,
        priority: Optional[str] = PRIORITY,
    ):
        self.name = name or os.path.basename(sys.argv[0])
        closelog()
        openlog(name, usestderr, facility)
        self.priority = priority

    def close(self):
        """Remove this logger from the cache, closing the log when none remain."""
        Logger._LOGGERS.pop(self.name, None)
        if not Logger._LOGGERS:
            closelog()

    def debug(self, msg, *args):
        debug(f"{self.name}: {msg}", *args)

    def info(self, msg, *args):
        info(f"{self.name}: {msg}", *args)

    def notice(self, msg, *args):
        notice(f"{self.name}: {msg}", *args)

    def warning(self, msg, *args):
        warning(f"{self.name}: {msg}", *args)

    def error(self, msg, *args):
        error(f"{self.name}: {msg}", *args)

    def critical(self, msg, *args):
        critical(f"{self.name}: {msg}", *args)

    def exception_error(self, prefix, exc, *args):
        """Log an exception as error."""
        exception_error(f"{self.name}: {prefix}", exc, *args)

    def exception_warning(self, prefix, exc, *args):
        """Log an exception as warning."""
        exception_warning(f"{self.name}: {prefix}", exc, *args)

    @property
    def priority(self):
        """The current priority level name."""
        return PRIORITIES_REV[get_priority()]

    @priority.setter
    def priority(self, newlevel):
        set_priority(PRIORITIES[newlevel.upper()])


def get_logger(name=None, usestderr=USESTDERR, facility=FACILITY, priority=PRIORITY):
    """Get a :py:class:`Logger` object.

    May return cached logger object. Global logger configuration reflects the last
    one created.
    """
    name = name or os.path.basename(sys.argv[0])
    if name in Logger._LOGGERS:
        return Logger._LOGGERS[name]
    logger = Logger(name=name, usestderr=usestderr, facility=facility, priority=priority)
    Logger._LOGGERS[name] = logger
    return logger


class LogLevel:
    """Context manager to run a block of code at a specific log level.

    Supply the level name as a string.
    """

    def __init__(self, level):
        self._level = PRIORITIES[level.upper()]
        self._oldpriority = LOG_NOTICE

    def __enter__(self):
        self._oldpriority = get_priority()
        set_priority(self._level)
        return self

    def __exit__(self, extype, exvalue, extb):
        set_priority(self._oldpriority)


openlog("droidbuild")
set_priority(_priority)

# vim:ts=4:sw=4:softtabstop=4:smarttab:expandtab:fileencoding=utf-8
