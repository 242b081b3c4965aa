"""A simple file logger with size-based rotation and a process-wide current logger."""

import inspect
import itertools
import os
import time
from enum import IntEnum

MAX_LOG_FILE_SIZE = 1024 * 1024
SESSION_HEADER = "\n       ===== New Session Started =====\n"

_state = {"current": None}
_rotation_numbers = itertools.count(1)


class LogLevel(IntEnum):
    """Severity of a log message."""

    DEBUG = 1
    INFO = 2
    ERROR = 3


def log_level_to_str(level):
    """Return the name of ``level`` or ``"UNKNOWN"``."""
    try:
        return LogLevel(level).name
    except ValueError:
        return "UNKNOWN"


def get_logger():
    """Return the current logger, or None."""
    return _state["current"]


def set_logger(logger):
    """Make ``logger`` the current logger and return the one it replaces."""
    previous = _state["current"]
    _state["current"] = logger
    return previous


def _caller(skip):
    """Return (filename, line) of the frame ``skip`` levels above the caller."""
    frame = inspect.currentframe()
    frame = frame.f_back if frame is not None else None
    for _ in range(skip):
        if frame is None:
            break
        frame = frame.f_back
    if frame is None:
        return "<unknown>", 0
    return frame.f_code.co_filename, frame.f_lineno


class Logger:
    """Appends timestamped messages to a file and becomes the current logger."""

    def __init__(self, filename, min_level=LogLevel.DEBUG, auto_flush=True):
        self.filename = os.fspath(filename)
        self.min_level = LogLevel(min_level)
        self.auto_flush = auto_flush
        self._file = open(self.filename, "a", encoding="utf-8")
        self._file.write(SESSION_HEADER)
        set_logger(self)

    @property
    def closed(self):
        return self._file.closed

    def _rotate(self):
        new_name = f"{self.filename}_{next(_rotation_numbers)}.log"
        try:
            new_file = open(new_name, "a", encoding="utf-8")
        except OSError:
            return
        if self.auto_flush:
            self._file.flush()
        self._file.close()
        self._file = new_file
        self.filename = new_name
        self.auto_flush = False
        self._file.write(SESSION_HEADER)
        set_logger(self)

    def log(self, level, message, file=None, line=None):
        """Write one message; the caller's location is used when none is given."""
        if file is None or line is None:
            caller_file, caller_line = _caller(1)
            file = caller_file if file is None else file
            line = caller_line if line is None else line

        if self._file.tell() > MAX_LOG_FILE_SIZE:
            self._rotate()

        stamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        self._file.write(
            f"[{stamp}] [{log_level_to_str(level)}] [{file}:{line}] {message}\n"
        )
        if self.auto_flush:
            self._file.flush()

    def debug(self, message):
        self.log(LogLevel.DEBUG, message, *_caller(1))

    def info(self, message):
        self.log(LogLevel.INFO, message, *_caller(1))

    def error(self, message):
        self.log(LogLevel.ERROR, message, *_caller(1))

    def close(self):
        """Close the file and stop being the current logger."""
        if not self._file.closed:
            if self.auto_flush:
                self._file.flush()
            self._file.close()
        if get_logger() is self:
            set_logger(None)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False