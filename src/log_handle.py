"""
Log Handle - Process-wide append-only log file mirrored to stdout.

Every call to log(message) appends a newline followed by the message to
my_log.txt and prints "Logging <message>" to standard output. One handle
exists per process, built on first access through get_log_handle() and
closed at interpreter exit.
"""

import sys
import atexit
import logging
import threading
from pathlib import Path

from log_utils import LOG_PATH, log_handle_init_lock as _init_lock

logger = logging.getLogger("LogHandle")


class LogHandleError(Exception):
    """Base class for log handle failures."""


class ResourceUnavailable(LogHandleError):
    """The log file could not be opened or created."""


class WriteFailure(LogHandleError):
    """Writing a message to the log file or stdout failed."""


class LogHandle:
    """Owns one append-mode log file and serializes writes to it.

    The path is fixed at construction. Writes to the file and to stdout for
    a single message happen inside one critical section.
    """

    def __init__(self, path):
        self.path = Path(path)
        self._lock = threading.Lock()
        try:
            # newline="" keeps "\n" as-is on every platform
            self._file = open(
                self.path, "a", encoding="utf-8", errors="backslashreplace", newline=""
            )
        except (OSError, ValueError) as e:
            logger.error(f"Cannot open log file {self.path}: {e}")
            raise ResourceUnavailable(f"Cannot open log file {self.path}: {e}") from e
        logger.debug(f"Opened log file {self.path}")

    @property
    def closed(self) -> bool:
        return self._file.closed

    def log(self, message) -> None:
        """Append "\\n<message>" to the file and echo "Logging <message>".

        Raises WriteFailure if either write fails. Nothing is retried.
        """
        text = str(message)
        with self._lock:
            try:
                self._file.write(f"\n{text}")
                self._file.flush()
                sys.stdout.write(f"Logging {text}\n")
                sys.stdout.flush()
            except (OSError, ValueError) as e:
                logger.error(f"Failed to log message to {self.path}: {e}")
                raise WriteFailure(f"Failed to log message to {self.path}: {e}") from e

    def close(self) -> None:
        """Close the log file. Idempotent."""
        with self._lock:
            if not self._file.closed:
                self._file.close()
                logger.debug(f"Closed log file {self.path}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


_instance: LogHandle | None = None
_shut_down = False


def get_log_handle() -> LogHandle:
    """Return the process-wide LogHandle, creating it on first call.

    Raises ResourceUnavailable if the log file cannot be opened, or once
    interpreter shutdown has closed the handle. A failed open stores nothing,
    so a later call tries again.
    """
    global _instance
    if _instance is None:
        with _init_lock:
            if _shut_down:
                raise ResourceUnavailable("Log handle is closed for interpreter shutdown")
            if _instance is None:
                _instance = LogHandle(LOG_PATH)
    return _instance


def reset_log_handle() -> None:
    """Close and forget the process-wide handle so the next access reopens it."""
    global _instance, _shut_down
    with _init_lock:
        if _instance is not None:
            _instance.close()
            _instance = None
        _shut_down = False


def _shutdown() -> None:
    """Close the handle at exit and refuse to reopen it afterwards."""
    global _instance, _shut_down
    with _init_lock:
        _shut_down = True
        if _instance is not None:
            _instance.close()
            _instance = None


def _register_shutdown() -> None:
    atexit.register(_shutdown)


def log(message) -> None:
    """Log a message through the process-wide handle."""
    get_log_handle().log(message)


_register_shutdown()
