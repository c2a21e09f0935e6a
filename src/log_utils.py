"""Shared constants and diagnostics for the log handle.

The log file path is fixed. All singleton construction goes through the one
init lock below.
"""

import os
import sys
import logging
import threading

LOG_PATH = "my_log.txt"

# Single shared lock guarding construction of the process-wide LogHandle
log_handle_init_lock = threading.Lock()


def log_level() -> int:
    """Return the diagnostic logging level from LOG_LEVEL, falling back to INFO."""
    name = os.getenv("LOG_LEVEL", "INFO").upper()
    if not isinstance(getattr(logging, name, None), int):
        name = "INFO"
    return getattr(logging, name)


def setup_logging() -> None:
    """Configure diagnostic logging on stderr.

    Stdout is reserved for the "Logging <message>" mirror lines.
    """
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
