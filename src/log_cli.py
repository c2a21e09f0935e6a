"""
Command-line entry point: log each argument (or each stdin line) through the
process-wide log handle.

    mylog "first message" "second message"
    some_command | mylog
"""

import sys
import logging
from dotenv import load_dotenv

from log_handle import get_log_handle, LogHandleError
from log_utils import setup_logging

logger = logging.getLogger("LogCli")


def _messages(argv: list[str]):
    if argv:
        yield from argv
        return
    for line in sys.stdin:
        yield line.rstrip("\r\n")


def main(argv: list[str] | None = None) -> int:
    """Entry point for the mylog command. Returns the process exit code."""
    load_dotenv()
    setup_logging()
    if argv is None:
        argv = sys.argv[1:]

    try:
        handle = get_log_handle()
        for message in _messages(argv):
            handle.log(message)
    except LogHandleError as e:
        logger.error(f"Logging failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
