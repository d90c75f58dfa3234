import sys
from enum import Enum

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class Status(Enum):
    """Result of every command: keep reading or stop the loop."""
    CONTINUE = 1
    STOP = 0


def fatal(message):
    """Report an unrecoverable error and terminate the shell process."""
    print(f"tinysh: {message}", file=sys.stderr)
    sys.exit(EXIT_FAILURE)
