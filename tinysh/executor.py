import logging
import signal
import sys

import psutil

from tinysh.status import Status

log = logging.getLogger(__name__)


def _wait(proc):
    """
    Block until the child has exited or been killed by a signal.
    Popen.wait() does not return for a stopped child.
    """
    while True:
        try:
            return proc.wait()
        except KeyboardInterrupt:
            # Ctrl+C reached the child too; keep waiting for it to go away.
            log.debug("interrupted while waiting for pid %d", proc.pid)


def launch(args):
    """
    Run an external program in the foreground.
    stdin/stdout/stderr and the working directory are inherited from the shell.
    Returns: Status.CONTINUE, whatever happens to the child
    """
    try:
        proc = psutil.Popen(args)
    except FileNotFoundError:
        print(f"tinysh: command not found: {args[0]}", file=sys.stderr)
        return Status.CONTINUE
    except PermissionError:
        print(f"tinysh: permission denied: {args[0]}", file=sys.stderr)
        return Status.CONTINUE
    except (OSError, ValueError) as e:
        print(f"tinysh: failed to execute '{args[0]}': {e}", file=sys.stderr)
        return Status.CONTINUE

    log.debug("started %s as pid %d", args[0], proc.pid)
    exit_code = _wait(proc)
    log.debug("pid %d finished with %d", proc.pid, exit_code)

    if exit_code < 0:
        try:
            name = signal.Signals(-exit_code).name
        except ValueError:
            name = str(-exit_code)
        print(f"tinysh: process terminated by signal {name}", file=sys.stderr)
    elif exit_code != 0:
        print(f"tinysh: process exited with code {exit_code}", file=sys.stderr)

    return Status.CONTINUE
