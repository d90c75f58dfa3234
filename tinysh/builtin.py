import os
import sys
from types import MappingProxyType

from tinysh.status import Status


def builtin_cd(args):
    """Change the shell's working directory; children inherit it"""
    if len(args) < 2:
        print('tinysh: expected argument to "cd"', file=sys.stderr)
        return Status.CONTINUE

    try:
        os.chdir(args[1])
    except OSError as e:
        print(f"tinysh: cd: {args[1]}: {e.strerror}", file=sys.stderr)
    except ValueError as e:
        print(f"tinysh: cd: {args[1]!r}: {e}", file=sys.stderr)
    return Status.CONTINUE


def builtin_help(args):
    """Print help message"""
    print("tinysh help:")
    print(" Type program names and arguments, and hit enter.")
    print(" The following are built in:")
    for name in builtin_names():
        print(f"  {name}")
    print(" Use the man command for information on other programs.")
    return Status.CONTINUE


def builtin_exit(args):
    return Status.STOP


BUILTINS = MappingProxyType({
    "cd": builtin_cd,
    "help": builtin_help,
    "exit": builtin_exit,
})


def lookup(name):
    """Return the builtin registered as name, or None"""
    return BUILTINS.get(name)


def builtin_names():
    return list(BUILTINS)
