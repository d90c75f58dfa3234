import os
import sys

try:
    import readline
except ImportError:
    readline = None


def init_readline():
    """Configure readline key bindings like a Linux terminal"""
    if readline is None:
        return

    try:
        readline.parse_and_bind("set editing-mode emacs")

        # Up/down arrows walk the history
        readline.parse_and_bind("\\e[A: previous-history")
        readline.parse_and_bind("\\e[B: next-history")

        # Ctrl+Left/Right jump between words
        readline.parse_and_bind("\\e[1;5D: backward-word")
        readline.parse_and_bind("\\e[1;5C: forward-word")
    except Exception as e:
        print(f"Warning: Could not configure readline: {e}", file=sys.stderr)


def load_history(path, max_history):
    if readline is None:
        return

    try:
        if os.path.exists(path):
            readline.read_history_file(path)
        readline.set_history_length(max_history)
    except OSError as e:
        print(f"Warning: Could not load history: {e}", file=sys.stderr)


def save_history(path, max_history):
    if readline is None:
        return

    try:
        readline.set_history_length(max_history)
        readline.write_history_file(path)
    except OSError as e:
        print(f"Warning: Could not save history: {e}", file=sys.stderr)
