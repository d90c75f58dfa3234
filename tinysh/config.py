import os
import sys
from dataclasses import dataclass

HISTORY_FILE = os.path.expanduser("~/.tinysh_history")
MAX_HISTORY = 1000
PROMPT = "> "


@dataclass
class Config:
    prompt: str = PROMPT
    history_file: str = HISTORY_FILE
    max_history: int = MAX_HISTORY
    history: bool = True
    interactive: bool = False


def _int_setting(environ, name, default):
    value = environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        print(f"Warning: {name}={value!r} is not an integer, using {default}", file=sys.stderr)
        return default


def load_config(environ=None):
    """
    Build the shell configuration from environment variables.
    Unset variables keep the module defaults.
    """
    if environ is None:
        environ = os.environ

    return Config(
        prompt=environ.get("TINYSH_PROMPT", PROMPT),
        history_file=os.path.expanduser(environ.get("TINYSH_HISTFILE", HISTORY_FILE)),
        max_history=_int_setting(environ, "TINYSH_HISTSIZE", MAX_HISTORY),
    )
