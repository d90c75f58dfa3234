import logging
import os

from tinysh.builtin import lookup
from tinysh.config import load_config
from tinysh.executor import launch
from tinysh.history import init_readline, load_history, save_history
from tinysh.parser import split_line
from tinysh.reader import LineReader
from tinysh.status import EXIT_SUCCESS, Status

log = logging.getLogger(__name__)


def prompt(config):
    """Generate shell prompt"""
    user = os.getenv("USER") or os.getenv("USERNAME") or "user"
    base = os.path.basename(os.getcwd()) or "/"
    return config.prompt.replace("{user}", user).replace("{cwd}", base)


def execute(args):
    """
    Run one tokenized command line.
    Builtins are looked up first, so they shadow programs of the same name.
    """
    if not args:
        return Status.CONTINUE

    func = lookup(args[0])
    if func is not None:
        log.debug("builtin %s", args[0])
        return func(args)

    return launch(args)


def startup(config=None):
    """Run once before the loop; returns the configuration to use"""
    if config is None:
        config = load_config()

    if config.interactive and config.history:
        init_readline()
        load_history(config.history_file, config.max_history)
    return config


def shutdown(config):
    """Run once after the loop has halted"""
    if config.interactive and config.history:
        save_history(config.history_file, config.max_history)


def main_loop(reader=None, config=None):
    """Main shell loop"""
    if config is None:
        config = load_config()
    if reader is None:
        reader = LineReader(interactive=config.interactive)

    running = True
    while running:
        try:
            line = reader.read_line(prompt(config))
        except KeyboardInterrupt:
            print()
            continue

        args = split_line(line)
        status = execute(args)
        del line, args

        if status is Status.STOP:
            running = False
        elif reader.eof:
            log.debug("end of input")
            running = False

    return EXIT_SUCCESS
