import argparse
import logging
import sys

from tinysh.config import load_config
from tinysh.reader import LineReader
from tinysh.shell import main_loop, shutdown, startup
from tinysh.status import EXIT_FAILURE


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="tinysh", description="A small interactive shell.")
    parser.add_argument("script", nargs="?", help="read commands from this file instead of stdin")
    parser.add_argument("--debug", action="store_true", help="log shell internals to stderr")
    parser.add_argument("--no-history", action="store_true", help="do not load or save readline history")
    return parser.parse_args(argv)


def main(argv=None):
    opts = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if opts.debug else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    config = load_config()
    config.history = not opts.no_history

    if opts.script:
        try:
            stream = open(opts.script, encoding="utf-8", errors="surrogateescape")
        except OSError as e:
            print(f"tinysh: {opts.script}: {e.strerror}", file=sys.stderr)
            return EXIT_FAILURE
        config.interactive = False
        config.prompt = ""
    else:
        stream = sys.stdin
        config.interactive = sys.stdin.isatty()

    config = startup(config)
    try:
        status = main_loop(LineReader(stream, interactive=config.interactive), config)
    finally:
        shutdown(config)
        if stream is not sys.stdin:
            stream.close()
    return status


if __name__ == "__main__":
    sys.exit(main())
