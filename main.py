import sys
import os
import curses
import logging

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")

import config_paths
from app_state import AppState
from batch_generator import BatchError, BatchGenerator
from orchestrator import Orchestrator

try:
    from _version import __version__
except ImportError:
    __version__ = "0.0.0"

logger = logging.getLogger(__name__)

USAGE = (
    "modwiz - terminal wizard for item and block JSON files\n\n"
    "Usage:\n"
    "  modwiz [output_dir]\n"
    "  modwiz -b <items.csv|items.xlsx> [output_dir]\n"
    "  modwiz -v\n"
    "  modwiz -h\n"
)


def parse_args(args):
    """Return (command, batch_path, output_dir); command is one of run/batch/version/help/error."""
    if "-v" in args or "-V" in args:
        return "version", None, None
    if "-h" in args or "--help" in args:
        return "help", None, None

    if args and args[0] == "-b":
        if len(args) < 2 or len(args) > 3:
            return "error", None, None
        return "batch", args[1], (args[2] if len(args) == 3 else None)

    if len(args) > 1 or any(a.startswith("-") for a in args):
        return "error", None, None
    return "run", None, (args[0] if args else None)


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    command, batch_path, output_dir = parse_args(args)

    if command == "version":
        print(__version__)
        return 0
    if command == "help":
        print(USAGE)
        return 0
    if command == "error":
        print(USAGE, file=sys.stderr)
        return 2

    config_paths.configure_logging()
    config = config_paths.load_config()

    if command == "batch":
        try:
            runner = BatchGenerator(batch_path, config, output_dir)
        except BatchError as e:
            print(f"Batch failed: {e}", file=sys.stderr)
            return 1
        return runner.run()

    state = AppState(config, output_dir)
    logger.info("Starting wizard, output dir %s", state.output_dir)

    def curses_main(stdscr):
        Orchestrator(stdscr, state).run()

    try:
        curses.wrapper(curses_main)
    except KeyboardInterrupt:
        pass
    except curses.error as e:
        logger.error("Terminal setup failed: %s", e)
        print(f"Terminal setup failed: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
