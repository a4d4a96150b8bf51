import curses
import os
import sys

from _version import __version__
from config_paths import load_config
from csv_file_handler import CsvFileHandler
from editor_session import EditorSession
from grid_model import MalformedGrid

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")
from orchestrator import Orchestrator

USAGE = "csvi - modal terminal CSV editor\n\nUsage:\n  csvi <path.csv>\n  csvi -v\n  csvi -h\n"


def load_session(path):
    handler = CsvFileHandler(path)
    grid = handler.load()
    return EditorSession(grid, path), handler


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)

    if "-v" in args or "-V" in args:
        print(__version__)
        return 0

    if "-h" in args or len(args) != 1:
        print(USAGE)
        return 0 if "-h" in args else 1

    path = args[0]
    try:
        session, handler = load_session(path)
    except (MalformedGrid, ValueError, OSError) as e:
        print(f"Load failed: {e}", file=sys.stderr)
        return 1

    config = load_config()

    def curses_main(stdscr):
        Orchestrator(stdscr, session, handler, config).run()

    curses.wrapper(curses_main)
    return 0


if __name__ == "__main__":
    sys.exit(main())
