"""tasklist command-line entry point."""

import argparse
import logging
import os
import sys
from typing import List, Mapping, Optional

from .logging_setup import setup_logging
from .models import tasks_path
from .storage import read_file, write_file
from .store import TaskStore

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    return argparse.ArgumentParser(
        prog="tasklist",
        description=(
            "Terminal task list. Browse: j/k move, c close, 0 clear all, "
            "i insert, q quit. Insert: type, Enter adds, Backspace erases."
        ),
    )


def save(path: str, store: TaskStore) -> bool:
    """Write the store to path; report failures without raising."""
    try:
        write_file(path, store.tasks)
    except OSError as exc:
        log.error("error while writing to %s: %s", path, exc)
        return False
    return True


def main(
    argv: Optional[List[str]] = None, environ: Optional[Mapping[str, str]] = None
) -> int:
    """Load the task file, run the interactive session, save on quit."""
    build_parser().parse_args(argv)
    setup_logging()

    env = os.environ if environ is None else environ
    home = env.get("HOME")
    if not home:
        print("HOME variable not set", file=sys.stderr)
        return 0
    path = tasks_path(home)

    store = TaskStore(read_file(path))

    from .tui import start_curses

    start_curses(store)
    save(path, store)
    return 0


if __name__ == "__main__":
    sys.exit(main())
