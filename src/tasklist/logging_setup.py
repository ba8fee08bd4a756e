"""Logging configuration for the tasklist command."""

import logging
import sys


def setup_logging(level: int = logging.WARNING) -> None:
    """Send log records at level and above to stderr.

    The default keeps the curses screen clean during a session; only
    warnings and errors reach the terminal. Call once, early.
    """
    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    root.addHandler(handler)
