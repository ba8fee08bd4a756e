"""Curses terminal adapter: key input, drawing, and terminal setup."""

import curses
import logging
from typing import List, Optional, Union

from .keys import Key, KeyHint, SpecialKey
from .modes import Insert
from .session import POLL_INTERVAL_MS, Session, View
from .store import TaskStore

log = logging.getLogger(__name__)

HIGHLIGHT_SYMBOL = ">> "
INSERT_PROMPT = "> "
EMPTY_HINT = "No tasks. Press 'i' to add one."

SPECIAL_CODES = {
    curses.KEY_ENTER: SpecialKey.ENTER,
    curses.KEY_BACKSPACE: SpecialKey.BACKSPACE,
    curses.KEY_UP: SpecialKey.UP,
    curses.KEY_DOWN: SpecialKey.DOWN,
}


def decode_key(raw: Union[str, int]) -> Optional[Key]:
    """Map a get_wch() result to a Key, or None for keys we ignore."""
    if isinstance(raw, str):
        if raw in ("\n", "\r"):
            return SpecialKey.ENTER
        if raw in ("\x7f", "\b"):
            return SpecialKey.BACKSPACE
        if len(raw) == 1 and raw.isprintable():
            return raw
        return None
    return SPECIAL_CODES.get(raw)


def wrap_legend(hints: List[KeyHint], width: int) -> List[str]:
    """Pack hints into lines no wider than width, two spaces apart.

    A hint never splits across lines; one wider than width gets its own line.
    """
    lines: List[str] = []
    for text in (str(hint) for hint in hints):
        if lines and len(lines[-1]) + 2 + len(text) <= width:
            lines[-1] += "  " + text
        else:
            lines.append(text)
    return lines


class CursesPoller:
    """Reads one key from a curses window, waiting at most timeout_ms."""

    def __init__(self, window):
        self.window = window

    def poll(self, timeout_ms: int) -> Optional[Key]:
        self.window.timeout(timeout_ms)
        try:
            raw = self.window.get_wch()
        except curses.error:
            # get_wch raises "no input" when the timeout expires.
            return None
        return decode_key(raw)


class CursesRenderer:
    """Draws a View: header, task list, insert line and key legend."""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.scroll = 0

    def render(self, view: View) -> None:
        self.stdscr.erase()
        height, width = self.stdscr.getmaxyx()

        open_count = sum(1 for t in view.tasks if not t.closed)
        header = f"Tasks: {open_count} open, {len(view.tasks)} total"
        self.stdscr.addnstr(0, 0, header, width - 1, curses.A_BOLD)

        top = 1
        legend = wrap_legend(view.legend, width - 1)
        # The body keeps at least one row; the legend takes what is left.
        legend_rows = min(len(legend), max(0, height - top - 2))
        body_h = height - top - 1 - legend_rows
        if body_h < 1:
            self.stdscr.refresh()
            return

        list_h = body_h
        if isinstance(view.mode, Insert):
            # List gets up to three quarters; the insert line always gets a row.
            list_h = max(0, min(body_h - 1, (body_h * 3) // 4))
            line = INSERT_PROMPT + view.mode.buffer
            # Keep the end of a long buffer visible.
            line = line[-(width - 1):] if width > 1 else ""
            self.stdscr.addnstr(top + list_h, 0, line, width - 1)

        if list_h > 0:
            self.draw_list(view, top, list_h, width)

        sep_y = top + body_h
        self.stdscr.hline(sep_y, 0, "-", width)
        for i, text in enumerate(legend[:legend_rows], start=1):
            self.stdscr.addnstr(sep_y + i, 0, text, width - 1, curses.A_DIM)
        self.stdscr.refresh()

    def draw_list(self, view: View, top: int, list_h: int, width: int) -> None:
        if not view.tasks:
            self.scroll = 0
            self.stdscr.addnstr(top, 0, EMPTY_HINT, width - 1, curses.A_DIM)
            return

        cur = view.selected if view.selected is not None else 0
        if cur < self.scroll:
            self.scroll = cur
        elif cur >= self.scroll + list_h:
            self.scroll = cur - list_h + 1
        self.scroll = max(0, min(self.scroll, len(view.tasks) - 1))

        pad = " " * len(HIGHLIGHT_SYMBOL)
        for i in range(self.scroll, min(self.scroll + list_h, len(view.tasks))):
            t = view.tasks[i]
            prefix = HIGHLIGHT_SYMBOL if i == view.selected else pad
            marker = "[x]" if t.closed else "[ ]"
            line = f"{prefix}{marker} {t.name}"
            attrs = curses.A_NORMAL
            if t.closed:
                attrs |= curses.A_DIM
            if i == view.selected:
                attrs |= curses.A_BOLD
            self.stdscr.addnstr(top + (i - self.scroll), 0, line, width - 1, attrs)


def start_curses(store: TaskStore, poll_interval_ms: int = POLL_INTERVAL_MS) -> None:
    """Run an interactive session on store.

    curses.wrapper restores the terminal on every exit path, including
    exceptions raised from the session.
    """

    def _main(stdscr):
        curses.raw()
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        stdscr.keypad(True)
        session = Session(store, CursesPoller(stdscr), CursesRenderer(stdscr), poll_interval_ms)
        session.run()

    log.debug("entering curses")
    curses.wrapper(_main)
    log.debug("left curses")
