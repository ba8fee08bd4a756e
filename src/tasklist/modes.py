"""Modal input handling (pure functions, no I/O).

The session is either browsing the list or typing a new task. ``step``
decides what a key means in the current mode and returns the next mode
together with at most one intent; applying intents is left to the caller.
"""

from dataclasses import dataclass
from typing import List, Tuple, Union

from .keys import Key, KeyHint, SpecialKey


@dataclass(frozen=True)
class Browse:
    """Navigating the list."""


@dataclass(frozen=True)
class Insert:
    """Typing a new task into buffer."""

    buffer: str = ""


Mode = Union[Browse, Insert]


@dataclass(frozen=True)
class AddTask:
    """Append a task named name."""

    name: str


@dataclass(frozen=True)
class CloseSelected:
    """Close the task under the cursor."""


@dataclass(frozen=True)
class ClearAll:
    """Drop every task."""


@dataclass(frozen=True)
class MoveSelection:
    """Move the cursor by delta (-1 up, +1 down)."""

    delta: int


@dataclass(frozen=True)
class Quit:
    """End the session."""


Intent = Union[AddTask, CloseSelected, ClearAll, MoveSelection, Quit]

BROWSE_KEYS = {
    "q": Quit(),
    "c": CloseSelected(),
    "0": ClearAll(),
    "j": MoveSelection(+1),
    "k": MoveSelection(-1),
    SpecialKey.DOWN: MoveSelection(+1),
    SpecialKey.UP: MoveSelection(-1),
}

BROWSE_LEGEND = [
    KeyHint("i", "insert new task mode"),
    KeyHint("j/k", "move down/up"),
    KeyHint("c", "close task"),
    KeyHint("0", "clear all"),
    KeyHint("q", "quit"),
]

INSERT_LEGEND = [
    KeyHint("enter", "add task"),
    KeyHint("backspace", "erase"),
]


def step(mode: Mode, key: Key) -> Tuple[Mode, List[Intent]]:
    """Return (next mode, intents) for key pressed in mode."""
    if isinstance(mode, Insert):
        return _step_insert(mode, key)
    return _step_browse(mode, key)


def _step_browse(mode: Browse, key: Key) -> Tuple[Mode, List[Intent]]:
    if key == "i":
        return Insert(), []
    intent = BROWSE_KEYS.get(key)
    if intent is None:
        return mode, []
    return mode, [intent]


def _step_insert(mode: Insert, key: Key) -> Tuple[Mode, List[Intent]]:
    if key is SpecialKey.ENTER:
        # The intent carries the buffer; the new mode drops it.
        return Browse(), [AddTask(mode.buffer)]
    if key is SpecialKey.BACKSPACE:
        if not mode.buffer:
            return mode, []
        return Insert(mode.buffer[:-1]), []
    if isinstance(key, str) and len(key) == 1 and key.isprintable():
        return Insert(mode.buffer + key), []
    return mode, []


def key_legend(mode: Mode) -> List[KeyHint]:
    """Key hints to show for mode."""
    if isinstance(mode, Insert):
        return list(INSERT_LEGEND)
    return list(BROWSE_LEGEND)
