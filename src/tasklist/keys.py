"""Key values understood by the session, and the on-screen key legend."""

import enum
from dataclasses import dataclass
from typing import Union


class SpecialKey(enum.Enum):
    """Non-printable keys the session reacts to."""

    ENTER = "enter"
    BACKSPACE = "backspace"
    UP = "up"
    DOWN = "down"


# A printable character (one-character str) or a SpecialKey.
Key = Union[str, SpecialKey]


@dataclass(frozen=True)
class KeyHint:
    """One legend entry: the key to press and what it does."""

    code: str
    short: str

    def __str__(self) -> str:
        return f"[{self.code}] -- {self.short}"
