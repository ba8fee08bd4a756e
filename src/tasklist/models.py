"""Data models and constants for tasklist."""

import os
from dataclasses import dataclass

TASKS_FILENAME = ".tasks.json"


def tasks_path(home: str) -> str:
    """Return the full path of the task file inside a home directory."""
    return os.path.join(home, TASKS_FILENAME)


@dataclass
class Task:
    """A single task. Identity is its position in the list."""

    name: str
    closed: bool = False
