"""tasklist - a modal task list for the terminal."""

__version__ = "1.0.0"

from .models import Task, TASKS_FILENAME, tasks_path
from .storage import read_file, write_file
from .store import TaskStore
from .selection import Selection
from .modes import Browse, Insert, step
from .session import Session, View

__all__ = [
    "Task",
    "TASKS_FILENAME",
    "tasks_path",
    "read_file",
    "write_file",
    "TaskStore",
    "Selection",
    "Browse",
    "Insert",
    "step",
    "Session",
    "View",
]
