"""File I/O for the task list."""

import json
import logging
from typing import Any, List

from .models import Task

log = logging.getLogger(__name__)


def _decode(data: Any) -> List[Task]:
    """Turn a decoded JSON document into tasks, or raise ValueError."""
    if not isinstance(data, list):
        raise ValueError("expected a list of tasks")
    tasks: List[Task] = []
    for raw in data:
        if not isinstance(raw, dict):
            raise ValueError("task entry is not an object")
        name = raw.get("name")
        closed = raw.get("closed")
        if not isinstance(name, str) or not isinstance(closed, bool):
            raise ValueError("task entry needs a string name and a boolean closed")
        tasks.append(Task(name=name, closed=closed))
    return tasks


def read_file(path: str) -> List[Task]:
    """Load the task list from path.

    A missing, unreadable or malformed file yields an empty list; the
    reason is only logged.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        log.debug("no task file at %s, starting empty", path)
        return []
    except (OSError, ValueError, RecursionError) as exc:
        log.debug("could not read %s (%s), starting empty", path, exc)
        return []

    try:
        tasks = _decode(data)
    except ValueError as exc:
        log.debug("malformed task file %s (%s), starting empty", path, exc)
        return []
    log.debug("loaded %d tasks from %s", len(tasks), path)
    return tasks


def write_file(path: str, tasks: List[Task]) -> None:
    """Rewrite the file from in-memory state. Raises OSError on failure."""
    payload = [{"name": t.name, "closed": t.closed} for t in tasks]
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f)
    log.debug("saved %d tasks to %s", len(tasks), path)
