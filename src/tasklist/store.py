"""In-memory task collection and its mutation primitives."""

from typing import Iterable, Iterator, List, Optional

from .models import Task


class TaskStore:
    """Ordered tasks; insertion order is display order."""

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        # The store owns its records.
        self._tasks: List[Task] = [Task(t.name, t.closed) for t in tasks or ()]

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        return self._tasks[index]

    @property
    def tasks(self) -> List[Task]:
        return list(self._tasks)

    def add(self, name: str) -> None:
        """Append an open task. Empty names are accepted."""
        self._tasks.append(Task(name=name))

    def close(self, index: int) -> None:
        """Mark the task at index closed; out-of-range indices are ignored."""
        if 0 <= index < len(self._tasks):
            self._tasks[index].closed = True

    def clear(self) -> None:
        self._tasks.clear()
