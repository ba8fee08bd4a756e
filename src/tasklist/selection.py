"""List cursor, kept inside the bounds of the task list."""

from typing import Optional


class Selection:
    """Index of the highlighted task (0-based)."""

    def __init__(self, index: int = 0):
        self.index = max(0, index)

    def move_up(self) -> None:
        self.index = max(0, self.index - 1)

    def move_down(self, count: int) -> None:
        self.index = max(0, min(count - 1, self.index + 1))

    def clamp(self, count: int) -> None:
        """Re-apply the bounds after the list changed size."""
        self.index = max(0, min(count - 1, self.index))

    def current(self, count: int) -> Optional[int]:
        """Return the selected index, or None when the list is empty."""
        if count <= 0:
            return None
        return min(self.index, count - 1)
