"""Session controller: the poll -> decode -> mutate -> render loop."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol

from .keys import Key, KeyHint
from .models import Task
from .modes import (
    AddTask,
    Browse,
    ClearAll,
    CloseSelected,
    Intent,
    Mode,
    MoveSelection,
    Quit,
    key_legend,
    step,
)
from .selection import Selection
from .store import TaskStore

log = logging.getLogger(__name__)

POLL_INTERVAL_MS = 64


class InputPoller(Protocol):
    def poll(self, timeout_ms: int) -> Optional[Key]:
        """Wait up to timeout_ms for one key press; None if nothing came."""


@dataclass(frozen=True)
class View:
    """Everything the renderer needs to draw one frame."""

    tasks: List[Task]
    selected: Optional[int]
    mode: Mode
    legend: List[KeyHint]


class Renderer(Protocol):
    def render(self, view: View) -> None:
        ...


class Session:
    """Owns the store, selection and mode for one interactive run."""

    def __init__(
        self,
        store: TaskStore,
        poller: InputPoller,
        renderer: Renderer,
        poll_interval_ms: int = POLL_INTERVAL_MS,
    ):
        self.store = store
        self.poller = poller
        self.renderer = renderer
        self.poll_interval_ms = poll_interval_ms
        self.mode: Mode = Browse()
        self.selection = Selection()
        self._stopped = False

    @property
    def stopped(self) -> bool:
        return self._stopped

    def view(self) -> View:
        count = len(self.store)
        return View(
            tasks=[Task(t.name, t.closed) for t in self.store],
            selected=self.selection.current(count),
            mode=self.mode,
            legend=key_legend(self.mode),
        )

    def apply(self, intent: Intent) -> None:
        """Apply one intent to the store and/or selection."""
        if isinstance(intent, AddTask):
            self.store.add(intent.name)
            self.selection.clamp(len(self.store))
        elif isinstance(intent, CloseSelected):
            self.store.close(self.selection.index)
        elif isinstance(intent, ClearAll):
            self.store.clear()
            self.selection.clamp(len(self.store))
        elif isinstance(intent, MoveSelection):
            if intent.delta < 0:
                self.selection.move_up()
            else:
                self.selection.move_down(len(self.store))
        elif isinstance(intent, Quit):
            self._stopped = True

    def tick(self) -> bool:
        """Run one iteration. Returns False once the session has stopped."""
        if self._stopped:
            return False
        key = self.poller.poll(self.poll_interval_ms)
        if key is not None:
            self.mode, intents = step(self.mode, key)
            for intent in intents:
                self.apply(intent)
            if self._stopped:
                log.debug("quit requested")
                return False
        self.renderer.render(self.view())
        return True

    def run(self) -> None:
        """Draw the initial frame, then tick until quit."""
        log.debug("session started with %d tasks", len(self.store))
        self.renderer.render(self.view())
        while self.tick():
            pass
        log.debug("session stopped with %d tasks", len(self.store))
