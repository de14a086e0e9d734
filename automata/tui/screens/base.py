"""Screen capability shared by every view the router can show."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Tuple, Union

from ..components import DEFAULT_HEIGHT, DEFAULT_WIDTH
from ..events import Effect, Event, Navigate, Resize
from ..ids import ScreenId

UpdateResult = Tuple[Union["Screen", Navigate], Union[Effect, None]]


class Screen(ABC):
    """A self-contained unit of UI state.

    Lifecycle:
      - `init()` puts the screen in its initial state and returns the
        startup effect, if any.
      - `resume()` re-enters the screen without resetting it.
      - `update(event)` consumes one event and returns either the screen
        (possibly changed) or a `Navigate` intent, plus an optional effect.
        The two outcomes are exclusive: a navigation carries no effect.
      - `render()` returns the current frame and never changes state.

    Events a screen does not recognize leave it unchanged: `(self, None)`.
    """

    screen_id: ScreenId
    title: str = ""

    def __init__(self, color: bool = True):
        self.color = color
        self.width = DEFAULT_WIDTH
        self.height = DEFAULT_HEIGHT

    @abstractmethod
    def init(self) -> Effect | None:
        ...

    def resume(self) -> Effect | None:
        return None

    def update(self, event: Event) -> UpdateResult:
        if isinstance(event, Resize):
            self.width = max(1, event.width)
            self.height = max(1, event.height)
        return self.handle(event)

    @abstractmethod
    def handle(self, event: Event) -> UpdateResult:
        """Screen-specific update step, called after size bookkeeping."""

    @abstractmethod
    def render(self) -> str:
        ...
