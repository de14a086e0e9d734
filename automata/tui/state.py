"""Session state kept for the lifetime of one TUI run."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from .events import Resize
from .ids import ScreenId

# Activations kept in session history; older ones are dropped.
HISTORY_LIMIT = 100


@dataclass
class UIState:
    """In-memory session state; nothing here is persisted.

    The router records each activation and the last terminal size, so a
    screen that becomes active can be told how big the window is.
    """

    # Most recent screen activations, oldest first
    session_history: deque[ScreenId] = field(
        default_factory=lambda: deque(maxlen=HISTORY_LIMIT)
    )

    # Number of events the router has dispatched
    events_dispatched: int = 0

    # Last size reported by the host, if any
    last_size: Resize | None = None

    def add_to_history(self, screen: ScreenId) -> None:
        """Record a screen activation."""
        self.session_history.append(screen)

    def count_event(self) -> None:
        self.events_dispatched += 1

    def remember_size(self, size: Resize) -> None:
        self.last_size = size
