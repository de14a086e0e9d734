"""Active-screen tracker for the router."""
from __future__ import annotations

from .ids import ScreenId


class Navigator:
    """Tracks which screen is active.

    Exactly one screen is active at a time; there is no history stack:
    - Go: make another screen active
    - Home: make the menu active
    """

    # Screen ID to human-readable label mapping
    SCREEN_LABELS = {
        ScreenId.MENU: "Automata",
        ScreenId.TIMER: "Timer",
        ScreenId.INFO: "About",
        ScreenId.SUBLIST: "List",
    }

    def __init__(self, start: ScreenId = ScreenId.MENU):
        self.active = start

    def go(self, screen: ScreenId) -> ScreenId:
        """Make `screen` active and return the screen it replaced."""
        previous = self.active
        self.active = screen
        return previous

    def home(self) -> None:
        self.active = ScreenId.MENU

    def current(self) -> ScreenId:
        return self.active

    def breadcrumbs(self) -> str:
        """Breadcrumb path like "Automata > Timer"."""
        home = self.SCREEN_LABELS[ScreenId.MENU]
        if self.active is ScreenId.MENU:
            return home
        label = self.SCREEN_LABELS.get(self.active, self.active.value)
        return f"{home} > {label}"
