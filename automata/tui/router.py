"""Router and screen registry for the TUI."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Mapping

from rich.padding import Padding

from . import components
from .events import Effect, Event, Navigate, Quit, QuitRequested, Resize
from .ids import ScreenId
from .navigator import Navigator
from .state import UIState

if TYPE_CHECKING:
    from ..settings import Settings
    from .screens.base import Screen

logger = logging.getLogger(__name__)

REENTRY_POLICIES = ("reset", "resume")

# Rows taken by the breadcrumb line above the active screen.
CHROME_ROWS = 1


class Router:
    """Owns the screen roster and the single active-screen slot.

    Every event goes to the active screen only. When the screen answers
    with a `Navigate` intent, the router activates the target instead of
    storing the screen, and the effect returned is the target's startup
    effect.

    Re-entry policy:
      - The menu is re-initialized every time it becomes active.
      - "reset": other screens are re-initialized too.
      - "resume": other screens keep their state after their first
        activation and only restart their tick chains.
    """

    def __init__(
        self,
        screens: Mapping[ScreenId, Screen],
        nav: Navigator | None = None,
        state: UIState | None = None,
        reentry_policy: str = "reset",
    ):
        """Initialize router with its roster.

        Args:
            screens: One screen per ScreenId
            nav: Navigator instance (starts at the menu)
            state: UI session state
            reentry_policy: "reset" or "resume"

        Raises:
            ValueError: if the roster is incomplete or mislabelled, or the
                policy is unknown
        """
        missing = [sid.value for sid in ScreenId if sid not in screens]
        if missing:
            raise ValueError(f"screen roster is missing: {', '.join(missing)}")
        for sid, screen in screens.items():
            if screen.screen_id is not sid:
                raise ValueError(
                    f"screen registered as {sid.value!r} reports {screen.screen_id.value!r}"
                )
        if reentry_policy not in REENTRY_POLICIES:
            raise ValueError(f"unknown re-entry policy: {reentry_policy!r}")

        self.screens: dict[ScreenId, Screen] = dict(screens)
        self.nav = nav or Navigator()
        self.state = state or UIState()
        self.reentry_policy = reentry_policy
        self._initialized: set[ScreenId] = set()

    @classmethod
    def from_settings(cls, settings: Settings) -> Router:
        return cls(build_roster(settings), reentry_policy=settings.AUTOMATA_REENTRY_POLICY)

    @property
    def active(self) -> ScreenId:
        return self.nav.current()

    @property
    def active_screen(self) -> Screen:
        return self.screens[self.active]

    def start(self) -> Effect | None:
        """Activate the menu; returns its startup effect."""
        _, effect = self.activate(ScreenId.MENU)
        return effect

    def activate(self, screen_id: ScreenId) -> tuple[Screen, Effect | None]:
        """Make `screen_id` active and (re)initialize it per the policy."""
        screen = self.screens[screen_id]
        previous = self.nav.current()
        if screen_id is ScreenId.MENU:
            self.nav.home()
        else:
            self.nav.go(screen_id)
        self.state.add_to_history(screen_id)

        reset = (
            screen_id is ScreenId.MENU
            or self.reentry_policy == "reset"
            or screen_id not in self._initialized
        )
        effect = screen.init() if reset else screen.resume()
        self._initialized.add(screen_id)

        if self.state.last_size is not None:
            screen.update(self._screen_size(self.state.last_size))

        logger.info(
            "activate %s (from %s, %s)",
            screen_id.value,
            previous.value,
            "init" if reset else "resume",
        )
        return screen, effect

    def dispatch(self, event: Event) -> Effect | None:
        """Route one event to the active screen and apply any navigation."""
        self.state.count_event()

        if isinstance(event, QuitRequested):
            logger.info("quit requested by host")
            return Quit()
        if isinstance(event, Resize):
            self.state.remember_size(event)
            event = self._screen_size(event)

        active = self.active
        result, effect = self.screens[active].update(event)
        if isinstance(result, Navigate):
            _, effect = self.activate(result.target)
            return effect

        self.screens[active] = result
        if isinstance(effect, Quit):
            logger.info("quit from %s", active.value)
        return effect

    def render(self) -> str:
        """Breadcrumbs plus the active screen's frame. Never changes state."""
        screen = self.active_screen
        crumbs = components.render_to_text(
            Padding(components.render_breadcrumbs(self.nav), (0, 2)),
            width=screen.width,
            color=screen.color,
        )
        return crumbs + "\n" + screen.render()

    @staticmethod
    def _screen_size(size: Resize) -> Resize:
        return Resize(size.width, max(1, size.height - CHROME_ROWS))


# Screen registry - maps screen IDs to factory functions
# Populated by the modules in `screens` when they are imported
SCREENS: dict[ScreenId, Callable[[Settings], Screen]] = {}


def register_screen(screen_id: ScreenId):
    """Decorator to register a screen factory.

    Usage:
        @register_screen(ScreenId.TIMER)
        def build_timer(settings: Settings) -> TimerScreen:
            ...
    """
    def decorator(fn: Callable[[Settings], Screen]):
        SCREENS[screen_id] = fn
        return fn
    return decorator


def build_roster(settings: Settings) -> dict[ScreenId, Screen]:
    """Instantiate every registered screen once."""
    from . import screens  # noqa: F401

    return {screen_id: factory(settings) for screen_id, factory in SCREENS.items()}
