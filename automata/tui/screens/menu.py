"""Main menu screen: entry point for the TUI."""
from __future__ import annotations

from typing import Mapping, Sequence

from ..events import Key, Navigate, Quit
from ..keys import MENU_QUIT, KeyBinding, matches
from ..router import register_screen
from .base import ScreenId, UpdateResult
from .listing import ListEntry, SelectableListScreen

MENU_TITLE = "Automata"

MENU_ENTRIES = (
    ListEntry("Item 1", "Descrpiption item 1"),
    ListEntry("Item 2", "Description item 2"),
    ListEntry("Item 3", "Description item 3"),
    ListEntry("Item 4", "Description item 4"),
    ListEntry("About", "Contact for Help/Support"),
)

# Positional: the entry at index N launches LAUNCH_TARGETS[N]. Entries with
# no target are deliberate no-ops.
LAUNCH_TARGETS: Mapping[int, ScreenId] = {
    0: ScreenId.SUBLIST,
    1: ScreenId.TIMER,
    4: ScreenId.INFO,
}


def validate_launch_targets(
    entries: Sequence[ListEntry],
    targets: Mapping[int, ScreenId],
) -> None:
    """Reject mappings that point outside the entry list or back at the menu."""
    for index, target in targets.items():
        if not 0 <= index < len(entries):
            raise ValueError(
                f"launch target index {index} is outside the menu (0..{len(entries) - 1})"
            )
        if not isinstance(target, ScreenId):
            raise ValueError(f"launch target for index {index} is not a screen: {target!r}")
        if target is ScreenId.MENU:
            raise ValueError(f"menu entry {index} cannot launch the menu itself")


class MenuScreen(SelectableListScreen):
    """The root list. Confirming an entry asks the router to switch screens."""

    screen_id = ScreenId.MENU

    def __init__(
        self,
        entries: Sequence[ListEntry] = MENU_ENTRIES,
        targets: Mapping[int, ScreenId] = LAUNCH_TARGETS,
        color: bool = True,
    ):
        validate_launch_targets(entries, targets)
        super().__init__(MENU_TITLE, entries, color=color)
        self.targets = dict(targets)

    def target_for(self, index: int) -> ScreenId | None:
        return self.targets.get(index)

    def confirm(self, index: int) -> UpdateResult:
        target = self.target_for(index)
        if target is None:
            return self, None
        return Navigate(target), None

    def on_other_key(self, key: Key) -> UpdateResult:
        if matches(key, MENU_QUIT):
            return self, Quit()
        return self, None

    def extra_short_help(self) -> list[KeyBinding]:
        return [self.keys.launch, MENU_QUIT]


@register_screen(ScreenId.MENU)
def build_menu(settings) -> MenuScreen:
    return MenuScreen(color=settings.AUTOMATA_COLOR)
