"""Secondary selectable list."""
from __future__ import annotations

from ..events import Key, Navigate
from ..keys import CHOOSE, RETURN, KeyBinding, matches
from ..router import register_screen
from .base import ScreenId, UpdateResult
from .listing import ListEntry, SelectableListScreen

SUBLIST_TITLE = "Pick something"

SUBLIST_ENTRIES = (
    ListEntry("Ramen", "Noodles in broth"),
    ListEntry("Tomato Soup", "Hearty, warming"),
    ListEntry("Hamburgers", "With cheese, please"),
    ListEntry("Cheeseburgers", "Hamburgers with more cheese"),
    ListEntry("Currywurst", "Sausage with curry ketchup"),
    ListEntry("Okonomiyaki", "Savoury pancake"),
    ListEntry("Pasta", "Any shape will do"),
    ListEntry("Fillet Mignon", "Only on special days"),
    ListEntry("Caviar", "Rarely"),
    ListEntry("Just Wine", "Sometimes"),
)


class SubListScreen(SelectableListScreen):
    """A list whose choose action only reports the choice."""

    screen_id = ScreenId.SUBLIST

    def __init__(self, entries=SUBLIST_ENTRIES, color: bool = True):
        super().__init__(SUBLIST_TITLE, entries, color=color)

    def confirm(self, index: int) -> UpdateResult:
        self.status = f"You chose {self.entries[index].title}"
        return self, None

    def on_other_key(self, key: Key) -> UpdateResult:
        if matches(key, RETURN):
            return Navigate(ScreenId.MENU), None
        return self, None

    def extra_short_help(self) -> list[KeyBinding]:
        return [CHOOSE, RETURN]


@register_screen(ScreenId.SUBLIST)
def build_sublist(settings) -> SubListScreen:
    return SubListScreen(color=settings.AUTOMATA_COLOR)
