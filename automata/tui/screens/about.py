"""About screen: fixed informational text."""
from __future__ import annotations

from rich.text import Text

from .. import components
from ..events import Effect, Event, Key, Navigate, Quit
from ..keys import QUIT, RETURN, help_line, matches
from ..router import register_screen
from .base import Screen, ScreenId, UpdateResult

ABOUT_TEXT = """\
Automata
Bring up and manage local development machines from the terminal.

Help / Support
  Open an issue on the project tracker, or contact the maintainers.

Navigation
  ↑/↓ or j/k   move the cursor
  /            filter a list
  enter or a   launch the highlighted item
  esc or q     return to the menu
  ctrl+c       quit"""


class AboutScreen(Screen):
    """Static page; only the return and quit keys do anything."""

    screen_id = ScreenId.INFO
    title = "About"

    def init(self) -> Effect | None:
        return None

    def handle(self, event: Event) -> UpdateResult:
        if isinstance(event, Key):
            if matches(event, QUIT):
                return self, Quit()
            if matches(event, RETURN):
                return Navigate(ScreenId.MENU), None
        return self, None

    def render(self) -> str:
        body = Text("\n").join([
            components.title_bar(self.title),
            Text(),
            Text(ABOUT_TEXT),
            Text(),
            components.help_text(help_line([RETURN, QUIT])),
        ])
        return components.render_to_text(
            components.app_frame(body), width=self.width, color=self.color
        )


@register_screen(ScreenId.INFO)
def build_about(settings) -> AboutScreen:
    return AboutScreen(color=settings.AUTOMATA_COLOR)
