"""Styling helpers shared by every screen.

All helpers are pure: they take strings or rich renderables and return
strings, so screens stay free of terminal state.
"""
from __future__ import annotations

import io
from typing import TYPE_CHECKING

from rich.console import Console
from rich.padding import Padding
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

if TYPE_CHECKING:
    from rich.console import RenderableType

    from .navigator import Navigator


# ═══════════════════════════════════════════════════════════════════════════════
# BRAND STYLING
# ═══════════════════════════════════════════════════════════════════════════════

APP_PADDING = (1, 2)
TITLE_STYLE = Style(color="#FFFDF5", bgcolor="#25A065")
STATUS_MESSAGE_STYLE = Style(color="#04B575")
HELP_STYLE = Style(color="color(241)")
SELECTED_STYLE = Style(color="#EE6FF8", bold=True)
SELECTED_DESC_STYLE = Style(color="#AD58B4")
NORMAL_STYLE = Style(color="#DDDDDD")
DIM_STYLE = Style(color="#777777")
FILTER_PROMPT_STYLE = Style(color="#ECFD65")

DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 24


def render_to_text(
    renderable: RenderableType,
    width: int = DEFAULT_WIDTH,
    color: bool = True,
) -> str:
    """Render a rich renderable to a string.

    With `color=False` the result is plain text, which keeps frames
    deterministic under test.
    """
    console = Console(
        file=io.StringIO(),
        width=max(1, width),
        force_terminal=color,
        color_system="truecolor" if color else None,
        no_color=not color,
        highlight=False,
        emoji=False,
        legacy_windows=False,
    )
    console.print(renderable, end="")
    return console.file.getvalue()


def app_frame(renderable: RenderableType) -> Padding:
    """Wrap a screen body in the application padding."""
    return Padding(renderable, APP_PADDING)


def title_bar(title: str) -> Text:
    return Text(f" {title} ", style=TITLE_STYLE)


def status_message(message: str) -> Text:
    return Text(message, style=STATUS_MESSAGE_STYLE)


def help_text(text: str) -> Text:
    return Text(text, style=HELP_STYLE)


def render_breadcrumbs(nav: Navigator) -> Text:
    """Render navigation breadcrumbs."""
    return Text(nav.breadcrumbs(), style=DIM_STYLE)


def render_error(
    console: Console,
    title: str,
    cause: str,
    action: str | None = None,
) -> None:
    """Render a friendly error panel with 3-part structure.
    
    Args:
        console: Rich Console for output
        title: Error title
        cause: What caused the error
        action: Suggested action to resolve
    """
    content = Text.assemble(
        ("✗ " + title, "bold red"),
        "\n\n",
        ("Cause: ", "yellow"),
        cause,
    )
    if action:
        content.append("\n\n→ " + action, style="dim")

    console.print(Panel.fit(content, border_style="red", title="Error"))
