"""Selectable list screen: cursor, pagination, filtering and display toggles."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence

from rich.text import Text

from .. import components
from ..events import Effect, Event, Key, Quit, ScheduleTick, Tick
from ..keys import QUIT, KeyBinding, ListKeyMap, full_help, help_line, matches
from .base import Screen, UpdateResult

SPINNER_FRAMES = ("⣾", "⣽", "⣻", "⢿", "⡿", "⣟", "⣯", "⣷")
SPINNER_INTERVAL = 0.1

# Each entry renders as title + description + one blank spacer line.
ITEM_HEIGHT = 3


class FilterState(enum.Enum):
    UNFILTERED = "unfiltered"
    FILTERING = "filtering"
    FILTER_APPLIED = "filter_applied"


@dataclass(frozen=True)
class ListEntry:
    title: str
    description: str

    @property
    def filter_value(self) -> str:
        return self.title


def fuzzy_match(needle: str, haystack: str) -> bool:
    """Case-insensitive subsequence match ("itm3" matches "Item 3")."""
    it = iter(haystack.casefold())
    return all(ch in it for ch in needle.casefold())


class SelectableListScreen(Screen):
    """An ordered list of entries with a cursor.

    The cursor indexes the *visible* entries (all of them, or the ones that
    match the active filter); `selected_index()` maps it back to the
    position in `entries`.
    """

    keys = ListKeyMap()

    def __init__(self, title: str, entries: Sequence[ListEntry], color: bool = True):
        super().__init__(color=color)
        if not entries:
            raise ValueError(f"{type(self).__name__} needs at least one entry")
        self.title = title
        self.entries: tuple[ListEntry, ...] = tuple(entries)
        self._generation = 0
        self._reset()

    def _reset(self) -> None:
        self.cursor = 0
        self.filter_state = FilterState.UNFILTERED
        self.filter_text = ""
        self._cursor_before_filter = 0

        self.show_title = True
        self.show_filter = True
        self.filtering_enabled = True
        self.show_status_bar = True
        self.show_pagination = True
        self.show_help = True
        self.show_full_help = False
        self.show_spinner = False
        self.spinner_frame = 0

        self.status = ""

    # ── lifecycle ────────────────────────────────────────────────────────────

    def init(self) -> Effect | None:
        self._reset()
        self._generation += 1
        return None

    def resume(self) -> Effect | None:
        self._generation += 1
        if self.show_spinner:
            return self._spinner_tick()
        return None

    # ── queries ──────────────────────────────────────────────────────────────

    def visible_indices(self) -> list[int]:
        if self.filter_state is FilterState.UNFILTERED or not self.filter_text:
            return list(range(len(self.entries)))
        return [
            i for i, entry in enumerate(self.entries)
            if fuzzy_match(self.filter_text, entry.filter_value)
        ]

    def selected_index(self) -> int | None:
        """Position in `entries` of the highlighted entry, if any."""
        visible = self.visible_indices()
        if not visible:
            return None
        return visible[min(self.cursor, len(visible) - 1)]

    def selected_entry(self) -> ListEntry | None:
        index = self.selected_index()
        return None if index is None else self.entries[index]

    def per_page(self) -> int:
        chrome = 2 * components.APP_PADDING[0]
        if self.show_title or self.filter_state is FilterState.FILTERING:
            chrome += 2
        if self.show_status_bar:
            chrome += 2
        if self.show_pagination:
            chrome += 1
        if self.show_help:
            chrome += 2 if not self.show_full_help else 6
        return max(1, (self.height - chrome) // ITEM_HEIGHT)

    def page(self) -> int:
        return self.cursor // self.per_page()

    def total_pages(self) -> int:
        count = len(self.visible_indices())
        return max(1, -(-count // self.per_page()))

    # ── update ───────────────────────────────────────────────────────────────

    def handle(self, event: Event) -> UpdateResult:
        if isinstance(event, Tick):
            return self._on_tick(event)
        if not isinstance(event, Key):
            return self, None
        if self.filter_state is FilterState.FILTERING:
            return self._on_filter_key(event)
        return self._on_key(event)

    def _on_tick(self, tick: Tick) -> UpdateResult:
        if tick.owner is not self.screen_id or tick.generation != self._generation:
            return self, None
        if not self.show_spinner:
            return self, None
        self.spinner_frame = (self.spinner_frame + 1) % len(SPINNER_FRAMES)
        return self, self._spinner_tick()

    def _spinner_tick(self) -> ScheduleTick:
        return ScheduleTick(SPINNER_INTERVAL, Tick(self.screen_id, self._generation))

    def _on_filter_key(self, key: Key) -> UpdateResult:
        """While typing a filter only filter editing, apply and cancel count."""
        k = self.keys
        if matches(key, QUIT):
            return self, Quit()
        if matches(key, k.cancel_filter):
            self.filter_state = FilterState.UNFILTERED
            self.filter_text = ""
            self.cursor = self._cursor_before_filter
        elif matches(key, k.accept_filter):
            if self.filter_text:
                self.filter_state = FilterState.FILTER_APPLIED
            else:
                self.filter_state = FilterState.UNFILTERED
                self.cursor = self._cursor_before_filter
        elif key.name == "backspace":
            self.filter_text = self.filter_text[:-1]
            self.cursor = 0
        elif key.printable:
            self.filter_text += key.name
            self.cursor = 0
        return self, None

    def _on_key(self, key: Key) -> UpdateResult:
        k = self.keys
        self.status = ""

        if matches(key, QUIT):
            return self, Quit()

        if matches(key, k.toggle_spinner):
            self.show_spinner = not self.show_spinner
            self._generation += 1
            return self, self._spinner_tick() if self.show_spinner else None

        if matches(key, k.toggle_title_bar):
            v = not self.show_title
            self.show_title = v
            self.show_filter = v
            self.filtering_enabled = v
            return self, None

        if matches(key, k.toggle_status_bar):
            self.show_status_bar = not self.show_status_bar
            return self, None

        if matches(key, k.toggle_pagination):
            self.show_pagination = not self.show_pagination
            return self, None

        if matches(key, k.toggle_help):
            self.show_help = not self.show_help
            return self, None

        if key.name == "?":
            self.show_full_help = not self.show_full_help
            return self, None

        if self.filtering_enabled and matches(key, k.filter):
            # Starting over from an applied filter: the cursor counts filtered
            # rows, so remember the selected entry by its position in `entries`.
            selected = self.selected_index()
            self._cursor_before_filter = selected if selected is not None else 0
            self.filter_state = FilterState.FILTERING
            self.filter_text = ""
            self.cursor = self._cursor_before_filter
            return self, None

        if self.filter_state is FilterState.FILTER_APPLIED and matches(key, k.clear_filter):
            selected = self.selected_index()
            self.filter_state = FilterState.UNFILTERED
            self.filter_text = ""
            self.cursor = selected if selected is not None else 0
            return self, None

        if self._move(key):
            return self, None

        if matches(key, k.launch):
            index = self.selected_index()
            if index is None:
                return self, None
            return self.confirm(index)

        return self.on_other_key(key)

    def _move(self, key: Key) -> bool:
        k = self.keys
        last = max(0, len(self.visible_indices()) - 1)
        per_page = self.per_page()
        if matches(key, k.cursor_up):
            self.cursor = max(0, self.cursor - 1)
        elif matches(key, k.cursor_down):
            self.cursor = min(last, self.cursor + 1)
        elif matches(key, k.prev_page):
            if self.page() > 0:
                self.cursor = (self.page() - 1) * per_page
        elif matches(key, k.next_page):
            if self.page() + 1 < self.total_pages():
                self.cursor = min(last, (self.page() + 1) * per_page)
        elif matches(key, k.go_to_start):
            self.cursor = 0
        elif matches(key, k.go_to_end):
            self.cursor = last
        else:
            return False
        return True

    def confirm(self, index: int) -> UpdateResult:
        """Launch action on the entry at `index` in `entries`."""
        return self, None

    def on_other_key(self, key: Key) -> UpdateResult:
        return self, None

    # ── render ───────────────────────────────────────────────────────────────

    def extra_short_help(self) -> list[KeyBinding]:
        return []

    def extra_full_help(self) -> list[KeyBinding]:
        k = self.keys
        return [
            k.toggle_spinner,
            k.launch,
            k.toggle_title_bar,
            k.toggle_status_bar,
            k.toggle_pagination,
            k.toggle_help,
        ]

    def _short_help(self) -> list[KeyBinding]:
        k = self.keys
        if self.filter_state is FilterState.FILTERING:
            return [k.cancel_filter, k.accept_filter]
        bindings = [k.cursor_up, k.cursor_down]
        if self.filter_state is FilterState.FILTER_APPLIED:
            bindings.append(k.clear_filter)
        elif self.filtering_enabled:
            bindings.append(k.filter)
        return bindings + self.extra_short_help() + [KeyBinding(("?",), "?", "more")]

    def _status_line(self) -> str:
        if self.status:
            return self.status
        visible = len(self.visible_indices())
        total = len(self.entries)
        noun = "item" if total == 1 else "items"
        if self.filter_state is FilterState.UNFILTERED:
            return f"{total} {noun}"
        if not visible:
            return f"Nothing matched • filter: {self.filter_text}"
        return f"{visible} of {total} {noun} • filter: {self.filter_text}"

    def _pagination_line(self) -> str:
        pages = self.total_pages()
        if pages <= 1:
            return ""
        if pages > 10:
            return f"{self.page() + 1}/{pages}"
        return "".join("•" if p == self.page() else "○" for p in range(pages))

    def body(self) -> Text:
        lines: list[Text] = []

        if self.filter_state is FilterState.FILTERING:
            prompt = Text("Filter: ", style=components.FILTER_PROMPT_STYLE)
            prompt.append(self.filter_text + "█")
            lines += [prompt, Text()]
        elif self.show_title:
            header = components.title_bar(self.title)
            if self.show_spinner:
                header.append(" " + SPINNER_FRAMES[self.spinner_frame], style=components.DIM_STYLE)
            lines += [header, Text()]

        if self.show_status_bar:
            style = components.STATUS_MESSAGE_STYLE if self.status else components.DIM_STYLE
            lines += [Text(self._status_line(), style=style), Text()]

        visible = self.visible_indices()
        per_page = self.per_page()
        start = self.page() * per_page
        for pos in range(start, min(start + per_page, len(visible))):
            entry = self.entries[visible[pos]]
            if pos == self.cursor:
                lines.append(Text("│ " + entry.title, style=components.SELECTED_STYLE))
                lines.append(Text("│ " + entry.description, style=components.SELECTED_DESC_STYLE))
            else:
                lines.append(Text("  " + entry.title, style=components.NORMAL_STYLE))
                lines.append(Text("  " + entry.description, style=components.DIM_STYLE))
            lines.append(Text())
        if not visible:
            lines += [Text("No items.", style=components.DIM_STYLE), Text()]

        if self.show_pagination:
            dots = self._pagination_line()
            if dots:
                lines.append(Text(dots, style=components.DIM_STYLE))

        if self.show_help:
            lines.append(Text())
            if self.show_full_help:
                k = self.keys
                columns = [
                    [k.cursor_up, k.cursor_down, k.prev_page, k.next_page],
                    [k.go_to_start, k.go_to_end, k.filter],
                    self.extra_short_help() + self.extra_full_help(),
                ]
                lines.append(components.help_text(full_help(columns)))
            else:
                lines.append(components.help_text(help_line(self._short_help())))

        body = Text("\n").join(lines)
        body.no_wrap = True
        body.overflow = "ellipsis"
        return body

    def render(self) -> str:
        return components.render_to_text(
            components.app_frame(self.body()), width=self.width, color=self.color
        )
