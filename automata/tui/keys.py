"""Key bindings and their help text."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Sequence

from .events import Key


@dataclass(frozen=True)
class KeyBinding:
    """A set of key names sharing one action, with its help label.

    Example:
        launch = KeyBinding(("a", "enter"), "a", "launch item")
    """

    keys: tuple[str, ...]
    help_key: str
    help_desc: str
    enabled: bool = True

    def with_enabled(self, enabled: bool) -> KeyBinding:
        return replace(self, enabled=enabled)


def matches(key: Key, *bindings: KeyBinding) -> bool:
    """True if `key` belongs to any of the enabled `bindings`."""
    return any(b.enabled and key.name in b.keys for b in bindings)


def help_line(bindings: Iterable[KeyBinding], separator: str = " • ") -> str:
    """Short help: "key desc • key desc", skipping disabled bindings."""
    return separator.join(
        f"{b.help_key} {b.help_desc}" for b in bindings if b.enabled
    )


def full_help(columns: Sequence[Sequence[KeyBinding]]) -> str:
    """Full help: one line per column group."""
    lines = [help_line(column) for column in columns]
    return "\n".join(line for line in lines if line)


# ═══════════════════════════════════════════════════════════════════════════════
# DEFAULT BINDINGS
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ListKeyMap:
    cursor_up: KeyBinding = KeyBinding(("up", "k"), "↑/k", "up")
    cursor_down: KeyBinding = KeyBinding(("down", "j"), "↓/j", "down")
    prev_page: KeyBinding = KeyBinding(("left", "h", "pgup"), "←/h/pgup", "prev page")
    next_page: KeyBinding = KeyBinding(("right", "l", "pgdown"), "→/l/pgdn", "next page")
    go_to_start: KeyBinding = KeyBinding(("home", "g"), "g/home", "go to start")
    go_to_end: KeyBinding = KeyBinding(("end", "G"), "G/end", "go to end")
    filter: KeyBinding = KeyBinding(("/",), "/", "filter")
    clear_filter: KeyBinding = KeyBinding(("esc",), "esc", "clear filter")
    cancel_filter: KeyBinding = KeyBinding(("esc",), "esc", "cancel")
    accept_filter: KeyBinding = KeyBinding(("enter", "tab"), "enter", "apply filter")
    toggle_spinner: KeyBinding = KeyBinding(("s",), "s", "toggle spinner")
    toggle_title_bar: KeyBinding = KeyBinding(("T",), "T", "toggle title")
    toggle_status_bar: KeyBinding = KeyBinding(("S",), "S", "toggle status")
    toggle_pagination: KeyBinding = KeyBinding(("P",), "P", "toggle pagination")
    toggle_help: KeyBinding = KeyBinding(("H",), "H", "toggle help")
    launch: KeyBinding = KeyBinding(("a", "enter"), "enter (a)", "launch item")


@dataclass(frozen=True)
class TimerKeyMap:
    start_stop: KeyBinding = KeyBinding(("s",), "s", "start/stop")
    reset: KeyBinding = KeyBinding(("r",), "r", "reset")


RETURN = KeyBinding(("esc", "q", "backspace"), "esc/q", "back to menu")
QUIT = KeyBinding(("ctrl+c",), "ctrl+c", "quit")
MENU_QUIT = KeyBinding(("q", "ctrl+c"), "q", "quit")
CHOOSE = KeyBinding(("enter", "a"), "enter", "choose")
