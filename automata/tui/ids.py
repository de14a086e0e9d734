"""Screen identities."""
from __future__ import annotations

import enum


class ScreenId(enum.Enum):
    """The closed set of screens. Order is roster order."""

    MENU = "menu"
    TIMER = "timer"
    INFO = "info"
    SUBLIST = "sublist"
