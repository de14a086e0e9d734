"""Screen modules for the TUI."""
from __future__ import annotations

# Import all screen modules to register them with the router
from . import (
    about,
    menu,
    sublist,
    timer,
)

__all__ = [
    "about",
    "menu",
    "sublist",
    "timer",
]
