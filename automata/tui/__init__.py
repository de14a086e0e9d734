"""TUI (Terminal User Interface) module for automata.

Provides a menu that routes to full-screen views, one active at a time.
"""
from .ids import ScreenId
from .navigator import Navigator
from .router import Router
from .state import UIState

__all__ = ["Navigator", "Router", "ScreenId", "UIState"]
