"""Unit tests for Navigator class."""
from __future__ import annotations

from automata.tui.ids import ScreenId
from automata.tui.navigator import Navigator


def test_navigator_initial_state():
    """Test navigator starts at the menu."""
    nav = Navigator()
    assert nav.current() is ScreenId.MENU
    assert nav.breadcrumbs() == "Automata"


def test_navigator_go_returns_previous():
    nav = Navigator()
    assert nav.go(ScreenId.TIMER) is ScreenId.MENU
    assert nav.current() is ScreenId.TIMER
    assert nav.breadcrumbs() == "Automata > Timer"


def test_navigator_has_no_history():
    """Going somewhere replaces the active screen; there is nothing to pop."""
    nav = Navigator()
    nav.go(ScreenId.SUBLIST)
    nav.go(ScreenId.INFO)
    assert nav.breadcrumbs() == "Automata > About"


def test_navigator_home():
    nav = Navigator()
    nav.go(ScreenId.SUBLIST)
    nav.home()
    assert nav.current() is ScreenId.MENU
    assert nav.breadcrumbs() == "Automata"


def test_every_screen_has_a_label():
    assert set(Navigator.SCREEN_LABELS) == set(ScreenId)
