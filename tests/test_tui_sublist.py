"""Tests for the secondary list screen."""
from __future__ import annotations

import pytest

from automata.tui.events import Key, Navigate
from automata.tui.ids import ScreenId
from automata.tui.screens.listing import FilterState
from automata.tui.screens.sublist import SubListScreen


@pytest.fixture
def sublist():
    screen = SubListScreen(color=False)
    screen.init()
    return screen


def _keys(screen, *names):
    result = effect = None
    for name in names:
        result, effect = screen.update(Key(name))
    return result, effect


def test_choose_reports_selection(sublist):
    result, effect = _keys(sublist, "down", "enter")
    assert result is sublist
    assert effect is None
    assert sublist.status == "You chose Tomato Soup"
    assert "You chose Tomato Soup" in sublist.render()

    _keys(sublist, "down")
    assert sublist.status == ""


@pytest.mark.parametrize("key", ["esc", "q", "backspace"])
def test_return_keys_go_back_to_menu(sublist, key):
    assert _keys(sublist, key) == (Navigate(ScreenId.MENU), None)


def test_esc_clears_applied_filter_before_returning(sublist):
    _keys(sublist, "/", "c", "a", "v", "enter")
    assert sublist.selected_entry().title == "Caviar"

    result, _ = _keys(sublist, "esc")
    assert result is sublist
    assert sublist.filter_state is FilterState.UNFILTERED
    assert sublist.selected_entry().title == "Caviar"

    assert _keys(sublist, "esc")[0] == Navigate(ScreenId.MENU)


def test_q_while_filtering_is_filter_text(sublist):
    result, _ = _keys(sublist, "/", "q")
    assert result is sublist
    assert sublist.filter_text == "q"


def test_status_bar_counts_matches(sublist):
    _keys(sublist, "/", "b", "u", "r", "g")
    assert "2 of 10 items" in sublist.render()
