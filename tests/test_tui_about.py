"""Tests for the static about screen."""
from __future__ import annotations

from automata.tui.events import Key, Navigate, Quit, Resize, Tick
from automata.tui.ids import ScreenId
from automata.tui.screens.about import AboutScreen


def test_about_ignores_everything_but_return_and_quit():
    screen = AboutScreen(color=False)
    assert screen.init() is None
    for event in (Key("x"), Key("enter"), Tick(ScreenId.INFO, 1), Resize(90, 30)):
        assert screen.update(event) == (screen, None)
    assert screen.update(Key("esc")) == (Navigate(ScreenId.MENU), None)
    assert screen.update(Key("ctrl+c")) == (screen, Quit())


def test_about_renders_fixed_text():
    screen = AboutScreen(color=False)
    frame = screen.render()
    assert "About" in frame
    assert "Help / Support" in frame
    assert frame == screen.render()
