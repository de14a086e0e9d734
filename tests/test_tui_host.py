"""Tests for the prompt_toolkit host."""
from __future__ import annotations

import pytest
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.keys import Keys
from prompt_toolkit.output import DummyOutput

from automata.tui.events import Key, Resize
from automata.tui.host import Host, key_from_press
from automata.tui.ids import ScreenId


@pytest.mark.parametrize(
    "key, expected",
    [
        (Keys.Up, "up"),
        (Keys.PageDown, "pgdown"),
        (Keys.ControlM, "enter"),
        (Keys.Escape, "esc"),
        (Keys.ControlH, "backspace"),
        (Keys.ControlI, "tab"),
        (Keys.ControlC, "ctrl+c"),
        ("a", "a"),
        ("T", "T"),
        ("/", "/"),
    ],
)
def test_key_normalization(key, expected):
    assert key_from_press(key) == Key(expected)


def test_unbound_keys_are_dropped():
    assert key_from_press(Keys.F1) is None
    assert key_from_press(Keys.ControlX) is None


class FakeScheduler:
    def __init__(self):
        self.calls = []

    def __call__(self, delay, callback):
        self.calls.append((delay, callback))


@pytest.fixture
def host(make_router):
    router = make_router()
    scheduler = FakeScheduler()
    with create_pipe_input() as pipe:
        yield Host(router, input=pipe, output=DummyOutput(), scheduler=scheduler)


def test_host_turns_tick_effects_into_scheduled_events(host):
    host.send(Key("down"))
    host.send(Key("enter"))
    assert host.router.active is ScreenId.TIMER

    (delay, callback), = host.scheduler.calls
    assert delay == 1.0
    callback()
    assert host.router.active_screen.remaining == 59
    assert len(host.scheduler.calls) == 2


def test_host_quit_effect_stops_delivery(host):
    host.send(Key("down"))
    host.send(Key("enter"))
    host.send(Key("ctrl+c"))
    assert host.quit_requested is True

    _, callback = host.scheduler.calls[0]
    callback()
    assert host.router.active_screen.remaining == 60


def test_host_reports_size_changes_once(host):
    host._check_size(host.app)
    size = host.app.output.get_size()
    assert host.router.state.last_size == Resize(size.columns, size.rows)

    dispatched = host.router.state.events_dispatched
    host._check_size(host.app)
    assert host.router.state.events_dispatched == dispatched


def test_host_start_activates_menu(host):
    host.router.activate(ScreenId.INFO)
    host._start()
    assert host.router.active is ScreenId.MENU


def test_termination_request_quits_through_router(host):
    """SIGTERM goes through the router as QuitRequested and stops the host."""
    host.send(Key("down"))
    host.send(Key("enter"))
    dispatched = host.router.state.events_dispatched

    host.request_quit()

    assert host.quit_requested is True
    assert host.router.state.events_dispatched == dispatched + 1
    assert host.router.active is ScreenId.TIMER
