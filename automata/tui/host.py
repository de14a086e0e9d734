"""Full-screen prompt_toolkit host that drives the router."""
from __future__ import annotations

import asyncio
import logging
import signal
from typing import TYPE_CHECKING, Any, Callable

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import Layout
from prompt_toolkit.layout.containers import Window
from prompt_toolkit.layout.controls import FormattedTextControl

from .events import (
    Effect,
    Event,
    Key,
    Quit,
    QuitRequested,
    Resize,
    ScheduleTick,
    Tick,
    iter_effects,
)

if TYPE_CHECKING:
    from .router import Router

logger = logging.getLogger(__name__)

# prompt_toolkit key names -> Key names understood by the screens
KEY_ALIASES = {
    "up": "up",
    "down": "down",
    "left": "left",
    "right": "right",
    "home": "home",
    "end": "end",
    "pageup": "pgup",
    "pagedown": "pgdown",
    "c-m": "enter",
    "c-j": "enter",
    "escape": "esc",
    "c-h": "backspace",
    "backspace": "backspace",
    "c-i": "tab",
    "c-c": "ctrl+c",
}

Scheduler = Callable[[float, Callable[[], None]], Any]


def key_from_press(key: Keys | str) -> Key | None:
    """Normalize a prompt_toolkit key into a Key event.

    Returns None for keys no screen binds (function keys, mouse, ...).
    """
    name = key.value if isinstance(key, Keys) else str(key)
    if name in KEY_ALIASES:
        return Key(KEY_ALIASES[name])
    if len(name) == 1 and name.isprintable():
        return Key(name)
    return None


def _loop_scheduler(delay: float, callback: Callable[[], None]) -> Any:
    return asyncio.get_running_loop().call_later(delay, callback)


class Host:
    """Turns terminal input into events and effects into future events.

    One event is fully dispatched (including any screen switch) before the
    next is read; everything runs on the application's event loop.
    """

    def __init__(
        self,
        router: Router,
        *,
        input=None,
        output=None,
        scheduler: Scheduler | None = None,
    ):
        self.router = router
        self.scheduler = scheduler or _loop_scheduler
        self.quit_requested = False
        self._last_size: tuple[int, int] | None = None
        self.app = self._build_app(input=input, output=output)

    def _build_app(self, input=None, output=None) -> Application:
        kb = KeyBindings()

        @kb.add(Keys.Any)
        def _any(event):
            for press in event.key_sequence:
                key = key_from_press(press.key)
                if key is None:
                    logger.debug("ignoring unbound key %r", press.key)
                    continue
                self.send(key)

        control = FormattedTextControl(
            lambda: ANSI(self.router.render()),
            focusable=True,
            show_cursor=False,
        )
        app = Application(
            layout=Layout(Window(control, wrap_lines=False)),
            key_bindings=kb,
            full_screen=True,
            mouse_support=False,
            before_render=self._check_size,
            input=input,
            output=output,
        )
        # Escape must not wait for a possible escape sequence for long.
        app.ttimeoutlen = 0.05
        app.timeoutlen = 0.05
        return app

    def _check_size(self, app: Application) -> None:
        size = app.output.get_size()
        current = (size.columns, size.rows)
        if current != self._last_size:
            self._last_size = current
            self.send(Resize(width=size.columns, height=size.rows), redraw=False)

    def send(self, event: Event, redraw: bool = True) -> None:
        """Dispatch one event and realize the effects it returns."""
        effect = self.router.dispatch(event)
        self.apply(effect)
        if redraw:
            self.app.invalidate()

    def apply(self, effect: Effect | None) -> None:
        for leaf in iter_effects(effect):
            if isinstance(leaf, ScheduleTick):
                self._schedule(leaf.delay, leaf.tick)
            elif isinstance(leaf, Quit):
                self.quit_requested = True
                if self.app.is_running:
                    self.app.exit(result=0)

    def _schedule(self, delay: float, tick: Tick) -> None:
        self.scheduler(delay, lambda: self._deliver(tick))

    def _deliver(self, tick: Tick) -> None:
        if self.quit_requested:
            return
        self.send(tick)

    def request_quit(self) -> None:
        """Ask the router to stop; installed as the SIGTERM handler."""
        logger.info("termination requested")
        self.send(QuitRequested())

    def _install_signal_handlers(self) -> None:
        try:
            asyncio.get_running_loop().add_signal_handler(signal.SIGTERM, self.request_quit)
        except (RuntimeError, NotImplementedError, ValueError):
            # No running loop, not the main thread, or no loop signal support.
            logger.debug("SIGTERM handler not installed")

    def _start(self) -> None:
        self._install_signal_handlers()
        self.apply(self.router.start())

    def run(self) -> int:
        """Run until a Quit effect; returns the process exit code."""
        logger.info("host starting")
        result = self.app.run(pre_run=self._start)
        logger.info("host stopped")
        return 0 if result is None else int(result)
