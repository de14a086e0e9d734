"""Countdown timer screen."""
from __future__ import annotations

import logging

from rich.text import Text

from .. import components
from ..events import Effect, Event, Key, Navigate, Quit, ScheduleTick, Tick
from ..keys import QUIT, RETURN, TimerKeyMap, help_line, matches
from ..router import register_screen
from .base import Screen, ScreenId, UpdateResult

logger = logging.getLogger(__name__)

EXPIRED_MESSAGE = "Timer expired!"


def format_duration(ms: int) -> str:
    """Format milliseconds the way Go prints a time.Duration.

    >>> format_duration(60_000)
    '1m0s'
    >>> format_duration(1_500)
    '1.5s'
    """
    if ms <= 0:
        return "0s"
    if ms < 1000:
        return f"{ms}ms"
    hours, rem = divmod(ms, 3_600_000)
    minutes, rem = divmod(rem, 60_000)
    seconds, millis = divmod(rem, 1000)
    sec = str(seconds)
    if millis:
        sec += "." + f"{millis:03d}".rstrip("0")
    if hours:
        return f"{hours}h{minutes}m{sec}s"
    if minutes:
        return f"{minutes}m{sec}s"
    return f"{sec}s"


class TimerScreen(Screen):
    """Counts a configured duration down to zero, one tick at a time.

    Remaining time is kept in integer milliseconds so repeated fractional
    ticks never drift below zero or stop short of it.
    """

    screen_id = ScreenId.TIMER
    title = "Timer"
    keys = TimerKeyMap()

    def __init__(self, duration: float = 60.0, interval: float = 1.0, color: bool = True):
        super().__init__(color=color)
        if duration <= 0 or interval <= 0:
            raise ValueError("timer duration and interval must be positive")
        self.duration_ms = round(duration * 1000)
        self.interval_ms = max(1, round(interval * 1000))
        self.remaining_ms = self.duration_ms
        self.running = False
        self._generation = 0

    @property
    def remaining(self) -> float:
        return self.remaining_ms / 1000

    @property
    def expired(self) -> bool:
        return self.remaining_ms == 0

    def init(self) -> Effect | None:
        self.remaining_ms = self.duration_ms
        self.running = True
        return self._start()

    def resume(self) -> Effect | None:
        if self.running and not self.expired:
            return self._start()
        return None

    def _start(self) -> ScheduleTick:
        # A new generation orphans any tick still in flight.
        self._generation += 1
        return self._next_tick()

    def _next_tick(self) -> ScheduleTick:
        return ScheduleTick(self.interval_ms / 1000, Tick(self.screen_id, self._generation))

    def handle(self, event: Event) -> UpdateResult:
        if isinstance(event, Tick):
            return self._on_tick(event)
        if isinstance(event, Key):
            return self._on_key(event)
        return self, None

    def _on_tick(self, tick: Tick) -> UpdateResult:
        if tick.owner is not self.screen_id or tick.generation != self._generation:
            return self, None
        if not self.running or self.expired:
            return self, None
        self.remaining_ms = max(0, self.remaining_ms - self.interval_ms)
        if self.expired:
            self.running = False
            logger.info("timer expired after %s", format_duration(self.duration_ms))
            return self, None
        return self, self._next_tick()

    def _on_key(self, key: Key) -> UpdateResult:
        if matches(key, QUIT):
            return self, Quit()
        if matches(key, RETURN):
            return Navigate(ScreenId.MENU), None
        if matches(key, self.keys.reset):
            self.remaining_ms = self.duration_ms
            self.running = True
            return self, self._start()
        if matches(key, self.keys.start_stop) and not self.expired:
            if self.running:
                self.running = False
                self._generation += 1
                return self, None
            self.running = True
            return self, self._start()
        return self, None

    def render(self) -> str:
        lines = [components.title_bar(self.title), Text()]
        if self.expired:
            lines.append(components.status_message(EXPIRED_MESSAGE))
        else:
            line = Text("Time remaining: ")
            line.append(format_duration(self.remaining_ms), style="bold")
            if not self.running:
                line.append("  (paused)", style=components.DIM_STYLE)
            lines.append(line)
        lines.append(Text())
        bindings = [self.keys.start_stop.with_enabled(not self.expired), self.keys.reset, RETURN, QUIT]
        lines.append(components.help_text(help_line(bindings)))
        body = Text("\n").join(lines)
        return components.render_to_text(
            components.app_frame(body), width=self.width, color=self.color
        )


@register_screen(ScreenId.TIMER)
def build_timer(settings) -> TimerScreen:
    return TimerScreen(
        duration=settings.AUTOMATA_TIMER_SECONDS,
        interval=settings.AUTOMATA_TICK_SECONDS,
        color=settings.AUTOMATA_COLOR,
    )
