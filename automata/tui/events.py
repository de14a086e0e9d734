"""Events, navigation intents and effects exchanged with the host loop.

Screens never touch the terminal. The host turns key presses, resizes and
timers into events; screens answer with declarative effects that the host
realizes later.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .ids import ScreenId


# ═══════════════════════════════════════════════════════════════════════════════
# EVENTS (host -> router)
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Key:
    """A normalized key press ("a", "T", "up", "enter", "esc", "ctrl+c", ...)."""

    name: str

    @property
    def printable(self) -> bool:
        return len(self.name) == 1 and self.name.isprintable()


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class Tick:
    """A timer tick addressed to one activation of one screen.

    `generation` changes every time the owning screen (re)starts its tick
    chain, so ticks scheduled by an earlier activation are ignored.
    """

    owner: ScreenId
    generation: int


@dataclass(frozen=True)
class QuitRequested:
    """The host wants to stop (signal or window close)."""


Event = Union[Key, Resize, Tick, QuitRequested]


# ═══════════════════════════════════════════════════════════════════════════════
# NAVIGATION INTENT (screen -> router)
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Navigate:
    target: ScreenId


# ═══════════════════════════════════════════════════════════════════════════════
# EFFECTS (screen/router -> host)
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ScheduleTick:
    """Deliver `tick` to the router after `delay` seconds."""

    delay: float
    tick: Tick


@dataclass(frozen=True)
class Quit:
    """Stop the host loop with exit code 0."""


@dataclass(frozen=True)
class Batch:
    effects: tuple[Effect, ...]


Effect = Union[ScheduleTick, Quit, Batch]


def batch(*effects: Effect | None) -> Effect | None:
    """Combine effects, dropping empty ones.

    Returns None when nothing is left, the effect itself when only one is
    left, and a flattened Batch otherwise.
    """
    flat: list[Effect] = []
    for effect in effects:
        if effect is None:
            continue
        if isinstance(effect, Batch):
            flat.extend(effect.effects)
        else:
            flat.append(effect)
    if not flat:
        return None
    if len(flat) == 1:
        return flat[0]
    return Batch(tuple(flat))


def iter_effects(effect: Effect | None):
    """Yield the leaf effects of `effect` in order."""
    if effect is None:
        return
    if isinstance(effect, Batch):
        for inner in effect.effects:
            yield from iter_effects(inner)
    else:
        yield effect
