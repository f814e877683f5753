"""Cooperative frame ticker driving transitions.

A :class:`Ticker` holds a queue of frame callbacks.  The application pumps it
once per display refresh by calling :meth:`Ticker.tick`; nothing here blocks
or spawns threads.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional

import pygame

from .config import DEFAULT_FPS

logger = logging.getLogger(__name__)

CancelHandle = Callable[[], None]


def monotonic_ms() -> float:
    """Return a monotonic timestamp in milliseconds."""
    return time.monotonic() * 1000.0


class _Registration:
    __slots__ = ("callback", "repeat", "cancelled")

    def __init__(self, callback: Callable[[], None], repeat: bool) -> None:
        self.callback = callback
        self.repeat = repeat
        self.cancelled = False


class Ticker:
    """Dispatch registered callbacks once per frame."""

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock or monotonic_ms
        self._registrations: List[_Registration] = []
        self.frame = 0

    def now(self) -> float:
        """Return the current time in milliseconds."""
        return self._clock()

    def _register(self, callback: Callable[[], None], repeat: bool) -> CancelHandle:
        reg = _Registration(callback, repeat)
        self._registrations.append(reg)

        def cancel() -> None:
            if reg.cancelled:
                return
            reg.cancelled = True
            try:
                self._registrations.remove(reg)
            except ValueError:
                pass

        return cancel

    def on_tick(self, callback: Callable[[], None]) -> CancelHandle:
        """Call ``callback`` every frame until the returned handle is called."""
        return self._register(callback, repeat=True)

    def once(self, callback: Callable[[], None]) -> CancelHandle:
        """Call ``callback`` on the next frame only."""
        return self._register(callback, repeat=False)

    def tick(self) -> None:
        """Dispatch one frame."""
        self.frame += 1
        # Registrations added while dispatching wait for the next frame
        pending = list(self._registrations)
        for reg in pending:
            if reg.cancelled:
                continue
            if not reg.repeat:
                reg.cancelled = True
                self._registrations.remove(reg)
            reg.callback()

    @property
    def active(self) -> int:
        """Number of live registrations."""
        return len(self._registrations)

    def clear(self) -> None:
        """Cancel every registration."""
        logger.debug("Clearing %d frame registrations", len(self._registrations))
        for reg in self._registrations:
            reg.cancelled = True
        self._registrations = []


class PygameTicker(Ticker):
    """Ticker paced by ``pygame.time.Clock``.

    ``pygame.init()`` must have been called so that ``get_ticks`` reports the
    time since initialisation.
    """

    def __init__(self, fps: int = DEFAULT_FPS) -> None:
        super().__init__(clock=pygame.time.get_ticks)
        self.fps = fps
        self.clock = pygame.time.Clock()

    def step(self) -> int:
        """Wait for the next frame, dispatch it and return the elapsed ms."""
        dt = self.clock.tick(self.fps)
        self.tick()
        return dt


# Shared ticker used by transitions created without one
default_ticker = Ticker()

__all__ = ["CancelHandle", "Ticker", "PygameTicker", "default_ticker", "monotonic_ms"]
