"""Tick-based countdown driven by the game loop's `dt`.

The countdown never reads a clock. Callers feed it elapsed seconds through
`update`, so tests advance time by calling it directly.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Countdown:
    """Cancellable countdown that fires `on_expire` once when it hits zero.

    The countdown stays idle until `start()` is called. While active, every
    full `interval` of accumulated time removes one unit from `remaining`.
    """

    def __init__(
        self,
        duration: int,
        interval: float = 1.0,
        on_tick: Optional[Callable[[int], None]] = None,
        on_expire: Optional[Callable[[], None]] = None,
    ) -> None:
        if duration <= 0:
            raise ValueError("duration must be positive")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.duration = duration
        self.interval = interval
        self.on_tick = on_tick
        self.on_expire = on_expire
        self.remaining = duration
        self._elapsed = 0.0
        self._active = False
        self._expired = False
        self._cancelled = False

    @property
    def active(self) -> bool:
        return self._active

    @property
    def expired(self) -> bool:
        return self._expired

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def start(self) -> None:
        if self._expired or self._cancelled or self._active:
            return
        self._active = True
        logger.debug("Countdown: start (%d ticks)", self.remaining)

    def cancel(self) -> None:
        if self._cancelled or self._expired:
            return
        self._active = False
        self._cancelled = True
        logger.debug("Countdown: cancelled at %d", self.remaining)

    def update(self, dt: float) -> None:
        """Advance by `dt` seconds; no-op unless active."""

        if not self._active or dt <= 0:
            return

        self._elapsed += dt
        while self._active and self._elapsed >= self.interval:
            self._elapsed -= self.interval
            self.remaining -= 1
            if self.on_tick is not None:
                self.on_tick(self.remaining)
            if self.remaining == 0 and not self._cancelled:
                self._expire()

    def _expire(self) -> None:
        self._active = False
        self._expired = True
        logger.debug("Countdown: expired")
        if self.on_expire is not None:
            self.on_expire()
