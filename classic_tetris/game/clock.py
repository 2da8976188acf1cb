"""
Gravity clocks.

The engine only needs ``start(interval_ms, on_tick)`` and ``stop()``. The
pygame implementation lives in ``classic_tetris.play``; ``ManualClock`` here
drives ticks by hand for tests and headless recording.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol

TickCallback = Callable[[], None]


class Clock(Protocol):
    running: bool

    def start(self, interval_ms: int, on_tick: TickCallback) -> None: ...

    def stop(self) -> None: ...


class ManualClock:
    """Clock whose ticks are fired explicitly.

    Attributes:
        running: Whether a tick callback is currently armed.
        interval_ms: Interval given to the last ``start`` call.
        starts: Number of times the clock was started (for diagnostics).
    """

    def __init__(self) -> None:
        self.running = False
        self.interval_ms = 0
        self.starts = 0
        self._on_tick: Optional[TickCallback] = None
        self._elapsed = 0

    def start(self, interval_ms: int, on_tick: TickCallback) -> None:
        if self.running:
            raise RuntimeError("clock already running")
        assert interval_ms > 0, f"bad tick interval {interval_ms}"
        self.running = True
        self.interval_ms = interval_ms
        self.starts += 1
        self._on_tick = on_tick
        self._elapsed = 0

    def stop(self) -> None:
        self.running = False
        self._on_tick = None
        self._elapsed = 0

    def fire(self) -> bool:
        """Deliver one tick now. Returns False if the clock is stopped."""
        if not self.running or self._on_tick is None:
            return False
        self._on_tick()
        return True

    def advance(self, ms: int) -> int:
        """Let ``ms`` milliseconds pass, firing one tick per full interval.

        Stops early if a tick stops the clock (pause or game over).

        Returns:
            Number of ticks delivered.
        """
        fired = 0
        self._elapsed += ms
        while self.running and self._elapsed >= self.interval_ms:
            self._elapsed -= self.interval_ms
            if self.fire():
                fired += 1
        return fired
