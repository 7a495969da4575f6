"""Per-turn countdown clock."""

from __future__ import annotations

import time

from capturechess.game.interfaces import ITurnClock, TimeControl


class TurnClock(ITurnClock):
    """Counts down the time left for the player whose turn it is.

    Uses monotonic time. Each turn starts with the full allowance of the
    :class:`TimeControl`; :meth:`reset` is called on every turn change.
    """

    __slots__ = ("_time_control", "_remaining", "_last_tick", "_running")

    def __init__(self, time_control: TimeControl) -> None:
        self._time_control = time_control
        self._remaining: float = time_control.seconds_per_turn
        self._last_tick: float = 0.0
        self._running: bool = False

    # ── ITurnClock implementation ────────────────────────────────────────

    def start(self) -> None:
        if self._running:
            return
        self._last_tick = time.monotonic()
        self._running = True

    def stop(self) -> None:
        if self._running:
            self._consume_elapsed()
            self._running = False

    def reset(self) -> None:
        self._remaining = self._time_control.seconds_per_turn
        self._last_tick = time.monotonic()

    def remaining(self) -> float:
        if self._running:
            elapsed = time.monotonic() - self._last_tick
            return max(0.0, self._remaining - elapsed)
        return max(0.0, self._remaining)

    def is_expired(self) -> bool:
        return self.remaining() <= 0.0

    # ── Extra helpers ────────────────────────────────────────────────────

    @property
    def time_control(self) -> TimeControl:
        return self._time_control

    @property
    def is_unlimited(self) -> bool:
        return self._time_control.seconds_per_turn == float("inf")

    @property
    def is_running(self) -> bool:
        return self._running

    def set_remaining(self, seconds: float) -> None:
        """Manually override remaining time (for testing / UI override)."""
        self._remaining = seconds
        self._last_tick = time.monotonic()

    # ── Internal ─────────────────────────────────────────────────────────

    def _consume_elapsed(self) -> None:
        now = time.monotonic()
        self._remaining = max(0.0, self._remaining - (now - self._last_tick))
        self._last_tick = now
