"""Frame timing for the scene view: per-frame delta seconds with a cap."""

from __future__ import annotations

import time
from collections.abc import Callable

DEFAULT_FRAME_INTERVAL_MS = 16
DEFAULT_DELTA_SECONDS = 1.0 / 60.0
MAX_DELTA_SECONDS = 0.1


class FrameClock:
    """Measures the time between successive frames."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._previous: float | None = None

    def compute_delta_seconds(self) -> float:
        """Return seconds since the previous call, clamped to [0, MAX_DELTA_SECONDS].

        The first call returns DEFAULT_DELTA_SECONDS.
        """
        now = self._clock()
        previous, self._previous = self._previous, now
        if previous is None:
            return DEFAULT_DELTA_SECONDS
        return min(max(now - previous, 0.0), MAX_DELTA_SECONDS)