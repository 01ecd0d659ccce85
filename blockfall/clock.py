"""A pausable stopwatch measured in milliseconds."""

from __future__ import annotations

import time
from collections.abc import Callable

_UINT32 = 0xFFFFFFFF
_EPOCH = time.monotonic()


def _default_ticks() -> int:
    return int((time.monotonic() - _EPOCH) * 1000)


class Clock:
    """Measures time since it was started, excluding time spent paused.

    ``ticks`` returns the current time in milliseconds; by default it counts
    from when the module was loaded.
    """

    def __init__(self, ticks: Callable[[], int] | None = None) -> None:
        self._ticks = ticks or _default_ticks
        self._start = self._ticks()
        self._pause_start = 0
        self._pause_end = 0
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def pause(self, paused: bool) -> None:
        """Pause or resume; on resuming the paused span is skipped."""
        if self._active:
            self._pause_start = self._ticks()
        else:
            self._pause_end = self._ticks()
        self._active = not paused
        if not paused:
            self._start = (self._start + (self._pause_end - self._pause_start)) & _UINT32
            self._pause_start = 0
            self._pause_end = 0

    def seconds_from_start(self) -> int:
        return self.milliseconds_from_start() // 1000

    def milliseconds_from_start(self) -> int:
        return (self._ticks() - self._start) & _UINT32

    def reset(self) -> None:
        """Start counting again from now."""
        self._start = self._ticks()