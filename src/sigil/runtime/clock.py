import time
from typing import Callable, Protocol


class IClock(Protocol):
    """Monotonic, non-decreasing integer milliseconds"""

    def now_ms(self) -> int:
        ...


class MonotonicClock(IClock):
    """Milliseconds since construction, from time.monotonic()"""

    def __init__(self, time_fn: Callable[[], float] = time.monotonic):
        self._time_fn = time_fn
        self._start = time_fn()

    def now_ms(self) -> int:
        return int((self._time_fn() - self._start) * 1000)


class ManualClock(IClock):
    """Clock advanced by hand (tests, frame-exact exports)"""

    def __init__(self, start_ms: int = 0):
        self._now = start_ms

    def advance(self, delta_ms: int) -> int:
        if delta_ms < 0:
            raise ValueError("Clock cannot run backwards")
        self._now += delta_ms
        return self._now

    def now_ms(self) -> int:
        return self._now
