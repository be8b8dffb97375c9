"""
Frame clock: turns monotonically increasing millisecond timestamps into a
clamped per-tick delta in seconds.
"""

from typing import Optional

from .utils import sanitize_dt


class FrameClock:
    """Delta-time source; the first sample after creation or reset yields 0"""

    def __init__(self, max_dt: float = 0.033):
        self.max_dt = max_dt
        self._last: Optional[float] = None  # no previous sample yet

    def delta(self, now_ms: float) -> float:
        last, self._last = self._last, now_ms
        if last is None:
            return 0.0
        return sanitize_dt((now_ms - last) / 1000.0, self.max_dt)

    def reset(self):
        self._last = None
