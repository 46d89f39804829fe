# scheduler.py
from typing import Callable, Optional


class RepeatingTask:
    """
    Cancellable fixed-period task driven by an external millisecond clock.

    The host calls poll(now_ms) from its loop; the callback fires at most once
    per poll, so a slow frame never produces a burst of catch-up ticks and two
    firings never overlap.
    """

    def __init__(self, callback: Callable[[], None], interval_ms: int):
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.callback = callback
        self.interval_ms = interval_ms
        self._last: Optional[int] = None  # None while cancelled

    @property
    def active(self) -> bool:
        return self._last is not None

    def start(self, now_ms: int) -> None:
        self._last = now_ms

    def cancel(self) -> None:
        self._last = None

    def poll(self, now_ms: int) -> bool:
        """Fire the callback if a full interval has elapsed. Returns True if it ran."""
        if self._last is None or now_ms - self._last < self.interval_ms:
            return False
        self._last = now_ms
        self.callback()
        return True
