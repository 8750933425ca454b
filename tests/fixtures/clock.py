"""
Controllable clock for time-dependent tests.
"""

from datetime import datetime, timedelta, timezone


class FakeClock:
    """Callable returning a fixed time until advanced."""

    def __init__(self, start: datetime = None):
        self.current = start or datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.current

    def advance(self, seconds: float = 0, minutes: float = 0) -> datetime:
        self.current += timedelta(seconds=seconds, minutes=minutes)
        return self.current
