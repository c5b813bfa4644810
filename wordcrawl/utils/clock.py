from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """Source of the current time. Injected so tests can control it."""

    def now(self) -> datetime: ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)
