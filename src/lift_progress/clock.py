"""Clock abstraction so cache freshness and date windows can be controlled."""

from datetime import date, datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Source of the current local time."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Wall-clock time in the local timezone."""

    def now(self) -> datetime:
        return datetime.now()


def today(clock: Clock) -> date:
    """Current calendar date according to ``clock``."""
    return clock.now().date()
