"""Current-date provider with an injectable clock.

A clock is any zero-argument callable returning a datetime. Production code
uses the local system time; tests pass fixed_clock() for determinism.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Callable

Clock = Callable[[], datetime]

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def system_clock() -> datetime:
    """Return the current local time."""
    return datetime.now()


def fixed_clock(value: datetime | date | str) -> Clock:
    """Return a clock that always reports the same moment.

    Accepts a datetime, a date (midnight), or an ISO 8601 string.
    """
    if isinstance(value, str):
        moment = datetime.fromisoformat(value)
    elif isinstance(value, datetime):
        moment = value
    else:
        moment = datetime(value.year, value.month, value.day)

    def clock() -> datetime:
        return moment

    return clock


def current_date(clock: Clock | None = None) -> str:
    """Return today's date as zero-padded YYYY-MM-DD."""
    now = (clock or system_clock)()
    # strftime does not zero-pad years below 1000 on every platform
    return f"{now.year:04d}-{now.month:02d}-{now.day:02d}"


def is_date_string(value: str) -> bool:
    return DATE_PATTERN.fullmatch(value) is not None
