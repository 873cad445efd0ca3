"""Time helpers.

All persisted timestamps are timezone-aware UTC. Services take a `Clock`
so expiry rules can be exercised without waiting for real time to pass.
"""

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_epoch_millis(moment: datetime) -> int:
    """Convert a datetime to epoch milliseconds.

    Naive datetimes are interpreted as UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return int(moment.timestamp() * 1000)
