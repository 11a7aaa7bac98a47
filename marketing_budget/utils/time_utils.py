"""Timestamp helpers.

Budgets, schedules and export envelopes carry ISO-8601 UTC timestamps in the
same shape the browser application writes (``2026-01-15T09:30:00.000Z``), so
that the ``YYYY-MM`` prefix of a timestamp is always its month.
"""

import datetime as dt
from typing import Optional


def to_iso(moment: dt.datetime) -> str:
    """Format a datetime as a millisecond-precision UTC ISO-8601 string.

    Naive datetimes are assumed to already be in UTC.

    Args:
        moment: Datetime to format

    Returns:
        String such as ``2026-01-15T09:30:00.000Z``

    Example:
        >>> to_iso(dt.datetime(2026, 1, 15, 9, 30))
        '2026-01-15T09:30:00.000Z'
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=dt.timezone.utc)
    moment = moment.astimezone(dt.timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso(now: Optional[dt.datetime] = None) -> str:
    """Return the current (or given) moment as a UTC ISO-8601 string."""
    return to_iso(now if now is not None else dt.datetime.now(dt.timezone.utc))


def month_key(timestamp: str) -> str:
    """Return the ``YYYY-MM`` month key of an ISO-8601 timestamp."""
    return timestamp[:7]
