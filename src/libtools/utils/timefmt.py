"""
UTC timestamp formatting in ``YYYY-MM-DD hh:mm:ss:mmm`` form.
"""

from datetime import datetime, timezone


def datetime_ms(dt: datetime) -> str:
    """
    Format a datetime as ``YYYY-MM-DD hh:mm:ss:mmm`` in UTC.

    Aware datetimes are converted to UTC first; naive ones are assumed
    to already be UTC.
    """
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d} "
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}:{dt.microsecond // 1000:03d}"
    )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def now_ms() -> str:
    """Current UTC time as ``YYYY-MM-DD hh:mm:ss:mmm``."""
    return datetime_ms(_utcnow())
