"""Calendar-day helpers. Stored timestamps are UTC; days are in a local zone."""

from __future__ import annotations

from datetime import date, datetime, time, timezone, tzinfo
from zoneinfo import ZoneInfo

UTC = timezone.utc

# last representable millisecond of a day; the listing window is inclusive on it
END_OF_DAY = time(23, 59, 59, 999000)


def local_zone(name: str) -> tzinfo:
    if name.upper() == "UTC":
        return UTC
    return ZoneInfo(name)


def utcnow() -> datetime:
    return datetime.now(UTC)


def to_utc(value: datetime, tz: tzinfo = UTC) -> datetime:
    """Naive values are read as wall-clock time in `tz`."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=tz)
    return value.astimezone(UTC)


def as_local_date(value: date | datetime, tz: tzinfo = UTC) -> date:
    if isinstance(value, datetime):
        return to_utc(value, tz).astimezone(tz).date()
    return value


def day_window(day: date | datetime, tz: tzinfo = UTC) -> tuple[datetime, datetime]:
    """Return (start, end) of the calendar day in UTC: 00:00:00.000 .. 23:59:59.999 local.

    Raises ValueError when the window falls outside the representable range
    (e.g. 0001-01-01 in a zone ahead of UTC).
    """
    try:
        d = as_local_date(day, tz)
        start = datetime.combine(d, time.min, tzinfo=tz)
        end = datetime.combine(d, END_OF_DAY, tzinfo=tz)
        return start.astimezone(UTC), end.astimezone(UTC)
    except OverflowError:
        raise ValueError("Invalid date")


def date_key(value: datetime, tz: tzinfo = UTC) -> str:
    """YYYY-MM-DD of `value` as seen in `tz`."""
    return as_local_date(value, tz).isoformat()


def checked_utc(value: datetime, tz: tzinfo = UTC) -> datetime:
    """to_utc, but ValueError when the instant has no UTC or local representation."""
    try:
        value = to_utc(value, tz)
        # the local day key is derived from this later
        value.astimezone(tz)
    except OverflowError:
        raise ValueError("Invalid date")
    return value
