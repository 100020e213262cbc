"""Day-granular date helpers - no I/O dependencies."""

from datetime import date, datetime, time, timezone, tzinfo


def day_of(value: date | datetime, tz: tzinfo | None = None) -> date:
    """
    Calendar day of an instant.

    Aware datetimes are converted to `tz` first when one is given; naive
    datetimes and plain dates are taken as they are.
    """
    if isinstance(value, datetime):
        if tz is not None and value.tzinfo is not None:
            value = value.astimezone(tz)
        return value.date()
    return value


def local_instant(value: datetime, tz: tzinfo | None = None) -> datetime:
    """
    An always-aware instant on the same wall clock `day_of` uses.

    Aware datetimes are converted to `tz` when one is given; naive ones are
    read as wall time in `tz`, UTC by default. Results are mutually
    comparable whatever shape the stored value had.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=tz or timezone.utc)
    if tz is not None:
        return value.astimezone(tz)
    return value


def start_of_day(day: date, tz: tzinfo | None = None) -> datetime:
    """Midnight at the start of `day`, UTC unless a zone is given."""
    return datetime.combine(day, time.min, tzinfo=tz or timezone.utc)
