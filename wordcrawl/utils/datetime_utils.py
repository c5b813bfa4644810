from datetime import datetime, timedelta, timezone
from email.utils import format_datetime


def to_utc(value: datetime) -> datetime:
    """Return `value` as an aware UTC datetime. Naive values are assumed to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_rfc1123(value: datetime) -> str:
    """Format a datetime like `Sun, 18 Oct 2026 09:30:00 GMT`."""
    return format_datetime(to_utc(value), usegmt=True)


def format_duration(duration: timedelta) -> str:
    """Format a duration as `<minutes>m <seconds>s <millis>ms`, truncating below a millisecond."""
    total_ms = duration // timedelta(milliseconds=1)
    minutes, rest = divmod(total_ms, 60_000)
    seconds, millis = divmod(rest, 1000)
    return f"{minutes}m {seconds}s {millis}ms"
