from datetime import datetime
from pytz import timezone, UnknownTimeZoneError, utc


def get_timezone(name: str):
    """Get a pytz timezone by name, falling back to UTC."""
    try:
        return timezone(name)
    except UnknownTimeZoneError:
        return utc

def get_current_time(tz_name: str = "UTC") -> datetime:
    """Get current time in the given timezone."""
    return datetime.now(get_timezone(tz_name))
