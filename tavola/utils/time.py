from datetime import date, datetime, time, timedelta
from typing import Union

from tavola.errors import InvalidArgument


def parse_date(value: Union[str, date], field: str = "date") -> date:
    """Parses YYYY-MM-DD or a full ISO datetime (truncated to its date)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        text = str(value).strip()
        if len(text) > 10:
            return datetime.fromisoformat(text).date()
        return date.fromisoformat(text)
    except (TypeError, ValueError):
        raise InvalidArgument(
            f"Invalid {field}, expected YYYY-MM-DD",
            errors=[{"field": field, "message": "Invalid date format"}],
        )


def parse_time(value: Union[str, time], field: str = "time") -> time:
    """Parses HH:MM or HH:MM:SS."""
    if isinstance(value, time):
        return value.replace(microsecond=0)
    try:
        return time.fromisoformat(str(value).strip()).replace(microsecond=0, tzinfo=None)
    except (TypeError, ValueError):
        raise InvalidArgument(
            f"Invalid {field}, expected HH:MM",
            errors=[{"field": field, "message": "Invalid time format"}],
        )


def day_of_week(day: date) -> int:
    """Day index with 0=Sunday, 1=Monday, ... 6=Saturday."""
    return (day.weekday() + 1) % 7


def add_minutes(start: time, minutes: int) -> time:
    """Adds minutes to a time of day, clamped to 23:59 so the result stays on the same day."""
    end = datetime.combine(date.min, start) + timedelta(minutes=minutes)
    if end.date() != date.min:
        return time(23, 59)
    return end.time()
