"""Formatting helpers for command output."""

from datetime import timedelta


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_duration(duration: timedelta) -> str:
    """Format a duration as e.g. "45 mins" or "1 hour 5 mins".

    Seconds are rounded to the nearest minute.
    """
    total_minutes = round(duration.total_seconds() / 60)
    hours, minutes = divmod(total_minutes, 60)
    if not hours:
        return _plural(minutes, "min")
    if not minutes:
        return _plural(hours, "hour")
    return f"{_plural(hours, 'hour')} {_plural(minutes, 'min')}"
