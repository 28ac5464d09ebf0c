from datetime import datetime


def hours_between(start: datetime, end: datetime) -> float:
    """Return the elapsed time between two datetimes in (fractional) hours."""
    return (end - start).total_seconds() / 3600
