"""
Publisher-calendar helpers: "today" in the publisher's timezone and the puzzle
sequence number. The only place in the pipeline that reads the wall clock.
"""

from datetime import date, datetime, timezone

import pytz

# NYT releases each puzzle at midnight Eastern
PUBLISHER_TZ = pytz.timezone("America/New_York")

# Connections launched 2023-06-12 (puzzle #1)
EPOCH = date(2023, 6, 12)


def today_et(now: datetime | None = None) -> str:
    """
    Return the current date in the publisher's timezone as YYYY-MM-DD.

    Args:
        now: Aware datetime to use instead of the wall clock (naive values are taken as UTC).
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(PUBLISHER_TZ).date().isoformat()


def sequence_number(print_date: str) -> int:
    """
    Whole days from EPOCH to print_date, plus one. Dates before EPOCH give
    zero or negative numbers. Raises ValueError if print_date is not YYYY-MM-DD.
    """
    return (date.fromisoformat(print_date) - EPOCH).days + 1
