"""Calendar Dates: parsing, day-boundary normalization and display formatting.

Invariants:
    - Every datetime returned here is timezone-aware UTC
    - Naive input is interpreted as UTC; offsets are converted to UTC
    - Parsed instants are truncated to whole milliseconds, so nothing falls
      between end_of_day (23:59:59.999) and the next day's start
    - Day boundaries are UTC: start 00:00:00.000, end 23:59:59.999
    - Out-of-range instants (offset pushes past year 1 or 9999) are unparseable
    - Day strings always use English weekday and month names, whatever the process locale

Design Decisions:
    - stdlib datetime.fromisoformat over a lenient parser: ISO dates and datetimes are
      the documented input, and the day string is accepted so responses round-trip
    - Day string built from fixed name tables, not strftime("%a %b"): the wire
      format must not change with LC_TIME
"""

import re
from datetime import datetime, time, timezone


DAY_FORMAT: str = "{weekday} {month} {day:02d} {year:04d}"  # Sun Jan 01 2023

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_DAY_STRING = re.compile(r"([A-Za-z]{3}) ([A-Za-z]{3}) (\d{2}) (\d{4})")
_END_OF_DAY = time(23, 59, 59, 999_000)


def _parse_day_string(text: str) -> datetime | None:
    """Parse "Sun Jan 01 2023". The weekday must match the date."""
    match = _DAY_STRING.fullmatch(text)
    if not match:
        return None
    weekday, month, day, year = match.groups()
    if month.title() not in MONTH_NAMES:
        return None
    try:
        parsed = datetime(
            int(year), MONTH_NAMES.index(month.title()) + 1, int(day),
            tzinfo=timezone.utc,
        )
    except ValueError:
        return None
    if WEEKDAY_NAMES[parsed.weekday()] != weekday.title():
        return None
    return parsed


def parse_calendar_date(raw: str) -> datetime | None:
    """Parse a client-supplied date. Returns None when unparseable."""
    text = raw.strip()
    if not text:
        return None
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return _parse_day_string(text)
    try:
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        else:
            parsed = parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None
    return parsed.replace(microsecond=parsed.microsecond // 1000 * 1000)


def start_of_day(moment: datetime) -> datetime:
    """Normalize to 00:00:00.000 UTC of the same UTC day."""
    return datetime.combine(
        moment.astimezone(timezone.utc).date(), time.min, tzinfo=timezone.utc,
    )


def end_of_day(moment: datetime) -> datetime:
    """Normalize to 23:59:59.999 UTC of the same UTC day."""
    return datetime.combine(
        moment.astimezone(timezone.utc).date(), _END_OF_DAY, tzinfo=timezone.utc,
    )


def format_day(moment: datetime) -> str:
    """Render as a human-readable day string, no time component."""
    day = moment.astimezone(timezone.utc).date()
    return DAY_FORMAT.format(
        weekday=WEEKDAY_NAMES[day.weekday()],
        month=MONTH_NAMES[day.month - 1],
        day=day.day,
        year=day.year,
    )
