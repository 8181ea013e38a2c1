"""Input Parsing: turn untrusted request payloads into typed commands or typed errors.

Invariants:
    - Pure: no store access, no IO; callers resolve users separately
    - Validation order is fixed per operation and the first violation wins
    - Empty strings count as absent (HTML forms submit blank fields as "")
    - A LogQuery is fully validated before any filtering runs (from, then to, then limit)

Design Decisions:
    - Mapping input, not pydantic models: the same parser serves JSON bodies and
      form bodies, and each rule carries its own client-facing message
    - Strict integer grammar ([+-]digits): "20" is 20, "20min" and "1_000" are rejected
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from exercise_tracker.core.dates import end_of_day, parse_calendar_date, start_of_day
from exercise_tracker.core.errors import BadRequestError


_INTEGER = re.compile(r"[+-]?\d+")


# ─── Commands ────────────────────────────────────────────────────

@dataclass(frozen=True)
class NewUser:
    """Validated create-user request."""
    username: str


@dataclass(frozen=True)
class NewExercise:
    """Validated add-exercise request. date is None when the client omitted it."""
    description: str
    duration: int
    date: datetime | None = None


@dataclass(frozen=True)
class LogQuery:
    """Validated log query with day boundaries already normalized to UTC."""
    start: datetime | None = None
    end: datetime | None = None
    limit: int | None = None


def _is_absent(value: Any) -> bool:
    return value is None or value == ""


def _parse_integer(value: Any) -> int | None:
    """Integer from an int, an integral float or a [+-]digits string; None otherwise."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str) and _INTEGER.fullmatch(value.strip()):
        return int(value.strip())
    return None


# ─── Parsers ─────────────────────────────────────────────────────

def parse_new_user(payload: Mapping[str, Any]) -> NewUser:
    """Validate a create-user payload."""
    username = payload.get("username")
    if _is_absent(username):
        raise BadRequestError("Username is required", "username")
    if not isinstance(username, str):
        raise BadRequestError("Username must be a string", "username")
    return NewUser(username=username)


def parse_new_exercise(payload: Mapping[str, Any]) -> NewExercise:
    """Validate an add-exercise payload: required fields, duration, then date."""
    description = payload.get("description")
    raw_duration = payload.get("duration")
    if _is_absent(description) or _is_absent(raw_duration):
        raise BadRequestError(
            "Description and duration are required", "description",
        )
    if not isinstance(description, str):
        raise BadRequestError("Description must be a string", "description")

    duration = _parse_integer(raw_duration)
    if duration is None:
        raise BadRequestError("Duration must be a number", "duration")
    if duration <= 0:
        raise BadRequestError("Duration must be a positive number", "duration")

    raw_date = payload.get("date")
    date = None
    if not _is_absent(raw_date):
        date = parse_calendar_date(raw_date) if isinstance(raw_date, str) else None
        if date is None:
            raise BadRequestError("Invalid date format", "date")

    return NewExercise(description=description, duration=duration, date=date)


def parse_log_query(
    from_: str | None = None, to: str | None = None, limit: str | None = None,
) -> LogQuery:
    """Validate log query parameters. All three are checked before any is applied."""
    start = None
    if not _is_absent(from_):
        parsed = parse_calendar_date(from_)
        if parsed is None:
            raise BadRequestError('Invalid "from" date format', "from")
        start = start_of_day(parsed)

    end = None
    if not _is_absent(to):
        parsed = parse_calendar_date(to)
        if parsed is None:
            raise BadRequestError('Invalid "to" date format', "to")
        end = end_of_day(parsed)

    max_entries = None
    if not _is_absent(limit):
        max_entries = _parse_integer(limit)
        if max_entries is None or max_entries <= 0:
            raise BadRequestError("Limit must be a positive number", "limit")

    return LogQuery(start=start, end=end, limit=max_entries)
