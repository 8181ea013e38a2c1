"""Exercise Log Query: date-range filtering, ordering and truncation of a user's log.

Invariants:
    - filter_exercise_log is PURE: input sequence never mutated, new list returned
    - Range bounds are inclusive: start <= date <= end
    - Sort is ascending by date and stable (insertion order kept on equal dates)
    - limit applies after filtering and sorting

Design Decisions:
    - Takes an already-validated LogQuery: parsing and applying are separate steps,
      so a bad parameter can never leave a half-filtered result
"""

from collections.abc import Iterable

from exercise_tracker.core.domain_types import Exercise
from exercise_tracker.core.validate_input import LogQuery


def filter_exercise_log(
    exercises: Iterable[Exercise], query: LogQuery,
) -> list[Exercise]:
    """Apply from/to bounds, sort ascending by date, then truncate to limit."""
    selected = list(exercises)
    if query.start is not None:
        selected = [ex for ex in selected if ex.date >= query.start]
    if query.end is not None:
        selected = [ex for ex in selected if ex.date <= query.end]

    selected.sort(key=lambda ex: ex.date)

    if query.limit is not None:
        selected = selected[:query.limit]
    return selected
