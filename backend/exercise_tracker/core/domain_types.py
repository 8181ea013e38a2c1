"""Domain Types: identifiers and records for users and exercises.

Invariants:
    - UserId and ExerciseId are opaque strings, compared only for equality
    - Records are frozen: never mutated after creation
    - Exercise.date is always timezone-aware UTC

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - Frozen dataclasses: the store hands records out without defensive copies
"""

from dataclasses import dataclass
from datetime import datetime
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
ExerciseId = NewType("ExerciseId", str)


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class User:
    """A registered user. Username is unique, case-sensitive."""
    id: UserId
    username: str


@dataclass(frozen=True)
class Exercise:
    """A logged exercise session owned by one user."""
    id: ExerciseId
    user_id: UserId
    description: str
    duration: int  # minutes, always > 0
    date: datetime
