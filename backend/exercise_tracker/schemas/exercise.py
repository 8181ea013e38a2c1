"""Exercise Schemas: wire shapes for the add-exercise and log endpoints.

Invariants:
    - Dates are rendered with core.dates.format_day in every response
    - duration is always an integer on the wire
    - ExerciseLog.count == len(ExerciseLog.log)
"""

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from exercise_tracker.core.dates import format_day
from exercise_tracker.core.domain_types import Exercise, User


class ExerciseResponse(BaseModel):
    """Created exercise, merged with its owner: {_id, username, date, duration, description}."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    username: str
    date: str
    duration: int
    description: str

    @classmethod
    def from_exercise(cls, user: User, exercise: Exercise) -> "ExerciseResponse":
        return cls(
            id=user.id,
            username=user.username,
            date=format_day(exercise.date),
            duration=exercise.duration,
            description=exercise.description,
        )


class LogEntry(BaseModel):
    """One exercise in a user's log."""
    description: str
    duration: int
    date: str


class ExerciseLog(BaseModel):
    """A user's filtered log: {_id, username, count, log}."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    username: str
    count: int
    log: list[LogEntry] = []

    @classmethod
    def from_exercises(
        cls, user: User, exercises: Sequence[Exercise],
    ) -> "ExerciseLog":
        entries = [
            LogEntry(
                description=ex.description,
                duration=ex.duration,
                date=format_day(ex.date),
            )
            for ex in exercises
        ]
        return cls(
            id=user.id, username=user.username, count=len(entries), log=entries,
        )
