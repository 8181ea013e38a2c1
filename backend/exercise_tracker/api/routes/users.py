"""User Routes: registration, listing, exercise logging and log queries.

Invariants:
    - Every handler validates input fully before touching the store
    - Unknown user ids are resolved first: 404 wins over any body or query error
    - Handlers never await between reading and writing the store

Design Decisions:
    - Query params taken as raw strings: parse_log_query owns the messages for
      bad from/to/limit values instead of FastAPI's generic 422
    - All status codes are 200 on success, matching existing clients
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query

from exercise_tracker.api.dependencies import get_store, read_payload
from exercise_tracker.core.validate_input import (
    parse_log_query, parse_new_exercise, parse_new_user,
)
from exercise_tracker.infrastructure.store import ExerciseStore
from exercise_tracker.schemas.exercise import ExerciseLog, ExerciseResponse
from exercise_tracker.schemas.user import UserResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse)
async def create_user(
    payload: dict[str, Any] = Depends(read_payload),
    store: ExerciseStore = Depends(get_store),
):
    """Register a new user."""
    new_user = parse_new_user(payload)
    user = store.create_user(new_user.username)
    return UserResponse.from_user(user)


@router.get("", response_model=list[UserResponse])
async def list_users(store: ExerciseStore = Depends(get_store)):
    """All users in creation order."""
    return [UserResponse.from_user(u) for u in store.list_users()]


@router.post("/{user_id}/exercises", response_model=ExerciseResponse)
async def add_exercise(
    user_id: str,
    payload: dict[str, Any] = Depends(read_payload),
    store: ExerciseStore = Depends(get_store),
):
    """Log an exercise for a user."""
    user = store.get_user(user_id)
    new_exercise = parse_new_exercise(payload)
    exercise = store.add_exercise(
        user.id,
        new_exercise.description,
        new_exercise.duration,
        new_exercise.date,
    )
    return ExerciseResponse.from_exercise(user, exercise)


@router.get("/{user_id}/logs", response_model=ExerciseLog)
async def get_exercise_log(
    user_id: str,
    from_: str | None = Query(None, alias="from"),
    to: str | None = Query(None),
    limit: str | None = Query(None),
    store: ExerciseStore = Depends(get_store),
):
    """A user's exercise log, optionally bounded by date and truncated."""
    user = store.get_user(user_id)
    query = parse_log_query(from_, to, limit)
    exercises = store.query_exercises(user.id, query)
    return ExerciseLog.from_exercises(user, exercises)
