"""Exercise Store: in-memory owner of all user and exercise records.

Invariants:
    - Usernames are unique (exact, case-sensitive match)
    - Ids are unique within their own collection (re-drawn on collision)
    - Collections are append-only; iteration follows insertion order
    - An exercise is only ever stored for a user that exists at insert time
    - Mutations are serialized by one lock; every read (lookups included) runs
      under the same lock, so a reader never sees a half-applied write

Design Decisions:
    - Explicit object created by create_app(), not a module-level dict: each app
      (and each test) owns a fresh store, state lives as long as the process
    - Dicts as indexes: O(1) lookups while keeping insertion order for list_users
    - threading.RLock even though routes are async: uvicorn may run sync code in a
      threadpool and the store must stay atomic there too
    - Clock and rng injectable: tests pin "today" and id sequences
"""

import logging
import random
import threading
from collections.abc import Callable
from datetime import datetime, timezone

from exercise_tracker.core.dates import start_of_day
from exercise_tracker.core.domain_types import (
    Exercise, ExerciseId, User, UserId,
)
from exercise_tracker.core.errors import ConflictError, ResourceNotFoundError
from exercise_tracker.core.ids import generate_id
from exercise_tracker.core.query_log import filter_exercise_log
from exercise_tracker.core.validate_input import LogQuery

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ExerciseStore:
    """Users and their exercises, held for the lifetime of the process."""

    def __init__(
        self,
        clock: Callable[[], datetime] = _utc_now,
        rng: random.Random | None = None,
    ):
        self._clock = clock
        self._rng = rng
        self._lock = threading.RLock()  # add_exercise resolves the user while holding it
        self._users: dict[UserId, User] = {}
        self._user_ids_by_name: dict[str, UserId] = {}
        self._exercises: dict[ExerciseId, Exercise] = {}
        self._exercises_by_user: dict[UserId, list[Exercise]] = {}

    def _fresh_id(self, taken: dict) -> str:
        """Draw ids until one is unused in the given collection."""
        while True:
            candidate = generate_id(self._rng)
            if candidate not in taken:
                return candidate
            logger.warning(f"Id collision on {candidate}, drawing again")

    # ─── Users ───────────────────────────────────────────────────

    def create_user(self, username: str) -> User:
        """Register a user. Raises ConflictError on a duplicate username."""
        with self._lock:
            if username in self._user_ids_by_name:
                raise ConflictError("Username already exists", "username")
            user = User(id=UserId(self._fresh_id(self._users)), username=username)
            self._users[user.id] = user
            self._user_ids_by_name[username] = user.id
        logger.info("User created", extra={"user_id": user.id})
        return user

    def list_users(self) -> list[User]:
        """All users in creation order."""
        with self._lock:
            return list(self._users.values())

    def find_user(self, user_id: str) -> User | None:
        with self._lock:
            return self._users.get(UserId(user_id))

    def get_user(self, user_id: str) -> User:
        """Like find_user, but raises ResourceNotFoundError when absent."""
        user = self.find_user(user_id)
        if user is None:
            raise ResourceNotFoundError("User", user_id)
        return user

    # ─── Exercises ───────────────────────────────────────────────

    def add_exercise(
        self,
        user_id: str,
        description: str,
        duration: int,
        date: datetime | None = None,
    ) -> Exercise:
        """Append an exercise for an existing user. Missing date means today (UTC)."""
        with self._lock:
            user = self.get_user(user_id)
            exercise = Exercise(
                id=ExerciseId(self._fresh_id(self._exercises)),
                user_id=user.id,
                description=description,
                duration=duration,
                date=date if date is not None else start_of_day(self._clock()),
            )
            self._exercises[exercise.id] = exercise
            self._exercises_by_user.setdefault(user.id, []).append(exercise)
        logger.info(
            "Exercise added",
            extra={"user_id": user.id, "exercise_id": exercise.id},
        )
        return exercise

    def user_exercises(self, user_id: str) -> list[Exercise]:
        """A user's exercises in insertion order (empty for unknown users)."""
        with self._lock:
            return list(self._exercises_by_user.get(UserId(user_id), []))

    def query_exercises(self, user_id: str, query: LogQuery) -> list[Exercise]:
        """A user's exercises filtered, sorted and limited per the query."""
        user = self.get_user(user_id)
        return filter_exercise_log(self.user_exercises(user.id), query)
