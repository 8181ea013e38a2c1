"""Root conftest: pinned clock, seeded store and a fresh HTTP client per test.

Invariants:
    - Every test gets a fresh ExerciseStore (no state shared between tests)
    - "Now" is pinned to FIXED_NOW so defaulted dates are deterministic
    - The static front-end is never mounted in tests
"""

import random
from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from exercise_tracker.config import Settings
from exercise_tracker.infrastructure.store import ExerciseStore
from exercise_tracker.main import create_app

FIXED_NOW = datetime(2024, 3, 15, 18, 30, 45, tzinfo=timezone.utc)


@pytest.fixture
def store():
    return ExerciseStore(clock=lambda: FIXED_NOW, rng=random.Random(1234))


@pytest.fixture
def test_settings():
    return Settings(static_dir="__no_static_dir__", log_format="text")


@pytest.fixture
async def client(store, test_settings):
    """HTTP client bound to a fresh app that owns the ``store`` fixture."""
    app = create_app(test_settings, store=store)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
