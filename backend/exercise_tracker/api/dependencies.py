"""Request Dependencies: store access and body decoding shared by all routes.

Invariants:
    - get_store returns the store owned by the running app (never a global)
    - read_payload always returns a dict of field -> value; it never raises
    - JSON bodies keep their value types; form bodies yield strings only

Design Decisions:
    - Body read by hand instead of a pydantic body model: the same endpoint accepts
      JSON and HTML forms, and field errors must carry client-facing messages
    - Malformed or unsupported bodies become {}: required-field checks then report
      what is missing instead of a framework error
"""

from typing import Any

from fastapi import Request

from exercise_tracker.infrastructure.store import ExerciseStore

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_store(request: Request) -> ExerciseStore:
    """FastAPI dependency for the app-scoped store."""
    return request.app.state.store


async def read_payload(request: Request) -> dict[str, Any]:
    """Decode a JSON object or form body into a plain dict."""
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}
    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        return {k: v for k, v in form.items() if isinstance(v, str)}
    return {}
