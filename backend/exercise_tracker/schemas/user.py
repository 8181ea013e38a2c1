"""User Schemas: wire shapes for user endpoints.

Invariants:
    - The id is serialized as "_id"
    - Responses are built from core User records, never from raw request data
"""

from pydantic import BaseModel, ConfigDict, Field

from exercise_tracker.core.domain_types import User


class UserResponse(BaseModel):
    """Public user shape: {_id, username}."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    username: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(id=user.id, username=user.username)
