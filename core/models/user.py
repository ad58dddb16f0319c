# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for user operations:
# - UserPayload: Body accepted by POST /users and PUT /users/{id}
# - User: A stored user as returned to clients
#
# Presence checks on name/email are NOT done here. They live in
# core/services/validation.py so both failures can be reported together
# as a plain list of messages.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class UserPayload(BaseModel):
    """
    Schema for the body of create and replace requests.

    Any `id` supplied by the client is accepted but never used:
    ids are assigned by the store (create) or taken from the path (replace).

    Example:
        {
            "name": "Alice",
            "email": "alice@example.com"
        }
    """

    model_config = ConfigDict(extra="ignore")

    id: int | None = Field(
        default=None,
        description="Ignored - ids are assigned by the server"
    )

    name: str | None = Field(
        default=None,
        description="Display name (required, non-blank)"
    )

    email: str | None = Field(
        default=None,
        description="Email address (required, must contain '@')"
    )


class User(BaseModel):
    """
    Schema for a stored user.

    Returned by every /users endpoint that returns a record.

    Example:
        {
            "id": 1,
            "name": "Alice",
            "email": "alice@example.com"
        }
    """

    # Assigned by the store, never reused
    id: int = Field(
        ...,
        description="Unique user identifier"
    )

    name: str | None = Field(
        default=None,
        description="Display name"
    )

    email: str | None = Field(
        default=None,
        description="Email address"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Alice",
                "email": "alice@example.com",
            }
        }
    )

    @classmethod
    def from_payload(cls, user_id: int, payload: UserPayload) -> "User":
        """Build a stored user from a request body, forcing the given id."""
        return cls(id=user_id, name=payload.name, email=payload.email)
