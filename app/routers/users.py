# =============================================================================
# app/routers/users.py - User CRUD Endpoints
# =============================================================================
# Handles listing, reading, creating, replacing and deleting users.
# Authentication is enforced by the auth_gate middleware, not here.
#
# Failures are raised as exceptions and rendered by app/exceptions.py:
# - UserNotFoundError -> 404, empty body
# - UserValidationError -> 400, JSON array of messages
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, Response, status

from app.dependencies import UserStoreDep
from app.exceptions import UserNotFoundError, UserValidationError
from core.models.user import User, UserPayload
from core.services.validation import validate_user

router = APIRouter()

UserId = Annotated[int, Path(description="User id")]


def _require_valid(payload: UserPayload) -> None:
    errors = validate_user(payload)
    if errors:
        raise UserValidationError(errors)


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=list[User])
async def list_users(store: UserStoreDep):
    """
    List all users.

    Order is not guaranteed. There is no pagination.
    """
    return store.list_users()


@router.get("/{user_id}", response_model=User)
async def get_user(user_id: UserId, store: UserStoreDep):
    """Get one user by id."""
    user = store.get_user(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserPayload,
    response: Response,
    store: UserStoreDep,
):
    """
    Create a user.

    The id is assigned by the server; any id in the body is ignored.
    Returns the stored user with a Location header pointing at it.
    """
    _require_valid(payload)

    user = store.create_user(payload)
    response.headers["Location"] = f"/users/{user.id}"
    return user


@router.put("/{user_id}", response_model=User)
async def replace_user(
    user_id: UserId,
    payload: UserPayload,
    store: UserStoreDep,
):
    """
    Replace every field of an existing user.

    Unknown ids are rejected before the body is validated.
    The stored id is always the one in the path.
    """
    if user_id not in store:
        raise UserNotFoundError(user_id)

    _require_valid(payload)

    # The user may have been deleted since the check above
    user = store.replace_user(user_id, payload)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


@router.delete("/{user_id}", response_model=User)
async def delete_user(user_id: UserId, store: UserStoreDep):
    """Delete a user and return the removed record."""
    user = store.delete_user(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user
