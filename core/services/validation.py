# =============================================================================
# core/services/validation.py - User Validation Rule
# =============================================================================
# Shared by create and replace. Each check runs independently so a single
# 400 response can carry every problem with the submitted user.
# =============================================================================

from core.models.user import UserPayload

NAME_REQUIRED = "Name is required."
EMAIL_REQUIRED = "Email is required."
EMAIL_INVALID = "Email must be valid."


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_user(payload: UserPayload) -> list[str]:
    """
    Check a submitted user and return the list of problems found.

    Rules:
    - name must be non-empty after trimming whitespace
    - email must be non-empty after trimming whitespace
    - a non-empty email must contain '@' (no further format checks)

    Args:
        payload: The request body to check

    Returns:
        Error messages in rule order. Empty list means the user is valid.
    """
    errors: list[str] = []

    if _is_blank(payload.name):
        errors.append(NAME_REQUIRED)

    if _is_blank(payload.email):
        errors.append(EMAIL_REQUIRED)
    elif "@" not in payload.email:
        errors.append(EMAIL_INVALID)

    return errors
