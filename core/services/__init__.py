# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .user_store import UserStore
from .validation import validate_user

__all__ = [
    "UserStore",
    "validate_user",
]
