# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from core.services.user_store import UserStore


def get_user_store(request: Request) -> UserStore:
    """
    Get the user store of the running application.

    The store is created by create_app() and kept on app.state, so every
    application instance (and every test) has its own.
    """
    return request.app.state.user_store


# Type alias for dependency injection
UserStoreDep = Annotated[UserStore, Depends(get_user_store)]
