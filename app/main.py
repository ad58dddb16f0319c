# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Users API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   users-api                      (console script, uses API_HOST/API_PORT)
# =============================================================================

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.exceptions import (
    UsersApiException,
    not_found_exception_handler,
    users_api_exception_handler,
    validation_exception_handler,
)
from app.middleware import configure_access_log, install_pipeline
from app.routers import users
from core.services.user_store import UserStore

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stdout,
)
configure_access_log()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The store lives exactly as long as the application: it starts empty
    and everything in it is discarded on shutdown.
    """
    logger.info(f"Starting Users API in {settings.ENVIRONMENT} mode")

    yield

    logger.info(
        f"Shutting down Users API, discarding {len(app.state.user_store)} users"
    )


def create_app(store: UserStore | None = None) -> FastAPI:
    """
    Build a fully wired application.

    Args:
        store: Store to serve from. A new empty store is created if omitted.

    Returns:
        FastAPI app with the request pipeline, handlers and routers installed
    """
    app = FastAPI(
        title="Users API",
        description="""
## In-Memory User CRUD API

Every request must carry `Authorization: Bearer valid-token`.

| Method | Path | Success |
|--------|------|---------|
| GET | /users | 200, all users |
| GET | /users/{id} | 200, one user |
| POST | /users | 201, created user |
| PUT | /users/{id} | 200, replaced user |
| DELETE | /users/{id} | 200, removed user |

Users are kept in memory only and are lost on restart.
""",
        version="1.0.0",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Users",
                "description": "Create, read, replace and delete users",
            },
        ],
    )

    app.state.user_store = store if store is not None else UserStore()

    # =========================================================================
    # Middleware
    # =========================================================================
    # error_boundary -> auth_gate -> access_logger -> route

    install_pipeline(app)

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(UsersApiException, users_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, not_found_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(
        users.router,
        prefix="/users",
        tags=["Users"]
    )

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.log_level.lower(),
        # app.middleware.access_logger already writes one line per request
        access_log=False,
    )


if __name__ == "__main__":
    run()
