# =============================================================================
# app/middleware.py - Request Pipeline
# =============================================================================
# Every request passes through these stages, outermost first:
#
#   error_boundary -> auth_gate -> access_logger -> route
#
# The order is part of the API contract:
# - error_boundary is outermost so no failure escapes as a raw server error
# - auth_gate runs before access_logger, so rejected requests are never logged
#
# Each stage is a plain `async def stage(request, call_next)` function.
# install_pipeline() registers them on the app in the order given.
# =============================================================================

import logging
import sys
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

# Access lines go out bare ("GET /users => 200"), see configure_access_log()
ACCESS_LOGGER = "app.access"
access_log = logging.getLogger(ACCESS_LOGGER)

CallNext = Callable[[Request], Awaitable[Response]]
Stage = Callable[[Request, CallNext], Awaitable[Response]]

BEARER_PREFIX = "Bearer "
VALID_TOKEN = "valid-token"

INTERNAL_ERROR_BODY = {"error": "Internal server error."}
UNAUTHORIZED_BODY = {"error": "Unauthorized"}


# =============================================================================
# Stages
# =============================================================================

async def error_boundary(request: Request, call_next: CallNext) -> Response:
    """
    Turn any failure raised downstream into a uniform 500 response.

    The failure is logged and swallowed; the server keeps serving.
    """
    try:
        return await call_next(request)
    except Exception as e:
        logger.exception(f"Unhandled exception: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=INTERNAL_ERROR_BODY,
        )


def extract_bearer_token(authorization: str | None) -> str | None:
    """
    Return the token from an Authorization header value.

    The "Bearer " prefix is matched exactly (case-sensitive).
    Returns None when the header is missing or uses another scheme.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    return authorization[len(BEARER_PREFIX):].strip()


def is_valid_token(token: str | None) -> bool:
    """Only the literal demo token is accepted."""
    return token == VALID_TOKEN


async def auth_gate(request: Request, call_next: CallNext) -> Response:
    """
    Reject requests without `Authorization: Bearer valid-token`.

    Rejected requests stop here with 401; nothing downstream runs.
    """
    token = extract_bearer_token(request.headers.get("Authorization"))

    if not is_valid_token(token):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=UNAUTHORIZED_BODY,
        )

    return await call_next(request)


async def access_logger(request: Request, call_next: CallNext) -> Response:
    """Log one `METHOD PATH => STATUS` line per authenticated request."""
    method = request.method
    path = request.url.path

    # A failure escaping the route will become a 500 at the error boundary
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        access_log.info(f"{method} {path} => {status_code}")


# =============================================================================
# Pipeline
# =============================================================================

PIPELINE: list[Stage] = [
    error_boundary,
    auth_gate,
    access_logger,
]


def install_pipeline(app: FastAPI, stages: list[Stage] = PIPELINE) -> None:
    """
    Register stages on the app, first stage outermost.

    Starlette wraps each newly added middleware around the ones added
    before it, so stages are added in reverse.
    """
    for stage in reversed(stages):
        app.add_middleware(BaseHTTPMiddleware, dispatch=stage)


# =============================================================================
# Access Log Output
# =============================================================================

class StdoutHandler(logging.StreamHandler):
    """StreamHandler that writes to whatever sys.stdout is at emit time."""

    def __init__(self) -> None:
        super().__init__(sys.stdout)

    @property
    def stream(self):
        return sys.stdout

    @stream.setter
    def stream(self, value) -> None:
        # Always sys.stdout; the value passed by StreamHandler is ignored
        pass


def configure_access_log() -> None:
    """
    Send access lines to stdout as the bare message, one per line.

    The access logger does not propagate, so the lines are not repeated
    with the root handler's timestamp/name/level prefix. Safe to call
    more than once.
    """
    if not any(isinstance(handler, StdoutHandler) for handler in access_log.handlers):
        handler = StdoutHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        access_log.addHandler(handler)
    access_log.setLevel(logging.INFO)
    access_log.propagate = False
