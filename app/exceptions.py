# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized handling for the expected, non-fatal failures of the users API:
# - UserNotFoundError -> 404 with an empty body
# - UserValidationError -> 400 with a JSON array of messages
# - RequestValidationError (FastAPI binding failures) -> 404 or 400
# - Route misses (Starlette HTTPException 404) -> 404 with an empty body
#
# These handlers run inside the middleware pipeline, so the access log
# records their status codes. Anything else is left to the error boundary
# in app/middleware.py.
# =============================================================================

from typing import Any

from fastapi import Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class UsersApiException(Exception):
    """
    Base exception for the users API.

    Responses are status-only unless a subclass adds a body.
    """

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def to_response(self) -> Response:
        """Convert exception to an HTTP response with an empty body."""
        return Response(status_code=self.status_code)


# =============================================================================
# User Exceptions
# =============================================================================

class UserNotFoundError(UsersApiException):
    """Raised when no user exists with the requested id."""

    def __init__(self, user_id: int):
        super().__init__(
            message=f"User not found: {user_id}",
            status_code=status.HTTP_404_NOT_FOUND,
        )
        self.user_id = user_id


class UserValidationError(UsersApiException):
    """Raised when a submitted user fails the name/email checks."""

    def __init__(self, errors: list[str]):
        super().__init__(
            message="; ".join(errors),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
        self.errors = errors

    def to_response(self) -> Response:
        return JSONResponse(status_code=self.status_code, content=self.errors)


# =============================================================================
# Exception Handlers
# =============================================================================

async def users_api_exception_handler(
    request: Request,
    exc: UsersApiException
) -> Response:
    """Convert UsersApiException to its HTTP response."""
    return exc.to_response()


def _format_binding_error(error: dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location}: {error.get('msg', 'Invalid value')}"


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> Response:
    """
    Handle request binding errors raised by FastAPI.

    - A bad path parameter (e.g. /users/abc) means the route does not
      match, so it is answered like any unknown user: empty 404.
    - A bad body (malformed JSON, wrong field types) is a 400 with one
      "<location>: <message>" string per problem.
    """
    errors = exc.errors()

    if any(error.get("loc", ("",))[0] == "path" for error in errors):
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=[_format_binding_error(error) for error in errors],
    )


async def not_found_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> Response:
    """
    Answer route misses (e.g. /nowhere) with an empty 404, like unknown ids.

    Other HTTP errors (405 and friends) keep FastAPI's default rendering.
    """
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return await http_exception_handler(request, exc)
