# =============================================================================
# tests/test_exceptions.py - Exception Rendering Tests
# =============================================================================
# Tests for how the users API exceptions turn into HTTP responses.
# =============================================================================

import json

from app.exceptions import UserNotFoundError, UserValidationError, UsersApiException


class TestUsersApiException:
    """Test the base exception and its subclasses."""

    def test_base_response_has_no_body(self):
        """Test that the default rendering is status-only."""
        response = UsersApiException("boom", status_code=409).to_response()

        assert response.status_code == 409
        assert response.body == b""

    def test_not_found_uses_default_rendering(self):
        """Test that not-found is an empty 404."""
        exc = UserNotFoundError(7)
        response = exc.to_response()

        assert response.status_code == 404
        assert response.body == b""
        assert exc.user_id == 7
        assert "to_response" not in UserNotFoundError.__dict__

    def test_validation_error_renders_message_list(self):
        """Test that validation errors are a JSON array."""
        response = UserValidationError(["Name is required."]).to_response()

        assert response.status_code == 400
        assert json.loads(response.body) == ["Name is required."]
