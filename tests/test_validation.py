# =============================================================================
# tests/test_validation.py - User Validation Tests
# =============================================================================
# Tests for the shared create/replace validation rule.
# =============================================================================

import pytest

from core.models import UserPayload
from core.services.validation import (
    EMAIL_INVALID,
    EMAIL_REQUIRED,
    NAME_REQUIRED,
    validate_user,
)


class TestValidateUser:
    """Test validate_user."""

    def test_valid_user_has_no_errors(self):
        """Test a complete, well-formed user."""
        assert validate_user(UserPayload(name="Alice", email="alice@x.com")) == []

    def test_empty_strings_report_both_fields(self):
        """Test that both checks run independently."""
        errors = validate_user(UserPayload(name="", email=""))

        assert errors == [NAME_REQUIRED, EMAIL_REQUIRED]

    def test_missing_fields_report_both_fields(self):
        """Test that null fields count as empty."""
        assert validate_user(UserPayload()) == [NAME_REQUIRED, EMAIL_REQUIRED]

    @pytest.mark.parametrize("name", [" ", "\t", "  \n "])
    def test_whitespace_name_rejected(self, name):
        """Test that whitespace-only names are blank."""
        assert validate_user(UserPayload(name=name, email="a@b.com")) == [NAME_REQUIRED]

    def test_whitespace_email_is_required_not_invalid(self):
        """Test that a blank email is reported as missing."""
        assert validate_user(UserPayload(name="A", email="   ")) == [EMAIL_REQUIRED]

    def test_email_without_at_sign(self):
        """Test that only the format message fires."""
        assert validate_user(UserPayload(name="A", email="no-at-sign")) == [EMAIL_INVALID]

    def test_any_at_sign_is_enough(self):
        """Test that no further email format checks are made."""
        assert validate_user(UserPayload(name="A", email="@")) == []

    def test_messages(self):
        """Test the exact client-facing messages."""
        assert NAME_REQUIRED == "Name is required."
        assert EMAIL_REQUIRED == "Email is required."
        assert EMAIL_INVALID == "Email must be valid."
