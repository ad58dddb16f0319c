# =============================================================================
# tests/test_config.py - Settings Tests
# =============================================================================
# Tests for defaults and environment loading of app.config.Settings.
# =============================================================================

import pytest
from pydantic import ValidationError

from app.config import Settings


@pytest.fixture
def clean_env(monkeypatch):
    """Remove settings variables so defaults apply."""
    for name in ("ENVIRONMENT", "DEBUG", "LOG_LEVEL", "API_HOST", "API_PORT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    """Test Settings loading."""

    def test_defaults(self, clean_env):
        """Test that the API starts with no environment at all."""
        settings = Settings(_env_file=None)

        assert settings.ENVIRONMENT == "development"
        assert settings.DEBUG is False
        assert settings.API_HOST == "0.0.0.0"
        assert settings.API_PORT == 8000
        assert settings.log_level == "INFO"

    def test_debug_overrides_log_level(self, clean_env):
        """Test that DEBUG forces the DEBUG log level."""
        clean_env.setenv("DEBUG", "true")
        clean_env.setenv("LOG_LEVEL", "WARNING")

        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_log_level_from_env(self, clean_env):
        """Test LOG_LEVEL when debug is off."""
        clean_env.setenv("LOG_LEVEL", "WARNING")

        assert Settings(_env_file=None).log_level == "WARNING"

    def test_port_out_of_range(self, clean_env):
        """Test API_PORT bounds."""
        clean_env.setenv("API_PORT", "70000")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
