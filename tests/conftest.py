# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Gives every test its own application and empty store
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "false")

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from core.services.user_store import UserStore


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def store():
    """Fresh, empty user store."""
    return UserStore()


@pytest.fixture
def app(store):
    """Application serving from the `store` fixture."""
    return create_app(store=store)


@pytest.fixture
def client(app):
    """TestClient with the application lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    """Headers accepted by the auth gate."""
    return {"Authorization": "Bearer valid-token"}


@pytest.fixture
def alice():
    """A valid user body."""
    return {"name": "Alice", "email": "alice@x.com"}
