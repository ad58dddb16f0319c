# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Users API:
# - test_models.py: Pydantic model behaviour
# - test_validation.py: The name/email validation rule
# - test_user_store.py: In-memory store, id counter, thread safety
# - test_middleware.py: Error boundary, auth gate, access log, ordering
# - test_exceptions.py: Exception to response rendering
# - test_config.py: Settings defaults and environment loading
# - test_users_api.py: HTTP endpoints end to end
#
# Run tests with: pytest
# =============================================================================
