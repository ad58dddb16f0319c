# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, logging setup, error handlers, routers
# - config.py: Environment variable loading and settings
# - middleware.py: Request pipeline (error boundary, auth gate, access log)
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# storage and validation to the core/ package.
# =============================================================================
