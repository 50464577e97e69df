"""API layer package for FastAPI application and route composition."""

from .application import NOT_FOUND_BODY, create_api_application

__all__ = ["NOT_FOUND_BODY", "create_api_application"]
