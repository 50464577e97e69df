"""API router package for endpoint composition."""

from .health import api_create_health_router
from .pages import PAGE_ROUTES, api_create_pages_router, api_create_static_router

__all__ = ["PAGE_ROUTES", "api_create_health_router", "api_create_pages_router", "api_create_static_router"]
