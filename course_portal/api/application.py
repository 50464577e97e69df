"""FastAPI application factory for the content server.

This module composes the page, static asset and health routers over one
asset store loaded before the application is built.
"""

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

import course_portal
from course_portal.assets import AssetStorePort, assets_create_template_environment
from course_portal.config import AppSettings

from .routers import api_create_health_router, api_create_pages_router, api_create_static_router

NOT_FOUND_BODY = "404 page not found"


def create_api_application(settings: AppSettings, asset_store: AssetStorePort) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings.
        asset_store: Asset store loaded at startup, shared by every handler.

    Returns:
        FastAPI: Framework application with the fixed route set registered.

    Raises:
        AssetLoadError: Raised when a page template cannot be compiled.
    """

    application = FastAPI(
        title="Course Portal",
        version=course_portal.__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @application.exception_handler(StarletteHTTPException)
    async def api_http_error(request: Request, error: StarletteHTTPException) -> Response:
        if error.status_code == status.HTTP_404_NOT_FOUND:
            return PlainTextResponse(NOT_FOUND_BODY, status_code=status.HTTP_404_NOT_FOUND)
        return await http_exception_handler(request, error)

    template_environment = assets_create_template_environment(asset_store)
    application.include_router(api_create_pages_router(settings=settings, template_environment=template_environment))
    application.include_router(api_create_static_router(asset_store=asset_store))
    application.include_router(api_create_health_router(settings=settings, asset_store=asset_store))

    return application
