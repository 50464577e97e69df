"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from course_portal.api import create_api_application
from course_portal.assets import assets_load_store
from course_portal.config import AppSettings, config_load_settings
from course_portal.server import ContentServer


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
        AssetLoadError: Raised when the asset directory or a template is unusable.
    """

    resolved_settings = settings or config_load_settings()
    asset_store = assets_load_store(resolved_settings.static_directory)
    return create_api_application(settings=resolved_settings, asset_store=asset_store)


def bootstrap_create_server(settings: AppSettings | None = None) -> ContentServer:
    """Build the content server in the starting state.

    Args:
        settings: Optional pre-loaded settings; loaded from environment when omitted.

    Returns:
        ContentServer: Server ready to bind and serve.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
        AssetLoadError: Raised when the asset directory or a template is unusable.
    """

    resolved_settings = settings or config_load_settings()
    return ContentServer(
        application=bootstrap_create_application(resolved_settings),
        host=resolved_settings.application_host,
        port=resolved_settings.application_port,
        log_level=resolved_settings.log_level,
    )
