"""Health endpoint router used by container platform probes."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from course_portal.assets import AssetStorePort
from course_portal.config import AppSettings
from course_portal.domain import HealthStatus


def api_create_health_router(settings: AppSettings, asset_store: AssetStorePort) -> APIRouter:
    """Create health-check router reporting app status and loaded asset count.

    Args:
        settings: Runtime settings used for the environment label.
        asset_store: Loaded asset store.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if asset_store is None:
        raise ValueError("asset_store must not be None")

    asset_count = len(asset_store.assets_names())
    health = HealthStatus(status="ok", detail=f"{asset_count} assets loaded")
    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return application health state.

        Assets are loaded before the server accepts connections, so a serving
        process is always healthy.

        Returns:
            JSONResponse: Deterministic health payload for operational checks.
        """

        payload = {
            "status": health.status,
            "app": "up",
            "assets": asset_count,
            "detail": health.detail,
            "environment": settings.environment_name,
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
