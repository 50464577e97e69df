"""Page and static asset routers backed by the read-only asset store."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import HTMLResponse, Response
from jinja2 import Environment, Template, TemplateError

from course_portal.assets import TEMPLATE_SUFFIX, AssetLoadError, AssetStorePort
from course_portal.config import AppSettings
from course_portal.domain import PageRoute

PAGE_ROUTES: tuple[PageRoute, ...] = (
    PageRoute(path="/", template_name="home.html", title="Learn DevOps"),
    PageRoute(path="/home", template_name="home.html", title="Learn DevOps"),
    PageRoute(path="/courses", template_name="courses.html", title="Courses"),
    PageRoute(path="/about", template_name="about.html", title="About"),
    PageRoute(path="/contact", template_name="contact.html", title="Contact"),
)

NAVIGATION: tuple[tuple[str, str], ...] = (
    ("/home", "Home"),
    ("/courses", "Courses"),
    ("/about", "About"),
    ("/contact", "Contact"),
)


def api_create_pages_router(
    settings: AppSettings,
    template_environment: Environment,
    page_routes: tuple[PageRoute, ...] = PAGE_ROUTES,
) -> APIRouter:
    """Create router with one GET handler per page route.

    Templates are compiled here, so a broken or missing template fails
    application construction instead of the first request.

    Args:
        settings: Runtime settings used for the environment label.
        template_environment: Jinja2 environment over the asset store.
        page_routes: Fixed page route table.

    Returns:
        APIRouter: Router exposing the page endpoints.

    Raises:
        AssetLoadError: Raised when a page template cannot be compiled.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if template_environment is None:
        raise ValueError("template_environment must not be None")

    router = APIRouter(tags=["pages"])
    for page_route in page_routes:
        try:
            template = template_environment.get_template(page_route.template_name)
        except TemplateError as error:
            raise AssetLoadError(f"page template could not be compiled: {page_route.template_name}") from error
        router.add_api_route(
            page_route.path,
            _api_build_page_handler(page_route, template, settings.environment_name),
            methods=["GET"],
            response_class=HTMLResponse,
            name=f"page:{page_route.path}",
        )
    return router


def _api_build_page_handler(page_route: PageRoute, template: Template, environment_name: str):
    context = {
        "title": page_route.title,
        "current_path": page_route.path,
        "navigation": NAVIGATION,
        "environment_name": environment_name,
    }

    def api_render_page() -> HTMLResponse:
        return HTMLResponse(content=template.render(context), status_code=status.HTTP_200_OK)

    return api_render_page


def api_create_static_router(asset_store: AssetStorePort) -> APIRouter:
    """Create router serving non-template assets under `/static`.

    Args:
        asset_store: Loaded asset store.

    Returns:
        APIRouter: Router exposing `/static/{asset_name}`.

    Raises:
        ValueError: Raised when asset_store is None.
    """

    if asset_store is None:
        raise ValueError("asset_store must not be None")

    router = APIRouter(prefix="/static", tags=["static"])

    @router.get("/{asset_name:path}")
    def api_static_asset(asset_name: str) -> Response:
        """Return one raw asset from the store.

        Args:
            asset_name: Asset name relative to the asset directory.

        Returns:
            Response: Asset bytes with guessed media type.

        Raises:
            HTTPException: Raised with 404 for unknown names and templates.
        """

        asset = asset_store.assets_get(asset_name)
        if asset is None or asset.name.endswith(TEMPLATE_SUFFIX):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return Response(content=asset.content, media_type=asset.media_type)

    return router
