"""Jinja2 environment compiled from the asset store's template sources."""

from jinja2 import DictLoader, Environment, StrictUndefined, select_autoescape

from .interfaces import AssetStorePort


def assets_create_template_environment(asset_store: AssetStorePort) -> Environment:
    """Create the template environment shared by all page handlers.

    The loader reads from the store's read-only mapping, so templates never
    touch the filesystem after startup.

    Args:
        asset_store: Loaded asset store.

    Returns:
        Environment: Jinja2 environment with HTML autoescaping.
    """

    return Environment(
        loader=DictLoader(asset_store.assets_template_sources()),
        autoescape=select_autoescape(["html"]),
        undefined=StrictUndefined,
        auto_reload=False,
    )
