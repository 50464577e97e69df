"""Asset layer package for the read-only static asset store."""

from .interfaces import AssetStorePort
from .store import (
    REQUIRED_TEMPLATES,
    TEMPLATE_SUFFIX,
    AssetLoadError,
    StaticAssetStore,
    assets_load_store,
)
from .templates import assets_create_template_environment

__all__ = [
    "REQUIRED_TEMPLATES",
    "TEMPLATE_SUFFIX",
    "AssetLoadError",
    "AssetStorePort",
    "StaticAssetStore",
    "assets_create_template_environment",
    "assets_load_store",
]
