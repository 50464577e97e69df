"""Static asset store loaded once at startup and shared read-only."""

from __future__ import annotations

import logging
import mimetypes
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from course_portal.domain import Asset
from course_portal.errors import CoursePortalError

from .interfaces import AssetStorePort

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".html"
REQUIRED_TEMPLATES: tuple[str, ...] = ("base.html", "home.html", "courses.html", "about.html", "contact.html")
DEFAULT_MEDIA_TYPE = "application/octet-stream"


class AssetLoadError(CoursePortalError, RuntimeError):
    """Raised when the asset directory or a required template cannot be loaded."""


class StaticAssetStore(AssetStorePort):
    """In-memory asset store backed by read-only mappings."""

    def __init__(self, assets: Iterable[Asset]):
        """Initialize the store from already loaded assets.

        Args:
            assets: Assets to expose. Names must be unique.

        Raises:
            ValueError: Raised when two assets share a name.
        """

        assets_by_name: dict[str, Asset] = {}
        for asset in assets:
            if asset.name in assets_by_name:
                raise ValueError(f"duplicate asset name: {asset.name}")
            assets_by_name[asset.name] = asset

        template_sources: dict[str, str] = {}
        for name, asset in assets_by_name.items():
            if name.endswith(TEMPLATE_SUFFIX):
                template_sources[name] = asset.content.decode("utf-8")

        self._assets = MappingProxyType(assets_by_name)
        self._template_sources = MappingProxyType(template_sources)

    def assets_get(self, name: str) -> Asset | None:
        return self._assets.get(name)

    def assets_names(self) -> tuple[str, ...]:
        return tuple(sorted(self._assets))

    def assets_template_sources(self) -> Mapping[str, str]:
        return self._template_sources


def assets_guess_media_type(name: str) -> str:
    """Guess the served content type of an asset from its file name."""

    media_type, _ = mimetypes.guess_type(name)
    return media_type or DEFAULT_MEDIA_TYPE


def assets_load_store(
    directory: str | Path,
    required_templates: Iterable[str] = REQUIRED_TEMPLATES,
) -> StaticAssetStore:
    """Read every file under the asset directory into a read-only store.

    Args:
        directory: Asset directory path.
        required_templates: Template names that must be present.

    Returns:
        StaticAssetStore: Store holding all files found under the directory.

    Raises:
        AssetLoadError: Raised when the directory is missing, a file cannot be
            read or decoded, or a required template is absent.
    """

    root = Path(directory)
    if not root.is_dir():
        raise AssetLoadError(f"asset directory not found: {root}")

    assets: list[Asset] = []
    for file_path in sorted(path for path in root.rglob("*") if path.is_file()):
        name = file_path.relative_to(root).as_posix()
        try:
            content = file_path.read_bytes()
        except OSError as error:
            raise AssetLoadError(f"asset could not be read: {name}") from error
        if name.endswith(TEMPLATE_SUFFIX):
            try:
                content.decode("utf-8")
            except UnicodeDecodeError as error:
                raise AssetLoadError(f"template is not valid UTF-8: {name}") from error
        assets.append(Asset(name=name, content=content, media_type=assets_guess_media_type(name)))

    store = StaticAssetStore(assets)
    loaded_names = set(store.assets_names())
    missing_templates = [name for name in required_templates if name not in loaded_names]
    if missing_templates:
        raise AssetLoadError(f"required templates missing from {root}: {', '.join(missing_templates)}")

    logger.info("Loaded %d assets from %s", len(loaded_names), root)
    return store
