"""Typed interfaces for asset store responsibilities."""

from collections.abc import Mapping
from typing import Protocol

from course_portal.domain import Asset


class AssetStorePort(Protocol):
    """Port definition for read-only access to startup-loaded assets."""

    def assets_get(self, name: str) -> Asset | None:
        """Return one asset by name.

        Args:
            name: Asset name relative to the asset directory.

        Returns:
            Asset | None: Loaded asset, or None when the name is unknown.
        """

    def assets_names(self) -> tuple[str, ...]:
        """Return all loaded asset names in sorted order."""

    def assets_template_sources(self) -> Mapping[str, str]:
        """Return decoded template sources keyed by asset name.

        Returns:
            Mapping[str, str]: Read-only mapping consumed by the template loader.
        """
