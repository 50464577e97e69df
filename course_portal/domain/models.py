"""Typed domain models shared across runtime layers.

This module provides immutable data contracts for the asset store, the page
route table, health reporting and container image references.
"""

from dataclasses import dataclass

DEFAULT_IMAGE_TAG = "latest"


@dataclass(frozen=True)
class Asset:
    """One file loaded from the static asset directory.

    Attributes:
        name: File name relative to the asset directory, using `/` separators.
        content: Raw file bytes as read at startup.
        media_type: Content type used when the asset is served directly.
    """

    name: str
    content: bytes
    media_type: str


@dataclass(frozen=True)
class PageRoute:
    """GET route rendered from a page template.

    Attributes:
        path: Request path the route is registered on.
        template_name: Asset name of the Jinja2 template to render.
        title: Page title passed to the template.
    """

    path: str
    template_name: str
    title: str


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by health-check surfaces.

    Attributes:
        status: Overall status text for service health.
        detail: Additional message suitable for operational diagnostics.
    """

    status: str
    detail: str


@dataclass(frozen=True)
class ImageReference:
    """Container image reference handed from CI to the deployment chart.

    Attributes:
        repository: Image repository including optional registry host and port.
        tag: Image tag.
    """

    repository: str
    tag: str = DEFAULT_IMAGE_TAG

    def __post_init__(self) -> None:
        if not self.repository.strip():
            raise ValueError("image repository must not be blank")
        if not self.tag.strip():
            raise ValueError("image tag must not be blank")

    @classmethod
    def parse(cls, value: str) -> "ImageReference":
        """Parse `repository[:tag]` notation.

        A colon before the last `/` belongs to a registry port, not the tag.

        Args:
            value: Image reference string, e.g. `ghcr.io/acme/portal:1.2.0`.

        Returns:
            ImageReference: Parsed reference, tag defaults to `latest`.

        Raises:
            ValueError: Raised when the reference or one of its parts is blank.
        """

        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("image reference must not be blank")

        last_slash = stripped_value.rfind("/")
        last_colon = stripped_value.rfind(":")
        if last_colon > last_slash:
            return cls(repository=stripped_value[:last_colon], tag=stripped_value[last_colon + 1 :])
        return cls(repository=stripped_value)

    def render(self) -> str:
        """Return the `repository:tag` form used by container runtimes."""

        return f"{self.repository}:{self.tag}"
