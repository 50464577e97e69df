"""Chart values validation and image tag update used by the CI workflow.

CI calls `release_update_chart_image` after a successful image push, which is
the single point where the chart's image reference changes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from course_portal.domain import ImageReference
from course_portal.errors import CoursePortalError

logger = logging.getLogger(__name__)


class ChartValuesError(CoursePortalError, ValueError):
    """Raised when a chart values file is missing, unreadable or invalid."""


class ImageValues(BaseModel):
    """`image` block of the chart values."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    repository: str = Field(min_length=1)
    tag: str = Field(min_length=1)


class ServiceValues(BaseModel):
    """`service` block of the chart values."""

    model_config = ConfigDict(extra="allow")

    type: Literal["ClusterIP", "NodePort", "LoadBalancer"] = "NodePort"


class IngressValues(BaseModel):
    """`ingress` block of the chart values."""

    model_config = ConfigDict(extra="allow")

    host: str = Field(min_length=1)


class ChartValues(BaseModel):
    """Recognized chart options. Unknown keys are preserved untouched."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    image: ImageValues
    replica_count: int = Field(default=1, ge=1, alias="replicaCount")
    service: ServiceValues = Field(default_factory=ServiceValues)
    ingress: IngressValues

    def image_reference(self) -> ImageReference:
        """Return the chart's current image reference."""

        return ImageReference(repository=self.image.repository, tag=self.image.tag)


def _release_read_values_document(values_path: Path) -> dict[str, Any]:
    try:
        document = yaml.safe_load(values_path.read_text(encoding="utf-8"))
    except FileNotFoundError as error:
        raise ChartValuesError(f"chart values file not found: {values_path}") from error
    except (OSError, yaml.YAMLError) as error:
        raise ChartValuesError(f"chart values file could not be read: {values_path}") from error
    if not isinstance(document, dict):
        raise ChartValuesError(f"chart values file must contain a mapping: {values_path}")
    return document


def _release_validate(document: dict[str, Any], values_path: Path) -> ChartValues:
    try:
        return ChartValues.model_validate(document)
    except ValidationError as error:
        raise ChartValuesError(f"chart values validation failed for {values_path}. Details: {error}") from error


def release_load_chart_values(values_path: str | Path) -> ChartValues:
    """Load and validate a chart values file.

    Args:
        values_path: Path to `values.yaml`.

    Returns:
        ChartValues: Validated values.

    Raises:
        ChartValuesError: Raised when the file is missing or invalid.
    """

    path = Path(values_path)
    return _release_validate(_release_read_values_document(path), path)


def release_update_chart_image(
    values_path: str | Path,
    tag: str,
    repository: str | None = None,
) -> ImageReference:
    """Point the chart at a newly pushed image.

    Only the `image` block changes. Key order of the document is kept;
    YAML comments are not.

    Args:
        values_path: Path to `values.yaml`.
        tag: New image tag.
        repository: Optional new image repository.

    Returns:
        ImageReference: Image reference written to the file.

    Raises:
        ChartValuesError: Raised when the file is missing or invalid.
        ValueError: Raised when tag or repository is blank.
    """

    path = Path(values_path)
    document = _release_read_values_document(path)
    current_values = _release_validate(document, path)

    new_reference = ImageReference(
        repository=(repository or current_values.image.repository).strip(),
        tag=tag.strip(),
    )
    image_block = dict(document["image"])
    image_block["repository"] = new_reference.repository
    image_block["tag"] = new_reference.tag
    document["image"] = image_block
    _release_validate(document, path)

    path.write_text(yaml.safe_dump(document, sort_keys=False), encoding="utf-8")
    logger.info(
        "Updated chart image %s -> %s in %s",
        current_values.image_reference().render(),
        new_reference.render(),
        path,
    )
    return new_reference
