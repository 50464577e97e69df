"""Domain models used across application layer boundaries."""

from .models import Asset, HealthStatus, ImageReference, PageRoute

__all__ = ["Asset", "HealthStatus", "ImageReference", "PageRoute"]
