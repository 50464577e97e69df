"""Release tooling package for CI image reference hand-off to the chart."""

from .chart_values import (
    ChartValues,
    ChartValuesError,
    release_load_chart_values,
    release_update_chart_image,
)

__all__ = ["ChartValues", "ChartValuesError", "release_load_chart_values", "release_update_chart_image"]
