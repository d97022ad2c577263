"""Tour overlay data models."""

from tour_overlay.models.geometry import Rect, ScrollExtent, Viewport, VisibleBand
from tour_overlay.models.opening import OpeningConfig, OpeningRect
from tour_overlay.models.radius import (
    CornerRadii,
    Radius,
    RadiusInput,
    UniformRadius,
    to_corner_radii,
)
from tour_overlay.models.result import (
    FailureResult,
    OverlayResult,
    SuccessResult,
    failure_result,
    success_result,
)

__all__ = [
    "CornerRadii",
    "FailureResult",
    "OpeningConfig",
    "OpeningRect",
    "OverlayResult",
    "Radius",
    "RadiusInput",
    "Rect",
    "ScrollExtent",
    "SuccessResult",
    "UniformRadius",
    "Viewport",
    "VisibleBand",
    "failure_result",
    "success_result",
    "to_corner_radii",
]
