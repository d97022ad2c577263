"""Geometry models for overlay computation.

This module defines the rectangle and extent models that flow through
the opening pipeline: element bounding boxes, scroll extents, the
visible band of a target and the viewport size.
"""

from pydantic import BaseModel, ConfigDict, field_validator


class Rect(BaseModel):
    """Axis-aligned rectangle in viewport (client) coordinates.

    Attributes:
        x: Left edge in pixels.
        y: Top edge in pixels.
        width: Width in pixels (must be non-negative).
        height: Height in pixels (must be non-negative).
    """

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @field_validator("width", "height")
    @classmethod
    def must_be_non_negative(cls, v: float) -> float:
        """Validate that dimensions are non-negative."""
        if v < 0:
            raise ValueError(f"must be non-negative, got {v}")
        return v

    @property
    def bottom(self) -> float:
        """Bottom edge in pixels."""
        return self.y + self.height

    @property
    def right(self) -> float:
        """Right edge in pixels."""
        return self.x + self.width

    @property
    def is_empty(self) -> bool:
        """True when the rectangle has no area (detached or collapsed node)."""
        return self.width == 0 or self.height == 0


class ScrollExtent(BaseModel):
    """Scrollable content height versus visible client height of a node."""

    model_config = ConfigDict(frozen=True)

    scroll_height: float
    client_height: float


class VisibleBand(BaseModel):
    """Vertical slice of a target that is actually visible.

    Attributes:
        y: Top of the visible slice.
        height: Height of the visible slice, zero when fully clipped.
    """

    model_config = ConfigDict(frozen=True)

    y: float
    height: float

    @field_validator("height")
    @classmethod
    def must_be_non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"must be non-negative, got {v}")
        return v


class Viewport(BaseModel):
    """Size of the visible viewport in pixels."""

    model_config = ConfigDict(frozen=True)

    width: float
    height: float
