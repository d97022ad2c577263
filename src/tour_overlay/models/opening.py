"""Opening models.

OpeningConfig holds the tour step's tuning parameters, OpeningRect the
derived rectangle (plus canonical corner radii) of the transparent hole.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tour_overlay.models.geometry import Rect
from tour_overlay.models.radius import CornerRadii, to_corner_radii


class OpeningConfig(BaseModel):
    """Parameters that shape the opening around a target element.

    Attributes:
        padding: Space added on every side of the target (non-negative).
        x_offset: Horizontal translation of the opening.
        y_offset: Vertical translation of the opening.
        radius: Corner radii, given as a number or a per-corner mapping.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    padding: float = Field(default=0.0, ge=0)
    x_offset: float = Field(default=0.0, alias="xOffset")
    y_offset: float = Field(default=0.0, alias="yOffset")
    radius: CornerRadii = Field(default_factory=CornerRadii)

    @field_validator("radius", mode="before")
    @classmethod
    def canonicalize_radius(cls, v: Any) -> CornerRadii:
        """Expand a scalar or partial record into four corners."""
        try:
            return to_corner_radii(v)
        except TypeError as e:
            raise ValueError(str(e)) from e


class OpeningRect(Rect):
    """The rectangle cut out of the overlay.

    Attributes:
        r: Canonical corner radii of the opening.
    """

    r: CornerRadii = Field(default_factory=CornerRadii)
