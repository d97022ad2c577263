"""Corner radius models for the overlay opening.

A radius is given either as a single number applied to every corner or
as a per-corner record. Both shapes are canonicalized once, at the entry
boundary, into a CornerRadii record before any path math runs:

- UniformRadius: one non-negative value for all four corners
- CornerRadii: four independent non-negative values, missing ones are 0
"""

from collections.abc import Mapping
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field


class CornerRadii(BaseModel):
    """Canonical per-corner radius record.

    Accepts both snake_case field names and the camelCase keys used by
    tour step definitions (``topLeft``, ``topRight``, ...).

    Attributes:
        top_left: Radius of the top-left corner.
        top_right: Radius of the top-right corner.
        bottom_right: Radius of the bottom-right corner.
        bottom_left: Radius of the bottom-left corner.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    top_left: float = Field(default=0.0, ge=0, alias="topLeft")
    top_right: float = Field(default=0.0, ge=0, alias="topRight")
    bottom_right: float = Field(default=0.0, ge=0, alias="bottomRight")
    bottom_left: float = Field(default=0.0, ge=0, alias="bottomLeft")

    @classmethod
    def uniform(cls, value: float) -> "CornerRadii":
        """Create a record with the same radius on every corner."""
        return cls(
            top_left=value,
            top_right=value,
            bottom_right=value,
            bottom_left=value,
        )

    @property
    def is_uniform(self) -> bool:
        return self.top_left == self.top_right == self.bottom_right == self.bottom_left


class UniformRadius(BaseModel):
    """A single radius applied to all four corners."""

    model_config = ConfigDict(frozen=True)

    value: float = Field(default=0.0, ge=0)

    def to_corners(self) -> CornerRadii:
        return CornerRadii.uniform(self.value)


# Tagged radius variant
Radius = Union[UniformRadius, CornerRadii]

# Shapes accepted at the boundary before canonicalization
RadiusInput = Union[float, int, Radius, Mapping[str, Any]]


def to_corner_radii(radius: RadiusInput) -> CornerRadii:
    """Canonicalize any accepted radius shape into a CornerRadii record.

    Args:
        radius: A number, a UniformRadius, a CornerRadii, or a mapping with
                per-corner keys (camelCase or snake_case).

    Returns:
        The four-corner record.

    Raises:
        pydantic.ValidationError: If any corner is negative or a mapping
            contains unknown keys.
        TypeError: If the radius has an unsupported shape.
    """
    if isinstance(radius, CornerRadii):
        return radius
    if isinstance(radius, UniformRadius):
        return radius.to_corners()
    if isinstance(radius, bool):
        raise TypeError(f"Unsupported radius type: {type(radius).__name__}")
    if isinstance(radius, (int, float)):
        return UniformRadius(value=radius).to_corners()
    if isinstance(radius, Mapping):
        return CornerRadii.model_validate(dict(radius))
    raise TypeError(f"Unsupported radius type: {type(radius).__name__}")
