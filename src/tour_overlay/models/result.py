"""Overlay result models.

This module defines the OverlayResult type which represents the outcome
of building an overlay for a tour step.

The union type design makes invalid states unrepresentable:
- SuccessResult: always has the SVG markup and the opening, never an error
- FailureResult: always has message and error, never markup
"""

from typing import Union

from pydantic import BaseModel, ConfigDict

from tour_overlay.models.opening import OpeningRect


class SuccessResult(BaseModel):
    """Result of a successful overlay computation.

    Attributes:
        svg: The complete ``<svg>`` markup fragment.
        opening: The opening rectangle the path was built from.
    """

    model_config = ConfigDict(frozen=True)

    svg: str
    opening: OpeningRect

    @property
    def success(self) -> bool:
        """Always True for SuccessResult."""
        return True

    @property
    def error(self) -> None:
        """Always None for SuccessResult."""
        return None


class FailureResult(BaseModel):
    """Result of a failed overlay computation.

    Attributes:
        message: Human-readable message describing the result.
        error: Error message describing the failure.
    """

    model_config = ConfigDict(frozen=True)

    message: str
    error: str

    @property
    def success(self) -> bool:
        """Always False for FailureResult."""
        return False

    @property
    def svg(self) -> None:
        """Always None for FailureResult."""
        return None


# Union type for overlay results
OverlayResult = Union[SuccessResult, FailureResult]


def success_result(svg: str, opening: OpeningRect) -> OverlayResult:
    """Create a successful overlay result.

    Args:
        svg: The generated SVG markup.
        opening: The opening rectangle used for the path.

    Returns:
        A SuccessResult instance.
    """
    return SuccessResult(svg=svg, opening=opening)


def failure_result(message: str, error: str | None = None) -> OverlayResult:
    """Create a failed overlay result.

    Args:
        message: Human-readable message describing the result.
        error: Error message if the computation failed (defaults to message).

    Returns:
        A FailureResult instance.
    """
    return FailureResult(message=message, error=error or message)
