"""Opening rectangle construction.

This module combines the target's unclipped horizontal extent, its
clipped visible band, and the step's padding, offsets and radius into
the rectangle that is cut out of the overlay.
"""

from tour_overlay.core.capabilities import ElementRef
from tour_overlay.core.logging import logForDebugging
from tour_overlay.core.scroll_parent import get_scroll_parent
from tour_overlay.core.visible_region import get_visible_band
from tour_overlay.models.geometry import Rect, VisibleBand
from tour_overlay.models.opening import OpeningConfig, OpeningRect
from tour_overlay.models.radius import RadiusInput


def build_opening_rect(target: Rect, band: VisibleBand, config: OpeningConfig) -> OpeningRect:
    """Build the opening from already-measured geometry.

    Padding grows the opening symmetrically on every side; offsets only
    move it.

    Args:
        target: Bounding box of the target (x and width are used as-is).
        band: Visible vertical band of the target (y and height).
        config: Padding, offsets and canonical radius.

    Returns:
        The opening rectangle.
    """
    return OpeningRect(
        width=target.width + config.padding * 2,
        height=band.height + config.padding * 2,
        x=target.x + config.x_offset - config.padding,
        y=band.y + config.y_offset - config.padding,
        r=config.radius,
    )


def compute_opening(target: ElementRef, config: OpeningConfig) -> OpeningRect:
    """Measure a live target and build its opening.

    A target without layout (detached or collapsed) is not an error: it
    yields a zero-sized box that only the padding grows.
    """
    target_rect = target.bounding_box()
    if target_rect.is_empty:
        logForDebugging(
            "Target has no layout, opening collapses to padding",
            extra={"x": target_rect.x, "y": target_rect.y},
        )

    scroll_parent = get_scroll_parent(target)
    parent_rect = scroll_parent.bounding_box() if scroll_parent is not None else None
    band = get_visible_band(target_rect, parent_rect)

    return build_opening_rect(target_rect, band, config)


def get_opening_properties(
    target: ElementRef,
    padding: float = 0,
    x_offset: float = 0,
    y_offset: float = 0,
    radius: RadiusInput = 0,
) -> OpeningRect:
    """Compute the opening for a target element.

    Args:
        target: The element to spotlight.
        padding: Space added around the target on every side.
        x_offset: Horizontal translation of the opening.
        y_offset: Vertical translation of the opening.
        radius: A number for all corners, or a per-corner mapping.

    Returns:
        The opening rectangle with canonical corner radii.

    Raises:
        pydantic.ValidationError: If padding or any radius is negative.
    """
    config = OpeningConfig(
        padding=padding,
        x_offset=x_offset,
        y_offset=y_offset,
        radius=radius,
    )
    return compute_opening(target, config)
