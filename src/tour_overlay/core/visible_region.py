"""Visible band computation.

Clips a target's vertical extent against its scroll parent. The
horizontal extent is never clipped.
"""

from tour_overlay.models.geometry import Rect, VisibleBand


def get_visible_band(target: Rect, scroll_parent: Rect | None = None) -> VisibleBand:
    """Compute the vertically visible slice of a target.

    Args:
        target: Bounding box of the target element.
        scroll_parent: Bounding box of the target's scroll parent, if any.

    Returns:
        The visible band. Its height is zero when the target lies entirely
        outside the scroll parent.
    """
    top = target.y
    bottom = target.bottom

    if scroll_parent is not None:
        top = max(top, scroll_parent.y)
        bottom = min(bottom, scroll_parent.bottom)

    return VisibleBand(y=top, height=max(bottom - top, 0))
