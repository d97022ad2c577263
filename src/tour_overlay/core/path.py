"""Overlay path construction.

This module encodes an opening rectangle as an SVG path made of two
subpaths with opposite winding:

1. the full viewport, drawn clockwise from the bottom-right corner
2. the rounded opening, drawn counter-clockwise from the start of its
   top-left arc

Filled with either the non-zero or the even-odd rule, the second
subpath renders as a transparent hole in the first.
"""

import html
import re
from collections.abc import Mapping

from tour_overlay.core.capabilities import ViewportProvider
from tour_overlay.models.opening import OpeningRect


def format_number(value: float) -> str:
    """Render a coordinate the way browsers serialize numbers (no trailing .0)."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def _arc(radius: float, dx: float, dy: float) -> str:
    # Relative quarter-turn, counter-clockwise sweep
    r = format_number(radius)
    return f"a{r},{r},0,0,0,{format_number(dx)},{format_number(dy)}"


def make_overlay_path(opening: OpeningRect, viewport: ViewportProvider) -> str:
    """Build the overlay path for an opening.

    The viewport is read from the provider on every call, so the outer
    rectangle always matches the size at path-build time.

    No corner radius is checked against the opening's extent; oversized
    radii produce overlapping arcs rather than an error.

    Args:
        opening: The opening rectangle with canonical corner radii.
        viewport: Provider of the current viewport size.

    Returns:
        The path definition for the ``d`` attribute.
    """
    size = viewport.viewport_size()
    w = format_number(size.width)
    h = format_number(size.height)

    x, y = opening.x, opening.y
    width, height = opening.width, opening.height
    top_left = opening.r.top_left
    top_right = opening.r.top_right
    bottom_right = opening.r.bottom_right
    bottom_left = opening.r.bottom_left

    outer = [f"M{w},{h}", "H0", "V0", f"H{w}", f"V{h}", "Z"]
    inner = [
        f"M{format_number(x + top_left)},{format_number(y)}",
        _arc(top_left, -top_left, top_left),
        f"V{format_number(y + height - bottom_left)}",
        _arc(bottom_left, bottom_left, bottom_left),
        f"H{format_number(x + width - bottom_right)}",
        _arc(bottom_right, bottom_right, -bottom_right),
        f"V{format_number(y + top_right)}",
        _arc(top_right, -top_right, -top_right),
        "Z",
    ]
    return " ".join(outer + inner)


_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def css_property_name(name: str) -> str:
    """Convert a camelCase style key (``fillRule``) to its CSS name (``fill-rule``)."""
    return _CAMEL_BOUNDARY.sub("-", name).lower()


def _style_attribute(styles: Mapping[str, object] | None) -> str:
    if not styles:
        return ""
    declarations = "; ".join(
        f"{css_property_name(name)}: {value}" for name, value in styles.items()
    )
    return f' style="{html.escape(declarations, quote=True)}"'


def generate_svg(
    path_definition: str,
    styles: Mapping[str, object] | None = None,
    path_styles: Mapping[str, object] | None = None,
) -> str:
    """Wrap a path definition in an SVG fragment.

    Args:
        path_definition: The ``d`` attribute for the path.
        styles: Optional CSS declarations for the ``<svg>`` element.
        path_styles: Optional CSS declarations for the ``<path>`` element.

    Returns:
        The SVG markup.
    """
    return (
        f"<svg{_style_attribute(styles)}>"
        f'<path{_style_attribute(path_styles)} d="{path_definition}" />'
        "</svg>"
    )
