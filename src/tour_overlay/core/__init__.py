"""Tour overlay core components."""

from tour_overlay.core.browser import PlaywrightDocument, PlaywrightElement, launch_page
from tour_overlay.core.capabilities import (
    ElementLookup,
    ElementRef,
    StaticViewport,
    ViewportProvider,
)
from tour_overlay.core.config import ConfigError, load_opening_config, parse_opening_config
from tour_overlay.core.opening import build_opening_rect, compute_opening, get_opening_properties
from tour_overlay.core.overlay import (
    ElementNotFoundError,
    OverlayError,
    find_target,
    get_overlay,
    overlay_result,
)
from tour_overlay.core.path import css_property_name, format_number, generate_svg, make_overlay_path
from tour_overlay.core.scroll_parent import get_scroll_parent, is_scroll_clipping
from tour_overlay.core.visible_region import get_visible_band

__all__ = [
    "ConfigError",
    "ElementLookup",
    "ElementNotFoundError",
    "ElementRef",
    "OverlayError",
    "PlaywrightDocument",
    "PlaywrightElement",
    "StaticViewport",
    "ViewportProvider",
    "build_opening_rect",
    "compute_opening",
    "css_property_name",
    "find_target",
    "format_number",
    "generate_svg",
    "get_opening_properties",
    "get_overlay",
    "get_scroll_parent",
    "get_visible_band",
    "is_scroll_clipping",
    "launch_page",
    "load_opening_config",
    "make_overlay_path",
    "overlay_result",
    "parse_opening_config",
]
