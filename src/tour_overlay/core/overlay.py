"""Overlay entry points.

This module wires the pipeline together: resolve the selector, compute
the opening, build the path and wrap it in SVG markup.
"""

from collections.abc import Mapping

from tour_overlay.core.capabilities import ElementLookup, ElementRef, ViewportProvider
from tour_overlay.core.logging import ErrorIds, logError, logEvent
from tour_overlay.core.opening import compute_opening
from tour_overlay.core.path import generate_svg, make_overlay_path
from tour_overlay.models.opening import OpeningConfig, OpeningRect
from tour_overlay.models.result import OverlayResult, failure_result, success_result


class OverlayError(Exception):
    """Base class for overlay computation errors."""


class ElementNotFoundError(OverlayError):
    """Raised when a selector matches no element."""

    def __init__(self, selector: str) -> None:
        self.selector = selector
        super().__init__(f"No element matches selector {selector!r}")


def find_target(selector: str, document: ElementLookup) -> ElementRef:
    """Resolve a selector to its element.

    Raises:
        ElementNotFoundError: If the selector matches nothing.
    """
    element = document.query_selector(selector)
    if element is None:
        logError(ErrorIds.ELEMENT_NOT_FOUND, "Selector matched no element", extra={"selector": selector})
        raise ElementNotFoundError(selector)
    return element


def _resolve_viewport(document: ElementLookup, viewport: ViewportProvider | None) -> ViewportProvider:
    if viewport is not None:
        return viewport
    if isinstance(document, ViewportProvider):
        return document
    raise TypeError("A viewport provider is required when the document does not provide one")


def _build(
    selector: str,
    document: ElementLookup,
    config: OpeningConfig | None,
    viewport: ViewportProvider | None,
    styles: Mapping[str, object] | None = None,
    path_styles: Mapping[str, object] | None = None,
) -> tuple[str, OpeningRect]:
    provider = _resolve_viewport(document, viewport)
    target = find_target(selector, document)
    opening = compute_opening(target, config or OpeningConfig())
    svg = generate_svg(make_overlay_path(opening, provider), styles, path_styles)

    logEvent(
        "overlay_generated",
        {
            "selector": selector,
            "x": opening.x,
            "y": opening.y,
            "width": opening.width,
            "height": opening.height,
        },
    )
    return svg, opening


def get_overlay(
    selector: str,
    document: ElementLookup,
    config: OpeningConfig | None = None,
    viewport: ViewportProvider | None = None,
    styles: Mapping[str, object] | None = None,
    path_styles: Mapping[str, object] | None = None,
) -> str:
    """Build the overlay SVG for the element a selector matches.

    Args:
        selector: CSS selector of the element to spotlight.
        document: Element lookup capability of the host page.
        config: Opening parameters (defaults to no padding, offset or radius).
        viewport: Viewport provider. Defaults to the document itself when it
                  also provides the viewport size.
        styles: Optional CSS declarations for the ``<svg>`` element.
        path_styles: Optional CSS declarations for the ``<path>`` element.

    Returns:
        The ``<svg><path d="..." /></svg>`` markup.

    Raises:
        ElementNotFoundError: If the selector matches nothing.
    """
    svg, _ = _build(selector, document, config, viewport, styles, path_styles)
    return svg


def overlay_result(
    selector: str,
    document: ElementLookup,
    config: OpeningConfig | None = None,
    viewport: ViewportProvider | None = None,
    styles: Mapping[str, object] | None = None,
    path_styles: Mapping[str, object] | None = None,
) -> OverlayResult:
    """Build the overlay SVG, reporting failures as a result instead of raising.

    Args:
        selector: CSS selector of the element to spotlight.
        document: Element lookup capability of the host page.
        config: Opening parameters.
        viewport: Viewport provider (defaults to the document).
        styles: Optional CSS declarations for the ``<svg>`` element.
        path_styles: Optional CSS declarations for the ``<path>`` element.

    Returns:
        SuccessResult with the markup and opening, or FailureResult when the
        selector matches nothing.
    """
    try:
        svg, opening = _build(selector, document, config, viewport, styles, path_styles)
    except OverlayError as e:
        return failure_result(f"Failed to build overlay for {selector!r}", error=str(e))
    return success_result(svg, opening)
