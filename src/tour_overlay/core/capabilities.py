"""Host capability interfaces.

The geometry pipeline never touches a live page directly. It talks to
the host through these small protocols, implemented by the Playwright
binding in tour_overlay.core.browser and by synthetic fixtures in tests.
"""

from typing import Protocol, runtime_checkable

from tour_overlay.models.geometry import Rect, ScrollExtent, Viewport


@runtime_checkable
class ElementRef(Protocol):
    """Read-only handle to a node in the rendered tree.

    Non-element nodes answer None for overflow and scroll extent.
    """

    def bounding_box(self) -> Rect: ...

    def computed_overflow_y(self) -> str | None: ...

    def scroll_extent(self) -> ScrollExtent | None: ...

    def parent(self) -> "ElementRef | None": ...


@runtime_checkable
class ViewportProvider(Protocol):
    """Accessor for the current viewport size."""

    def viewport_size(self) -> Viewport: ...


@runtime_checkable
class ElementLookup(Protocol):
    """Resolves a CSS selector to an element, or None when nothing matches."""

    def query_selector(self, selector: str) -> ElementRef | None: ...


class StaticViewport:
    """A ViewportProvider with a fixed size."""

    def __init__(self, width: float, height: float) -> None:
        self._viewport = Viewport(width=width, height=height)

    def viewport_size(self) -> Viewport:
        return self._viewport
