"""Shared test fixtures for tour_overlay tests."""

from collections.abc import Callable

import pytest

from tour_overlay.models.geometry import Rect, ScrollExtent, Viewport
from tour_overlay.models.opening import OpeningRect
from tour_overlay.models.radius import CornerRadii


class FakeElement:
    """Synthetic ElementRef with fixed geometry."""

    def __init__(
        self,
        rect: Rect | None = None,
        overflow_y: str | None = "visible",
        scroll_height: float = 0,
        client_height: float = 0,
        parent: "FakeElement | None" = None,
        is_element: bool = True,
    ) -> None:
        self.rect = rect or Rect()
        self.overflow_y = overflow_y
        self.extent = ScrollExtent(scroll_height=scroll_height, client_height=client_height)
        self._parent = parent
        self.is_element = is_element
        self.parent_calls = 0

    def bounding_box(self) -> Rect:
        return self.rect

    def computed_overflow_y(self) -> str | None:
        return self.overflow_y if self.is_element else None

    def scroll_extent(self) -> ScrollExtent | None:
        return self.extent if self.is_element else None

    def parent(self) -> "FakeElement | None":
        self.parent_calls += 1
        return self._parent


class FakeDocument:
    """Synthetic ElementLookup and ViewportProvider."""

    def __init__(self, elements: dict[str, FakeElement], width: float = 800, height: float = 600) -> None:
        self.elements = elements
        self.viewport = Viewport(width=width, height=height)
        self.viewport_reads = 0

    def query_selector(self, selector: str) -> FakeElement | None:
        return self.elements.get(selector)

    def viewport_size(self) -> Viewport:
        self.viewport_reads += 1
        return self.viewport


@pytest.fixture
def make_element() -> Callable[..., FakeElement]:
    return FakeElement


@pytest.fixture
def target_rect() -> Rect:
    return Rect(x=10.0, y=20.0, width=100.0, height=50.0)


@pytest.fixture
def target(target_rect: Rect) -> FakeElement:
    root = FakeElement(rect=Rect(width=800, height=600))
    return FakeElement(rect=target_rect, parent=root)


@pytest.fixture
def document(target: FakeElement) -> FakeDocument:
    return FakeDocument({"#target": target})


@pytest.fixture
def sample_opening() -> OpeningRect:
    return OpeningRect(x=7.0, y=12.0, width=110.0, height=60.0, r=CornerRadii.uniform(8))


@pytest.fixture
def make_document() -> Callable[..., FakeDocument]:
    return FakeDocument
