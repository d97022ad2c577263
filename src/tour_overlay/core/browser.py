"""Playwright binding for the overlay capabilities.

This module launches pages and adapts Playwright element handles and
pages to the ElementRef, ElementLookup and ViewportProvider protocols.
Every query is a synchronous evaluate() against the live page, so each
call may force a layout pass in the browser.
"""

from playwright.sync_api import ElementHandle, Page, Playwright, ViewportSize

from tour_overlay.core.logging import ErrorIds, logError
from tour_overlay.models.geometry import Rect, ScrollExtent, Viewport

_BOUNDING_BOX_JS = """el => {
    const r = el.getBoundingClientRect();
    return {x: r.x || r.left, y: r.y || r.top, width: r.width, height: r.height};
}"""

_OVERFLOW_Y_JS = """el => el instanceof HTMLElement
    ? window.getComputedStyle(el).overflowY
    : null"""

_SCROLL_EXTENT_JS = """el => el instanceof HTMLElement
    ? {scroll_height: el.scrollHeight, client_height: el.clientHeight}
    : null"""

_VIEWPORT_JS = "() => ({width: window.innerWidth, height: window.innerHeight})"


class PlaywrightElement:
    """ElementRef backed by a Playwright ElementHandle."""

    def __init__(self, handle: ElementHandle) -> None:
        self._handle = handle

    @property
    def handle(self) -> ElementHandle:
        return self._handle

    def bounding_box(self) -> Rect:
        box = self._handle.evaluate(_BOUNDING_BOX_JS)
        if not box:
            return Rect()
        return Rect(
            x=box.get("x") or 0,
            y=box.get("y") or 0,
            width=max(box.get("width") or 0, 0),
            height=max(box.get("height") or 0, 0),
        )

    def computed_overflow_y(self) -> str | None:
        return self._handle.evaluate(_OVERFLOW_Y_JS)

    def scroll_extent(self) -> ScrollExtent | None:
        extent = self._handle.evaluate(_SCROLL_EXTENT_JS)
        if extent is None:
            return None
        return ScrollExtent.model_validate(extent)

    def parent(self) -> "PlaywrightElement | None":
        js_handle = self._handle.evaluate_handle("el => el.parentElement")
        # as_element() returns the same handle for elements; only a null result is released
        parent_handle = js_handle.as_element()
        if parent_handle is None:
            js_handle.dispose()
            return None
        return PlaywrightElement(parent_handle)


class PlaywrightDocument:
    """ElementLookup and ViewportProvider backed by a Playwright Page."""

    def __init__(self, page: Page) -> None:
        self._page = page

    @property
    def page(self) -> Page:
        return self._page

    def query_selector(self, selector: str) -> PlaywrightElement | None:
        handle = self._page.query_selector(selector)
        if handle is None:
            return None
        return PlaywrightElement(handle)

    def viewport_size(self) -> Viewport:
        size = self._page.evaluate(_VIEWPORT_JS)
        return Viewport(width=size["width"], height=size["height"])


def launch_page(
    playwright: Playwright,
    url: str,
    headless: bool = True,
    viewport: ViewportSize | None = None,
) -> Page:
    """Launch Chromium and open a page at the given URL.

    Args:
        playwright: The Playwright instance (from sync_playwright()).
        url: Address of the page hosting the tour target.
        headless: If True (default), launches without UI.
        viewport: Optional fixed viewport size for the page.

    Returns:
        The loaded Page. Closing its browser (page.context.browser) releases it.

    Example:
        from playwright.sync_api import sync_playwright

        with sync_playwright() as p:
            page = launch_page(p, "https://example.com")
            document = PlaywrightDocument(page)
            ...
    """
    browser = playwright.chromium.launch(headless=headless)
    page = browser.new_page(viewport=viewport) if viewport else browser.new_page()
    try:
        page.goto(url)
    except Exception:
        logError(ErrorIds.NAVIGATION_FAILED, "Failed to load page", exc_info=True, extra={"url": url})
        browser.close()
        raise
    return page
