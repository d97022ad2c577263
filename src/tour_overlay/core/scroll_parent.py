"""Scroll parent resolution.

Finds the nearest node that clips and scrolls its content vertically,
starting from the target element and climbing its ancestor chain.
"""

from tour_overlay.core.capabilities import ElementRef
from tour_overlay.core.logging import logForDebugging

# overflow-y values that never produce a scroll container
_NON_SCROLLING_OVERFLOW = frozenset({"hidden", "visible"})


def is_scroll_clipping(element: ElementRef) -> bool:
    """Check whether a node clips and scrolls its content vertically.

    A node qualifies when its computed overflow-y is neither ``hidden``
    nor ``visible`` and its content height is at least its client height.
    Non-element nodes (no overflow, no extent) never qualify.
    """
    overflow_y = element.computed_overflow_y()
    if overflow_y is None or overflow_y in _NON_SCROLLING_OVERFLOW:
        return False

    extent = element.scroll_extent()
    if extent is None:
        return False

    return extent.scroll_height >= extent.client_height


def get_scroll_parent(element: ElementRef | None) -> ElementRef | None:
    """Find the nearest scroll-clipping node for an element.

    The element itself is tested first, then each ancestor in turn.

    Args:
        element: The target element, or None.

    Returns:
        The first scroll-clipping node, or None once the chain is exhausted.
    """
    depth = 0
    node = element
    while node is not None:
        if is_scroll_clipping(node):
            logForDebugging("Resolved scroll parent", extra={"depth": depth})
            return node
        node = node.parent()
        depth += 1

    logForDebugging("No scroll parent found", extra={"depth": depth})
    return None
