#!/usr/bin/env python3
"""Demo script for tour-overlay.

Loads a small page with a scrolling panel, walks through a three-step
tour, and for every step:
1. Computes the opening around the step's target
2. Injects the overlay SVG into the page
3. Captures a screenshot

Usage:
    uv run python scripts/demo.py [--headed] [--output-dir DIR]
"""

import argparse
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from playwright.sync_api import sync_playwright
from rich.console import Console
from rich.table import Table

from tour_overlay.core import PlaywrightDocument, overlay_result
from tour_overlay.models import OpeningConfig

console = Console()

DEMO_PAGE = """
<html>
  <body style="margin: 0; font-family: sans-serif;">
    <header id="title" style="padding: 16px;">Quarterly report</header>
    <div id="panel" style="height: 200px; overflow-y: auto; margin: 16px; border: 1px solid #ccc;">
      <div style="height: 150px;">Intro</div>
      <button id="export" style="width: 120px; height: 40px;">Export</button>
      <div style="height: 400px;">Details</div>
    </div>
  </body>
</html>
"""

TOUR_STEPS = [
    ("#title", OpeningConfig(padding=4, radius=6)),
    ("#panel", OpeningConfig(padding=8, radius={"topLeft": 12, "bottomRight": 12})),
    ("#export", OpeningConfig(padding=6, y_offset=-2, radius=8)),
]

_INJECT_JS = """svg => {
    document.getElementById('tour-overlay')?.remove();
    const host = document.createElement('div');
    host.id = 'tour-overlay';
    host.style.cssText = 'position:fixed;inset:0;pointer-events:none;';
    host.innerHTML = svg;
    const el = host.firstElementChild;
    el.setAttribute('width', '100%');
    el.setAttribute('height', '100%');
    el.firstElementChild.setAttribute('fill', 'rgba(0,0,0,0.5)');
    el.firstElementChild.setAttribute('fill-rule', 'evenodd');
    document.body.appendChild(host);
}"""


def main() -> None:
    parser = argparse.ArgumentParser(description="Tour Overlay demo")
    parser.add_argument("--headed", action="store_true", help="Show the browser")
    parser.add_argument("--output-dir", type=str, default="demo-output", help="Screenshot directory")
    args = parser.parse_args()

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    table = Table(title="Tour openings")
    for column in ("Step", "Selector", "x", "y", "width", "height", "Screenshot"):
        table.add_column(column)

    with sync_playwright() as p:
        browser = p.chromium.launch(headless=not args.headed)
        page = browser.new_page(viewport={"width": 800, "height": 600})
        page.set_content(DEMO_PAGE)
        document = PlaywrightDocument(page)

        for index, (selector, config) in enumerate(TOUR_STEPS, start=1):
            result = overlay_result(selector, document, config)
            if not result.success:
                console.print(f"[red]Step {index} failed:[/red] {result.error}")
                continue

            page.evaluate(_INJECT_JS, result.svg)
            screenshot = output_dir / f"step-{index}.png"
            page.screenshot(path=str(screenshot))

            opening = result.opening
            table.add_row(
                str(index),
                selector,
                f"{opening.x:g}",
                f"{opening.y:g}",
                f"{opening.width:g}",
                f"{opening.height:g}",
                str(screenshot),
            )

        browser.close()

    console.print(table)


if __name__ == "__main__":
    main()
