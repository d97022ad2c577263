"""CLI entry point for tour-overlay."""

import argparse
from pathlib import Path

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright
from pydantic import ValidationError
from rich.console import Console

from tour_overlay.core.browser import PlaywrightDocument, launch_page
from tour_overlay.core.config import ConfigError, load_opening_config
from tour_overlay.core.logging import enable_file_logging, set_log_level
from tour_overlay.core.overlay import overlay_result
from tour_overlay.models.opening import OpeningConfig

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Tour Overlay - spotlight an element with an SVG overlay"
    )
    parser.add_argument("url", help="Address of the page hosting the target")
    parser.add_argument("selector", help="CSS selector of the element to spotlight")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML file with padding, xOffset, yOffset and radius",
    )
    parser.add_argument("--padding", type=float, default=None, help="Padding around the target")
    parser.add_argument("--x-offset", type=float, default=None, help="Horizontal offset of the opening")
    parser.add_argument("--y-offset", type=float, default=None, help="Vertical offset of the opening")
    parser.add_argument("--radius", type=float, default=None, help="Corner radius for all corners")
    parser.add_argument("--width", type=int, default=None, help="Viewport width in pixels")
    parser.add_argument("--height", type=int, default=None, help="Viewport height in pixels")
    parser.add_argument(
        "--headed",
        action="store_true",
        help="Run with a visible browser (default: headless)",
    )
    parser.add_argument("--output", type=str, default=None, help="Write the SVG to this file")
    parser.add_argument("--log-level", type=str, default="warning", help="Console log level")
    parser.add_argument("--log-file", type=str, default=None, help="Also log to this file")
    return parser


def resolve_config(args: argparse.Namespace) -> OpeningConfig:
    """Load the config file (if any) and apply command-line overrides.

    Raises:
        ConfigError: If the file is unusable.
        pydantic.ValidationError: If an override is out of range.
    """
    base = load_opening_config(args.config) if args.config else OpeningConfig()

    overrides = {
        "padding": args.padding,
        "x_offset": args.x_offset,
        "y_offset": args.y_offset,
        "radius": args.radius,
    }
    data = base.model_dump()
    data.update({k: v for k, v in overrides.items() if v is not None})
    return OpeningConfig.model_validate(data)


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if (args.width is None) != (args.height is None):
        parser.error("--width and --height must be given together")

    set_log_level(args.log_level)
    if args.log_file:
        enable_file_logging(args.log_file)

    try:
        config = resolve_config(args)
    except (ConfigError, ValidationError) as e:
        console.print(f"[red]Invalid configuration:[/red] {e}")
        raise SystemExit(1)

    viewport = None
    if args.width is not None and args.height is not None:
        viewport = {"width": args.width, "height": args.height}

    with sync_playwright() as p:
        console.print(f"[yellow]Loading {args.url}...[/yellow]")
        try:
            page = launch_page(p, args.url, headless=not args.headed, viewport=viewport)
        except PlaywrightError as e:
            console.print(f"[red]Failed to load {args.url}:[/red] {e}")
            raise SystemExit(1)
        try:
            result = overlay_result(args.selector, PlaywrightDocument(page), config)
        finally:
            browser = page.context.browser
            if browser is not None:
                browser.close()

    if not result.success:
        console.print(f"[red]{result.message}:[/red] {result.error}")
        raise SystemExit(1)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.svg, encoding="utf-8")
        console.print(f"[green]Overlay written to[/green] {output_path}")
    else:
        console.print(result.svg, markup=False, highlight=False, soft_wrap=True)


if __name__ == "__main__":
    main()
