"""Tests for overlay path construction and SVG markup."""

from xml.etree import ElementTree

from tour_overlay.core.capabilities import StaticViewport
from tour_overlay.core.path import (
    css_property_name,
    format_number,
    generate_svg,
    make_overlay_path,
)
from tour_overlay.models.opening import OpeningRect
from tour_overlay.models.radius import CornerRadii


def _subpaths(path: str) -> list[str]:
    return [part.strip() + " Z" for part in path.split("Z") if part.strip()]


class TestFormatNumber:
    def test_integral_float_has_no_fraction(self) -> None:
        assert format_number(15.0) == "15"

    def test_fraction_kept(self) -> None:
        assert format_number(7.5) == "7.5"

    def test_negative_zero(self) -> None:
        assert format_number(-0.0) == "0"

    def test_negative(self) -> None:
        assert format_number(-8) == "-8"


class TestMakeOverlayPath:
    def test_outer_subpath_traces_viewport(self, sample_opening: OpeningRect) -> None:
        path = make_overlay_path(sample_opening, StaticViewport(800, 600))
        outer, _ = _subpaths(path)
        assert outer == "M800,600 H0 V0 H800 V600 Z"

    def test_inner_subpath_starts_after_top_left_radius(self, sample_opening: OpeningRect) -> None:
        path = make_overlay_path(sample_opening, StaticViewport(800, 600))
        _, inner = _subpaths(path)
        assert inner.startswith("M15,12 ")

    def test_full_path(self, sample_opening: OpeningRect) -> None:
        path = make_overlay_path(sample_opening, StaticViewport(800, 600))
        assert path == (
            "M800,600 H0 V0 H800 V600 Z "
            "M15,12 a8,8,0,0,0,-8,8 V64 a8,8,0,0,0,8,8 H109 "
            "a8,8,0,0,0,8,-8 V20 a8,8,0,0,0,-8,-8 Z"
        )

    def test_zero_radius_gives_sharp_corners(self) -> None:
        opening = OpeningRect(x=10, y=20, width=100, height=50)
        path = make_overlay_path(opening, StaticViewport(800, 600))
        _, inner = _subpaths(path)
        assert inner == (
            "M10,20 a0,0,0,0,0,0,0 V70 a0,0,0,0,0,0,0 H110 "
            "a0,0,0,0,0,0,0 V20 a0,0,0,0,0,0,0 Z"
        )

    def test_per_corner_radii(self) -> None:
        opening = OpeningRect(
            x=0,
            y=0,
            width=100,
            height=50,
            r=CornerRadii(top_left=1, top_right=2, bottom_right=3, bottom_left=4),
        )
        path = make_overlay_path(opening, StaticViewport(800, 600))
        _, inner = _subpaths(path)
        assert inner == (
            "M1,0 a1,1,0,0,0,-1,1 V46 a4,4,0,0,0,4,4 H97 "
            "a3,3,0,0,0,3,-3 V2 a2,2,0,0,0,-2,-2 Z"
        )

    def test_viewport_read_at_build_time(self, sample_opening: OpeningRect, make_document) -> None:
        document = make_document({}, width=800, height=600)
        first = make_overlay_path(sample_opening, document)
        document.viewport = document.viewport.model_copy(update={"width": 1024, "height": 768})
        second = make_overlay_path(sample_opening, document)

        assert first.startswith("M800,600 ")
        assert second.startswith("M1024,768 ")
        assert document.viewport_reads == 2

    def test_zero_size_opening_is_degenerate_point(self) -> None:
        opening = OpeningRect(x=50, y=60, width=0, height=0)
        path = make_overlay_path(opening, StaticViewport(800, 600))
        _, inner = _subpaths(path)
        assert inner.startswith("M50,60 ")
        assert "V60" in inner
        assert "H50" in inner

    def test_oversized_radius_tolerated(self) -> None:
        opening = OpeningRect(x=0, y=0, width=10, height=10, r=CornerRadii.uniform(20))
        path = make_overlay_path(opening, StaticViewport(100, 100))
        _, inner = _subpaths(path)
        assert inner.startswith("M20,0 ")
        assert "V-10" in inner

    def test_fractional_coordinates(self) -> None:
        opening = OpeningRect(x=0.5, y=1.25, width=10, height=10)
        path = make_overlay_path(opening, StaticViewport(800.5, 600))
        assert path.startswith("M800.5,600 ")
        assert "M0.5,1.25 " in path


class TestGenerateSvg:
    def test_plain_markup(self) -> None:
        assert generate_svg("M0,0 Z") == '<svg><path d="M0,0 Z" /></svg>'

    def test_with_styles(self) -> None:
        svg = generate_svg(
            "M0,0 Z",
            styles={"position": "fixed", "z-index": 9997},
            path_styles={"fill": "rgba(0,0,0,0.5)"},
        )
        assert svg == (
            '<svg style="position: fixed; z-index: 9997">'
            '<path style="fill: rgba(0,0,0,0.5)" d="M0,0 Z" /></svg>'
        )

    def test_empty_styles_omitted(self) -> None:
        assert generate_svg("M0,0 Z", styles={}) == '<svg><path d="M0,0 Z" /></svg>'

    def test_camel_case_keys_become_css_names(self) -> None:
        svg = generate_svg(
            "M0,0 Z",
            styles={"zIndex": 9997},
            path_styles={"fillRule": "evenodd", "pointerEvents": "none"},
        )
        assert svg == (
            '<svg style="z-index: 9997">'
            '<path style="fill-rule: evenodd; pointer-events: none" d="M0,0 Z" /></svg>'
        )

    def test_quoted_values_are_escaped(self) -> None:
        svg = generate_svg("M0,0 Z", path_styles={"font-family": '"Open Sans"'})
        assert svg == (
            '<svg><path style="font-family: &quot;Open Sans&quot;" d="M0,0 Z" /></svg>'
        )
        ElementTree.fromstring(svg)


class TestCssPropertyName:
    def test_camel_case(self) -> None:
        assert css_property_name("fillRule") == "fill-rule"

    def test_already_kebab_case(self) -> None:
        assert css_property_name("font-family") == "font-family"

    def test_single_word(self) -> None:
        assert css_property_name("opacity") == "opacity"
