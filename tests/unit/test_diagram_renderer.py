"""Unit tests for the SVG diagram renderer."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from railquote.domain.services.diagram_geometry import compute_diagram_geometry
from railquote.domain.services.quote_engine import compute_materials
from railquote.domain.value_objects import (
    InfillType,
    RailingEndType,
    RailStyle,
    SectionConfig,
)
from railquote.infrastructure.diagram_renderer import (
    MIN_STROKE_WIDTH_PX,
    SVG_ELEMENT_ID,
    DiagramRenderer,
)

SVG_NS = "{http://www.w3.org/2000/svg}"


def _render(style, infill, sections, railing_end=None, **renderer_options) -> ET.Element:
    materials = compute_materials(style, infill, sections)
    geometry = compute_diagram_geometry(
        style, infill, None, sections, materials, railing_end
    )
    svg = DiagramRenderer(**renderer_options).render_svg(geometry, style)
    return ET.fromstring(svg)


class TestRenderSvg:
    """Tests for DiagramRenderer.render_svg."""

    def test_root_element(self, flat_ten: list[SectionConfig]) -> None:
        root = _render(RailStyle.VICTORIAN, InfillType.PICKETS, flat_ten)
        assert root.tag == f"{SVG_NS}svg"
        assert root.get("id") == SVG_ELEMENT_ID
        assert root.get("viewBox", "").startswith("0 0 1250 ")

    def test_one_image_per_picket(self, flat_ten: list[SectionConfig]) -> None:
        root = _render(RailStyle.VICTORIAN, InfillType.PICKETS, flat_ten)
        images = root.findall(f".//{SVG_NS}image")
        assert len(images) == 26
        assert all(
            img.get("href", "").endswith("victorian-standard.svg") for img in images
        )

    def test_stanchion_lines(self, two_flat_eights: list[SectionConfig]) -> None:
        root = _render(RailStyle.RECTANGLE, InfillType.CABLE, two_flat_eights)
        stanchions = root.findall(f".//{SVG_NS}line[@class='stanchion']")
        assert len(stanchions) == 5
        cables = root.findall(f".//{SVG_NS}line[@class='cable']")
        assert cables

    def test_slats_drawn_as_rotated_rects(self, flat_ten: list[SectionConfig]) -> None:
        root = _render(RailStyle.RECTANGLE, InfillType.SLATS, flat_ten)
        slats = root.findall(f".//{SVG_NS}rect[@class='slat']")
        assert slats
        assert all(s.get("transform", "").startswith("rotate(") for s in slats)

    def test_railing_ends_group(self, flat_ten: list[SectionConfig]) -> None:
        root = _render(
            RailStyle.RECTANGLE,
            InfillType.PICKETS,
            flat_ten,
            railing_end=RailingEndType.FOLD_DOWN,
        )
        ends = root.findall(f".//{SVG_NS}polyline[@class='railing_end']")
        assert len(ends) == 2

    def test_ground_line_can_be_hidden(self, flat_ten: list[SectionConfig]) -> None:
        shown = _render(RailStyle.VICTORIAN, InfillType.NONE, flat_ten)
        hidden = _render(
            RailStyle.VICTORIAN, InfillType.NONE, flat_ten, show_ground_line=False
        )
        query = f".//{SVG_NS}line[@class='ground_line']"
        assert len(shown.findall(query)) == 1
        assert hidden.findall(query) == []


class TestStrokeWidths:
    """Tests for DiagramRenderer.stroke_widths."""

    @pytest.mark.parametrize("style", list(RailStyle))
    def test_never_below_minimum(self, style: RailStyle) -> None:
        widths = DiagramRenderer().stroke_widths(style)
        assert all(
            w >= MIN_STROKE_WIDTH_PX for name, w in widths.items() if name != "ground"
        )

    def test_victorian_rail_lighter_bottom_rail_heavier(self) -> None:
        renderer = DiagramRenderer()
        victorian = renderer.stroke_widths(RailStyle.VICTORIAN)
        rectangle = renderer.stroke_widths(RailStyle.RECTANGLE)
        assert victorian["top_rail"] < rectangle["top_rail"]
        assert victorian["bottom_rail"] > rectangle["bottom_rail"]
