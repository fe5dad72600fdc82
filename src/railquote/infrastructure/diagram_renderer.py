"""SVG rendering of the railing side-view diagram.

Turns a ``DiagramGeometry`` into a standalone SVG document. All placement
is decided by the geometry; this module only chooses stroke widths,
colours and element types.
"""

from __future__ import annotations

from xml.sax.saxutils import quoteattr

from railquote.domain.constants import GEOMETRY, VISUAL
from railquote.domain.services.diagram_geometry import (
    DiagramGeometry,
    LinePrimitive,
    PicketPrimitive,
    PolylinePrimitive,
    SlatPrimitive,
)
from railquote.domain.value_objects import Point2D, RailStyle

SVG_ELEMENT_ID = "railing-diagram-svg"

# Lines never get thinner than this so they stay visible when scaled down
MIN_STROKE_WIDTH_PX = 1.5

# Victorian rails are drawn lighter with a heavier bottom rail
VICTORIAN_RAIL_FACTOR = 0.7
VICTORIAN_BOTTOM_RAIL_FACTOR = 1.3


def _fmt(value: float) -> str:
    """Format a coordinate with at most two decimals."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _points(points: tuple[Point2D, ...]) -> str:
    return " ".join(f"{_fmt(p.x)},{_fmt(p.y)}" for p in points)


class DiagramRenderer:
    """Renders railing diagrams in SVG format.

    Attributes:
        background: Fill colour of the diagram background.
        foreground: Stroke colour of rails, stanchions and infill.
        show_ground_line: Whether to draw the dashed ground line.
    """

    def __init__(
        self,
        background: str = "rgb(17,24,39)",
        foreground: str = "#e5e7eb",
        show_ground_line: bool = True,
    ) -> None:
        self.background = background
        self.foreground = foreground
        self.show_ground_line = show_ground_line

    def stroke_widths(self, style: RailStyle) -> dict[str, float]:
        """Stroke widths in pixels derived from physical member sizes."""
        top_rail = max(VISUAL.inches_to_px(1.5), 2.0)
        stanchion = max(VISUAL.inches_to_px(GEOMETRY.stanchion_width_inches), 2.0)
        bottom_rail = 2.0
        if style == RailStyle.VICTORIAN:
            top_rail *= VICTORIAN_RAIL_FACTOR
            stanchion *= VICTORIAN_RAIL_FACTOR
            bottom_rail *= VICTORIAN_BOTTOM_RAIL_FACTOR
        return {
            "top_rail": max(top_rail, MIN_STROKE_WIDTH_PX),
            "stanchion": max(stanchion, MIN_STROKE_WIDTH_PX),
            "bottom_rail": max(bottom_rail, MIN_STROKE_WIDTH_PX),
            "accent": max(2.0, MIN_STROKE_WIDTH_PX),
            "cable": MIN_STROKE_WIDTH_PX,
            "ground": 1.0,
        }

    def render_svg(self, geometry: DiagramGeometry, style: RailStyle) -> str:
        """Generate the SVG document for a diagram.

        Args:
            geometry: Computed diagram geometry.
            style: Rail style (selects stroke widths).

        Returns:
            SVG string with viewBox equal to the geometry viewport.
        """
        widths = self.stroke_widths(style)
        width = _fmt(geometry.width)
        height = _fmt(geometry.height)

        parts: list[str] = [
            f'<svg id="{SVG_ELEMENT_ID}" xmlns="http://www.w3.org/2000/svg" '
            f'xmlns:xlink="http://www.w3.org/1999/xlink" '
            f'width="{width}" height="{height}" viewBox="0 0 {width} {height}">',
            f'  <rect x="0" y="0" width="{width}" height="{height}" fill="{self.background}"/>',
        ]

        parts.append('  <g class="top-rail">')
        for line in geometry.top_rail:
            parts.append(self._line(line, widths["top_rail"], linecap="round"))
        for line in geometry.rail_accents:
            parts.append(self._line(line, widths["accent"], opacity=0.6))
        parts.append("  </g>")

        if geometry.railing_ends:
            parts.append('  <g class="railing-ends">')
            for end in geometry.railing_ends:
                parts.append(self._polyline(end, widths["top_rail"], linecap="round"))
            parts.append("  </g>")

        parts.append('  <g class="stanchions">')
        for line in geometry.stanchions:
            parts.append(self._line(line, widths["stanchion"]))
        parts.append("  </g>")

        if geometry.pickets:
            parts.append('  <g class="pickets">')
            for picket in geometry.pickets:
                parts.append(self._picket(picket))
            if geometry.bottom_rail is not None:
                parts.append(
                    self._polyline(geometry.bottom_rail, widths["bottom_rail"], opacity=0.6)
                )
            parts.append("  </g>")

        if geometry.cables:
            parts.append('  <g class="cables">')
            for line in geometry.cables:
                parts.append(self._line(line, widths["cable"], linecap="round"))
            parts.append("  </g>")

        if geometry.slats:
            parts.append('  <g class="slats">')
            for slat in geometry.slats:
                parts.append(self._slat(slat))
            parts.append("  </g>")

        if self.show_ground_line:
            parts.append(
                self._line(geometry.ground_line, widths["ground"], dasharray="4 4", opacity=0.5)
            )

        parts.append("</svg>")
        return "\n".join(parts)

    def _line(
        self,
        line: LinePrimitive,
        stroke_width: float,
        linecap: str | None = None,
        dasharray: str | None = None,
        opacity: float | None = None,
    ) -> str:
        attrs = [
            f'x1="{_fmt(line.start.x)}"',
            f'y1="{_fmt(line.start.y)}"',
            f'x2="{_fmt(line.end.x)}"',
            f'y2="{_fmt(line.end.y)}"',
            f'stroke="{self.foreground}"',
            f'stroke-width="{_fmt(stroke_width)}"',
        ]
        if linecap:
            attrs.append(f'stroke-linecap="{linecap}"')
        if dasharray:
            attrs.append(f'stroke-dasharray="{dasharray}"')
        if opacity is not None:
            attrs.append(f'opacity="{opacity}"')
        return f'    <line class="{line.kind.value}" {" ".join(attrs)}/>'

    def _polyline(
        self,
        polyline: PolylinePrimitive,
        stroke_width: float,
        linecap: str | None = None,
        opacity: float | None = None,
    ) -> str:
        attrs = [
            f'points="{_points(polyline.points)}"',
            'fill="none"',
            f'stroke="{self.foreground}"',
            f'stroke-width="{_fmt(stroke_width)}"',
        ]
        if linecap:
            attrs.append(f'stroke-linecap="{linecap}" stroke-linejoin="round"')
        if opacity is not None:
            attrs.append(f'opacity="{opacity}"')
        return f'    <polyline class="{polyline.kind.value}" {" ".join(attrs)}/>'

    def _picket(self, picket: PicketPrimitive) -> str:
        return (
            f'    <image class="picket" x="{_fmt(picket.x)}" y="{_fmt(picket.y)}" '
            f'width="{_fmt(picket.width)}" height="{_fmt(picket.height)}" '
            f'href={quoteattr(picket.asset)} preserveAspectRatio="none"/>'
        )

    def _slat(self, slat: SlatPrimitive) -> str:
        x = _fmt(slat.origin.x)
        y = _fmt(slat.origin.y)
        return (
            f'    <rect class="slat" x="{x}" y="{y}" width="{_fmt(slat.length)}" '
            f'height="{_fmt(slat.height)}" fill="{self.foreground}" '
            f'transform="rotate({_fmt(slat.angle_degrees)} {x} {y})"/>'
        )
