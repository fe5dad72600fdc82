"""DXF format exporter for railing elevations.

Generates a 2D elevation drawing (R2010 format) of the railing diagram in
inches with y pointing up, suitable for import into CAD tools.
"""

from __future__ import annotations

import logging
import math
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, cast

import ezdxf
from ezdxf import units as dxf_units

from railquote.domain.constants import VISUAL
from railquote.domain.services.diagram_geometry import DiagramGeometry, PrimitiveKind
from railquote.domain.value_objects import Point2D
from railquote.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from railquote.application.dtos import QuoteOutput


logger = logging.getLogger(__name__)


# Layer configuration for DXF output
LAYERS = {
    "RAIL": {"color": 7, "linetype": "CONTINUOUS"},  # White - top and bottom rails
    "STANCHIONS": {"color": 3, "linetype": "CONTINUOUS"},  # Green
    "INFILL": {"color": 5, "linetype": "CONTINUOUS"},  # Blue - pickets, cable, slats
    "ENDS": {"color": 1, "linetype": "CONTINUOUS"},  # Red - railing end treatments
    "GROUND": {"color": 8, "linetype": "DASHED"},  # Gray - ground reference
}

_LINE_LAYERS = {
    PrimitiveKind.TOP_RAIL: "RAIL",
    PrimitiveKind.RAIL_ACCENT: "RAIL",
    PrimitiveKind.STANCHION: "STANCHIONS",
    PrimitiveKind.CABLE: "INFILL",
    PrimitiveKind.GROUND_LINE: "GROUND",
}


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports the railing diagram as a DXF elevation drawing.

    Diagram pixels are converted back to inches and the y axis is flipped
    so the drawing sits upright in CAD coordinates.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"
    media_type: ClassVar[str] = "application/dxf"

    def __init__(self, units: str = "inches") -> None:
        """Initialize the DXF exporter.

        Args:
            units: Output units - "inches" or "mm".
        """
        if units not in ("inches", "mm"):
            raise ValueError(f"Invalid units: {units}. Must be 'inches' or 'mm'")
        self.units = units
        self.scale = 25.4 if units == "mm" else 1.0

    def export(self, output: QuoteOutput, path: Path) -> None:
        """Export the quote's diagram to a DXF file.

        Raises:
            ValueError: If the quote has no diagram.
        """
        doc = self._build(output)
        doc.saveas(path)
        logger.info(f"Exported DXF elevation to {path}")

    def export_string(self, output: QuoteOutput) -> str:
        """Export the quote's diagram as DXF text."""
        doc = self._build(output)
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def _build(self, output: QuoteOutput) -> Drawing:
        if output.diagram is None:
            raise ValueError("Quote has no diagram to export")
        doc = self._create_document()
        self._draw_diagram(doc.modelspace(), output.diagram)
        return doc

    def _create_document(self) -> Drawing:
        doc = ezdxf.new("R2010")
        doc.units = dxf_units.MM if self.units == "mm" else dxf_units.IN
        self._setup_layers(doc)
        return doc

    def _setup_layers(self, doc: Drawing) -> None:
        for name, props in LAYERS.items():
            layer = doc.layers.add(name, color=cast(int, props["color"]))
            if props["linetype"] == "DASHED":
                if "DASHED" not in doc.linetypes:
                    doc.linetypes.add(
                        "DASHED",
                        pattern=[0.5, 0.25, -0.25],
                        description="Dashed line",
                    )
                layer.dxf.linetype = "DASHED"

    def _to_cad(self, point: Point2D, height_px: float) -> tuple[float, float]:
        """Convert a diagram pixel position to output units, y up."""
        per_px = 12 / VISUAL.pixels_per_foot * self.scale
        return (point.x * per_px, (height_px - point.y) * per_px)

    def _draw_diagram(self, msp: Modelspace, geometry: DiagramGeometry) -> None:
        height = geometry.height

        lines = (
            list(geometry.top_rail)
            + list(geometry.rail_accents)
            + list(geometry.stanchions)
            + list(geometry.cables)
            + [geometry.ground_line]
        )
        for line in lines:
            msp.add_line(
                self._to_cad(line.start, height),
                self._to_cad(line.end, height),
                dxfattribs={"layer": _LINE_LAYERS[line.kind]},
            )

        if geometry.bottom_rail is not None:
            msp.add_lwpolyline(
                [self._to_cad(p, height) for p in geometry.bottom_rail.points],
                dxfattribs={"layer": "RAIL"},
            )

        for end in geometry.railing_ends:
            msp.add_lwpolyline(
                [self._to_cad(p, height) for p in end.points],
                dxfattribs={"layer": "ENDS"},
            )

        for picket in geometry.pickets:
            top_left = Point2D(picket.x, picket.y)
            corners = [
                top_left,
                top_left.offset(picket.width, 0.0),
                top_left.offset(picket.width, picket.height),
                top_left.offset(0.0, picket.height),
            ]
            msp.add_lwpolyline(
                [self._to_cad(p, height) for p in corners],
                close=True,
                dxfattribs={"layer": "INFILL"},
            )

        for slat in geometry.slats:
            angle = math.radians(slat.angle_degrees)
            along = (math.cos(angle), math.sin(angle))
            across = (-math.sin(angle), math.cos(angle))
            origin = slat.origin
            corners = [
                origin,
                origin.offset(along[0] * slat.length, along[1] * slat.length),
                origin.offset(
                    along[0] * slat.length + across[0] * slat.height,
                    along[1] * slat.length + across[1] * slat.height,
                ),
                origin.offset(across[0] * slat.height, across[1] * slat.height),
            ]
            msp.add_lwpolyline(
                [self._to_cad(p, height) for p in corners],
                close=True,
                dxfattribs={"layer": "INFILL"},
            )

        logger.debug(
            f"Drew DXF elevation: {len(geometry.stanchions)} stanchions, "
            f"{len(geometry.pickets)} pickets, {len(geometry.slats)} slats"
        )
