"""Output formatters and exporters for railing quotes."""

from __future__ import annotations

import base64
import json
from typing import Any

from railquote.application.dtos import QuoteOutput
from railquote.domain import MaterialBreakdown, PriceBreakdown
from railquote.domain.value_objects import InfillType, RailingEndType, RailStyle

STYLE_LABELS: dict[RailStyle, str] = {
    RailStyle.VICTORIAN: "Victorian top rail",
    RailStyle.RECTANGLE: "Rectangle top rail",
}

INFILL_LABELS: dict[InfillType, str] = {
    InfillType.NONE: "No pickets / infill",
    InfillType.PICKETS: "Vertical pickets",
    InfillType.TWISTED_PICKETS: "Twisted pickets",
    InfillType.ORNAMENTAL_PICKETS: "Extra ornamental pickets",
    InfillType.CABLE: "Cable rail",
    InfillType.SLATS: "Horizontal slats",
}

RAILING_END_LABELS: dict[RailingEndType, str] = {
    RailingEndType.NONE: "None",
    RailingEndType.STRAIGHT: "Straight",
    RailingEndType.FOLD_DOWN: "Fold Down",
    RailingEndType.FOLD_BACK: "Fold Back",
}


class MaterialReportFormatter:
    """Formats material quantity reports."""

    def format(self, materials: MaterialBreakdown) -> str:
        """Format material quantities as a report.

        Infill lines with a zero quantity are left out.
        """
        lines = [
            "MATERIALS",
            "=" * 40,
            f"{'Top rail':<20} {materials.top_rail_feet:>10.1f} ft",
            f"{'Stanchions':<20} {materials.stanchion_count:>10}",
        ]
        if materials.picket_count > 0:
            lines.append(f"{'Pickets':<20} {materials.picket_count:>10}")
        if materials.cable_feet > 0:
            lines.append(f"{'Cable':<20} {materials.cable_feet:>10.1f} ft")
        if materials.slat_feet > 0:
            lines.append(f"{'Horizontal slats':<20} {materials.slat_feet:>10.1f} ft")
        return "\n".join(lines)


class PriceReportFormatter:
    """Formats price breakdowns."""

    def format(self, price: PriceBreakdown) -> str:
        """Format the price breakdown with its total."""
        lines = [
            "ESTIMATED PRICE",
            "=" * 40,
            f"{'Materials':<20} ${price.materials:>12,.2f}",
            f"{'Labor':<20} ${price.labor:>12,.2f}",
            f"{'Installation':<20} ${price.install:>12,.2f}",
            "-" * 40,
            f"{'TOTAL':<20} ${price.total:>12,.2f}",
        ]
        return "\n".join(lines)


class QuoteSummaryFormatter:
    """Formats the full quote summary shown to the customer."""

    def __init__(self) -> None:
        self._materials = MaterialReportFormatter()
        self._price = PriceReportFormatter()

    def format(self, output: QuoteOutput) -> str:
        """Format configuration, materials and price as one report."""
        if not output.is_valid:
            return "\n".join(["Quote could not be generated:"] + [f"  - {e}" for e in output.errors])

        request = output.request
        materials = output.materials
        assert materials is not None and output.price is not None

        lines = [
            "CONFIGURATION",
            "=" * 40,
            f"Style: {STYLE_LABELS[request.style]}",
        ]
        if request.infill.uses_pickets:
            lines.append(f"Pickets: {materials.picket_count} pickets")
        else:
            lines.append(f"Infill: {INFILL_LABELS[request.infill]}")
        lines.append(f"Total Rail Length: {materials.top_rail_feet:.1f} ft")
        if request.railing_end != RailingEndType.NONE:
            lines.append(f"Railing Ends: {RAILING_END_LABELS[request.railing_end]}")

        lines.append("")
        lines.append("Sections:")
        for index, section in enumerate(request.sections, start=1):
            lines.append(f"  {index}. {section.length_feet:g} ft ({section.type.value})")

        lines.append("")
        lines.append(self._materials.format(materials))
        lines.append("")
        lines.append(self._price.format(output.price))
        return "\n".join(lines)


class JsonExporter:
    """Exports quotes as the JSON payload sent with a quote email.

    Keys follow the quote widget's camelCase naming so the payload can be
    posted unchanged to the mail handler.
    """

    def to_dict(self, output: QuoteOutput, diagram_svg: str | None = None) -> dict[str, Any]:
        """Build the export payload.

        Args:
            output: Generated quote.
            diagram_svg: Rendered diagram to embed as base64, if any.

        Returns:
            Payload dictionary, or ``{"errors": [...]}`` for a failed quote.
        """
        if not output.is_valid:
            return {"errors": output.errors}

        request = output.request
        assert output.materials is not None and output.price is not None

        customer = request.customer
        data: dict[str, Any] = {
            "name": customer.name if customer else "",
            "contact": customer.contact if customer else "",
            "zipcode": customer.zipcode if customer else "",
            "style": request.style.value,
            "infill": request.infill.value,
            "picketStyle": request.picket_style.value if request.picket_style else None,
            "railingEnd": request.railing_end.value,
            "materials": output.materials.to_dict(),
            "price": output.price.to_dict(),
            "sections": [
                {"id": s.id, "lengthFeet": s.length_feet, "type": s.type.value}
                for s in request.sections
            ],
        }
        if output.diagram is not None:
            data["stanchionPositionsFeet"] = list(output.diagram.stanchion_positions_feet)
        if diagram_svg is not None:
            encoded = base64.b64encode(diagram_svg.encode("utf-8")).decode("ascii")
            data["diagramImage"] = f"data:image/svg+xml;base64,{encoded}"
        return data

    def export(self, output: QuoteOutput, diagram_svg: str | None = None) -> str:
        """Export quote output as JSON string.

        Args:
            output: Generated quote.
            diagram_svg: Rendered diagram to embed, if any.

        Returns:
            Indented JSON payload.
        """
        return json.dumps(self.to_dict(output, diagram_svg), indent=2)
