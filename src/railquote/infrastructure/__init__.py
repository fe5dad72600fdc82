"""Infrastructure layer - rendering, formatting and export."""

from railquote.infrastructure.diagram_renderer import DiagramRenderer
from railquote.infrastructure.exporters import (
    DxfExporter,
    ExporterRegistry,
    ExportManager,
    QuoteJsonExporter,
    SvgExporter,
    TextExporter,
)
from railquote.infrastructure.formatters import (
    JsonExporter,
    MaterialReportFormatter,
    PriceReportFormatter,
    QuoteSummaryFormatter,
)

__all__ = [
    "DiagramRenderer",
    "DxfExporter",
    "ExportManager",
    "ExporterRegistry",
    "JsonExporter",
    "MaterialReportFormatter",
    "PriceReportFormatter",
    "QuoteJsonExporter",
    "QuoteSummaryFormatter",
    "SvgExporter",
    "TextExporter",
]
