"""Exporter framework for railing quotes.

This package provides a unified exporter framework with:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- dxf: DXF elevation drawing of the railing in inches
- json: Quote payload with materials, price and sections
- svg: Side-view diagram
- text: Plain text quote summary

Usage:
    from railquote.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()

    svg_exporter = ExporterRegistry.get("svg")()
    svg = svg_exporter.export_string(quote_output)

    manager = ExportManager(output_dir=Path("./output"))
    results = manager.export_all(["json", "svg"], quote_output, project_name="deck")
"""

from railquote.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)

# Import exporters to trigger registration
from railquote.infrastructure.exporters.dxf import DxfExporter
from railquote.infrastructure.exporters.quote_json import QuoteJsonExporter
from railquote.infrastructure.exporters.svg import SvgExporter
from railquote.infrastructure.exporters.text import TextExporter

__all__ = [
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "QuoteJsonExporter",
    "SvgExporter",
    "TextExporter",
]
