"""JSON exporter producing the quote email payload."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from railquote.infrastructure.diagram_renderer import DiagramRenderer
from railquote.infrastructure.exporters.base import ExporterRegistry
from railquote.infrastructure.formatters import JsonExporter

if TYPE_CHECKING:
    from railquote.application.dtos import QuoteOutput


@ExporterRegistry.register("json")
class QuoteJsonExporter:
    """Exports a quote as the JSON payload handed to the mail handler.

    Attributes:
        embed_diagram: Whether to include the SVG diagram as a base64
            data URL under ``diagramImage``.
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"
    media_type: ClassVar[str] = "application/json"

    def __init__(self, embed_diagram: bool = False) -> None:
        """Initialize the JSON exporter.

        Args:
            embed_diagram: Embed the rendered diagram in the payload.
        """
        self.embed_diagram = embed_diagram
        self._json = JsonExporter()
        self._renderer = DiagramRenderer()

    def export(self, output: QuoteOutput, path: Path) -> None:
        """Write the quote payload to a JSON file.

        Args:
            output: The generated quote.
            path: Path where the JSON file will be saved.
        """
        path.write_text(self.export_string(output), encoding="utf-8")

    def export_string(self, output: QuoteOutput) -> str:
        """Export the quote payload as a JSON string.

        Args:
            output: The generated quote.

        Returns:
            Indented JSON, with ``diagramImage`` when embedding is on and
            the quote has a diagram.
        """
        diagram_svg = None
        if self.embed_diagram and output.diagram is not None:
            diagram_svg = self._renderer.render_svg(output.diagram, output.request.style)
        return self._json.export(output, diagram_svg)
