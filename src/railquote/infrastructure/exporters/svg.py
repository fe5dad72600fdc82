"""SVG exporter for the railing diagram."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from railquote.infrastructure.diagram_renderer import DiagramRenderer
from railquote.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from railquote.application.dtos import QuoteOutput


@ExporterRegistry.register("svg")
class SvgExporter:
    """Exports the side-view diagram of a quote as SVG.

    Attributes:
        format_name: Identifier for this export format.
        file_extension: File extension for SVG files.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"
    media_type: ClassVar[str] = "image/svg+xml"

    def __init__(self, show_ground_line: bool = True) -> None:
        """Initialize the SVG exporter.

        Args:
            show_ground_line: Draw the dashed ground reference line.
        """
        self.renderer = DiagramRenderer(show_ground_line=show_ground_line)

    def export(self, output: QuoteOutput, path: Path) -> None:
        """Write the quote's diagram to an SVG file.

        Args:
            output: The generated quote.
            path: Path where the SVG file will be saved.

        Raises:
            ValueError: If the quote has no diagram.
        """
        path.write_text(self.export_string(output), encoding="utf-8")

    def export_string(self, output: QuoteOutput) -> str:
        """Render the quote's diagram.

        Args:
            output: The generated quote.

        Returns:
            SVG content as a string.

        Raises:
            ValueError: If the quote has no diagram.
        """
        if output.diagram is None:
            raise ValueError("Quote has no diagram to export")
        return self.renderer.render_svg(output.diagram, output.request.style)
