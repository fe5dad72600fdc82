"""Plain text exporter for quote summaries."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from railquote.infrastructure.exporters.base import ExporterRegistry
from railquote.infrastructure.formatters import QuoteSummaryFormatter

if TYPE_CHECKING:
    from railquote.application.dtos import QuoteOutput


@ExporterRegistry.register("text")
class TextExporter:
    """Exports the quote summary as plain text."""

    format_name: ClassVar[str] = "text"
    file_extension: ClassVar[str] = "txt"
    media_type: ClassVar[str] = "text/plain"

    def __init__(self) -> None:
        self.formatter = QuoteSummaryFormatter()

    def export(self, output: QuoteOutput, path: Path) -> None:
        """Write the quote summary to a text file."""
        path.write_text(self.export_string(output) + "\n", encoding="utf-8")

    def export_string(self, output: QuoteOutput) -> str:
        """Format the quote summary."""
        return self.formatter.format(output)
