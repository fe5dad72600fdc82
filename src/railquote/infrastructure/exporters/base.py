"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from railquote.application.dtos import QuoteOutput


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters convert a QuoteOutput to a specific format.

    Attributes:
        format_name: Registered name of the export format (e.g., "svg").
        file_extension: File extension without leading dot (e.g., "svg").
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]
    media_type: ClassVar[str]

    @abstractmethod
    def export(self, output: QuoteOutput, path: Path) -> None:
        """Export a quote to a file.

        Args:
            output: The generated quote.
            path: Destination file path.
        """
        ...

    def export_string(self, output: QuoteOutput) -> str:
        """Export a quote as a string.

        Binary-only formats may leave this unimplemented.

        Args:
            output: The generated quote.

        Returns:
            The exported document as text.

        Raises:
            NotImplementedError: If the format does not support string export.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves using the @ExporterRegistry.register
    decorator when their module is imported.

    Example:
        @ExporterRegistry.register("svg")
        class SvgExporter:
            format_name = "svg"
            file_extension = "svg"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        """Decorator to register an exporter class under a format name.

        Args:
            format_name: Name the exporter is looked up by (e.g., "svg").

        Returns:
            Decorator that registers the class and returns it unchanged.
        """

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Args:
            format_name: Registered format name.

        Returns:
            The exporter class registered for the format.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        """List the registered format names.

        Returns:
            Format names in alphabetical order.
        """
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        """Check whether a format has a registered exporter.

        Args:
            format_name: Format name to check.

        Returns:
            True if an exporter is registered under the name.
        """
        return format_name in cls._exporters

    @classmethod
    def clear(cls) -> None:
        """Clear all registered exporters (used by tests)."""
        cls._exporters.clear()


class ExportManager:
    """Writes a quote to one or more formats in an output directory.

    Attributes:
        output_dir: Directory where exported files will be saved.
        exporter_options: Keyword arguments per format name, passed to the
            exporter constructor.
    """

    def __init__(
        self,
        output_dir: Path,
        exporter_options: dict[str, dict] | None = None,
    ) -> None:
        """Initialize the export manager.

        Args:
            output_dir: Directory for exported files, created on first export.
            exporter_options: Constructor keyword arguments keyed by format name.
        """
        self.output_dir = Path(output_dir)
        self.exporter_options = exporter_options or {}

    def create_exporter(self, format_name: str) -> Exporter:
        """Instantiate the registered exporter for a format.

        Args:
            format_name: Registered format name.

        Returns:
            Exporter built with the options configured for the format.

        Raises:
            KeyError: If the format is not registered.
        """
        exporter_class = ExporterRegistry.get(format_name)
        return exporter_class(**self.exporter_options.get(format_name, {}))

    def export_all(
        self,
        formats: list[str],
        output: QuoteOutput,
        project_name: str = "railing",
    ) -> dict[str, Path]:
        """Export a quote to multiple formats.

        Files are named ``{project_name}.{ext}``.

        Args:
            formats: Format names to export (e.g., ["json", "svg"]).
            output: The generated quote.
            project_name: Base name for output files.

        Returns:
            Dictionary mapping format names to output file paths.

        Raises:
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name in formats:
            exporter = self.create_exporter(format_name)
            filepath = self.output_dir / f"{project_name}.{exporter.file_extension}"
            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(output, filepath)
            results[format_name] = filepath

        return results

    def export_single(
        self,
        format_name: str,
        output: QuoteOutput,
        project_name: str = "railing",
    ) -> Path:
        """Export a quote to a single format.

        Args:
            format_name: Format name to export.
            output: The generated quote.
            project_name: Base name for the output file.

        Returns:
            Path to the exported file.

        Raises:
            KeyError: If the format is not registered.
            OSError: If file operations fail.
        """
        return self.export_all([format_name], output, project_name)[format_name]
