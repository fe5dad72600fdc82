"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from railquote.application.commands import GenerateQuoteCommand
    from railquote.domain.services import QuoteEngine
    from railquote.infrastructure.diagram_renderer import DiagramRenderer
    from railquote.infrastructure.formatters import QuoteSummaryFormatter


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Centralizes service instantiation so the CLI and the REST API share
    one set of services and tests can swap them out.
    """

    _quote_engine: QuoteEngine | None = field(default=None, init=False, repr=False)
    _diagram_renderer: DiagramRenderer | None = field(default=None, init=False, repr=False)
    _summary_formatter: QuoteSummaryFormatter | None = field(
        default=None, init=False, repr=False
    )

    def get_quote_engine(self) -> QuoteEngine:
        """Get or create quote engine instance."""
        if self._quote_engine is None:
            from railquote.domain.services import QuoteEngine

            self._quote_engine = QuoteEngine()
        return self._quote_engine

    def get_diagram_renderer(self) -> DiagramRenderer:
        """Get or create diagram renderer instance."""
        if self._diagram_renderer is None:
            from railquote.infrastructure.diagram_renderer import DiagramRenderer

            self._diagram_renderer = DiagramRenderer()
        return self._diagram_renderer

    def get_summary_formatter(self) -> QuoteSummaryFormatter:
        if self._summary_formatter is None:
            from railquote.infrastructure.formatters import QuoteSummaryFormatter

            self._summary_formatter = QuoteSummaryFormatter()
        return self._summary_formatter

    def create_generate_command(self) -> GenerateQuoteCommand:
        """Create GenerateQuoteCommand with its dependencies."""
        from railquote.application.commands import GenerateQuoteCommand

        return GenerateQuoteCommand(quote_engine=self.get_quote_engine())


# Default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
