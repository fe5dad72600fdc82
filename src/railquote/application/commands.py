"""Application commands (use cases) for railing quotes."""

from __future__ import annotations

import logging

from railquote.domain import (
    InvalidConfigurationError,
    QuoteEngine,
    compute_diagram_geometry,
)

from .dtos import QuoteOutput, QuoteRequest

logger = logging.getLogger(__name__)


class GenerateQuoteCommand:
    """Command to generate materials, price and diagram for a railing."""

    def __init__(self, quote_engine: QuoteEngine | None = None) -> None:
        self.quote_engine = quote_engine or QuoteEngine()

    def execute(
        self,
        request: QuoteRequest,
        include_diagram: bool = True,
        require_contact: bool = False,
    ) -> QuoteOutput:
        """Execute the quote generation command.

        Args:
            request: Railing configuration to quote.
            include_diagram: Whether to compute the diagram geometry.
            require_contact: Whether customer contact details are mandatory
                (set when the quote is about to be sent).

        Returns:
            QuoteOutput with materials, price and diagram, or with errors.
        """
        errors = request.validate(require_contact=require_contact)
        if errors:
            logger.debug(f"Quote request rejected: {errors}")
            return QuoteOutput(request=request, errors=errors)

        try:
            materials, price = self.quote_engine.quote(
                request.style,
                request.infill,
                request.sections,
                request.picket_style,
                request.railing_end,
            )
            diagram = None
            if include_diagram:
                diagram = compute_diagram_geometry(
                    request.style,
                    request.infill,
                    request.picket_style,
                    request.sections,
                    materials,
                    request.railing_end,
                )
        except InvalidConfigurationError as e:
            return QuoteOutput(request=request, errors=[str(e)])

        return QuoteOutput(
            request=request,
            materials=materials,
            price=price,
            diagram=diagram,
        )
