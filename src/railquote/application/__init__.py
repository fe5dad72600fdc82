"""Application layer - use cases and orchestration."""

from .commands import GenerateQuoteCommand
from .dtos import CustomerContact, QuoteOutput, QuoteRequest
from .factory import ServiceFactory, get_factory

__all__ = [
    "CustomerContact",
    "GenerateQuoteCommand",
    "QuoteOutput",
    "QuoteRequest",
    "ServiceFactory",
    "get_factory",
]
