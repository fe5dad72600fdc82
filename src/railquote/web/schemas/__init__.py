"""Pydantic schemas for the REST API."""

from railquote.web.schemas.requests import (
    ConfigValidateRequest,
    CustomerSchema,
    QuoteFromConfigRequest,
    QuoteRequestSchema,
    SectionSchema,
)
from railquote.web.schemas.responses import (
    ErrorResponseSchema,
    ExportFormatsSchema,
    MaterialsSchema,
    OptionsSchema,
    PriceSchema,
    QuoteResponseSchema,
    StyleOptionsSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "CustomerSchema",
    "QuoteFromConfigRequest",
    "QuoteRequestSchema",
    "SectionSchema",
    # Responses
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "MaterialsSchema",
    "OptionsSchema",
    "PriceSchema",
    "QuoteResponseSchema",
    "StyleOptionsSchema",
    "ValidationResultSchema",
]
