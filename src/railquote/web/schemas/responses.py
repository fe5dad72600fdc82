"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class MaterialsSchema(BaseModel):
    """Material quantities of a quote."""

    top_rail_feet: float = Field(..., description="Top rail length in feet")
    stanchion_count: int = Field(..., description="Number of stanchions")
    picket_count: int = Field(..., description="Number of pickets")
    cable_feet: float = Field(..., description="Cable length in feet")
    slat_feet: float = Field(..., description="Horizontal slat length in feet")


class PriceSchema(BaseModel):
    """Price breakdown in dollars."""

    materials: float = Field(..., description="Materials subtotal")
    labor: float = Field(..., description="Labor subtotal")
    install: float = Field(..., description="Installation subtotal")
    total: float = Field(..., description="Sum of the subtotals")


class QuoteResponseSchema(BaseModel):
    """Response for a generated quote."""

    is_valid: bool = Field(..., description="Whether the quote was generated")
    errors: list[str] = Field(default_factory=list, description="Error messages")
    materials: MaterialsSchema | None = Field(default=None, description="Quantities")
    price: PriceSchema | None = Field(default=None, description="Price breakdown")
    stanchion_positions_feet: list[float] = Field(
        default_factory=list, description="Stanchion positions along the run"
    )
    diagram_svg: str | None = Field(default=None, description="Side-view diagram")


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ExportFormatsSchema(BaseModel):
    """Response listing available export formats."""

    formats: list[str] = Field(..., description="Available export format names")


class StyleOptionsSchema(BaseModel):
    """Options offered for one rail style."""

    style: str = Field(..., description="Rail style")
    top_rail_rate: float = Field(..., description="Top rail price per foot")
    infills: list[str] = Field(..., description="Valid infill types")
    picket_styles: list[str] = Field(..., description="Selectable picket styles")
    railing_ends: list[str] = Field(..., description="Valid railing ends")


class OptionsSchema(BaseModel):
    """Response describing the options of every rail style."""

    styles: list[StyleOptionsSchema] = Field(..., description="Per-style options")
    max_stanchion_spacing_feet: float = Field(
        ..., description="Maximum distance between stanchions"
    )
    max_stanchion_spacing_cable_feet: float = Field(
        ..., description="Maximum distance between stanchions for cable infill"
    )
    pricing: dict[str, Any] = Field(..., description="Rates used to price quotes")


class ErrorResponseSchema(BaseModel):
    """Error response body."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: Any = Field(default=None, description="Additional error details")
