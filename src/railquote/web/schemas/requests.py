"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from railquote.domain.value_objects import (
    InfillType,
    PicketStyle,
    RailingEndType,
    RailStyle,
    SectionType,
)


class SectionSchema(BaseModel):
    """One section of the railing run."""

    id: str | None = Field(
        default=None, description="Section identifier (defaults to its position)"
    )
    length_feet: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Rail length in feet"
    )
    type: SectionType = Field(default=SectionType.FLAT, description="Flat or angled")


class CustomerSchema(BaseModel):
    """Customer contact details sent with the quote."""

    name: str = Field(default="", description="Customer name")
    contact: str = Field(default="", description="Email address or phone number")
    zipcode: str = Field(default="", description="Installation zip code")


class QuoteRequestSchema(BaseModel):
    """Request for quoting a railing."""

    style: RailStyle = Field(default=RailStyle.VICTORIAN, description="Top rail style")
    infill: InfillType = Field(default=InfillType.PICKETS, description="Infill type")
    picket_style: PicketStyle | None = Field(
        default=None, description="Picket style (rectangle rails with pickets)"
    )
    railing_end: RailingEndType = Field(
        default=RailingEndType.NONE, description="End treatment at both ends"
    )
    sections: list[SectionSchema] = Field(
        ..., min_length=1, description="Sections of the run, in order"
    )
    customer: CustomerSchema | None = Field(
        default=None, description="Customer contact details"
    )
    include_diagram: bool = Field(
        default=True, description="Whether to return the SVG diagram"
    )


class QuoteFromConfigRequest(BaseModel):
    """Request for quoting a railing from a full configuration."""

    config: dict[str, Any] = Field(..., description="Full quote configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Quote configuration JSON")
