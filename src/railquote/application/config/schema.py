"""Pydantic configuration schema models for railing quote configurations.

This module defines the configuration schema for JSON-based railing quote
files. It uses Pydantic v2 for validation and serialization.

The rail style, infill, picket style, railing end and section type enums
are reused from the domain layer so the wire names stay identical.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from railquote.domain.value_objects import (
    InfillType,
    PicketStyle,
    RailingEndType,
    RailStyle,
    SectionType,
)

# Supported schema versions for configuration files
# Version 1.0: Initial schema with railing options, sections and customer
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"json", "svg", "dxf", "text"})


class RailingConfig(BaseModel):
    """Railing options shared by every section of the run.

    Attributes:
        style: Top rail style.
        infill: Infill between stanchions.
        picket_style: Picket profile (rectangle rails with pickets only).
        railing_end: End treatment at both open ends of the run.
    """

    model_config = ConfigDict(extra="forbid")

    style: RailStyle = RailStyle.VICTORIAN
    infill: InfillType = InfillType.PICKETS
    picket_style: PicketStyle | None = None
    railing_end: RailingEndType = RailingEndType.NONE


class SectionConfigSchema(BaseModel):
    """Configuration for one section of the run.

    Attributes:
        id: Section identifier; defaults to the 1-based position.
        length_feet: True (sloped) rail length in feet.
        type: Flat or angled.
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = None
    length_feet: float = Field(..., ge=0, allow_inf_nan=False, description="Rail length in feet")
    type: SectionType = SectionType.FLAT


class CustomerConfig(BaseModel):
    """Customer contact details sent along with a quote."""

    model_config = ConfigDict(extra="forbid")

    name: str = ""
    contact: str = ""
    zipcode: str = ""


class DiagramOutputConfigSchema(BaseModel):
    """Diagram rendering options.

    Attributes:
        show_ground_line: Whether to draw the dashed ground line.
        embed_in_json: Whether JSON exports carry the SVG as base64.
    """

    model_config = ConfigDict(extra="forbid")

    show_ground_line: bool = True
    embed_in_json: bool = False


class OutputConfig(BaseModel):
    """Configuration for output formats and file paths.

    Attributes:
        formats: List of output formats to generate.
        output_dir: Directory for output files.
        project_name: Base name for output files.
        diagram: Diagram rendering options.
    """

    model_config = ConfigDict(extra="forbid")

    formats: list[str] = Field(default_factory=list, description="List of output formats to generate")
    output_dir: str | None = Field(default=None, description="Directory for output files")
    project_name: str = Field(default="railing", description="Base name for output files")
    diagram: DiagramOutputConfigSchema = Field(default_factory=DiagramOutputConfigSchema)

    @field_validator("formats")
    @classmethod
    def validate_formats(cls, v: list[str]) -> list[str]:
        """Validate format names in the formats list."""
        invalid = set(v) - VALID_OUTPUT_FORMATS - {"all"}
        if invalid:
            raise ValueError(
                f"Invalid formats: {sorted(invalid)}. Valid formats: {sorted(VALID_OUTPUT_FORMATS)}"
            )
        return v


class QuoteConfiguration(BaseModel):
    """Root configuration model for a railing quote.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        railing: Rail style, infill, picket style and railing end
        sections: Sections of the run, in order
        customer: Optional customer contact details
        output: Output format configuration

    Example:
        >>> config = QuoteConfiguration(
        ...     schema_version="1.0",
        ...     sections=[SectionConfigSchema(length_feet=10.0)],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    railing: RailingConfig = Field(default_factory=RailingConfig)
    sections: list[SectionConfigSchema] = Field(..., min_length=1)
    customer: CustomerConfig | None = None
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted
        for forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @model_validator(mode="after")
    def validate_unique_section_ids(self) -> QuoteConfiguration:
        """Reject explicit section ids that appear more than once."""
        ids = [s.id for s in self.sections if s.id is not None]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate section ids: {duplicates}")
        return self
