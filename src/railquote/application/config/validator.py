"""Validation structures and railing advisory checks.

This module provides validation result structures and domain-specific
validation logic for railing quote configurations: option combinations
the rail style does not offer, and advisories for sections and run
lengths that are likely mistakes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from railquote.application.config.schema import QuoteConfiguration
from railquote.application.dtos import MAX_RUN_FEET
from railquote.domain.constants import GEOMETRY, max_stanchion_spacing
from railquote.domain.validity import (
    allowed_infills,
    allowed_picket_styles,
    allowed_railing_ends,
)
from railquote.domain.value_objects import InfillType, PicketStyle

# Runs longer than this (feet) are unusual for a single quote
LONG_RUN_WARNING_FEET = 200.0

# Sections longer than this (feet) are unusual for a single straight segment
LONG_SECTION_WARNING_FEET = 60.0


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "railing.infill")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings.

    Attributes:
        errors: List of blocking validation errors
        warnings: List of non-blocking validation warnings
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        """Check if the configuration has any warnings."""
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> ValidationResult:
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> ValidationResult:
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "is_valid": self.is_valid,
            "errors": [
                {"path": e.path, "message": e.message, "value": e.value} for e in self.errors
            ],
            "warnings": [
                {"path": w.path, "message": w.message, "suggestion": w.suggestion}
                for w in self.warnings
            ],
        }


def check_option_combination(config: QuoteConfiguration) -> ValidationResult:
    """Check the railing options against what the rail style offers."""
    result = ValidationResult()
    railing = config.railing
    style = railing.style

    if railing.infill not in allowed_infills(style):
        valid = ", ".join(i.value for i in allowed_infills(style))
        result.add_error(
            path="railing.infill",
            message=f"Infill '{railing.infill.value}' is not available for {style.value} rails (choose from: {valid})",
            value=railing.infill.value,
        )

    if railing.railing_end not in allowed_railing_ends(style):
        valid = ", ".join(e.value for e in allowed_railing_ends(style))
        result.add_error(
            path="railing.railing_end",
            message=f"Railing end '{railing.railing_end.value}' is not available for {style.value} rails (choose from: {valid})",
            value=railing.railing_end.value,
        )

    picket_style = railing.picket_style
    if picket_style is not None:
        selectable = allowed_picket_styles(style, railing.infill)
        if picket_style != PicketStyle.STRAIGHT and picket_style not in selectable:
            result.add_error(
                path="railing.picket_style",
                message=f"Picket style '{picket_style.value}' only applies to rectangle rails with picket infill",
                value=picket_style.value,
            )
        elif not selectable:
            result.add_warning(
                path="railing.picket_style",
                message=f"Picket style is ignored for {style.value} rails with {railing.infill.value} infill",
                suggestion="Remove picket_style from the configuration",
            )

    return result


def check_section_advisories(config: QuoteConfiguration) -> ValidationResult:
    """Check sections and total run length for likely mistakes."""
    result = ValidationResult()

    total = 0.0
    for index, section in enumerate(config.sections):
        path = f"sections[{index}].length_feet"
        if section.length_feet == 0:
            result.add_warning(
                path=path,
                message="Section has zero length and will be ignored",
                suggestion="Remove the section or set its length",
            )
        elif section.length_feet > LONG_SECTION_WARNING_FEET:
            result.add_warning(
                path=path,
                message=f"Section is {section.length_feet:g} ft long; straight sections over {LONG_SECTION_WARNING_FEET:g} ft are unusual",
            )
        total += section.length_feet

    if total == 0:
        result.add_warning(
            path="sections",
            message="Every section has zero length; the quote covers installation only",
        )
    elif total > MAX_RUN_FEET:
        result.add_error(
            path="sections",
            message=f"Total run ({total:g} ft) exceeds maximum ({MAX_RUN_FEET:g} ft)",
            value=total,
        )
    elif total > LONG_RUN_WARNING_FEET:
        result.add_warning(
            path="sections",
            message=f"Total run is {total:g} ft; runs over {LONG_RUN_WARNING_FEET:g} ft usually need a site visit",
            suggestion="Split the run into several quotes",
        )

    spacing = max_stanchion_spacing(config.railing.infill)
    for index, section in enumerate(config.sections):
        if math.ceil(section.length_feet / spacing) + 1 > GEOMETRY.max_stanchion_count:
            result.add_error(
                path=f"sections[{index}].length_feet",
                message=f"Section needs more than {GEOMETRY.max_stanchion_count} stanchions",
                value=section.length_feet,
            )

    return result


def validate_config(config: QuoteConfiguration) -> ValidationResult:
    """Perform full validation of a railing quote configuration.

    Structural validation is already handled by Pydantic; this adds the
    option combination rules and the section advisories.

    Args:
        config: A QuoteConfiguration instance (already validated by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()
    result.merge(check_option_combination(config))
    result.merge(check_section_advisories(config))

    if config.railing.infill == InfillType.NONE:
        result.add_warning(
            path="railing.infill",
            message="No infill selected; most codes require infill on raised decks",
        )
    return result
