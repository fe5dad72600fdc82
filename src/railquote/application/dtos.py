"""Data Transfer Objects for the application layer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from railquote.domain import (
    DiagramGeometry,
    InfillType,
    MaterialBreakdown,
    PicketStyle,
    PriceBreakdown,
    RailingEndType,
    RailStyle,
    SectionConfig,
    check_combination,
)

# Longest run accepted in a single quote (feet).
MAX_RUN_FEET = 1000.0


@dataclass
class CustomerContact:
    """Input DTO for the customer asking for a quote."""

    name: str = ""
    contact: str = ""
    zipcode: str = ""

    def validate(self) -> list[str]:
        """Validate contact details needed to send a quote."""
        errors: list[str] = []
        if not self.name.strip():
            errors.append("Customer name is required")
        if not self.contact.strip():
            errors.append("Customer contact (email or phone) is required")
        return errors


@dataclass
class QuoteRequest:
    """Input DTO for a railing quote.

    Attributes:
        style: Top rail style.
        infill: Infill between stanchions.
        sections: Sections of the run, in order.
        picket_style: Picket style for rectangle rails with pickets.
        railing_end: End treatment at both open ends of the run.
        customer: Contact details, needed only to send the quote.
    """

    style: RailStyle
    infill: InfillType
    sections: list[SectionConfig]
    picket_style: PicketStyle | None = None
    railing_end: RailingEndType = RailingEndType.NONE
    customer: CustomerContact | None = None

    def validate(self, require_contact: bool = False) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if not self.sections:
            errors.append("At least one section is required")

        seen: set[str] = set()
        for index, section in enumerate(self.sections):
            if not math.isfinite(section.length_feet):
                errors.append(f"Section {index + 1} length must be a finite number")
            elif section.length_feet < 0:
                errors.append(f"Section {index + 1} length cannot be negative")
            if section.id in seen:
                errors.append(f"Duplicate section id: {section.id!r}")
            seen.add(section.id)

        total = sum(
            s.length_feet for s in self.sections if math.isfinite(s.length_feet) and s.length_feet > 0
        )
        if total > MAX_RUN_FEET:
            errors.append(f"Total run exceeds maximum ({MAX_RUN_FEET:g} ft)")

        errors.extend(
            check_combination(self.style, self.infill, self.picket_style, self.railing_end)
        )

        if require_contact:
            if self.customer is None:
                errors.append("Customer contact details are required")
            else:
                errors.extend(self.customer.validate())
        return errors


@dataclass
class QuoteOutput:
    """Output DTO containing a generated quote.

    Attributes:
        request: The request the quote was generated for.
        materials: Material quantities, None when generation failed.
        price: Price breakdown, None when generation failed.
        diagram: Side-view diagram geometry, None when generation failed.
        errors: List of error messages if generation failed.
    """

    request: QuoteRequest
    materials: MaterialBreakdown | None = None
    price: PriceBreakdown | None = None
    diagram: DiagramGeometry | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the quote was generated successfully."""
        return len(self.errors) == 0
