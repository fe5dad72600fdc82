"""Material and price roll-up for a railing quote."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from ..constants import (
    GEOMETRY,
    PRICING,
    max_stanchion_spacing,
    picket_rate,
    rail_rate,
    railing_end_labor,
    stanchion_rate,
)
from ..exceptions import InvalidConfigurationError
from ..value_objects import (
    InfillType,
    MaterialBreakdown,
    PicketStyle,
    PriceBreakdown,
    RailingEndType,
    RailStyle,
    SectionConfig,
)
from .infill import count_pickets
from .stanchions import (
    compute_stanchion_positions_for_sections,
    ensure_finite_sections,
    rail_length_feet,
)

__all__ = [
    "QuoteEngine",
    "compute_materials",
    "compute_price",
    "round_to_cents",
]

logger = logging.getLogger(__name__)


def round_to_cents(value: float) -> float:
    """Round half away from zero to two decimal places."""
    return math.copysign(math.floor(abs(value) * 100 + 0.5) / 100, value)


def active_section_count(sections: Sequence[SectionConfig]) -> int:
    """Number of sections with a positive length."""
    return sum(1 for section in sections if section.length_feet > 0)


def compute_materials(
    style: RailStyle,
    infill: InfillType,
    sections: Sequence[SectionConfig],
) -> MaterialBreakdown:
    """Calculate material quantities for a railing run.

    Pickets are counted at the common spacing width, so the picket style
    only affects the unit price, never the quantities.

    Args:
        style: Rail style.
        infill: Infill type; cable tightens the stanchion spacing.
        sections: Sections of the run, in order.

    Returns:
        Material breakdown recomputed from scratch.

    Raises:
        InvalidConfigurationError: If any section length is not finite.
    """
    ensure_finite_sections(sections)

    stanchions = compute_stanchion_positions_for_sections(
        sections, max_stanchion_spacing(infill)
    )
    total_rail_feet = sum(rail_length_feet(section) for section in sections)

    pickets = 0
    if infill.uses_pickets and len(stanchions) >= 2:
        pickets = count_pickets(
            sections,
            stanchions,
            GEOMETRY.picket_spacing_width_inches,
        )

    return MaterialBreakdown(
        top_rail_feet=total_rail_feet,
        stanchion_count=len(stanchions),
        picket_count=pickets,
        cable_feet=total_rail_feet if infill == InfillType.CABLE else 0.0,
        slat_feet=total_rail_feet if infill == InfillType.SLATS else 0.0,
    )


def _ensure_finite_materials(materials: MaterialBreakdown) -> None:
    for name, value in materials.to_dict().items():
        if not math.isfinite(value) or value < 0:
            raise InvalidConfigurationError(
                f"Material quantity '{name}' must be a finite non-negative number, got {value}",
                field=f"materials.{name}",
            )


def compute_price(
    style: RailStyle,
    infill: InfillType,
    materials: MaterialBreakdown,
    sections: Sequence[SectionConfig],
    picket_style: PicketStyle | None = None,
    railing_end: RailingEndType | None = None,
) -> PriceBreakdown:
    """Convert material quantities into a price breakdown.

    Raw materials and labor are summed first, then scaled by the global
    modifiers. Rounding to cents happens once, on the final values; the
    total is the sum of the three rounded components.

    Raises:
        InvalidConfigurationError: If a quantity or section length is not
            a finite non-negative number.
    """
    ensure_finite_sections(sections)
    _ensure_finite_materials(materials)

    section_count = active_section_count(sections)

    materials_raw = (
        materials.top_rail_feet * rail_rate(style)
        + materials.stanchion_count * stanchion_rate(infill)
        + materials.picket_count * picket_rate(style, infill, picket_style)
        + materials.cable_feet * PRICING.cable.per_foot
        + materials.slat_feet * PRICING.slats.per_foot
    )
    if infill == InfillType.CABLE:
        materials_raw += section_count * PRICING.cable.section_fee
    elif infill == InfillType.SLATS:
        materials_raw += section_count * PRICING.slats.section_fee

    labor_rates = PRICING.labor
    labor_raw = 0.0
    if infill.uses_pickets:
        labor_raw = (
            materials.picket_count * labor_rates.pickets.per_picket
            + materials.stanchion_count * labor_rates.pickets.per_stanchion
        )
    elif infill == InfillType.CABLE:
        labor_raw = (
            materials.stanchion_count * labor_rates.cable.per_stanchion
            + section_count * labor_rates.cable.per_section
        )
    elif infill == InfillType.SLATS:
        labor_raw = (
            materials.stanchion_count * labor_rates.slats.per_stanchion
            + section_count * labor_rates.slats.per_section
        )

    # Both open ends of the run, not per section.
    labor_raw += 2 * railing_end_labor(railing_end)

    materials_cost = round_to_cents(materials_raw * PRICING.materials_modifier)
    labor_cost = round_to_cents(labor_raw * PRICING.labor_modifier)
    install_cost = round_to_cents(
        PRICING.install.base_fee + materials.top_rail_feet * PRICING.install.per_foot
    )

    return PriceBreakdown(
        materials=materials_cost,
        labor=labor_cost,
        install=install_cost,
        total=round_to_cents(materials_cost + labor_cost + install_cost),
    )


class QuoteEngine:
    """Computes materials and price for a railing configuration."""

    def quote(
        self,
        style: RailStyle,
        infill: InfillType,
        sections: Sequence[SectionConfig],
        picket_style: PicketStyle | None = None,
        railing_end: RailingEndType | None = None,
    ) -> tuple[MaterialBreakdown, PriceBreakdown]:
        """Compute the material breakdown and the price for it."""
        materials = compute_materials(style, infill, sections)
        price = compute_price(
            style, infill, materials, sections, picket_style, railing_end
        )
        logger.debug(
            f"Quoted {style.value}/{infill.value}: {materials.stanchion_count} stanchions, "
            f"{materials.picket_count} pickets, total ${price.total:.2f}"
        )
        return materials, price
