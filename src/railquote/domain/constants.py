"""Pricing, geometry and drawing constants for railing quotes.

This module provides the single authoritative table of:
- Material rates (rail, pickets, cable, slats, stanchions)
- Labor rates keyed by infill category and railing end
- Installation fees and the global materials/labor modifiers
- Physical dimensions and spacing limits used for placement
- Drawing constants for the schematic diagram

Every table is a frozen dataclass instantiated once at import time.
"""

from __future__ import annotations

from dataclasses import dataclass

from .value_objects import InfillType, PicketStyle, RailingEndType, RailStyle


@dataclass(frozen=True)
class RailRates:
    """Top rail price per linear foot, by style."""

    victorian: float = 3.45
    rectangle: float = 2.80


@dataclass(frozen=True)
class PicketRates:
    """Unit price per picket, by style and variant."""

    victorian_standard: float = 8.0
    victorian_twisted: float = 10.0
    victorian_ornamental: float = 14.0
    rectangle_straight: float = 3.0
    rectangle_round: float = 22.0
    rectangle_square: float = 22.0


@dataclass(frozen=True)
class RunRates:
    """Per-foot and per-section rates for cable or slat infill."""

    per_foot: float
    section_fee: float


@dataclass(frozen=True)
class StanchionRates:
    each: float = 55.0
    cable: float = 55.0 + 15.0


@dataclass(frozen=True)
class InfillLabor:
    """Labor rates for one infill category."""

    per_picket: float = 0.0
    per_stanchion: float = 0.0
    per_section: float = 0.0


@dataclass(frozen=True)
class RailingEndLabor:
    """Labor per railing end (charged at both ends of the run)."""

    straight: float = 0.0
    fold_down: float = 60.0
    fold_back: float = 90.0


@dataclass(frozen=True)
class LaborRates:
    pickets: InfillLabor = InfillLabor(per_picket=10.0, per_stanchion=150.0)
    cable: InfillLabor = InfillLabor(per_stanchion=20.0 + 150.0, per_section=500.0)
    slats: InfillLabor = InfillLabor(per_stanchion=250.0, per_section=20.0)
    railing_end: RailingEndLabor = RailingEndLabor()


@dataclass(frozen=True)
class InstallRates:
    base_fee: float = 400.0
    per_foot: float = 10.0


@dataclass(frozen=True)
class PricingTable:
    """Every rate used to price a quote."""

    rail: RailRates = RailRates()
    pickets: PicketRates = PicketRates()
    cable: RunRates = RunRates(per_foot=1.40, section_fee=50.20)
    slats: RunRates = RunRates(per_foot=12.0, section_fee=60.0)
    stanchion: StanchionRates = StanchionRates()
    labor: LaborRates = LaborRates()
    install: InstallRates = InstallRates()
    materials_modifier: float = 1.5
    labor_modifier: float = 1.0


@dataclass(frozen=True)
class PicketWidths:
    """Physical picket widths in inches (edge to edge)."""

    rectangle_straight: float = 0.5
    rectangle_round: float = 4.0
    rectangle_square: float = 4.0
    victorian_standard: float = 0.5
    victorian_twisted: float = 0.5
    victorian_ornamental: float = 0.5


@dataclass(frozen=True)
class GeometryTable:
    """Physical dimensions and spacing limits."""

    max_stanchion_spacing_feet: float = 6.0
    max_stanchion_spacing_cable_feet: float = 4.0
    stanchion_width_inches: float = 1.5
    picket_widths: PicketWidths = PicketWidths()
    # Pickets are counted and spaced at this width whatever their style.
    picket_spacing_width_inches: float = 0.5
    max_picket_clear_gap_inches: float = 4.0
    railing_end_length_inches: float = 6.0
    railing_fold_down_height_inches: float = 6.0
    angled_section_degrees: float = 30.0
    max_stanchion_count: int = 1000


@dataclass(frozen=True)
class VisualTable:
    """Drawing constants for the side-view diagram (pixel space)."""

    pixels_per_foot: float = 100.0
    picket_height_inches: float = 34.0
    stanchion_height_inches: float = 38.0
    initial_rail_y: float = 100.0
    margin: float = 60.0
    content_scale: float = 0.8
    default_width: float = 400.0
    default_height: float = 200.0
    infill_row_spacing_inches: float = 4.0
    slat_base_height: float = 8.0
    slat_height_scale: float = 0.4
    victorian_accent_offset: float = 4.0
    twisted_picket_stagger: float = 4.0
    ground_line_inset: float = 10.0

    @property
    def slat_height(self) -> float:
        return self.slat_base_height * self.slat_height_scale * 1.5

    def inches_to_px(self, inches: float) -> float:
        return inches / 12 * self.pixels_per_foot


PRICING = PricingTable()
GEOMETRY = GeometryTable()
VISUAL = VisualTable()


def rail_rate(style: RailStyle) -> float:
    """Get the top rail price per foot for a rail style."""
    if style == RailStyle.VICTORIAN:
        return PRICING.rail.victorian
    return PRICING.rail.rectangle


def picket_rate(
    style: RailStyle,
    infill: InfillType,
    picket_style: PicketStyle | None = None,
) -> float:
    """Get the unit price of one picket.

    Victorian rails price by infill variant; rectangle rails price by
    picket style. Non-picket infills cost nothing per picket.
    """
    if not infill.uses_pickets:
        return 0.0
    if style == RailStyle.VICTORIAN:
        if infill == InfillType.TWISTED_PICKETS:
            return PRICING.pickets.victorian_twisted
        if infill == InfillType.ORNAMENTAL_PICKETS:
            return PRICING.pickets.victorian_ornamental
        return PRICING.pickets.victorian_standard
    if picket_style == PicketStyle.ROUND:
        return PRICING.pickets.rectangle_round
    if picket_style == PicketStyle.SQUARE:
        return PRICING.pickets.rectangle_square
    return PRICING.pickets.rectangle_straight


def picket_width_inches(
    style: RailStyle,
    infill: InfillType,
    picket_style: PicketStyle | None = None,
) -> float:
    """Get the physical width of one picket in inches."""
    widths = GEOMETRY.picket_widths
    if style == RailStyle.RECTANGLE and infill == InfillType.PICKETS:
        if picket_style == PicketStyle.SQUARE:
            return widths.rectangle_square
        if picket_style == PicketStyle.ROUND:
            return widths.rectangle_round
        return widths.rectangle_straight
    if infill == InfillType.TWISTED_PICKETS:
        return widths.victorian_twisted
    if infill == InfillType.ORNAMENTAL_PICKETS:
        return widths.victorian_ornamental
    return widths.victorian_standard


def stanchion_rate(infill: InfillType) -> float:
    if infill == InfillType.CABLE:
        return PRICING.stanchion.cable
    return PRICING.stanchion.each


def max_stanchion_spacing(infill: InfillType) -> float:
    """Maximum stanchion spacing in feet; cable needs closer posts."""
    if infill == InfillType.CABLE:
        return GEOMETRY.max_stanchion_spacing_cable_feet
    return GEOMETRY.max_stanchion_spacing_feet


def railing_end_labor(railing_end: RailingEndType | None) -> float:
    """Labor for a single railing end (0 when there is no end treatment)."""
    rates = PRICING.labor.railing_end
    if railing_end == RailingEndType.STRAIGHT:
        return rates.straight
    if railing_end == RailingEndType.FOLD_DOWN:
        return rates.fold_down
    if railing_end == RailingEndType.FOLD_BACK:
        return rates.fold_back
    return 0.0


def picket_asset_path(
    style: RailStyle,
    infill: InfillType,
    picket_style: PicketStyle | None = None,
) -> str:
    """Get the image asset used to draw a picket of this kind."""
    if style == RailStyle.RECTANGLE and infill == InfillType.PICKETS:
        if picket_style == PicketStyle.ROUND:
            return "/picket-assets/round.svg"
        if picket_style == PicketStyle.SQUARE:
            return "/picket-assets/square.svg"
        return "/picket-assets/straight.svg"
    if infill == InfillType.TWISTED_PICKETS:
        return "/picket-assets/victorian-twisted.svg"
    if infill == InfillType.ORNAMENTAL_PICKETS:
        return "/picket-assets/victorian-ornamental.svg"
    return "/picket-assets/victorian-standard.svg"
