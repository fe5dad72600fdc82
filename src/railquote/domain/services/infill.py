"""Infill quantity derivation.

Pickets are fitted span by span between consecutive stanchions using the
horizontal projection of the span, so angled sections get pickets spaced
evenly as seen from the front. Each span uses the fewest pickets whose
even edge-to-edge gap (picket to picket and picket to stanchion) stays
within the maximum clear gap.

Cable and slats are quantified per true rail foot and need no per-span
counting.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from ..constants import GEOMETRY
from ..value_objects import SectionConfig
from .stanchions import rail_length_feet

__all__ = [
    "PicketFit",
    "PicketSpan",
    "angled_cosine",
    "compute_picket_layout",
    "count_pickets",
    "fit_pickets",
    "horizontal_projection_feet",
    "horizontal_span_feet",
]


def angled_cosine() -> float:
    """Horizontal projection factor of an angled section."""
    return math.cos(math.radians(GEOMETRY.angled_section_degrees))


def horizontal_projection_feet(section: SectionConfig) -> float:
    """Plan-view extent of a section in feet."""
    length = rail_length_feet(section)
    if section.is_angled:
        return length * angled_cosine()
    return length


def horizontal_span_feet(
    sections: Sequence[SectionConfig], start_feet: float, end_feet: float
) -> float:
    """Horizontal projection of the rail between two run positions.

    Args:
        sections: Sections of the run, in order.
        start_feet: Start position along the true rail length.
        end_feet: End position along the true rail length.

    Returns:
        Sum of the projected overlap with every section the span crosses.
    """
    if end_feet <= start_feet:
        return 0.0

    total = 0.0
    section_start = 0.0
    cosine = angled_cosine()
    for section in sections:
        length = rail_length_feet(section)
        if length <= 0:
            continue
        section_end = section_start + length
        if section_start >= end_feet:
            break
        overlap = min(end_feet, section_end) - max(start_feet, section_start)
        if overlap > 0:
            total += overlap * cosine if section.is_angled else overlap
        section_start = section_end
    return total


@dataclass(frozen=True)
class PicketFit:
    """Pickets fitted into one clear span.

    Attributes:
        count: Number of pickets (0 when no count satisfies the gap limit).
        gap_inches: Even edge-to-edge gap, 0 when count is 0.
    """

    count: int
    gap_inches: float


def fit_pickets(clear_span_inches: float, picket_width_inches: float) -> PicketFit:
    """Find the fewest pickets whose even gap stays within the clear gap limit.

    Layout across the clear span is ``gap picket gap picket ... picket gap``,
    so ``clear = N * width + (N + 1) * gap``.
    """
    if clear_span_inches <= 0 or picket_width_inches <= 0:
        return PicketFit(count=0, gap_inches=0.0)

    max_gap = GEOMETRY.max_picket_clear_gap_inches
    max_possible = math.floor(clear_span_inches / picket_width_inches)
    for count in range(1, max_possible + 1):
        gap = (clear_span_inches - count * picket_width_inches) / (count + 1)
        if 0 <= gap <= max_gap:
            return PicketFit(count=count, gap_inches=gap)
    return PicketFit(count=0, gap_inches=0.0)


@dataclass(frozen=True)
class PicketSpan:
    """Pickets placed between two consecutive stanchions.

    Attributes:
        start_feet: Run position of the left stanchion centre.
        end_feet: Run position of the right stanchion centre.
        horizontal_feet: Horizontal projection of the span.
        fit: Count and gap chosen for the span.
        positions_feet: Run positions (true rail feet) of each picket centre.
    """

    start_feet: float
    end_feet: float
    horizontal_feet: float
    fit: PicketFit
    positions_feet: tuple[float, ...]

    @property
    def count(self) -> int:
        return self.fit.count


def compute_picket_layout(
    sections: Sequence[SectionConfig],
    stanchion_positions: Sequence[float],
    picket_width_inches: float,
) -> list[PicketSpan]:
    """Fit pickets into every span between consecutive stanchions.

    Picket centres are offset from the left stanchion centre by
    ``stanchion_width / 2 + gap + picket_width / 2`` and then by
    ``picket_width + gap`` per picket, measured horizontally and mapped
    back onto the rail.
    """
    stanchion_width = GEOMETRY.stanchion_width_inches
    spans: list[PicketSpan] = []
    for start, end in zip(stanchion_positions, stanchion_positions[1:]):
        rail_span = end - start
        if rail_span <= 0:
            continue

        horizontal = horizontal_span_feet(sections, start, end)
        clear_span = horizontal * 12 - stanchion_width
        fit = fit_pickets(clear_span, picket_width_inches)

        positions: tuple[float, ...] = ()
        if fit.count > 0 and horizontal > 0:
            rail_per_horizontal = rail_span / horizontal
            first_offset = stanchion_width / 2 + fit.gap_inches + picket_width_inches / 2
            pitch = picket_width_inches + fit.gap_inches
            positions = tuple(
                start + (first_offset + j * pitch) / 12 * rail_per_horizontal
                for j in range(fit.count)
            )

        spans.append(
            PicketSpan(
                start_feet=start,
                end_feet=end,
                horizontal_feet=horizontal,
                fit=fit,
                positions_feet=positions,
            )
        )
    return spans


def count_pickets(
    sections: Sequence[SectionConfig],
    stanchion_positions: Sequence[float],
    picket_width_inches: float,
) -> int:
    """Total pickets across every stanchion span."""
    return sum(
        span.count
        for span in compute_picket_layout(sections, stanchion_positions, picket_width_inches)
    )
