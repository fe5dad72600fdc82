"""Stanchion placement along a railing run.

Stanchions sit at both ends of every section and are added evenly in
between until no gap exceeds the maximum spacing. Sections share their
boundary stanchion with the previous section.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from ..constants import GEOMETRY
from ..exceptions import InvalidConfigurationError, StanchionLimitError
from ..value_objects import SectionConfig

__all__ = [
    "compute_stanchion_positions",
    "compute_stanchion_positions_for_sections",
    "ensure_finite_sections",
    "rail_length_feet",
]

logger = logging.getLogger(__name__)


def rail_length_feet(section: SectionConfig) -> float:
    """True rail length a section contributes (0 for empty sections)."""
    return section.length_feet if section.length_feet > 0 else 0.0


def ensure_finite_sections(sections: Sequence[SectionConfig]) -> None:
    """Reject sections whose length is NaN or infinite.

    Raises:
        InvalidConfigurationError: If any section length is not finite.
    """
    for index, section in enumerate(sections):
        if not math.isfinite(section.length_feet):
            raise InvalidConfigurationError(
                f"Section {section.id!r} (index {index}) has a non-finite length: "
                f"{section.length_feet}",
                field=f"sections[{index}].length_feet",
            )


def _ensure_valid_spacing(max_spacing_feet: float) -> None:
    if not math.isfinite(max_spacing_feet) or max_spacing_feet <= 0:
        raise InvalidConfigurationError(
            f"Maximum stanchion spacing must be a positive number, got {max_spacing_feet}",
            field="max_spacing_feet",
        )


def compute_stanchion_positions(
    length_feet: float, max_spacing_feet: float
) -> list[float]:
    """Place stanchions along a single straight rail.

    Always places a stanchion at 0 and at ``length_feet`` and uses the
    smallest count that keeps every gap within ``max_spacing_feet``.

    Args:
        length_feet: True rail length in feet.
        max_spacing_feet: Largest allowed distance between stanchions.

    Returns:
        Positions in feet from the start of the rail; empty for a
        non-positive length.

    Raises:
        InvalidConfigurationError: If the length or spacing is not usable.
        StanchionLimitError: If more than the configured maximum number
            of stanchions would be needed.
    """
    if not math.isfinite(length_feet):
        raise InvalidConfigurationError(
            f"Rail length must be finite, got {length_feet}", field="length_feet"
        )
    _ensure_valid_spacing(max_spacing_feet)
    if length_feet <= 0:
        return []

    limit = GEOMETRY.max_stanchion_count
    count = 2
    while length_feet / (count - 1) > max_spacing_feet:
        count += 1
        if count > limit:
            raise StanchionLimitError(length_feet, max_spacing_feet, limit)

    return [length_feet * i / (count - 1) for i in range(count)]


def compute_stanchion_positions_for_sections(
    sections: Sequence[SectionConfig], max_spacing_feet: float
) -> list[float]:
    """Place stanchions across consecutive sections.

    Each section is placed independently and translated by the length of
    the sections before it. The first stanchion of every section after the
    first is dropped since it coincides with the previous section's last.

    Returns:
        Strictly increasing positions in feet from the start of the run.
    """
    ensure_finite_sections(sections)
    _ensure_valid_spacing(max_spacing_feet)

    positions: list[float] = []
    offset = 0.0
    placed_sections = 0
    for section in sections:
        length = rail_length_feet(section)
        if length <= 0:
            continue

        local = compute_stanchion_positions(length, max_spacing_feet)
        if placed_sections > 0:
            local = local[1:]
        positions.extend(offset + pos for pos in local)

        offset += length
        placed_sections += 1

    logger.debug(
        f"Placed {len(positions)} stanchions over {offset:.2f} ft "
        f"(max spacing {max_spacing_feet} ft)"
    )
    return positions
