"""Which infill, picket style and railing end options each rail style offers.

The quote computations accept any combination and stay total over
meaningless ones. This table is what callers use to reject combinations
before they reach the computations.
"""

from __future__ import annotations

from dataclasses import dataclass

from .value_objects import InfillType, PicketStyle, RailingEndType, RailStyle


@dataclass(frozen=True)
class StyleOptions:
    """Options offered for one rail style.

    Attributes:
        infills: Infill types valid for the style.
        railing_ends: Railing end treatments valid for the style.
        picket_styles: Picket styles selectable when infill is plain pickets.
            Empty when the style does not offer a picket style choice.
    """

    infills: frozenset[InfillType]
    railing_ends: frozenset[RailingEndType]
    picket_styles: frozenset[PicketStyle]


STYLE_OPTIONS: dict[RailStyle, StyleOptions] = {
    RailStyle.VICTORIAN: StyleOptions(
        infills=frozenset(
            {
                InfillType.NONE,
                InfillType.PICKETS,
                InfillType.TWISTED_PICKETS,
                InfillType.ORNAMENTAL_PICKETS,
            }
        ),
        railing_ends=frozenset(
            {RailingEndType.NONE, RailingEndType.STRAIGHT, RailingEndType.FOLD_DOWN}
        ),
        picket_styles=frozenset(),
    ),
    RailStyle.RECTANGLE: StyleOptions(
        infills=frozenset(
            {
                InfillType.NONE,
                InfillType.PICKETS,
                InfillType.CABLE,
                InfillType.SLATS,
            }
        ),
        railing_ends=frozenset(RailingEndType),
        picket_styles=frozenset(PicketStyle),
    ),
}


def allowed_infills(style: RailStyle) -> list[InfillType]:
    """Infill types offered for a rail style, in declaration order."""
    options = STYLE_OPTIONS[style]
    return [infill for infill in InfillType if infill in options.infills]


def allowed_railing_ends(style: RailStyle) -> list[RailingEndType]:
    """Railing end treatments offered for a rail style, in declaration order."""
    options = STYLE_OPTIONS[style]
    return [end for end in RailingEndType if end in options.railing_ends]


def allowed_picket_styles(style: RailStyle, infill: InfillType) -> list[PicketStyle]:
    """Picket styles selectable for a style/infill pair."""
    if infill != InfillType.PICKETS:
        return []
    options = STYLE_OPTIONS[style]
    return [ps for ps in PicketStyle if ps in options.picket_styles]


def check_combination(
    style: RailStyle,
    infill: InfillType,
    picket_style: PicketStyle | None = None,
    railing_end: RailingEndType | None = None,
) -> list[str]:
    """Check a style/infill/picket style/railing end combination.

    Returns:
        List of problems, empty when the combination is offered.
    """
    problems: list[str] = []
    options = STYLE_OPTIONS[style]

    if infill not in options.infills:
        valid = ", ".join(i.value for i in allowed_infills(style))
        problems.append(
            f"Infill '{infill.value}' is not available for {style.value} rails "
            f"(choose from: {valid})"
        )

    if picket_style is not None and picket_style != PicketStyle.STRAIGHT:
        if picket_style not in allowed_picket_styles(style, infill):
            problems.append(
                f"Picket style '{picket_style.value}' only applies to rectangle rails "
                "with picket infill"
            )

    if railing_end is not None and railing_end not in options.railing_ends:
        valid = ", ".join(e.value for e in allowed_railing_ends(style))
        problems.append(
            f"Railing end '{railing_end.value}' is not available for {style.value} rails "
            f"(choose from: {valid})"
        )

    return problems
