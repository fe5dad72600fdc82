"""Rail style option endpoints."""

from dataclasses import asdict

from fastapi import APIRouter

from railquote.domain.constants import GEOMETRY, PRICING, rail_rate
from railquote.domain.validity import (
    allowed_infills,
    allowed_picket_styles,
    allowed_railing_ends,
)
from railquote.domain.value_objects import InfillType, RailStyle
from railquote.web.schemas.responses import OptionsSchema, StyleOptionsSchema

router = APIRouter(prefix="/options", tags=["options"])


@router.get("", response_model=OptionsSchema)
async def list_options() -> OptionsSchema:
    """List the options of each rail style and the rates quotes are priced with."""
    return OptionsSchema(
        styles=[
            StyleOptionsSchema(
                style=style.value,
                top_rail_rate=rail_rate(style),
                infills=[i.value for i in allowed_infills(style)],
                picket_styles=[
                    p.value for p in allowed_picket_styles(style, InfillType.PICKETS)
                ],
                railing_ends=[e.value for e in allowed_railing_ends(style)],
            )
            for style in RailStyle
        ],
        max_stanchion_spacing_feet=GEOMETRY.max_stanchion_spacing_feet,
        max_stanchion_spacing_cable_feet=GEOMETRY.max_stanchion_spacing_cable_feet,
        pricing=asdict(PRICING),
    )
