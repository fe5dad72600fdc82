"""Domain services for railing quotes.

This package provides:
- Stanchion placement along a run of sections
- Picket fitting and infill quantities
- Material and price roll-up
- Side-view diagram geometry
"""

from .diagram_geometry import (
    DiagramGeometry,
    DiagramPrimitive,
    LinePrimitive,
    PicketPrimitive,
    PolylinePrimitive,
    PrimitiveKind,
    RailSegment,
    SlatPrimitive,
    ViewportFit,
    compute_diagram_geometry,
    fit_to_viewport,
    layout_rail_segments,
    map_feet_to_xy,
    measure_content_bounds,
)
from .infill import (
    PicketFit,
    PicketSpan,
    compute_picket_layout,
    count_pickets,
    fit_pickets,
    horizontal_projection_feet,
    horizontal_span_feet,
)
from .quote_engine import QuoteEngine, compute_materials, compute_price, round_to_cents
from .stanchions import (
    compute_stanchion_positions,
    compute_stanchion_positions_for_sections,
    rail_length_feet,
)

__all__ = [
    "DiagramGeometry",
    "DiagramPrimitive",
    "LinePrimitive",
    "PicketFit",
    "PicketPrimitive",
    "PicketSpan",
    "PolylinePrimitive",
    "PrimitiveKind",
    "QuoteEngine",
    "RailSegment",
    "SlatPrimitive",
    "ViewportFit",
    "compute_diagram_geometry",
    "compute_materials",
    "compute_picket_layout",
    "compute_price",
    "compute_stanchion_positions",
    "compute_stanchion_positions_for_sections",
    "count_pickets",
    "fit_pickets",
    "fit_to_viewport",
    "horizontal_projection_feet",
    "horizontal_span_feet",
    "layout_rail_segments",
    "map_feet_to_xy",
    "measure_content_bounds",
    "rail_length_feet",
    "round_to_cents",
]
