"""Domain layer - core quoting logic."""

from .exceptions import InvalidConfigurationError, StanchionLimitError
from .services import (
    DiagramGeometry,
    QuoteEngine,
    compute_diagram_geometry,
    compute_materials,
    compute_price,
    compute_stanchion_positions,
    compute_stanchion_positions_for_sections,
)
from .validity import check_combination
from .value_objects import (
    BoundingBox,
    InfillType,
    MaterialBreakdown,
    PicketStyle,
    Point2D,
    PriceBreakdown,
    RailingEndType,
    RailStyle,
    SectionConfig,
    SectionType,
)

__all__ = [
    "BoundingBox",
    "DiagramGeometry",
    "InfillType",
    "InvalidConfigurationError",
    "MaterialBreakdown",
    "PicketStyle",
    "Point2D",
    "PriceBreakdown",
    "QuoteEngine",
    "RailStyle",
    "RailingEndType",
    "SectionConfig",
    "SectionType",
    "StanchionLimitError",
    "check_combination",
    "compute_diagram_geometry",
    "compute_materials",
    "compute_price",
    "compute_stanchion_positions",
    "compute_stanchion_positions_for_sections",
]
