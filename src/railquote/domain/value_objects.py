"""Value objects for the railing quote domain.

All types here are immutable. Enum values use the wire names of the quote
widget (``twistedPickets``, ``foldDown``...) so they serialize unchanged to
JSON.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RailStyle(str, Enum):
    """Decorative profile of the top rail."""

    VICTORIAN = "victorian"
    RECTANGLE = "rectangle"


class InfillType(str, Enum):
    """Material filling the space between stanchions below the top rail."""

    NONE = "none"
    PICKETS = "pickets"
    TWISTED_PICKETS = "twistedPickets"
    ORNAMENTAL_PICKETS = "ornamentalPickets"
    CABLE = "cable"
    SLATS = "slats"

    @property
    def uses_pickets(self) -> bool:
        """True for every discrete vertical picket infill."""
        return self in (
            InfillType.PICKETS,
            InfillType.TWISTED_PICKETS,
            InfillType.ORNAMENTAL_PICKETS,
        )


class PicketStyle(str, Enum):
    """Picket profile for rectangle rails with picket infill."""

    STRAIGHT = "straight"
    ROUND = "round"
    SQUARE = "square"


class RailingEndType(str, Enum):
    """Terminal shape of the rail at the two open ends of the run."""

    NONE = "none"
    STRAIGHT = "straight"
    FOLD_DOWN = "foldDown"
    FOLD_BACK = "foldBack"


class SectionType(str, Enum):
    """Orientation of a rail section.

    Attributes:
        FLAT: Horizontal run.
        ANGLED: Fixed-angle ascent relative to horizontal.
    """

    FLAT = "flat"
    ANGLED = "angled"


@dataclass(frozen=True)
class SectionConfig:
    """One straight segment of a railing run.

    ``length_feet`` is always the true (sloped) rail length, never the
    horizontal projection. Sections with a length of zero or less are
    ignored by every computation.
    """

    id: str
    length_feet: float
    type: SectionType = SectionType.FLAT

    @property
    def is_angled(self) -> bool:
        return self.type == SectionType.ANGLED


@dataclass(frozen=True)
class MaterialBreakdown:
    """Material quantities for a railing run."""

    top_rail_feet: float
    stanchion_count: int
    picket_count: int
    cable_feet: float
    slat_feet: float

    def to_dict(self) -> dict[str, float | int]:
        """Serialize with the camelCase keys used by the quote widget."""
        return {
            "topRailFeet": self.top_rail_feet,
            "stanchionCount": self.stanchion_count,
            "picketCount": self.picket_count,
            "cableFeet": self.cable_feet,
            "slatFeet": self.slat_feet,
        }


@dataclass(frozen=True)
class PriceBreakdown:
    """Price breakdown in dollars, each field rounded to cents."""

    materials: float
    labor: float
    install: float
    total: float

    def to_dict(self) -> dict[str, float]:
        return {
            "materials": self.materials,
            "labor": self.labor,
            "install": self.install,
            "total": self.total,
        }


@dataclass(frozen=True)
class Point2D:
    """Point in diagram pixel space (y grows downward)."""

    x: float
    y: float

    def offset(self, dx: float, dy: float) -> Point2D:
        return Point2D(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned rectangle in diagram pixel space."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y
