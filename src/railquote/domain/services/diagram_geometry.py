"""Side-view diagram geometry for a railing run.

The diagram is built in two passes over an intermediate list of rail
segments:

1. Measure: walk the sections left to right at a fixed pixels-per-foot
   scale, angled sections rising by ``tan(angle)`` per horizontal run,
   and take the bounding box of rail segments and stanchion bottoms.
2. Fit: size a viewport around that box (enlarged by the content scale so
   the drawing has margins) and translate every segment so the content
   is centred.

Drawable primitives (rails, stanchions, infill, railing ends) are then
derived from the fitted segments using the same stanchion and picket
positions the quote is priced from.

Coordinates are SVG-style pixels: x grows right, y grows down.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

from ..constants import (
    GEOMETRY,
    VISUAL,
    max_stanchion_spacing,
    picket_asset_path,
    picket_width_inches,
)
from ..value_objects import (
    BoundingBox,
    InfillType,
    MaterialBreakdown,
    PicketStyle,
    Point2D,
    RailingEndType,
    RailStyle,
    SectionConfig,
)
from .infill import compute_picket_layout, horizontal_projection_feet
from .stanchions import compute_stanchion_positions_for_sections, rail_length_feet

__all__ = [
    "DiagramGeometry",
    "DiagramPrimitive",
    "LinePrimitive",
    "PicketPrimitive",
    "PolylinePrimitive",
    "PrimitiveKind",
    "RailSegment",
    "SlatPrimitive",
    "ViewportFit",
    "compute_diagram_geometry",
    "fit_to_viewport",
    "layout_rail_segments",
    "map_feet_to_xy",
    "measure_content_bounds",
]

logger = logging.getLogger(__name__)

# Guards interpolation within zero-length segments.
_MIN_SEGMENT_FEET = 0.0001


class PrimitiveKind(str, Enum):
    """What a drawable primitive represents."""

    TOP_RAIL = "top_rail"
    RAIL_ACCENT = "rail_accent"
    STANCHION = "stanchion"
    PICKET = "picket"
    BOTTOM_RAIL = "bottom_rail"
    CABLE = "cable"
    SLAT = "slat"
    RAILING_END = "railing_end"
    GROUND_LINE = "ground_line"


@dataclass(frozen=True)
class RailSegment:
    """Top rail geometry of one section.

    Attributes:
        section_id: Id of the section drawn by this segment.
        start_feet: Run position (true rail feet) where the section starts.
        end_feet: Run position where the section ends.
        start: Pixel position of the section start.
        dx: Horizontal pixel displacement across the section.
        dy: Vertical pixel displacement (negative when rising).
    """

    section_id: str
    start_feet: float
    end_feet: float
    start: Point2D
    dx: float
    dy: float

    @property
    def end(self) -> Point2D:
        return self.start.offset(self.dx, self.dy)

    @property
    def angle(self) -> float:
        """Direction of the rail in radians (pixel space)."""
        return math.atan2(self.dy, self.dx)

    def contains(self, pos_feet: float, inclusive_end: bool = False) -> bool:
        if pos_feet < self.start_feet:
            return False
        if inclusive_end:
            return pos_feet <= self.end_feet
        return pos_feet < self.end_feet

    def point_at(self, pos_feet: float) -> Point2D:
        """Interpolate the pixel position of a run position on this segment."""
        length = max(self.end_feet - self.start_feet, _MIN_SEGMENT_FEET)
        t = (pos_feet - self.start_feet) / length
        return self.start.offset(self.dx * t, self.dy * t)

    def translated(self, shift_x: float, shift_y: float) -> RailSegment:
        return replace(self, start=self.start.offset(shift_x, shift_y))


@dataclass(frozen=True)
class LinePrimitive:
    kind: PrimitiveKind
    start: Point2D
    end: Point2D


@dataclass(frozen=True)
class PolylinePrimitive:
    kind: PrimitiveKind
    points: tuple[Point2D, ...]


@dataclass(frozen=True)
class PicketPrimitive:
    """Picket image placed with its top-left corner at (x, y)."""

    x: float
    y: float
    width: float
    height: float
    asset: str
    kind: PrimitiveKind = PrimitiveKind.PICKET


@dataclass(frozen=True)
class SlatPrimitive:
    """Slat bar starting at ``origin`` and rotated about it by ``angle_degrees``."""

    origin: Point2D
    length: float
    height: float
    angle_degrees: float
    kind: PrimitiveKind = PrimitiveKind.SLAT


DiagramPrimitive = Union[LinePrimitive, PolylinePrimitive, PicketPrimitive, SlatPrimitive]


@dataclass(frozen=True)
class ViewportFit:
    """Result of fitting measured content into the viewport.

    Attributes:
        width: Viewport width in pixels.
        height: Viewport height in pixels.
        shift_x: Translation applied to measured x coordinates.
        shift_y: Translation applied to measured y coordinates.
        content: Content box after translation.
        is_fallback: True when degenerate input forced the default bounds.
    """

    width: float
    height: float
    shift_x: float
    shift_y: float
    content: BoundingBox
    is_fallback: bool


@dataclass(frozen=True)
class DiagramGeometry:
    """Everything needed to draw the railing diagram."""

    width: float
    height: float
    content_bounds: BoundingBox
    is_fallback: bool
    segments: tuple[RailSegment, ...]
    stanchion_positions_feet: tuple[float, ...]
    top_rail: tuple[LinePrimitive, ...]
    rail_accents: tuple[LinePrimitive, ...]
    railing_ends: tuple[PolylinePrimitive, ...]
    stanchions: tuple[LinePrimitive, ...]
    pickets: tuple[PicketPrimitive, ...]
    bottom_rail: PolylinePrimitive | None
    cables: tuple[LinePrimitive, ...]
    slats: tuple[SlatPrimitive, ...]
    ground_line: LinePrimitive
    total_rail_feet: float

    @property
    def viewport(self) -> BoundingBox:
        return BoundingBox(0.0, 0.0, self.width, self.height)

    @property
    def primitives(self) -> list[DiagramPrimitive]:
        """All primitives in drawing order (back to front)."""
        items: list[DiagramPrimitive] = []
        items.extend(self.top_rail)
        items.extend(self.rail_accents)
        items.extend(self.railing_ends)
        items.extend(self.stanchions)
        items.extend(self.pickets)
        if self.bottom_rail is not None:
            items.append(self.bottom_rail)
        items.extend(self.cables)
        items.extend(self.slats)
        items.append(self.ground_line)
        return items


# --- Pass 1: measure ---------------------------------------------------------


def layout_rail_segments(
    sections: Sequence[SectionConfig],
    origin: Point2D | None = None,
) -> list[RailSegment]:
    """Walk the sections left to right and lay out the top rail.

    Args:
        sections: Sections of the run, in order.
        origin: Pixel position of the run start (default margin, rail y).

    Returns:
        One segment per section with positive length.
    """
    if origin is None:
        origin = Point2D(VISUAL.margin, VISUAL.initial_rail_y)
    rise = math.tan(math.radians(GEOMETRY.angled_section_degrees))

    segments: list[RailSegment] = []
    current = origin
    current_feet = 0.0
    for section in sections:
        length = rail_length_feet(section)
        if length <= 0:
            continue
        dx = horizontal_projection_feet(section) * VISUAL.pixels_per_foot
        dy = -dx * rise if section.is_angled else 0.0
        segment = RailSegment(
            section_id=section.id,
            start_feet=current_feet,
            end_feet=current_feet + length,
            start=current,
            dx=dx,
            dy=dy,
        )
        segments.append(segment)
        current = segment.end
        current_feet += length
    return segments


def _find_segment(segments: Sequence[RailSegment], pos_feet: float) -> RailSegment | None:
    last = len(segments) - 1
    for index, segment in enumerate(segments):
        if segment.contains(pos_feet, inclusive_end=index == last):
            return segment
    return None


def map_feet_to_xy(
    segments: Sequence[RailSegment],
    pos_feet: float,
    fallback_origin: Point2D | None = None,
) -> Point2D:
    """Map a run position (true rail feet) to a pixel position on the rail.

    Positions outside every segment fall back to a flat rail starting at
    ``fallback_origin``.
    """
    segment = _find_segment(segments, pos_feet)
    if segment is not None:
        return segment.point_at(pos_feet)
    if fallback_origin is None:
        fallback_origin = Point2D(VISUAL.margin, VISUAL.initial_rail_y)
    return fallback_origin.offset(pos_feet * VISUAL.pixels_per_foot, 0.0)


def _stanchion_drop() -> float:
    return VISUAL.inches_to_px(VISUAL.stanchion_height_inches)


def measure_content_bounds(
    segments: Sequence[RailSegment],
    stanchion_positions: Sequence[float],
) -> BoundingBox | None:
    """Bounding box of rail segments and stanchion bottoms.

    Railing end treatments are excluded and may overflow the box.

    Returns:
        The box, or None when there is nothing to measure.
    """
    xs: list[float] = []
    ys: list[float] = []
    for segment in segments:
        xs.extend((segment.start.x, segment.end.x))
        ys.extend((segment.start.y, segment.end.y))

    drop = _stanchion_drop()
    for pos in stanchion_positions:
        point = map_feet_to_xy(segments, pos)
        xs.append(point.x)
        ys.append(point.y + drop)

    if not xs or not ys:
        return None
    return BoundingBox(min(xs), min(ys), max(xs), max(ys))


# --- Pass 2: fit ---------------------------------------------------------------


def fit_to_viewport(bounds: BoundingBox | None) -> ViewportFit:
    """Size the viewport around measured content and centre it.

    The viewport is the content divided by the content scale (never
    smaller than the default size). An axis with no usable extent falls
    back to the default bounds.
    """
    x_ok = (
        bounds is not None
        and math.isfinite(bounds.min_x)
        and math.isfinite(bounds.max_x)
        and bounds.width > 0
    )
    y_ok = (
        bounds is not None
        and math.isfinite(bounds.min_y)
        and math.isfinite(bounds.max_y)
        and bounds.height > 0
    )

    if x_ok:
        min_x, max_x = bounds.min_x, bounds.max_x
        width = max(VISUAL.default_width, (max_x - min_x) / VISUAL.content_scale)
    else:
        min_x, max_x = 0.0, VISUAL.default_width
        width = VISUAL.default_width

    if y_ok:
        min_y, max_y = bounds.min_y, bounds.max_y
        height = max(VISUAL.default_height, (max_y - min_y) / VISUAL.content_scale)
    else:
        min_y, max_y = 0.0, VISUAL.default_height
        height = VISUAL.default_height

    content_width = max_x - min_x
    content_height = max_y - min_y
    offset_x = (width - content_width) / 2
    offset_y = (height - content_height) / 2

    return ViewportFit(
        width=width,
        height=height,
        shift_x=offset_x - min_x,
        shift_y=offset_y - min_y,
        content=BoundingBox(
            offset_x, offset_y, offset_x + content_width, offset_y + content_height
        ),
        is_fallback=not (x_ok and y_ok),
    )


# --- Primitives ----------------------------------------------------------------


def _railing_end_polyline(
    start: Point2D, angle: float, railing_end: RailingEndType
) -> PolylinePrimitive | None:
    length = VISUAL.inches_to_px(GEOMETRY.railing_end_length_inches)
    fold = VISUAL.inches_to_px(GEOMETRY.railing_fold_down_height_inches)

    extend = start.offset(math.cos(angle) * length, math.sin(angle) * length)
    if railing_end == RailingEndType.STRAIGHT:
        points: tuple[Point2D, ...] = (start, extend)
    elif railing_end == RailingEndType.FOLD_DOWN:
        points = (start, extend, extend.offset(0.0, fold))
    elif railing_end == RailingEndType.FOLD_BACK:
        down = extend.offset(0.0, fold)
        back = down.offset(-math.cos(angle) * length, -math.sin(angle) * length)
        points = (start, extend, down, back)
    else:
        return None
    return PolylinePrimitive(kind=PrimitiveKind.RAILING_END, points=points)


def _build_railing_ends(
    segments: Sequence[RailSegment],
    stanchions: Sequence[float],
    railing_end: RailingEndType,
    fallback_origin: Point2D,
) -> tuple[PolylinePrimitive, ...]:
    if railing_end == RailingEndType.NONE or len(stanchions) < 2:
        return ()

    first_pos, last_pos = stanchions[0], stanchions[-1]
    first_segment = _find_segment(segments, first_pos)
    last_segment = _find_segment(segments, last_pos)
    first_angle = first_segment.angle if first_segment else 0.0
    last_angle = last_segment.angle if last_segment else 0.0

    ends = (
        # The start end points backwards, away from the run.
        _railing_end_polyline(
            map_feet_to_xy(segments, first_pos, fallback_origin),
            first_angle + math.pi,
            railing_end,
        ),
        _railing_end_polyline(
            map_feet_to_xy(segments, last_pos, fallback_origin),
            last_angle,
            railing_end,
        ),
    )
    return tuple(end for end in ends if end is not None)


def _infill_row_offsets() -> list[float]:
    """Vertical offsets below the rail for cable and slat rows."""
    band = VISUAL.picket_height_inches
    rows = max(1, math.floor(band / VISUAL.infill_row_spacing_inches))
    step = VISUAL.inches_to_px(band) / (rows + 1)
    return [step * (row + 1) for row in range(rows)]


def compute_diagram_geometry(
    style: RailStyle,
    infill: InfillType,
    picket_style: PicketStyle | None,
    sections: Sequence[SectionConfig],
    materials: MaterialBreakdown,
    railing_end: RailingEndType | None = None,
) -> DiagramGeometry:
    """Compute the drawable side view of a railing configuration.

    Args:
        style: Rail style (victorian adds accent lines).
        infill: Infill type drawn between stanchions.
        picket_style: Picket style for rectangle pickets.
        sections: Sections of the run, in order.
        materials: Material breakdown the diagram accompanies.
        railing_end: End treatment drawn at the first and last stanchion.

    Returns:
        Viewport size and primitives in viewport coordinates.
    """
    railing_end = railing_end or RailingEndType.NONE
    stanchions = compute_stanchion_positions_for_sections(
        sections, max_stanchion_spacing(infill)
    )
    if len(stanchions) != materials.stanchion_count:
        logger.warning(
            f"Diagram places {len(stanchions)} stanchions but materials list "
            f"{materials.stanchion_count}"
        )

    # Pass 1: true geometry and its bounds.
    measured = layout_rail_segments(sections)
    fit = fit_to_viewport(measure_content_bounds(measured, stanchions))
    if fit.is_fallback:
        logger.warning("Diagram content is degenerate; using default bounds")

    # Pass 2: everything below is in viewport coordinates.
    segments = [segment.translated(fit.shift_x, fit.shift_y) for segment in measured]
    fallback_origin = Point2D(VISUAL.margin, VISUAL.initial_rail_y).offset(
        fit.shift_x, fit.shift_y
    )

    def to_xy(pos_feet: float) -> Point2D:
        return map_feet_to_xy(segments, pos_feet, fallback_origin)

    top_rail = tuple(
        LinePrimitive(PrimitiveKind.TOP_RAIL, segment.start, segment.end)
        for segment in segments
    )

    accents: list[LinePrimitive] = []
    if style == RailStyle.VICTORIAN:
        offset = VISUAL.victorian_accent_offset
        for segment in segments:
            for dy in (-offset, offset):
                accents.append(
                    LinePrimitive(
                        PrimitiveKind.RAIL_ACCENT,
                        segment.start.offset(0.0, dy),
                        segment.end.offset(0.0, dy),
                    )
                )

    drop = _stanchion_drop()
    stanchion_lines = []
    for pos in stanchions:
        top = to_xy(pos)
        stanchion_lines.append(
            LinePrimitive(PrimitiveKind.STANCHION, top, top.offset(0.0, drop))
        )

    picket_height = VISUAL.inches_to_px(VISUAL.picket_height_inches)
    pickets: list[PicketPrimitive] = []
    bottom_rail: PolylinePrimitive | None = None
    if infill.uses_pickets:
        width_in = picket_width_inches(style, infill, picket_style)
        width_px = VISUAL.inches_to_px(width_in)
        asset = picket_asset_path(style, infill, picket_style)
        # Same layout the quote counts; the style only changes the drawn width.
        layout = compute_picket_layout(
            sections, stanchions, GEOMETRY.picket_spacing_width_inches
        )
        positions = [pos for span in layout for pos in span.positions_feet]
        for index, pos in enumerate(positions):
            point = to_xy(pos)
            stagger = 0.0
            if infill == InfillType.TWISTED_PICKETS and index % 2 == 1:
                stagger = VISUAL.twisted_picket_stagger
            pickets.append(
                PicketPrimitive(
                    x=point.x - width_px / 2,
                    y=point.y + stagger,
                    width=width_px,
                    height=picket_height,
                    asset=asset,
                )
            )
        if segments:
            points = [segments[0].start.offset(0.0, picket_height)]
            points.extend(segment.end.offset(0.0, picket_height) for segment in segments)
            bottom_rail = PolylinePrimitive(PrimitiveKind.BOTTOM_RAIL, tuple(points))

    cables: list[LinePrimitive] = []
    slats: list[SlatPrimitive] = []
    if infill in (InfillType.CABLE, InfillType.SLATS):
        rows = _infill_row_offsets()
        for start_pos, end_pos in zip(stanchions, stanchions[1:]):
            start = to_xy(start_pos)
            end = to_xy(end_pos)
            for row in rows:
                if infill == InfillType.CABLE:
                    cables.append(
                        LinePrimitive(
                            PrimitiveKind.CABLE,
                            start.offset(0.0, row),
                            end.offset(0.0, row),
                        )
                    )
                else:
                    slats.append(
                        SlatPrimitive(
                            origin=start.offset(0.0, row),
                            length=math.hypot(end.x - start.x, end.y - start.y),
                            height=VISUAL.slat_height,
                            angle_degrees=math.degrees(
                                math.atan2(end.y - start.y, end.x - start.x)
                            ),
                        )
                    )

    inset = VISUAL.ground_line_inset
    ground_line = LinePrimitive(
        PrimitiveKind.GROUND_LINE,
        Point2D(VISUAL.margin - inset, fit.height - inset),
        Point2D(fit.width - VISUAL.margin + inset, fit.height - inset),
    )

    return DiagramGeometry(
        width=fit.width,
        height=fit.height,
        content_bounds=fit.content,
        is_fallback=fit.is_fallback,
        segments=tuple(segments),
        stanchion_positions_feet=tuple(stanchions),
        top_rail=top_rail,
        rail_accents=tuple(accents),
        railing_ends=_build_railing_ends(segments, stanchions, railing_end, fallback_origin),
        stanchions=tuple(stanchion_lines),
        pickets=tuple(pickets),
        bottom_rail=bottom_rail,
        cables=tuple(cables),
        slats=tuple(slats),
        ground_line=ground_line,
        total_rail_feet=materials.top_rail_feet,
    )
