"""
Bounding volumes of cubic Bezier segments.

Both boxes bound the *curve*, not its control polygon: the control handles can
lie far outside the curve they shape. Extrema are found analytically from the
roots of each coordinate's derivative (see ``axis_extrema``), so the boxes are
exact up to floating point.
"""
import math
from dataclasses import dataclass
from typing import Iterable

from .evaluators import SegmentLike, as_segment, axis_extrema, bernstein_axis
from .math import Point, rotate_into, rotate_out, unit_or_none
from .points import ControlPointSet

WORLD_X_AXIS: Point = (1.0, 0.0)


@dataclass(frozen=True)
class BoundingBox:
    min: Point
    max: Point

    def __post_init__(self):
        if self.min[0] > self.max[0] or self.min[1] > self.max[1]:
            raise ValueError(f"Inverted bounding box {self.min} > {self.max}")

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "BoundingBox":
        pts = list(points)
        if not pts:
            raise ValueError("Cannot bound an empty point set")
        xs = [p[0] for p in pts]
        ys = [p[1] for p in pts]
        return cls((min(xs), min(ys)), (max(xs), max(ys)))

    @property
    def width(self) -> float:
        return self.max[0] - self.min[0]

    @property
    def height(self) -> float:
        return self.max[1] - self.min[1]

    @property
    def area(self) -> float:
        return self.width * self.height

    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Counter-clockwise (in a y-up frame) starting at min."""
        (x0, y0), (x1, y1) = self.min, self.max
        return (x0, y0), (x1, y0), (x1, y1), (x0, y1)

    def contains(self, p: Point, tol: float = 0.0) -> bool:
        return (self.min[0] - tol <= p[0] <= self.max[0] + tol
                and self.min[1] - tol <= p[1] <= self.max[1] + tol)


@dataclass(frozen=True)
class OrientedBox:
    """
      - corners: world-space rectangle, in the order of ``local.corners()``
      - axis: unit local x direction (the chord p0 -> p3, or world x when p0 == p3)
      - local: axis-aligned box of the curve in the rotated frame
    """
    corners: tuple[Point, Point, Point, Point]
    axis: Point
    local: BoundingBox

    @property
    def angle(self) -> float:
        return math.atan2(self.axis[1], self.axis[0])

    @property
    def area(self) -> float:
        return self.local.area

    def to_local(self, p: Point) -> Point:
        return rotate_into(p, self.axis)

    def to_world(self, p: Point) -> Point:
        return rotate_out(p, self.axis)

    def bounds(self) -> BoundingBox:
        return BoundingBox.from_points(self.corners)


def control_box(points: Iterable[Point]) -> BoundingBox:
    """Box of the control polygon; always contains the curve box."""
    return BoundingBox.from_points(points)


def _axis_range(c0: float, c1: float, c2: float, c3: float) -> tuple[float, float]:
    values = [c0, c3]
    for t in axis_extrema(c0, c1, c2, c3):
        values.append(bernstein_axis(c0, c1, c2, c3, t))
    return min(values), max(values)


def regular_box(segment: SegmentLike) -> BoundingBox:
    """
    Minimal axis-aligned box containing the curve for t in [0, 1].
    """
    p0, p1, p2, p3 = as_segment(segment)
    min_x, max_x = _axis_range(p0[0], p1[0], p2[0], p3[0])
    min_y, max_y = _axis_range(p0[1], p1[1], p2[1], p3[1])
    return BoundingBox((min_x, min_y), (max_x, max_y))


def chord_axis(segment: SegmentLike) -> Point:
    p0, _, _, p3 = as_segment(segment)
    axis = unit_or_none((p3[0] - p0[0], p3[1] - p0[1]))
    return WORLD_X_AXIS if axis is None else axis


def tight_box(segment: SegmentLike) -> OrientedBox:
    """
    Box aligned with the chord p0 -> p3.

    Control points are rotated (about the origin, no translation) into the
    chord frame, the curve box is computed there and its corners rotated back.
    Horizontal and vertical chords give exact +-1/0 rotations, so in that case
    the result coincides with ``regular_box``.
    """
    pts = as_segment(segment)
    axis = chord_axis(pts)
    local_pts = [rotate_into(p, axis) for p in pts]
    local = regular_box(local_pts)
    corners = tuple(rotate_out(c, axis) for c in local.corners())
    return OrientedBox(corners=corners, axis=axis, local=local)


@dataclass(frozen=True)
class SegmentBoxes:
    index: int
    regular: BoundingBox
    tight: OrientedBox
    control: BoundingBox


def segment_boxes(points: ControlPointSet) -> list[SegmentBoxes]:
    """
    Boxes for each complete segment; sets with fewer than 4 points produce none.
    """
    out: list[SegmentBoxes] = []
    for k, seg in enumerate(points.segments()):
        pts = seg.points()
        out.append(SegmentBoxes(k, regular_box(pts), tight_box(pts), control_box(pts)))
    return out

