import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

from .math import Point, RGBa, as_point, point_color

logger = logging.getLogger(__name__)

SEGMENT_SIZE = 4
SEGMENT_STRIDE = 3


@dataclass()
class ControlPointSet:
    """
      - points: ordered control points; order defines segment membership and curve direction
      - colors: one colour per point, taken from the cycle when the point is added and kept
        with it through later deletions
      - next_color: position in the colour cycle for the next appended point
      - segments are chained: segment k uses points 3k..3k+3, neighbours share an anchor
    """
    points: list[Point] = field(default_factory=list)
    colors: list[RGBa] = field(default_factory=list)
    next_color: int = 0

    def __post_init__(self):
        if len(self.colors) > len(self.points):
            raise ValueError(f"{len(self.colors)} colors given for {len(self.points)} points")
        while len(self.colors) < len(self.points):
            self.colors.append(self._take_color())

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def _take_color(self) -> RGBa:
        color = point_color(self.next_color)
        self.next_color += 1
        return color

    def copy(self) -> "ControlPointSet":
        return ControlPointSet(list(self.points), list(self.colors), self.next_color)

    def clear(self):
        self.points = []
        self.colors = []
        self.next_color = 0

    # read-only view
    def as_points(self) -> Sequence[Point]:
        return tuple(self.points)

    def valid_index(self, index: int) -> bool:
        return 0 <= index < len(self.points)

    def color(self, index: int) -> RGBa:
        return self.colors[index]

    def append(self, p: Point, color: Optional[RGBa] = None) -> int:
        self.points.append(as_point(p))
        self.colors.append(self._take_color() if color is None else color)
        logger.debug("Point %d added at %s", len(self.points) - 1, self.points[-1])
        return len(self.points) - 1

    def remove(self, index: int) -> bool:
        if not self.valid_index(index):
            return False
        removed = self.points.pop(index)
        self.colors.pop(index)
        logger.debug("Point %d removed from %s", index, removed)
        return True

    def move(self, index: int, p: Point) -> bool:
        if not self.valid_index(index):
            return False
        self.points[index] = as_point(p)
        return True

    def segment_count(self) -> int:
        n = len(self.points)
        if n < SEGMENT_SIZE:
            return 0
        return (n - SEGMENT_SIZE) // SEGMENT_STRIDE + 1

    def segment(self, k: int) -> "Segment":
        if not 0 <= k < self.segment_count():
            raise IndexError(k)
        return Segment(self, k * SEGMENT_STRIDE)

    def segments(self) -> Iterator["Segment"]:
        for k in range(self.segment_count()):
            yield Segment(self, k * SEGMENT_STRIDE)

    def segments_containing(self, index: int) -> list["Segment"]:
        return [seg for seg in self.segments() if seg.contains(index)]


class Segment:
    """
    View over 4 consecutive points of a ControlPointSet (p0 anchor, p1/p2 handles, p3 anchor).
    Reads go through to the owning set, so a segment always reflects the latest edits.
    """
    __slots__ = ("_owner", "start")

    def __init__(self, owner: ControlPointSet, start: int):
        self._owner = owner
        self.start = start

    def __len__(self) -> int:
        return SEGMENT_SIZE

    def __getitem__(self, i: int) -> Point:
        if not 0 <= i < SEGMENT_SIZE:
            raise IndexError(i)
        return self._owner.points[self.start + i]

    def __iter__(self) -> Iterator[Point]:
        for i in range(SEGMENT_SIZE):
            yield self[i]

    def __repr__(self):
        return f"Segment(start={self.start}, points={self.points()})"

    @property
    def p0(self) -> Point:
        return self[0]

    @property
    def p1(self) -> Point:
        return self[1]

    @property
    def p2(self) -> Point:
        return self[2]

    @property
    def p3(self) -> Point:
        return self[3]

    @property
    def indices(self) -> range:
        return range(self.start, self.start + SEGMENT_SIZE)

    def contains(self, index: int) -> bool:
        return index in self.indices

    def points(self) -> tuple[Point, Point, Point, Point]:
        pts = self._owner.points
        s = self.start
        return pts[s], pts[s + 1], pts[s + 2], pts[s + 3]

    def colors(self) -> tuple[RGBa, RGBa, RGBa, RGBa]:
        cs = self._owner.colors
        s = self.start
        return cs[s], cs[s + 1], cs[s + 2], cs[s + 3]
