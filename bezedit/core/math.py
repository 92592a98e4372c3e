import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from PySide6.QtGui import QColor

Point = tuple[float, float]


def dist2(a: Point, b: Point) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def lerp(a: Point, b: Point, t: float) -> Point:
    # (1-t)a + tb hits both endpoints exactly at t=0 and t=1
    u = 1.0 - t
    return u * a[0] + t * b[0], u * a[1] + t * b[1]


def cross(a: Point, b: Point) -> float:
    return a[0] * b[1] - a[1] * b[0]


def unit_or_none(v: Point) -> Point | None:
    """
    Normalise v. Returns None for the zero vector.
    Uses hypot so that axis-aligned vectors normalise to exact +-1/0 components.
    """
    length = math.hypot(v[0], v[1])
    if length == 0.0:
        return None
    return v[0] / length, v[1] / length


def rotate_into(p: Point, axis: Point) -> Point:
    # world -> frame whose x axis is the unit vector `axis`
    c, s = axis
    return p[0] * c + p[1] * s, -p[0] * s + p[1] * c


def rotate_out(p: Point, axis: Point) -> Point:
    # inverse of rotate_into
    c, s = axis
    return p[0] * c - p[1] * s, p[0] * s + p[1] * c


def clamp01(t: float) -> float:
    if t < 0.0:
        return 0.0
    if t > 1.0:
        return 1.0
    return t


def as_point(p: Iterable[float]) -> Point:
    x, y = p
    return float(x), float(y)


@dataclass(frozen=True)
class RGBa:
    """
    Plain color container using Qt's integer ranges (0..255 per channel),
    so it bridges to QColor without conversion.
    """
    r: int
    g: int
    b: int
    a: int = 255

    def lerp(self, other: "RGBa", t: float) -> "RGBa":
        t = clamp01(t)
        return RGBa(
            int(round(self.r + (other.r - self.r) * t)),
            int(round(self.g + (other.g - self.g) * t)),
            int(round(self.b + (other.b - self.b) * t)),
            int(round(self.a + (other.a - self.a) * t)),
        )

    def to_rgba(self, /) -> tuple[int, int, int, int]:
        return self.r, self.g, self.b, self.a

    def to_QColor(self) -> "QColor":
        from PySide6.QtGui import QColor
        return QColor(self.r, self.g, self.b, self.a)


ORANGE = RGBa(255, 161, 0)
BLUE = RGBa(0, 121, 241)
RED = RGBa(230, 41, 55)
PURPLE = RGBa(200, 122, 255)
GOLD = RGBa(255, 203, 0)
GREEN = RGBa(0, 228, 48)
YELLOW = RGBa(253, 249, 0)

POINT_COLORS: tuple[RGBa, ...] = (ORANGE, BLUE, RED, PURPLE)


def point_color(index: int) -> RGBa:
    return POINT_COLORS[index % len(POINT_COLORS)]
