import math
from enum import Enum
from typing import Iterator, Sequence

from .math import Point, clamp01, cross, lerp, unit_or_none
from .registries import evaluator_registry, register_evaluator

SegmentLike = Sequence[Point]


class AlgorithmMode(Enum):
    DE_CASTELJAU = "De Casteljau"
    BERNSTEIN = "Bernstein"

    def toggled(self) -> "AlgorithmMode":
        if self is AlgorithmMode.DE_CASTELJAU:
            return AlgorithmMode.BERNSTEIN
        return AlgorithmMode.DE_CASTELJAU


def as_segment(segment: SegmentLike) -> tuple[Point, Point, Point, Point]:
    pts = tuple(segment)
    if len(pts) != 4:
        raise ValueError(f"A cubic segment needs exactly 4 control points, got {len(pts)}")
    return pts


@register_evaluator(AlgorithmMode.DE_CASTELJAU)
def de_casteljau(segment: SegmentLike, t: float) -> Point:
    """
    Repeated linear interpolation: 4 points -> 3 -> 2 -> 1.
    """
    t = clamp01(t)
    level: list[Point] = list(as_segment(segment))
    while len(level) > 1:
        level = [lerp(a, b, t) for a, b in zip(level, level[1:])]
    return level[0]


def bernstein_weights(t: float) -> tuple[float, float, float, float]:
    u = 1.0 - t
    return tuple(math.comb(3, i) * u ** (3 - i) * t ** i for i in range(4))


@register_evaluator(AlgorithmMode.BERNSTEIN)
def bernstein(segment: SegmentLike, t: float) -> Point:
    """
    Weighted sum p0*B0 + p1*B1 + p2*B2 + p3*B3 of the cubic Bernstein basis.
    """
    t = clamp01(t)
    pts = as_segment(segment)
    w = bernstein_weights(t)
    x = w[0] * pts[0][0] + w[1] * pts[1][0] + w[2] * pts[2][0] + w[3] * pts[3][0]
    y = w[0] * pts[0][1] + w[1] * pts[1][1] + w[2] * pts[2][1] + w[3] * pts[3][1]
    return x, y


def evaluate(segment: SegmentLike, t: float, mode: AlgorithmMode = AlgorithmMode.DE_CASTELJAU) -> Point:
    return evaluator_registry[mode](segment, t)


def bernstein_axis(c0: float, c1: float, c2: float, c3: float, t: float) -> float:
    """Single coordinate of the curve at t."""
    w = bernstein_weights(t)
    return w[0] * c0 + w[1] * c1 + w[2] * c2 + w[3] * c3


class CurveSamples:
    """
    Lazy, restartable sequence of n points along a segment at t = i/(n-1).
    Nothing is evaluated until iteration, and every iteration starts over,
    so a sampler built on a Segment view follows later edits of its points.
    """

    def __init__(self, segment: SegmentLike, n: int, mode: AlgorithmMode = AlgorithmMode.DE_CASTELJAU):
        if n < 2:
            raise ValueError(f"Need at least 2 samples, got {n}")
        self._segment = segment
        self._n = int(n)
        self._mode = mode

    def __len__(self) -> int:
        return self._n

    def parameters(self) -> Iterator[float]:
        last = self._n - 1
        for i in range(self._n):
            yield i / last

    def __iter__(self) -> Iterator[Point]:
        fn = evaluator_registry[self._mode]
        for t in self.parameters():
            yield fn(self._segment, t)

    @property
    def mode(self) -> AlgorithmMode:
        return self._mode


def sample(segment: SegmentLike, n: int, mode: AlgorithmMode = AlgorithmMode.DE_CASTELJAU) -> CurveSamples:
    return CurveSamples(segment, n, mode)


# ---- derivatives -----------------------------------------------------------

def velocity(segment: SegmentLike, t: float) -> Point:
    """B'(t), used for tangent and normal."""
    t = clamp01(t)
    p0, p1, p2, p3 = as_segment(segment)
    u = 1.0 - t
    a = 3.0 * u * u
    b = 6.0 * u * t
    c = 3.0 * t * t
    x = a * (p1[0] - p0[0]) + b * (p2[0] - p1[0]) + c * (p3[0] - p2[0])
    y = a * (p1[1] - p0[1]) + b * (p2[1] - p1[1]) + c * (p3[1] - p2[1])
    return x, y


def acceleration(segment: SegmentLike, t: float) -> Point:
    """B''(t), used by the curvature formula."""
    t = clamp01(t)
    p0, p1, p2, p3 = as_segment(segment)
    u = 1.0 - t
    x = 6.0 * (u * (p2[0] - 2.0 * p1[0] + p0[0]) + t * (p3[0] - 2.0 * p2[0] + p1[0]))
    y = 6.0 * (u * (p2[1] - 2.0 * p1[1] + p0[1]) + t * (p3[1] - 2.0 * p2[1] + p1[1]))
    return x, y


def tangent(segment: SegmentLike, t: float) -> Point | None:
    return unit_or_none(velocity(segment, t))


def normal(segment: SegmentLike, t: float) -> Point | None:
    tan = tangent(segment, t)
    if tan is None:
        return None
    return -tan[1], tan[0]


def curvature(segment: SegmentLike, t: float) -> float:
    """
    Signed curvature cross(B', B'') / |B'|^3; 0.0 where the curve has a cusp.
    """
    vel = velocity(segment, t)
    speed = math.hypot(vel[0], vel[1])
    if speed == 0.0:
        return 0.0
    return cross(vel, acceleration(segment, t)) / speed ** 3


# ---- extrema ---------------------------------------------------------------

_DEGENERATE_EPS = 1e-12


def axis_extrema(c0: float, c1: float, c2: float, c3: float) -> list[float]:
    """
    Parameters t in [0, 1] where the derivative of one coordinate vanishes.

    The derivative of the cubic is the quadratic a t^2 + b t + c. Falls back to
    the linear root when a is negligible, returns nothing when the
    discriminant is negative.
    """
    a = 3.0 * (-c0 + 3.0 * c1 - 3.0 * c2 + c3)
    b = 6.0 * (c0 - 2.0 * c1 + c2)
    c = 3.0 * (c1 - c0)

    scale = max(abs(a), abs(b), abs(c))
    if scale == 0.0:
        return []

    roots: list[float] = []
    if abs(a) <= _DEGENERATE_EPS * scale:
        if abs(b) > _DEGENERATE_EPS * scale:
            roots.append(-c / b)
    else:
        delta = b * b - 4.0 * a * c
        if delta < 0.0:
            return []
        # numerically stable form, avoids cancellation in -b + sqrt(delta)
        q = -0.5 * (b + math.copysign(math.sqrt(delta), b))
        roots.append(q / a)
        if q != 0.0:
            roots.append(c / q)

    out: list[float] = []
    for r in roots:
        if 0.0 <= r <= 1.0 and r not in out:
            out.append(r)
    out.sort()
    return out
