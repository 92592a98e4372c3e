import logging
from dataclasses import dataclass
from typing import Optional

from .bounds import BoundingBox, OrientedBox, control_box, regular_box, tight_box
from .config import DEFAULT_CONFIG, EditorConfig
from .editor import Editor
from .evaluators import AlgorithmMode, sample
from .math import RGBa, Point

logger = logging.getLogger(__name__)

Line = tuple[Point, Point]


@dataclass(frozen=True)
class Marker:
    index: int
    position: Point
    color: RGBa
    hovered: bool = False
    dragged: bool = False


@dataclass(frozen=True)
class SegmentGeometry:
    """
    Everything drawn for one complete segment.
      - polyline/colors: sampled curve and per-vertex colour from blend_colors
      - handles: anchor -> handle lines (p0->p1, p3->p2)
    """
    index: int
    control: tuple[Point, Point, Point, Point]
    polyline: tuple[Point, ...]
    colors: tuple[RGBa, ...]
    handles: tuple[Line, Line]
    regular: BoundingBox
    tight: OrientedBox
    control_bounds: BoundingBox


@dataclass(frozen=True)
class Scene:
    markers: tuple[Marker, ...]
    segments: tuple[SegmentGeometry, ...]
    mode: AlgorithmMode
    show_grid: bool
    show_boxes: bool
    grid: tuple[Line, ...] = ()
    axes: tuple[Line, ...] = ()
    origin: Optional[Point] = None

    @property
    def regular_boxes(self) -> tuple[BoundingBox, ...]:
        if not self.show_boxes:
            return ()
        return tuple(seg.regular for seg in self.segments)

    @property
    def tight_boxes(self) -> tuple[OrientedBox, ...]:
        if not self.show_boxes:
            return ()
        return tuple(seg.tight for seg in self.segments)


def grid_lines(width: float, height: float, columns: int, rows: int) -> tuple[tuple[Line, ...], tuple[Line, ...]]:
    """
    Grid lines drawn outward from the viewport centre, one cell being
    width/columns by height/rows. Returns (grid, axes); the axes cross at the centre.
    """
    if width <= 0 or height <= 0:
        return (), ()
    cx = width / 2.0
    cy = height / 2.0
    x_step = width / columns
    y_step = height / rows

    xs = {cx}
    k = 1
    while cx - k * x_step >= 0.0 or cx + k * x_step <= width:
        if cx - k * x_step >= 0.0:
            xs.add(cx - k * x_step)
        if cx + k * x_step <= width:
            xs.add(cx + k * x_step)
        k += 1
    ys = {cy}
    k = 1
    while cy - k * y_step >= 0.0 or cy + k * y_step <= height:
        if cy - k * y_step >= 0.0:
            ys.add(cy - k * y_step)
        if cy + k * y_step <= height:
            ys.add(cy + k * y_step)
        k += 1

    grid = [((x, 0.0), (x, height)) for x in sorted(xs)]
    grid += [((0.0, y), (width, y)) for y in sorted(ys)]
    axes = (((0.0, cy), (width, cy)), ((cx, 0.0), (cx, height)))
    return tuple(grid), axes


def blend_colors(colors: tuple[RGBa, RGBa, RGBa, RGBa], t: float, mode: AlgorithmMode) -> RGBa:
    """
    Colour of the curve at t. De Casteljau carries colour through every
    interpolation level, so all four control colours contribute; Bernstein
    fades from the start anchor's colour to the end anchor's.
    """
    if mode is AlgorithmMode.DE_CASTELJAU:
        level = list(colors)
        while len(level) > 1:
            level = [a.lerp(b, t) for a, b in zip(level, level[1:])]
        return level[0]
    return colors[0].lerp(colors[3], t)


class SceneBuilder:
    """
    Turns the Editor's state into a Scene for the renderer.

    A build with the same editor revision, flags, hover and viewport as the
    previous one returns the previous Scene. Segment geometry is additionally
    cached by (control points, colours, mode, sample count), so a drag only
    re-evaluates the segments that contain the dragged point.
    """

    def __init__(self, config: EditorConfig = DEFAULT_CONFIG):
        self.config = config
        self._cache: dict[tuple, SegmentGeometry] = {}
        self._last_key: Optional[tuple] = None
        self._last_scene: Optional[Scene] = None
        self.evaluations = 0

    def segment_geometry(self, index: int, control: tuple[Point, Point, Point, Point],
                         colors: tuple[RGBa, RGBa, RGBa, RGBa], mode: AlgorithmMode) -> SegmentGeometry:
        n = self.config.samples_per_segment
        key = (index, control, colors, mode, n)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        samples = sample(control, n, mode)
        p0, p1, p2, p3 = control
        geom = SegmentGeometry(
            index=index,
            control=control,
            polyline=tuple(samples),
            colors=tuple(blend_colors(colors, t, mode) for t in samples.parameters()),
            handles=((p0, p1), (p3, p2)),
            regular=regular_box(control),
            tight=tight_box(control),
            control_bounds=control_box(control),
        )
        self._cache[key] = geom
        self.evaluations += 1
        return geom

    def build(self, editor: Editor, viewport: Optional[tuple[float, float]] = None) -> Scene:
        hovered = editor.hovered()
        dragged = editor.drag_index
        key = (id(editor), editor.revision, editor.mode, editor.show_grid, editor.show_boxes,
               hovered, dragged, viewport)
        if key == self._last_key and self._last_scene is not None:
            return self._last_scene
        logger.debug("Rendering curve at revision %d", editor.revision)

        points = editor.points
        markers = tuple(
            Marker(i, p, points.color(i), hovered=(i == hovered), dragged=(i == dragged))
            for i, p in enumerate(points)
        )

        live: dict[tuple, SegmentGeometry] = {}
        segments = []
        n = self.config.samples_per_segment
        for k, seg in enumerate(points.segments()):
            colors = seg.colors()
            geom = self.segment_geometry(k, seg.points(), colors, editor.mode)
            live[(k, geom.control, colors, editor.mode, n)] = geom
            segments.append(geom)
        # drop geometry of segments that no longer exist
        self._cache = live

        grid: tuple[Line, ...] = ()
        axes: tuple[Line, ...] = ()
        origin: Optional[Point] = None
        if editor.show_grid and viewport is not None:
            w, h = viewport
            grid, axes = grid_lines(w, h, self.config.grid_columns, self.config.grid_rows)
            if axes:
                origin = (w / 2.0, h / 2.0)

        scene = Scene(
            markers=markers,
            segments=tuple(segments),
            mode=editor.mode,
            show_grid=editor.show_grid,
            show_boxes=editor.show_boxes,
            grid=grid,
            axes=axes,
            origin=origin,
        )
        self._last_key = key
        self._last_scene = scene
        return scene
