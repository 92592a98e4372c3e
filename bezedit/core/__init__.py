from .math import Point, RGBa, dist2, lerp, point_color
from .points import ControlPointSet, Segment
from .evaluators import (
    AlgorithmMode, CurveSamples, bernstein, de_casteljau, evaluate, sample,
    velocity, acceleration, tangent, normal, curvature, axis_extrema,
)
from .bounds import BoundingBox, OrientedBox, regular_box, tight_box, control_box, segment_boxes
from .config import EditorConfig, DEFAULT_CONFIG
from .editor import Editor, EventKind, InputEvent, Idle, Dragging, IDLE, hovered_index
from .scene import Scene, SceneBuilder, SegmentGeometry, Marker, blend_colors, grid_lines
from .registries import evaluator_registry
