import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Optional

from .config import DEFAULT_CONFIG, EditorConfig
from .evaluators import AlgorithmMode
from .math import Point, dist2
from .points import ControlPointSet

logger = logging.getLogger(__name__)


class EventKind(Enum):
    MOVED = auto()
    PRIMARY_PRESSED = auto()
    PRIMARY_RELEASED = auto()
    SECONDARY_PRESSED = auto()
    TOGGLE_GRID = auto()
    TOGGLE_BOUNDING_BOXES = auto()
    TOGGLE_ALGORITHM = auto()


@dataclass(frozen=True)
class InputEvent:
    kind: EventKind
    position: Optional[Point] = None


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Dragging:
    index: int


InteractionState = Idle | Dragging

IDLE = Idle()


def hovered_index(points: Iterable[Point], cursor: Point, radius: float) -> Optional[int]:
    """
    Index of the point nearest to cursor within radius, or None.
    Ties go to the lowest index.
    """
    r2 = radius * radius
    best_i: Optional[int] = None
    best_d2 = float("inf")
    for i, p in enumerate(points):
        d2 = dist2(p, cursor)
        if d2 <= r2 and d2 < best_d2:
            best_i = i
            best_d2 = d2
    return best_i


class Editor:
    """
    Interaction state machine over a ControlPointSet.

      - primary press: start dragging the hovered point, or append a new one
      - move: while dragging, the dragged point follows the cursor
      - primary release: stop dragging
      - secondary press: delete the hovered point
      - toggles: algorithm mode, grid and bounding box visibility

    Events of a frame must be fed in the order they occurred.
    """

    def __init__(self, config: EditorConfig = DEFAULT_CONFIG, points: ControlPointSet | None = None):
        self.config = config
        self._points = points.copy() if points is not None else ControlPointSet()
        self._state: InteractionState = IDLE
        self.mode: AlgorithmMode = config.initial_mode
        self.show_grid: bool = config.show_grid
        self.show_boxes: bool = config.show_boxes
        self._cursor: Point = (0.0, 0.0)
        self._revision = 0

    # ---- read-only accessors -------------------------------------------------
    @property
    def points(self) -> ControlPointSet:
        """Snapshot of the control points. Edits only go through events and clear()."""
        return self._points.copy()

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def cursor(self) -> Point:
        return self._cursor

    @property
    def revision(self) -> int:
        """Bumped on every mutation of the control points."""
        return self._revision

    @property
    def drag_index(self) -> Optional[int]:
        if isinstance(self._state, Dragging):
            return self._state.index
        return None

    def hovered(self, cursor: Point | None = None) -> Optional[int]:
        c = self._cursor if cursor is None else cursor
        return hovered_index(self._points, c, self.config.pick_radius)

    # ---- event handling ------------------------------------------------------
    def process(self, events: Iterable[InputEvent]) -> None:
        for event in events:
            self.handle(event)

    def handle(self, event: InputEvent) -> None:
        if event.position is not None:
            self._cursor = (float(event.position[0]), float(event.position[1]))

        match event.kind:
            case EventKind.MOVED:
                self._on_move()
            case EventKind.PRIMARY_PRESSED:
                self._on_primary_pressed()
            case EventKind.PRIMARY_RELEASED:
                self._state = IDLE
            case EventKind.SECONDARY_PRESSED:
                self._on_secondary_pressed()
            case EventKind.TOGGLE_GRID:
                self.toggle_grid()
            case EventKind.TOGGLE_BOUNDING_BOXES:
                self.toggle_boxes()
            case EventKind.TOGGLE_ALGORITHM:
                self.toggle_algorithm()
            case _:
                raise ValueError(event.kind)

    def _on_move(self) -> None:
        idx = self.drag_index
        if idx is None:
            return
        if not self._points.move(idx, self._cursor):
            logger.debug("Drag target %d no longer exists, back to idle", idx)
            self._state = IDLE
            return
        self._touch()

    def _on_primary_pressed(self) -> None:
        idx = self.hovered()
        if idx is not None:
            self._state = Dragging(idx)
            return
        self._points.append(self._cursor)
        self._touch()

    def _on_secondary_pressed(self) -> None:
        idx = self.hovered()
        if idx is None:
            return
        self._points.remove(idx)
        dragged = self.drag_index
        if dragged is not None:
            if dragged == idx:
                self._state = IDLE
            elif dragged > idx:
                self._state = Dragging(dragged - 1)
        self._touch()

    def _touch(self) -> None:
        self._revision += 1

    # ---- toggles -------------------------------------------------------------
    def toggle_algorithm(self) -> AlgorithmMode:
        self.mode = self.mode.toggled()
        logger.info("Mode toggled! Algorithm: %s", self.mode.value)
        return self.mode

    def toggle_grid(self) -> bool:
        self.show_grid = not self.show_grid
        return self.show_grid

    def toggle_boxes(self) -> bool:
        self.show_boxes = not self.show_boxes
        return self.show_boxes

    def clear(self) -> None:
        self._points.clear()
        self._state = IDLE
        self._touch()
