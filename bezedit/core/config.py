"""
Tunable constants for the editor.

PICK_RADIUS and SAMPLES_PER_SEGMENT are screen-space quality knobs, chosen
empirically; EQUIVALENCE_TOLERANCE is the agreement the two evaluation
algorithms are held to.
"""
from dataclasses import dataclass

from .evaluators import AlgorithmMode

PICK_RADIUS: float = 8.0
SAMPLES_PER_SEGMENT: int = 100
EQUIVALENCE_TOLERANCE: float = 1e-9

# grid: cells across/down the viewport, drawn outward from the centre
GRID_COLUMNS: int = 16
GRID_ROWS: int = 9

MARKER_RADIUS: float = 5.0


@dataclass(frozen=True)
class EditorConfig:
    pick_radius: float = PICK_RADIUS
    samples_per_segment: int = SAMPLES_PER_SEGMENT
    grid_columns: int = GRID_COLUMNS
    grid_rows: int = GRID_ROWS
    initial_mode: AlgorithmMode = AlgorithmMode.BERNSTEIN
    show_grid: bool = False
    show_boxes: bool = False

    def __post_init__(self):
        if self.pick_radius < 0.0:
            raise ValueError(f"pick_radius must be >= 0, got {self.pick_radius}")
        if self.samples_per_segment < 2:
            raise ValueError(f"samples_per_segment must be >= 2, got {self.samples_per_segment}")
        if self.grid_columns < 1 or self.grid_rows < 1:
            raise ValueError("grid needs at least one column and one row")


DEFAULT_CONFIG = EditorConfig()
