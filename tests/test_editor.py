"""Unit tests for the interaction state machine.

Tests bezedit.core.editor:
    - hovered_index: nearest point within the pick radius
    - Editor: add / drag / delete / toggles, event ordering, stale drag indices
"""

import random
import unittest

from bezedit.core import ControlPointSet
from bezedit.core.bounds import segment_boxes
from bezedit.core.config import EditorConfig, PICK_RADIUS
from bezedit.core.editor import (
    IDLE,
    Dragging,
    Editor,
    EventKind,
    InputEvent,
    hovered_index,
)
from bezedit.core.evaluators import AlgorithmMode
from bezedit.core.math import BLUE, RED


def press(x, y):
    return InputEvent(EventKind.PRIMARY_PRESSED, (x, y))


def release(x, y):
    return InputEvent(EventKind.PRIMARY_RELEASED, (x, y))


def move(x, y):
    return InputEvent(EventKind.MOVED, (x, y))


def delete(x, y):
    return InputEvent(EventKind.SECONDARY_PRESSED, (x, y))


def _chained():
    return ControlPointSet([
        (0.0, 0.0), (20.0, 80.0), (50.0, 50.0), (100.0, 0.0),
        (150.0, -60.0), (180.0, 40.0), (220.0, 10.0),
    ])


class TestHoveredIndex(unittest.TestCase):

    def test_no_points(self):
        self.assertIsNone(hovered_index([], (0.0, 0.0), 8.0))

    def test_outside_radius(self):
        self.assertIsNone(hovered_index([(0.0, 0.0)], (8.5, 0.0), 8.0))

    def test_on_radius_counts(self):
        self.assertEqual(hovered_index([(0.0, 0.0)], (8.0, 0.0), 8.0), 0)

    def test_nearest_wins(self):
        pts = [(0.0, 0.0), (6.0, 0.0), (4.0, 0.0)]
        self.assertEqual(hovered_index(pts, (5.0, 0.0), 8.0), 1)

    def test_tie_goes_to_lowest_index(self):
        pts = [(0.0, 0.0), (10.0, 0.0)]
        self.assertEqual(hovered_index(pts, (5.0, 0.0), 8.0), 0)


class TestAddAndDrag(unittest.TestCase):

    def setUp(self):
        self.editor = Editor()

    def test_default_pick_radius(self):
        self.assertEqual(self.editor.config.pick_radius, PICK_RADIUS)

    def test_press_on_empty_space_appends(self):
        self.editor.handle(press(10.0, 20.0))
        self.assertEqual(self.editor.points.as_points(), ((10.0, 20.0),))
        self.assertEqual(self.editor.state, IDLE)

    def test_press_on_point_starts_drag_without_mutation(self):
        self.editor.handle(press(10.0, 20.0))
        revision = self.editor.revision
        self.editor.handle(press(12.0, 21.0))
        self.assertEqual(self.editor.state, Dragging(0))
        self.assertEqual(len(self.editor.points), 1)
        self.assertEqual(self.editor.revision, revision)

    def test_move_while_dragging_follows_cursor(self):
        self.editor.process([press(10.0, 20.0), press(10.0, 20.0), move(40.0, 50.0), move(60.0, 70.0)])
        self.assertEqual(self.editor.points[0], (60.0, 70.0))

    def test_release_stops_drag(self):
        self.editor.process([press(10.0, 20.0), press(10.0, 20.0), release(10.0, 20.0), move(90.0, 90.0)])
        self.assertEqual(self.editor.state, IDLE)
        self.assertEqual(self.editor.points[0], (10.0, 20.0))

    def test_move_while_idle_does_nothing(self):
        self.editor.handle(press(10.0, 20.0))
        revision = self.editor.revision
        self.editor.handle(move(10.0, 20.0))
        self.assertEqual(self.editor.revision, revision)

    def test_event_order_within_frame(self):
        """A press before a move drags; a move before a press does not."""
        a = Editor(points=ControlPointSet([(0.0, 0.0)]))
        a.process([press(0.0, 0.0), move(30.0, 30.0)])
        self.assertEqual(a.points[0], (30.0, 30.0))

        b = Editor(points=ControlPointSet([(0.0, 0.0)]))
        b.process([move(30.0, 30.0), press(0.0, 0.0)])
        self.assertEqual(b.points[0], (0.0, 0.0))
        self.assertEqual(b.state, Dragging(0))

    def test_drag_changes_only_the_dragged_point(self):
        editor = Editor(points=_chained())
        before_points = editor.points.as_points()
        before_boxes = segment_boxes(editor.points)

        editor.process([press(50.0, 50.0), move(200.0, 200.0), release(200.0, 200.0)])

        after_points = editor.points.as_points()
        self.assertEqual(after_points[2], (200.0, 200.0))
        for i, (old, new) in enumerate(zip(before_points, after_points)):
            if i != 2:
                self.assertEqual(old, new)

        after_boxes = segment_boxes(editor.points)
        self.assertNotEqual(before_boxes[0], after_boxes[0])
        self.assertEqual(before_boxes[1], after_boxes[1])


class TestDelete(unittest.TestCase):

    def test_delete_hovered_point_reindexes(self):
        editor = Editor(EditorConfig(pick_radius=8.0), points=_chained())
        editor.handle(delete(53.0, 54.0))
        self.assertEqual(editor.points.as_points(), (
            (0.0, 0.0), (20.0, 80.0), (100.0, 0.0),
            (150.0, -60.0), (180.0, 40.0), (220.0, 10.0),
        ))

    def test_delete_with_nothing_hovered_is_noop(self):
        editor = Editor(points=_chained())
        before = editor.points.as_points()
        revision = editor.revision
        editor.handle(delete(500.0, 500.0))
        self.assertEqual(editor.points.as_points(), before)
        self.assertEqual(len(editor.points), 7)
        self.assertEqual(editor.revision, revision)

    def test_deleting_dragged_point_returns_to_idle(self):
        editor = Editor(points=_chained())
        editor.process([press(50.0, 50.0), delete(50.0, 50.0)])
        self.assertEqual(editor.state, IDLE)
        self.assertEqual(len(editor.points), 6)

    def test_drag_follows_its_point_when_earlier_point_deleted(self):
        editor = Editor(points=_chained())
        editor.process([press(150.0, -60.0), delete(20.0, 80.0)])
        self.assertEqual(editor.state, Dragging(3))
        editor.handle(move(155.0, -65.0))
        self.assertEqual(editor.points[3], (155.0, -65.0))

    def test_stale_drag_index_resets_to_idle(self):
        editor = Editor(points=_chained())
        editor.process([press(220.0, 10.0)])
        self.assertEqual(editor.state, Dragging(6))
        # the set shrinks without the editor seeing a delete event
        editor._points.remove(6)
        before = editor.points.as_points()
        editor.handle(move(0.0, 0.0))
        self.assertEqual(editor.state, IDLE)
        self.assertEqual(editor.points.as_points(), before)

    def test_colors_follow_points_through_delete(self):
        editor = Editor()
        editor.process([press(0.0, 0.0), press(100.0, 0.0), press(200.0, 0.0)])
        editor.handle(delete(0.0, 0.0))
        points = editor.points
        self.assertEqual(points.as_points(), ((100.0, 0.0), (200.0, 0.0)))
        self.assertEqual(points.colors, [BLUE, RED])


class TestOwnership(unittest.TestCase):

    def test_editor_copies_initial_points(self):
        cps = _chained()
        editor = Editor(points=cps)
        cps.remove(0)
        cps.move(1, (999.0, 999.0))
        self.assertEqual(len(editor.points), 7)
        self.assertEqual(editor.points[0], (0.0, 0.0))

    def test_points_is_a_snapshot(self):
        editor = Editor(points=_chained())
        revision = editor.revision
        editor.points.remove(0)
        editor.points.append((1.0, 1.0))
        self.assertEqual(len(editor.points), 7)
        self.assertEqual(editor.revision, revision)


class TestToggles(unittest.TestCase):

    def test_algorithm_toggle(self):
        editor = Editor(EditorConfig(initial_mode=AlgorithmMode.DE_CASTELJAU))
        editor.handle(InputEvent(EventKind.TOGGLE_ALGORITHM))
        self.assertIs(editor.mode, AlgorithmMode.BERNSTEIN)
        editor.handle(InputEvent(EventKind.TOGGLE_ALGORITHM))
        self.assertIs(editor.mode, AlgorithmMode.DE_CASTELJAU)

    def test_grid_and_box_toggles(self):
        editor = Editor()
        editor.process([InputEvent(EventKind.TOGGLE_GRID), InputEvent(EventKind.TOGGLE_BOUNDING_BOXES)])
        self.assertTrue(editor.show_grid)
        self.assertTrue(editor.show_boxes)
        editor.handle(InputEvent(EventKind.TOGGLE_GRID))
        self.assertFalse(editor.show_grid)

    def test_toggles_keep_cursor(self):
        editor = Editor()
        editor.handle(move(3.0, 4.0))
        editor.handle(InputEvent(EventKind.TOGGLE_GRID))
        self.assertEqual(editor.cursor, (3.0, 4.0))

    def test_clear(self):
        editor = Editor(points=_chained())
        editor.handle(press(0.0, 0.0))
        editor.clear()
        self.assertEqual(len(editor.points), 0)
        self.assertEqual(editor.state, IDLE)


class TestInvalidConfig(unittest.TestCase):

    def test_negative_pick_radius(self):
        with self.assertRaises(ValueError):
            EditorConfig(pick_radius=-1.0)

    def test_too_few_samples(self):
        with self.assertRaises(ValueError):
            EditorConfig(samples_per_segment=1)


class TestRandomSessions(unittest.TestCase):
    """The editor stays consistent under any sequence of inputs."""

    def test_random_event_stream(self):
        rng = random.Random(42)
        editor = Editor()
        kinds = list(EventKind)
        for _ in range(3000):
            kind = rng.choice(kinds)
            pos = (rng.uniform(0.0, 100.0), rng.uniform(0.0, 100.0))
            editor.handle(InputEvent(kind, pos))
            idx = editor.drag_index
            if idx is not None:
                self.assertLess(idx, len(editor.points))
            for seg in editor.points.segments():
                self.assertEqual(len(seg.points()), 4)
