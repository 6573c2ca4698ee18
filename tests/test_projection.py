import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_backtracker.config import SketchConfig
from maze_backtracker.core.state import create_state
from maze_backtracker.algo.dfs import step
from maze_backtracker.viz.projection import (
    render, FillRect, Line,
    COLOR_ACTIVE, COLOR_STACK, COLOR_UNVISITED, COLOR_VISITED, COLOR_WALL,
)

def pick_first(seq):
    return seq[0]

class TestProjection(unittest.TestCase):
    def test_single_cell(self):
        state = create_state(1, 1)
        cfg = SketchConfig(width=30, height=30, rows=1, cols=1)
        commands = render(state, cfg)

        self.assertEqual(commands, [
            FillRect(0, 0, 30, 30, COLOR_UNVISITED),
            Line(0, 0, 30, 0, COLOR_WALL),     # top
            Line(30, 0, 30, 30, COLOR_WALL),   # right
            Line(0, 30, 30, 30, COLOR_WALL),   # bottom
            Line(0, 0, 0, 30, COLOR_WALL),     # left
            FillRect(0, 0, 30, 30, COLOR_ACTIVE),
        ])

    def test_default_pixel_mapping(self):
        state = create_state(20, 20)
        commands = render(state, SketchConfig())
        fills = [c for c in commands if isinstance(c, FillRect)]
        # 400 base fills + active
        self.assertEqual(len(fills), 401)
        self.assertEqual(fills[21], FillRect(30, 30, 30, 30, COLOR_UNVISITED))
        self.assertEqual(fills[399], FillRect(570, 570, 30, 30, COLOR_UNVISITED))

    def test_floor_cell_size(self):
        cfg = SketchConfig(width=100, height=50, rows=3, cols=3)
        self.assertEqual((cfg.cell_width, cfg.cell_height), (33, 16))
        state = create_state(3, 3)
        commands = render(state, cfg)
        self.assertEqual(commands[-1], FillRect(0, 0, 33, 16, COLOR_ACTIVE))

    def test_default_config_from_state(self):
        state = create_state(2, 3)
        commands = render(state)
        self.assertEqual(commands[0], FillRect(0, 0, 200, 300, COLOR_UNVISITED))

    def test_default_canvas_accepts_any_grid(self):
        state = create_state(700, 1)
        commands = render(state)
        self.assertEqual(commands[0], FillRect(0, 0, 600, 1, COLOR_UNVISITED))
        self.assertEqual(commands[-1], FillRect(0, 0, 600, 1, COLOR_ACTIVE))
        fills = [c for c in commands if isinstance(c, FillRect)]
        self.assertEqual(fills[-2], FillRect(0, 699, 600, 1, COLOR_UNVISITED))

    def test_mismatched_config_rejected(self):
        state = create_state(3, 3)
        with self.assertRaises(ValueError):
            render(state, SketchConfig())
        with self.assertRaises(ValueError):
            render(state, SketchConfig(rows=3, cols=4))

    def test_stack_and_active_order(self):
        state = create_state(2, 2)
        cfg = SketchConfig(width=60, height=60, rows=2, cols=2)
        step(state, pick_first) # (0,0) -> (1,0)
        step(state, pick_first) # (1,0) -> (1,1)

        commands = render(state, cfg)
        self.assertEqual(commands[-3:], [
            FillRect(0, 0, 30, 30, COLOR_STACK),
            FillRect(30, 0, 30, 30, COLOR_STACK),
            FillRect(30, 30, 30, 30, COLOR_ACTIVE),
        ])
        self.assertEqual(commands[0], FillRect(0, 0, 30, 30, COLOR_VISITED))

        # (0,0) lost its right wall: fill + top, bottom, left
        first_cell = commands[:4]
        self.assertEqual(first_cell[1:], [
            Line(0, 0, 30, 0, COLOR_WALL),
            Line(0, 30, 30, 30, COLOR_WALL),
            Line(0, 0, 0, 30, COLOR_WALL),
        ])

    def test_render_is_pure(self):
        state = create_state(3, 3)
        step(state, pick_first)
        before = (state.grid.cells.tobytes(), state.active, list(state.stack), state.complete)
        first = render(state)
        second = render(state)
        self.assertEqual(first, second)
        self.assertEqual((state.grid.cells.tobytes(), state.active, list(state.stack), state.complete), before)

if __name__ == '__main__':
    unittest.main()
