import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_backtracker.core.grid import Grid
from maze_backtracker.core.state import create_state
from maze_backtracker.core import analysis
from maze_backtracker.algo.dfs import RecursiveBacktracker

class TestAnalysis(unittest.TestCase):
    def test_closed_grid(self):
        grid = Grid(3, 3)
        self.assertEqual(analysis.passage_edges(grid), [])
        self.assertTrue(analysis.is_wall_symmetric(grid))
        self.assertFalse(analysis.is_connected(grid))
        self.assertFalse(analysis.is_perfect(grid))

    def test_asymmetric_wall_detected(self):
        grid = Grid(2, 2)
        # Clear only one side of the wall between (0,1) and (0,0)
        grid.cells[grid.get_index(0, 1)] &= ~Grid.TOP
        self.assertFalse(analysis.is_wall_symmetric(grid))
        self.assertFalse(analysis.is_perfect(grid))

    def test_cycle_is_not_perfect(self):
        grid = Grid(2, 2)
        grid.carve_path(0, 0, Grid.RIGHT)
        grid.carve_path(1, 0, Grid.BOTTOM)
        grid.carve_path(1, 1, Grid.LEFT)
        self.assertTrue(analysis.is_perfect(grid))
        grid.carve_path(0, 1, Grid.TOP)
        self.assertTrue(analysis.is_connected(grid))
        self.assertEqual(len(analysis.passage_edges(grid)), 4)
        self.assertFalse(analysis.is_perfect(grid))

    def test_stats(self):
        state = create_state(20, 20)
        RecursiveBacktracker(state, seed=42).run_all()

        stats = analysis.calculate_stats(state.grid)
        self.assertGreater(stats["dead_ends"], 0)
        self.assertEqual(stats["passages"], 20 * 20 - 1)
        self.assertEqual(stats["dead_ends"] + stats["corridors"] + stats["intersections"], 400)

    def test_stats_corridor(self):
        grid = Grid(1, 3)
        grid.carve_path(0, 0, Grid.RIGHT)
        grid.carve_path(1, 0, Grid.RIGHT)
        stats = analysis.calculate_stats(grid)
        self.assertEqual(stats["dead_ends"], 2)
        self.assertEqual(stats["corridors"], 1)
        self.assertAlmostEqual(stats["dead_end_percent"], 200 / 3)

if __name__ == '__main__':
    unittest.main()
