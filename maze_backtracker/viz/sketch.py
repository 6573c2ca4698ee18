import logging
from typing import Optional
from maze_backtracker.config import SketchConfig
from maze_backtracker.core.state import create_state
from maze_backtracker.algo.base import Chooser
from maze_backtracker.algo.dfs import RecursiveBacktracker
from maze_backtracker.viz.projection import COLOR_BG, render

logger = logging.getLogger(__name__)


class MazeSketch:
    """
    Owns the generation state and drives it one tick at a time.

    Any object with clear(color), fill_rect(x, y, w, h, color) and
    line(x1, y1, x2, y2, color) can act as the canvas.
    """

    def __init__(self, config: SketchConfig = None, seed: int = None,
                 choose: Optional[Chooser] = None, check_invariants: bool = False):
        self.config = config or SketchConfig()
        self.state = create_state(self.config.rows, self.config.cols)
        self.generator = RecursiveBacktracker(
            self.state, seed=seed, choose=choose, check_invariants=check_invariants)
        self.ticks = 0

    @property
    def finished(self) -> bool:
        return self.state.complete

    def setup(self, canvas):
        canvas.clear(COLOR_BG)

    def tick(self, canvas):
        if not self.finished:
            self.generator.step()
            if self.finished:
                logger.info(f"Maze complete after {self.generator.step_count} steps")

        canvas.clear(COLOR_BG)
        for command in render(self.state, self.config):
            command.apply(canvas)
        self.ticks += 1
