from typing import List, Tuple
from maze_backtracker.core.grid import Grid
from maze_backtracker.core.analysis import is_wall_symmetric


class InvariantViolation(AssertionError):
    """Raised when a MazeState no longer describes a valid backtracking walk."""


class MazeState:
    """
    Mutable generation state.

    The grid owns every cell. `active` and the entries of `stack` are flat
    row-major indices into `grid.cells`, so any mutation made through the
    grid is visible through them.
    """

    __slots__ = ('grid', 'active', 'stack', 'complete')

    def __init__(self, grid: Grid, active: int, stack: List[int], complete: bool):
        self.grid = grid
        self.active = active
        self.stack = stack
        self.complete = complete

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def cols(self) -> int:
        return self.grid.cols

    @property
    def active_xy(self) -> Tuple[int, int]:
        return self.grid.get_coords(self.active)

    def stack_xy(self) -> List[Tuple[int, int]]:
        return [self.grid.get_coords(idx) for idx in self.stack]

    def check_invariants(self):
        grid = self.grid
        if not 0 <= self.active < len(grid):
            raise InvariantViolation(f"Active index {self.active} outside grid")

        seen = set()
        for idx in self.stack:
            if idx in seen:
                raise InvariantViolation(f"Cell {grid.get_coords(idx)} pushed twice")
            if not grid.is_visited_index(idx):
                raise InvariantViolation(f"Unvisited cell {grid.get_coords(idx)} on stack")
            seen.add(idx)

        if self.active in seen:
            raise InvariantViolation(f"Active cell {self.active_xy} is on the stack")

        if self.complete:
            if self.stack:
                raise InvariantViolation("Complete with a non-empty stack")
            if grid.visited_count() != len(grid):
                raise InvariantViolation("Complete before every cell was visited")
            if not is_wall_symmetric(grid):
                raise InvariantViolation("Wall between adjacent cells is one-sided")

    def __repr__(self):
        status = "complete" if self.complete else "running"
        return (f"MazeState({self.rows}x{self.cols}, active={self.active_xy}, "
                f"stack={len(self.stack)}, {status})")


def create_grid(rows: int, cols: int) -> Grid:
    return Grid(rows, cols)


def create_state(rows: int, cols: int) -> MazeState:
    """Sole constructor of a valid MazeState; raises ValueError on bad dimensions."""
    grid = create_grid(rows, cols)
    return MazeState(grid, active=0, stack=[], complete=False)
