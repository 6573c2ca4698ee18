import logging
from typing import List, Optional
from maze_backtracker.core.state import MazeState
from maze_backtracker.algo.base import Generator, Chooser

logger = logging.getLogger(__name__)


def unvisited_neighbors(state: MazeState, idx: int) -> List[int]:
    """Flat indices of in-bounds, unvisited neighbors of idx, in neighbor order."""
    grid = state.grid
    x, y = grid.get_coords(idx)
    candidates = []
    for nx, ny, _ in grid.get_neighbors(x, y):
        if not grid.is_visited(nx, ny):
            candidates.append(ny * grid.cols + nx)
    return candidates


def step(state: MazeState, choose: Chooser) -> bool:
    """
    One recursive-backtracker transition, applied to state in place.

    Advance: carve into a random unvisited neighbor, push the active cell
    and move onto the neighbor.
    Backtrack: pop the stack into the active cell, or mark the state
    complete once the stack is exhausted.

    Returns False (and changes nothing) if the state is already complete.
    """
    if state.complete:
        return False

    grid = state.grid
    current = state.active
    candidates = unvisited_neighbors(state, current)

    if candidates:
        nxt = choose(candidates)
        grid.carve_between(current, nxt)
        grid.cells[current] |= grid.VISITED
        state.stack.append(current)
        state.active = nxt
    else:
        grid.cells[current] |= grid.VISITED
        if state.stack:
            state.active = state.stack.pop()
        else:
            state.complete = True
    return True


class RecursiveBacktracker(Generator):
    def __init__(self, state: MazeState, seed: int = None,
                 choose: Optional[Chooser] = None, check_invariants: bool = False):
        super().__init__(state, seed=seed, choose=choose, check_invariants=check_invariants)
        self.pushes = 0
        self.pops = 0

    def step(self) -> bool:
        state = self.state
        if state.complete:
            logger.debug("step() called on a complete maze; ignoring")
            return False

        depth = len(state.stack)
        step(state, self.choose)
        self.step_count += 1

        if len(state.stack) > depth:
            self.pushes += 1
        elif len(state.stack) < depth:
            self.pops += 1

        if self.check_invariants:
            state.check_invariants()

        if state.complete:
            logger.debug(f"Maze {state.rows}x{state.cols} complete after {self.step_count} steps")
        return True
