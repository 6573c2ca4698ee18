"""
Projection of a MazeState onto draw commands.

render() is pure: it reads the state and returns the commands a canvas
should execute, in order. Later commands overdraw earlier ones.
"""
from typing import List, NamedTuple, Tuple, Union
from maze_backtracker.core.state import MazeState
from maze_backtracker.config import SketchConfig, WIDTH, HEIGHT

Color = Tuple[int, int, int]

COLOR_BG = (153, 153, 153)
COLOR_UNVISITED = (51, 51, 51)
COLOR_VISITED = (101, 101, 101)
COLOR_WALL = (255, 255, 255)
COLOR_STACK = (150, 0, 150)
COLOR_ACTIVE = (0, 255, 0)


class FillRect(NamedTuple):
    x: int
    y: int
    w: int
    h: int
    color: Color

    def apply(self, canvas):
        canvas.fill_rect(self.x, self.y, self.w, self.h, self.color)


class Line(NamedTuple):
    x1: int
    y1: int
    x2: int
    y2: int
    color: Color

    def apply(self, canvas):
        canvas.line(self.x1, self.y1, self.x2, self.y2, self.color)


DrawCommand = Union[FillRect, Line]


def cell_rect(x: int, y: int, cell_w: int, cell_h: int) -> Tuple[int, int, int, int]:
    return x * cell_w, y * cell_h, cell_w, cell_h


def render(state: MazeState, config: SketchConfig = None) -> List[DrawCommand]:
    if config is None:
        # Default canvas, never less than one pixel per cell
        cw = max(1, WIDTH // state.cols)
        ch = max(1, HEIGHT // state.rows)
    elif (config.rows, config.cols) != (state.rows, state.cols):
        raise ValueError(
            f"Config is for a {config.cols}x{config.rows} grid, state is {state.cols}x{state.rows}")
    else:
        cw, ch = config.cell_width, config.cell_height
    commands: List[DrawCommand] = []

    # 1. Grid pass: base fill then present walls (top, right, bottom, left)
    for cell in state.grid.iter_cells():
        px, py, w, h = cell_rect(cell.x, cell.y, cw, ch)
        color = COLOR_VISITED if cell.visited else COLOR_UNVISITED
        commands.append(FillRect(px, py, w, h, color))

        walls = cell.walls
        if walls.top:
            commands.append(Line(px, py, px + w, py, COLOR_WALL))
        if walls.right:
            commands.append(Line(px + w, py, px + w, py + h, COLOR_WALL))
        if walls.bottom:
            commands.append(Line(px, py + h, px + w, py + h, COLOR_WALL))
        if walls.left:
            commands.append(Line(px, py, px, py + h, COLOR_WALL))

    # 2. Backtracking path
    for x, y in state.stack_xy():
        commands.append(FillRect(*cell_rect(x, y, cw, ch), COLOR_STACK))

    # 3. Active cell, drawn last
    ax, ay = state.active_xy
    commands.append(FillRect(*cell_rect(ax, ay, cw, ch), COLOR_ACTIVE))
    return commands
