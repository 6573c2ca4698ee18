from collections import deque
from typing import Dict, List, Tuple
from maze_backtracker.core.grid import Grid


def popcount_walls(val: int) -> int:
    c = 0
    if val & Grid.TOP: c += 1
    if val & Grid.RIGHT: c += 1
    if val & Grid.BOTTOM: c += 1
    if val & Grid.LEFT: c += 1
    return c


def passage_edges(grid: Grid) -> List[Tuple[int, int]]:
    """
    Returns (idx_a, idx_b) for every open passage between adjacent cells.
    Only RIGHT and BOTTOM are inspected so each edge is listed once.
    """
    edges = []
    for y in range(grid.rows):
        for x in range(grid.cols):
            idx = y * grid.cols + x
            if x < grid.cols - 1 and not grid.has_wall(x, y, Grid.RIGHT):
                edges.append((idx, idx + 1))
            if y < grid.rows - 1 and not grid.has_wall(x, y, Grid.BOTTOM):
                edges.append((idx, idx + grid.cols))
    return edges


def is_wall_symmetric(grid: Grid) -> bool:
    for y in range(grid.rows):
        for x in range(grid.cols):
            for nx, ny, dir_bit in grid.get_neighbors(x, y):
                if grid.has_wall(x, y, dir_bit) != grid.has_wall(nx, ny, Grid.OPPOSITE[dir_bit]):
                    return False
    return True


def is_connected(grid: Grid) -> bool:
    seen = {0}
    queue = deque([(0, 0)])
    while queue:
        x, y = queue.popleft()
        for nx, ny in grid.get_open_neighbors(x, y):
            idx = ny * grid.cols + nx
            if idx not in seen:
                seen.add(idx)
                queue.append((nx, ny))
    return len(seen) == len(grid)


def is_perfect(grid: Grid) -> bool:
    """
    A perfect maze is a spanning tree over the passage graph:
    connected, with exactly one edge fewer than it has cells.
    """
    if not is_wall_symmetric(grid):
        return False
    return len(passage_edges(grid)) == len(grid) - 1 and is_connected(grid)


def calculate_stats(grid: Grid) -> Dict[str, float]:
    dead_ends = 0
    intersections = 0 # 0, 1 walls
    corridors = 0 # 2 walls

    for val in grid.cells:
        walls = popcount_walls(val)
        if walls == 3: dead_ends += 1
        elif walls == 2: corridors += 1
        elif walls <= 1: intersections += 1

    total = len(grid)
    return {
        "dead_ends": dead_ends,
        "corridors": corridors,
        "intersections": intersections,
        "passages": len(passage_edges(grid)),
        "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
    }
