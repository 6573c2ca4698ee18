from array import array
from typing import Iterator, NamedTuple, Tuple


class Walls(NamedTuple):
    top: bool
    right: bool
    bottom: bool
    left: bool


class Cell(NamedTuple):
    """Read-only snapshot of one grid cell."""
    x: int
    y: int
    walls: Walls
    visited: bool


class Grid:
    # Bitmask Constants
    TOP    = 0b00000001
    RIGHT  = 0b00000010
    BOTTOM = 0b00000100
    LEFT   = 0b00001000

    # Flags
    VISITED = 0b00010000

    # All walls present by default (T|R|B|L) = 15
    ALL_WALLS = TOP | RIGHT | BOTTOM | LEFT

    # Direction Helpers
    DX = {TOP: 0, BOTTOM: 0, RIGHT: 1, LEFT: -1}
    DY = {TOP: -1, BOTTOM: 1, RIGHT: 0, LEFT: 0}
    OPPOSITE = {TOP: BOTTOM, BOTTOM: TOP, RIGHT: LEFT, LEFT: RIGHT}

    # Neighbor enumeration order: (-1,0), (0,-1), (1,0), (0,1)
    NEIGHBOR_ORDER = (LEFT, TOP, RIGHT, BOTTOM)

    __slots__ = ('rows', 'cols', 'cells')

    def __init__(self, rows: int, cols: int):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        # One byte per cell: wall bits + visited flag
        self.cells = array('B', [self.ALL_WALLS] * (rows * cols))

    def __len__(self) -> int:
        return len(self.cells)

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.cols and 0 <= y < self.rows:
            return y * self.cols + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def get_coords(self, idx: int) -> Tuple[int, int]:
        if not 0 <= idx < len(self.cells):
            raise IndexError(f"Cell index {idx} out of bounds")
        return idx % self.cols, idx // self.cols

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def direction_between(self, idx1: int, idx2: int) -> int:
        """
        Returns the wall bit of cell idx1 that faces cell idx2.
        The two cells must be 4-adjacent.
        """
        x1, y1 = self.get_coords(idx1)
        x2, y2 = self.get_coords(idx2)
        dx, dy = x2 - x1, y2 - y1
        for dir_bit in self.NEIGHBOR_ORDER:
            if self.DX[dir_bit] == dx and self.DY[dir_bit] == dy:
                return dir_bit
        raise ValueError(f"Cells ({x1}, {y1}) and ({x2}, {y2}) are not adjacent")

    def carve_path(self, x1: int, y1: int, dir_bit: int):
        """
        Removes the wall between current cell (x,y) and the neighbor in 'dir_bit'.
        Also removes the OPPOSITE wall from the neighbor.
        """
        idx1 = self.get_index(x1, y1)
        x2 = x1 + self.DX[dir_bit]
        y2 = y1 + self.DY[dir_bit]

        if not self.in_bounds(x2, y2):
            return # Cannot carve into void

        idx2 = y2 * self.cols + x2

        self.cells[idx1] &= ~dir_bit
        self.cells[idx2] &= ~self.OPPOSITE[dir_bit]

    def carve_between(self, idx1: int, idx2: int) -> int:
        dir_bit = self.direction_between(idx1, idx2)
        x1, y1 = self.get_coords(idx1)
        self.carve_path(x1, y1, dir_bit)
        return dir_bit

    def has_wall(self, x: int, y: int, dir_bit: int) -> bool:
        return (self.cells[y * self.cols + x] & dir_bit) != 0

    def set_visited(self, x: int, y: int):
        # Monotonic: there is no way to clear the flag
        self.cells[y * self.cols + x] |= self.VISITED

    def is_visited(self, x: int, y: int) -> bool:
        return (self.cells[y * self.cols + x] & self.VISITED) != 0

    def is_visited_index(self, idx: int) -> bool:
        return (self.cells[idx] & self.VISITED) != 0

    def visited_count(self) -> int:
        return sum(1 for val in self.cells if val & self.VISITED)

    def cell(self, x: int, y: int) -> Cell:
        val = self.cells[self.get_index(x, y)]
        walls = Walls(
            top=bool(val & self.TOP),
            right=bool(val & self.RIGHT),
            bottom=bool(val & self.BOTTOM),
            left=bool(val & self.LEFT),
        )
        return Cell(x, y, walls, bool(val & self.VISITED))

    def iter_cells(self) -> Iterator[Cell]:
        """Yields every cell snapshot in row-major order."""
        for y in range(self.rows):
            for x in range(self.cols):
                yield self.cell(x, y)

    def get_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, direction_to_neighbor) for all valid grid neighbors.
        Does NOT check walls or visited flags.
        """
        for dir_bit in self.NEIGHBOR_ORDER:
            nx = x + self.DX[dir_bit]
            ny = y + self.DY[dir_bit]
            if self.in_bounds(nx, ny):
                yield (nx, ny, dir_bit)

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nx, ny) for neighbors that are NOT blocked by a wall.
        """
        val = self.cells[y * self.cols + x]
        for nx, ny, dir_bit in self.get_neighbors(x, y):
            if not (val & dir_bit):
                yield (nx, ny)
