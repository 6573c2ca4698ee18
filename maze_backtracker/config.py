from dataclasses import dataclass

WIDTH = 600
HEIGHT = 600
ROWS = 20
COLS = 20
FPS = 60


@dataclass(frozen=True)
class SketchConfig:
    # Canvas size in pixels
    width: int = WIDTH
    height: int = HEIGHT
    # Grid shape
    rows: int = ROWS
    cols: int = COLS
    # Target ticks per second (visual speed only)
    fps: int = FPS

    def __post_init__(self):
        for name in ("width", "height", "rows", "cols", "fps"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if self.width < self.cols or self.height < self.rows:
            raise ValueError(
                f"Canvas {self.width}x{self.height} too small for a {self.cols}x{self.rows} grid")

    @property
    def cell_width(self) -> int:
        return self.width // self.cols

    @property
    def cell_height(self) -> int:
        return self.height // self.rows
