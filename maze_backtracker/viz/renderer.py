import logging
import pygame
from maze_backtracker.viz.sketch import MazeSketch
from maze_backtracker.viz.recorder import VideoRecorder

logger = logging.getLogger(__name__)


class PygameCanvas:
    """Executes draw commands on a pygame Surface."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface

    def clear(self, color):
        self.surface.fill(color)

    def fill_rect(self, x, y, w, h, color):
        pygame.draw.rect(self.surface, color, (x, y, w, h))

    def line(self, x1, y1, x2, y2, color):
        pygame.draw.line(self.surface, color, (x1, y1), (x2, y2), 1)


class Renderer:
    # Frames kept on screen after completion when closing automatically
    HOLD_SECONDS = 2

    def __init__(self, sketch: MazeSketch, record=False, close_when_done=False):
        self.sketch = sketch
        self.config = sketch.config
        self.close_when_done = close_when_done
        self.recorder = VideoRecorder(active=record, fps=self.config.fps)

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.canvas = None
        self.show_hud = True

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze Backtracker - {self.config.cols}x{self.config.rows}")
        self.surface = pygame.display.set_mode((self.config.width, self.config.height))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)
        self.canvas = PygameCanvas(self.surface)
        logger.info(f"Window {self.config.width}x{self.config.height} at {self.config.fps} FPS")

        self.sketch.setup(self.canvas)

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_h:
                    self.show_hud = not self.show_hud

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        state = self.sketch.state
        rec_status = "REC" if self.recorder.active else ""
        status = "Done" if self.sketch.finished else "Running"
        info = [
            f"FPS: {fps}",
            f"Size: {state.cols}x{state.rows}",
            f"Stack: {len(state.stack)}",
            f"Status: {status}",
            rec_status
        ]

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def run_loop(self):
        hold_frames = self.HOLD_SECONDS * self.config.fps

        try:
            while self.running:
                self.handle_input()

                self.sketch.tick(self.canvas)
                if self.show_hud:
                    self.draw_hud()
                pygame.display.flip()

                if self.recorder.active:
                    self.recorder.capture_frame(self.surface)

                if self.sketch.finished and self.close_when_done:
                    hold_frames -= 1
                    if hold_frames <= 0:
                        self.running = False

                self.clock.tick(self.config.fps)
        finally:
            logger.info(f"Closed after {self.sketch.ticks} frames")
            self.recorder.stop()
            pygame.quit()
