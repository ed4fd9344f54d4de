from dataclasses import dataclass
from typing import Tuple

# ----- Canvas & grid -----
WIDTH, HEIGHT = 500, 380
CELL_SIZE = 20
GRID_W, GRID_H = WIDTH // CELL_SIZE, HEIGHT // CELL_SIZE
STATUS_H = 60  # score bar below the board

# ----- Colors -----
BG         = (245, 245, 245)
GRID_LINE  = (225, 225, 230)
BLUE       = (1, 112, 243)
BLUE_EDGE  = (0, 55, 121)
RED        = (220, 48, 48)
RED_EDGE   = (136, 26, 27)
ARROW      = (0, 0, 0)
TEXT       = (30, 30, 40)
OVERLAY    = (0, 0, 0, 150)
LIGHT_TEXT = (240, 240, 250)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
STILL = (0, 0)

# ----- Timing -----
COUNTDOWN_FROM = 3
COUNTDOWN_MS = 800
MIN_SPEED = 10   # moves per second at the start
MAX_SPEED = 15   # ramp stops here

# ----- Trivia -----
TRIVIA_EVERY = 3


# ----- Tunables -----
@dataclass(frozen=True)
class Config:
    seed: int = 0
    width: int = WIDTH
    height: int = HEIGHT
    cell_size: int = CELL_SIZE
    start_head: Tuple[int, int] = (12, 9)
    countdown_from: int = COUNTDOWN_FROM
    countdown_ms: int = COUNTDOWN_MS
    min_speed: int = MIN_SPEED
    max_speed: int = MAX_SPEED
    trivia_every: int = TRIVIA_EVERY
    placement_retries: int = 1000

    @property
    def grid_w(self) -> int:
        return self.width // self.cell_size

    @property
    def grid_h(self) -> int:
        return self.height // self.cell_size


CFG = Config()
