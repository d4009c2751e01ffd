# config.py
from dataclasses import dataclass

# ----- Window & grid -----
GRID_SIZE = 20
WIDTH = 400
HUD_HEIGHT = 32

# ----- Colors -----
BG    = (245, 245, 245)
GREEN = (76, 175, 80)
RED   = (255, 0, 0)
TEXT  = (30, 30, 30)
HUD_BG = (225, 225, 230)
PURPLE = (128, 0, 128)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# Fixed 2-segment vertical start, head first
START_SNAKE = [(GRID_SIZE // 2, GRID_SIZE // 2), (GRID_SIZE // 2, GRID_SIZE // 2 + 1)]

# ----- Tunables -----
@dataclass
class Config:
    seed: int = 0
    tick_ms: int = 100
    food_attempts: int = 100
    width: int = WIDTH

    def __post_init__(self):
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.food_attempts < 1:
            raise ValueError(f"food_attempts must be >= 1, got {self.food_attempts}")
        if self.width < 2 * GRID_SIZE or self.width % GRID_SIZE:
            raise ValueError(
                f"width must be a multiple of {GRID_SIZE} and at least {2 * GRID_SIZE}px, got {self.width}"
            )

CFG = Config()
