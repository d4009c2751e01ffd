# state.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Optional
import logging
import random

import numpy as np  # type: ignore

from .config import GRID_SIZE, UP, START_SNAKE, CFG

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


class GameStatus(Enum):
    NOT_STARTED = "not_started"
    PLAYING = "playing"
    GAME_OVER = "game_over"


# ---------- Food placement ----------
def _first_free_cell(snake: List[Position]) -> Optional[Position]:
    """Row-major scan of an occupancy grid. None means the board is full."""
    occupied = np.zeros((GRID_SIZE, GRID_SIZE), dtype=bool)  # [y, x]
    for x, y in snake:
        occupied[y, x] = True
    free = np.argwhere(~occupied)
    if free.size == 0:
        logger.error("no free cell for food: snake covers all %d cells", GRID_SIZE * GRID_SIZE)
        return None
    y, x = free[0]
    return (int(x), int(y))

def spawn_food(snake: List[Position], rng: random.Random,
               attempts: int = CFG.food_attempts) -> Optional[Position]:
    """
    Pick a uniformly random cell not covered by the snake.
    Random draws are capped at `attempts`; after that the first free cell
    is taken deterministically.
    """
    occupied = set(snake)
    for _ in range(attempts):
        cell = (rng.randrange(GRID_SIZE), rng.randrange(GRID_SIZE))
        if cell not in occupied:
            return cell
    logger.debug("random food placement gave up after %d attempts, scanning", attempts)
    return _first_free_cell(snake)


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Position]               # head at index 0
    direction: Tuple[int, int]          # heading in effect for the current tick
    pending: Tuple[int, int]            # next heading, consumed by step_game
    food: Optional[Position]
    score: int = 0
    high_score: int = 0
    status: GameStatus = GameStatus.NOT_STARTED
    rng: random.Random = field(default_factory=random.Random, repr=False)
    food_attempts: int = CFG.food_attempts

def new_game_state(rng: Optional[random.Random] = None,
                   food_attempts: int = CFG.food_attempts) -> GameState:
    if rng is None:
        rng = random.Random(CFG.seed)
    snake = list(START_SNAKE)
    return GameState(
        snake=snake,
        direction=UP,
        pending=UP,
        food=spawn_food(snake, rng, food_attempts),
        rng=rng,
        food_attempts=food_attempts,
    )

def reset(state: GameState) -> None:
    """Start (or restart) a round. The high score survives."""
    state.snake = list(START_SNAKE)
    state.direction = UP
    state.pending = UP
    state.score = 0
    state.food = spawn_food(state.snake, state.rng, state.food_attempts)
    state.status = GameStatus.PLAYING

def record_game_over(state: GameState) -> None:
    state.status = GameStatus.GAME_OVER
    if state.score > state.high_score:
        state.high_score = state.score
    logger.info("game over: score=%d high_score=%d", state.score, state.high_score)

def is_new_high_score(state: GameState) -> bool:
    return state.score == state.high_score and state.score > 0
