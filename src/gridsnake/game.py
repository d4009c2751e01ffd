# game.py
from typing import Tuple
import logging

from .config import GRID_SIZE
from .state import GameState, GameStatus, record_game_over, spawn_food

logger = logging.getLogger(__name__)

# ---------- Helpers ----------
def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE

# ---------- Update ----------
def step_game(state: GameState) -> bool:
    """
    Advance the game by one tick.
    Collisions are checked against the snake as it was before the move,
    so stepping onto the cell the tail is leaving still ends the game.
    Returns True if alive, False if game over (or not playing).
    """
    if state.status is not GameStatus.PLAYING:
        return False

    # Commit direction once per tick
    if not is_opposite(state.pending, state.direction):
        state.direction = state.pending
    state.pending = state.direction

    hx, hy = state.snake[0]
    dx, dy = state.direction
    nx, ny = hx + dx, hy + dy

    # Wall collision
    if not in_bounds(nx, ny):
        record_game_over(state)
        return False

    new_head = (nx, ny)

    # Self collision, tail included
    if new_head in state.snake:
        record_game_over(state)
        return False

    state.snake.insert(0, new_head)

    # Grow or move
    if new_head == state.food:
        state.score += 1
        if state.score > state.high_score:
            state.high_score = state.score
        state.food = spawn_food(state.snake, state.rng, state.food_attempts)
        logger.debug("ate food at %s, score=%d, next food %s", new_head, state.score, state.food)
    else:
        state.snake.pop()

    return True
