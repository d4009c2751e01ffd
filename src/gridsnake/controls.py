# controls.py
from typing import Callable, Dict, Tuple
import logging

import pygame  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT
from .game import is_opposite
from .state import GameState, GameStatus

logger = logging.getLogger(__name__)

START_KEY = pygame.K_SPACE

KEY_DIRECTIONS: Dict[int, Tuple[int, int]] = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}

def handle_key(state: GameState, key: int, start: Callable[[], None]) -> None:
    """
    Start/restart on SPACE when not playing; otherwise queue a turn.
    A turn is checked against the current heading, not the pending one,
    so two quick presses can't sneak in a 180° reversal.
    """
    if state.status is not GameStatus.PLAYING:
        if key == START_KEY:
            start()
        return

    cand = KEY_DIRECTIONS.get(key)
    if cand is None:
        return
    if is_opposite(cand, state.direction):
        logger.debug("rejected reversal %s while heading %s", cand, state.direction)
        return
    state.pending = cand

def handle_event(state: GameState, event: pygame.event.Event, start: Callable[[], None]) -> bool:
    """Process one event. Return False to quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        handle_key(state, event.key, start)
    return True
