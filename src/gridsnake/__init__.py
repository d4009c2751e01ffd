"""Single-player grid snake game built on pygame."""

from .state import GameState, GameStatus, new_game_state, reset, record_game_over
from .game import step_game
from .loop import TickLoop, PygameTimer, LoopPhase

__all__ = [
    "GameState", "GameStatus", "new_game_state", "reset", "record_game_over",
    "step_game", "TickLoop", "PygameTimer", "LoopPhase",
]
