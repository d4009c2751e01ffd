# loop.py
from enum import Enum
from typing import Callable, Optional
import logging

import pygame  # type: ignore

from .config import CFG
from .game import step_game
from .state import GameState, GameStatus, reset

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


class LoopPhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class PygameTimer:
    """
    The one timer handle: a one-shot TICK_EVENT posted by pygame.
    Each armed shot carries an increasing token so a tick that was already
    queued when the timer got cancelled can be told apart from the live one.
    """

    def __init__(self, event_type: int = TICK_EVENT):
        self.event_type = event_type
        self.token = 0
        self.armed = False

    def schedule(self, delay_ms: int) -> int:
        self.cancel()
        self.token += 1
        event = pygame.event.Event(self.event_type, token=self.token)
        pygame.time.set_timer(event, delay_ms, 1)  # one shot
        self.armed = True
        return self.token

    def cancel(self) -> None:
        if not self.armed:
            return
        pygame.time.set_timer(self.event_type, 0)
        pygame.event.clear(self.event_type)
        self.armed = False

    def fired(self, token: int) -> None:
        """Mark the live shot as delivered; older tokens change nothing."""
        if token == self.token:
            self.armed = False


class TickLoop:
    """Runs step + render once per tick and reschedules until game over."""

    def __init__(
        self,
        state: GameState,
        timer: PygameTimer,
        render: Callable[[GameState], None],
        tick_ms: int = CFG.tick_ms,
        on_game_over: Optional[Callable[[GameState], None]] = None,
    ):
        self.state = state
        self.timer = timer
        self.render = render
        self.tick_ms = tick_ms
        self.on_game_over = on_game_over
        self.phase = LoopPhase.IDLE
        self._token: Optional[int] = None

    def start(self) -> None:
        if self.phase is LoopPhase.RUNNING:
            return
        self._release()
        reset(self.state)
        self.phase = LoopPhase.RUNNING
        logger.info("game started (high score %d)", self.state.high_score)
        self.render(self.state)
        self._token = self.timer.schedule(self.tick_ms)

    def stop(self) -> None:
        self._release()
        if self.phase is LoopPhase.RUNNING:
            self.phase = LoopPhase.STOPPED

    def tick(self, token: int) -> bool:
        """Handle a fired tick. Returns False if the tick was stale and ignored."""
        if self.phase is not LoopPhase.RUNNING or token != self._token:
            logger.debug("ignoring stale tick %s (live %s)", token, self._token)
            return False
        self._token = None
        self.timer.fired(token)

        step_game(self.state)
        self.render(self.state)

        if self.state.status is GameStatus.PLAYING:
            self._token = self.timer.schedule(self.tick_ms)
        else:
            self._release()
            self.phase = LoopPhase.STOPPED
            if self.on_game_over is not None:
                self.on_game_over(self.state)
        return True

    def _release(self) -> None:
        self.timer.cancel()
        self._token = None
