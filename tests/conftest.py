"""Shared fixtures. pygame runs headless under the dummy SDL drivers."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pygame  # type: ignore
import pytest

from gridsnake.state import GameState, GameStatus, new_game_state, reset


@pytest.fixture
def state() -> GameState:
    """A fresh state already in PLAYING, food parked out of the way."""
    s = new_game_state(random.Random(1234))
    reset(s)
    s.food = (0, 0)
    return s


@pytest.fixture
def idle_state() -> GameState:
    s = new_game_state(random.Random(1234))
    assert s.status is GameStatus.NOT_STARTED
    return s


@pytest.fixture
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


class FakeTimer:
    """Stands in for PygameTimer: records schedule/cancel, never fires."""

    def __init__(self):
        self.token = 0
        self.armed = False
        self.scheduled = []
        self.cancels = 0

    def schedule(self, delay_ms):
        self.cancel()
        self.token += 1
        self.armed = True
        self.scheduled.append(delay_ms)
        return self.token

    def cancel(self):
        self.cancels += 1
        self.armed = False

    def fired(self, token):
        if token == self.token:
            self.armed = False


@pytest.fixture
def fake_timer() -> FakeTimer:
    return FakeTimer()
