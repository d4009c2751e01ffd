"""
Tests for gridsnake.render - drawing onto offscreen surfaces.
"""

from unittest.mock import Mock

import pygame  # type: ignore
import pytest

from gridsnake.config import BG, GREEN, RED, HUD_BG, HUD_HEIGHT
from gridsnake.render import Renderer, cell_size, draw_board, draw_game_over
from gridsnake.state import GameStatus, record_game_over


def _rgb(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def _band(surface, top, bottom, left=100, right=300):
    return [_rgb(surface, x, y) for y in range(top, bottom) for x in range(left, right)]


class TestDrawBoard:
    """Tests for draw_board()."""

    def test_cell_size_from_width(self):
        assert cell_size(pygame.Surface((400, 400))) == 20
        assert cell_size(pygame.Surface((200, 200))) == 10

    def test_snake_and_food_cells(self, state):
        surface = pygame.Surface((400, 400))
        state.food = (2, 3)
        draw_board(surface, state)

        assert _rgb(surface, 10 * 20, 10 * 20) == GREEN
        assert _rgb(surface, 10 * 20 + 18, 11 * 20 + 18) == GREEN
        assert _rgb(surface, 2 * 20 + 5, 3 * 20 + 5) == RED
        assert _rgb(surface, 15 * 20, 15 * 20) == BG

    def test_one_pixel_gutter(self, state):
        surface = pygame.Surface((400, 400))
        draw_board(surface, state)
        # right and bottom edge of the head cell stay background
        assert _rgb(surface, 10 * 20 + 19, 10 * 20 + 5) == BG
        assert _rgb(surface, 10 * 20 + 5, 11 * 20 + 19) == BG

    def test_clears_previous_frame(self, state):
        surface = pygame.Surface((400, 400))
        draw_board(surface, state)
        state.snake = [(0, 5), (0, 6)]
        draw_board(surface, state)
        assert _rgb(surface, 10 * 20, 10 * 20) == BG

    def test_missing_food_is_skipped(self, state):
        surface = pygame.Surface((400, 400))
        state.food = None
        draw_board(surface, state)
        assert _rgb(surface, 0, 0) == BG


class TestRenderer:
    """Smoke tests for the full frame under the dummy video driver."""

    @pytest.fixture
    def renderer(self, pygame_session):
        screen = pygame.display.set_mode((400, HUD_HEIGHT + 400))
        return Renderer(screen, pygame.font.SysFont(None, 24))

    def test_board_below_hud(self, renderer, state):
        renderer(state)
        screen = renderer.screen
        assert _rgb(screen, 1, 1) == HUD_BG
        assert _rgb(screen, 10 * 20 + 2, HUD_HEIGHT + 10 * 20 + 2) == GREEN

    def test_start_message_only_before_first_round(self, renderer, state):
        """The centre of a NOT_STARTED frame carries text a PLAYING frame doesn't."""
        state.snake = [(0, 18), (0, 19)]
        state.food = (19, 19)
        renderer(state)
        playing = _band(renderer.board, 190, 210)

        state.status = GameStatus.NOT_STARTED
        renderer(state)
        waiting = _band(renderer.board, 190, 210)

        assert playing != waiting
        assert set(playing) == {BG}

    def test_game_over_overlay_changes_centre(self, renderer, state):
        state.snake = [(0, 18), (0, 19)]
        state.food = (19, 19)
        renderer(state)
        playing = _band(renderer.board, 160, 240)

        record_game_over(state)
        renderer(state)

        assert _band(renderer.board, 160, 240) != playing


class TestDrawGameOver:
    """Tests for the game-over messages."""

    @staticmethod
    def _font():
        font = Mock()
        font.render.side_effect = lambda text, aa, color: pygame.Surface((40, 10))
        return font

    @staticmethod
    def _texts(font):
        return [c.args[0] for c in font.render.call_args_list]

    def test_new_high_score_notice(self, state):
        """A positive score equal to the high score gets the extra notice."""
        font = self._font()
        state.score = 2
        record_game_over(state)

        draw_game_over(pygame.Surface((400, 400)), font, state)

        assert self._texts(font) == ["game over!", "new high score!", "press SPACE to play again"]

    def test_no_notice_below_high_score(self, state):
        font = self._font()
        state.high_score = 5
        state.score = 2
        record_game_over(state)

        draw_game_over(pygame.Surface((400, 400)), font, state)

        assert self._texts(font) == ["game over!", "press SPACE to play again"]

    def test_no_notice_for_zero_score(self, state):
        font = self._font()
        record_game_over(state)

        draw_game_over(pygame.Surface((400, 400)), font, state)

        assert "new high score!" not in self._texts(font)

    def test_notice_row_drawn_only_with_high_score(self, pygame_session, state):
        """Pixels in the notice row differ; the rows above and below match."""
        font = pygame.font.SysFont(None, 24)
        with_notice = pygame.Surface((400, 400))
        without_notice = pygame.Surface((400, 400))

        state.score = 3
        record_game_over(state)
        draw_board(with_notice, state)
        draw_game_over(with_notice, font, state)

        state.high_score = 9
        draw_board(without_notice, state)
        draw_game_over(without_notice, font, state)

        assert _band(with_notice, 194, 206) != _band(without_notice, 194, 206)
        assert _band(with_notice, 170, 182) == _band(without_notice, 170, 182)
        assert _band(with_notice, 218, 230) == _band(without_notice, 218, 230)
