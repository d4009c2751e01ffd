# render.py
from typing import Tuple
import pygame  # type: ignore

from .config import GRID_SIZE, HUD_HEIGHT, BG, GREEN, RED, TEXT, HUD_BG, PURPLE
from .state import GameState, GameStatus, is_new_high_score

# ---------- Helpers ----------
def cell_size(surface: pygame.Surface) -> int:
    return surface.get_width() // GRID_SIZE

def draw_cell(surface: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    size = cell_size(surface)
    # 1px gutter on the right/bottom of every cell
    rect = pygame.Rect(gx * size, gy * size, size - 1, size - 1)
    pygame.draw.rect(surface, color, rect)

def _blit_centered(surface: pygame.Surface, text: pygame.Surface, dy: int) -> None:
    w, h = surface.get_size()
    surface.blit(text, text.get_rect(center=(w // 2, h // 2 + dy)))

# ---------- Draw ----------
def draw_board(surface: pygame.Surface, state: GameState) -> None:
    surface.fill(BG)
    for x, y in state.snake:
        draw_cell(surface, x, y, GREEN)
    if state.food is not None:
        draw_cell(surface, state.food[0], state.food[1], RED)

def draw_scores(surface: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    surface.fill(HUD_BG)
    score = font.render(f"Score: {state.score}", True, TEXT)
    high = font.render(f"High score: {state.high_score}", True, TEXT)
    mid = surface.get_height() // 2
    surface.blit(score, score.get_rect(midleft=(8, mid)))
    surface.blit(high, high.get_rect(midright=(surface.get_width() - 8, mid)))

def draw_start_message(surface: pygame.Surface, font: pygame.font.Font) -> None:
    _blit_centered(surface, font.render("press SPACE to start", True, TEXT), 0)

def draw_game_over(surface: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    # Dim with translucent overlay
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill((255, 255, 255, 160))  # RGBA
    surface.blit(overlay, (0, 0))

    _blit_centered(surface, font.render("game over!", True, RED), -24)
    if is_new_high_score(state):
        _blit_centered(surface, font.render("new high score!", True, PURPLE), 0)
    _blit_centered(surface, font.render("press SPACE to play again", True, TEXT), 24)


class Renderer:
    """Owns the window: HUD strip on top, square board below."""

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font):
        width = screen.get_width()
        self.screen = screen
        self.font = font
        self.hud = screen.subsurface(pygame.Rect(0, 0, width, HUD_HEIGHT))
        self.board = screen.subsurface(pygame.Rect(0, HUD_HEIGHT, width, width))

    def __call__(self, state: GameState) -> None:
        draw_scores(self.hud, self.font, state)
        draw_board(self.board, state)
        if state.status is GameStatus.NOT_STARTED:
            draw_start_message(self.board, self.font)
        elif state.status is GameStatus.GAME_OVER:
            draw_game_over(self.board, self.font, state)
        pygame.display.flip()
