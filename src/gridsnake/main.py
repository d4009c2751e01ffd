# main.py
from typing import List, Optional
import argparse
import logging
import random

import pygame  # type: ignore

from .config import HUD_HEIGHT, CFG, Config
from .controls import handle_event
from .loop import PygameTimer, TickLoop, TICK_EVENT
from .render import Renderer
from .state import GameState, new_game_state

logger = logging.getLogger(__name__)

CAPTION = "Snake"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Grid snake game.")
    parser.add_argument("--seed", type=int, default=CFG.seed, help="seed for food placement")
    parser.add_argument(
        "--tick-ms",
        type=int,
        default=CFG.tick_ms,
        help="milliseconds between snake moves",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=CFG.width,
        help="board width in pixels (the board is square)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)
    try:
        args.config = Config(seed=args.seed, tick_ms=args.tick_ms, width=args.width)
    except ValueError as exc:
        parser.error(str(exc))
    return args


def _show_game_over(state: GameState) -> None:
    pygame.display.set_caption(f"{CAPTION}: game over ({state.score})")


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    cfg: Config = args.config
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((cfg.width, HUD_HEIGHT + cfg.width))
    pygame.display.set_caption(CAPTION)
    clock = pygame.time.Clock()

    state = new_game_state(random.Random(cfg.seed), cfg.food_attempts)
    render = Renderer(screen, font)
    loop = TickLoop(state, PygameTimer(), render, cfg.tick_ms, on_game_over=_show_game_over)

    def start() -> None:
        pygame.display.set_caption(CAPTION)
        loop.start()

    render(state)
    logger.info("ready: seed=%d tick_ms=%d", cfg.seed, cfg.tick_ms)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == TICK_EVENT:
                loop.tick(event.token)
            elif not handle_event(state, event, start):
                running = False
                break
        clock.tick(60)  # ticks are paced by the timer, this only caps polling

    loop.stop()
    pygame.quit()

if __name__ == "__main__":
    main()
