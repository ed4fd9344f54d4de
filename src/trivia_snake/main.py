# main.py
import argparse
import logging
import random
from pathlib import Path

import pygame # type: ignore

from .config import Config
from .driver import GameDriver
from .engine import Lifecycle
from .highscore import FileHighScoreStore
from .logging_config import configure_logging
from .render import PygameRenderer, window_size
from .timers import TickScheduler
from .trivia import QuestionPolicy

logger = logging.getLogger(__name__)

DEFAULT_HIGHSCORE_FILE = Path.home() / ".trivia_snake" / "highscore"
START_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_r)
ANSWER_KEYS = (pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Snake with a trivia question every few apples.")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed (default: random)")
    parser.add_argument(
        "--policy",
        type=str,
        default=QuestionPolicy.RANDOM.value,
        choices=[p.value for p in QuestionPolicy],
        help="How the next trivia question is picked",
    )
    parser.add_argument(
        "--highscore-file",
        type=Path,
        default=DEFAULT_HIGHSCORE_FILE,
        help="Where the high score is kept",
    )
    parser.add_argument("--log-level", type=str, default="WARNING")
    return parser.parse_args(argv)


def handle_event(event, driver: GameDriver, renderer: PygameRenderer) -> bool:
    """Route one pygame event to the driver. Return False to quit."""
    state = driver.state
    if event.type == pygame.QUIT:
        return False

    if event.type == pygame.KEYDOWN:
        if event.key in START_KEYS and state.lifecycle in (Lifecycle.IDLE, Lifecycle.GAME_OVER):
            driver.start()
        elif event.key in ANSWER_KEYS and state.lifecycle is Lifecycle.AWAITING_ANSWER:
            options = state.trivia.question.options
            index = ANSWER_KEYS.index(event.key)
            if index < len(options):
                driver.answer(options[index])
        else:
            driver.press_key(pygame.key.name(event.key))

    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        option = renderer.option_at(event.pos)
        if option is not None:
            driver.answer(option)
        elif event.pos[1] < driver.config.height:
            driver.tap(*event.pos)
    return True


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.log_level)

    config = Config(seed=args.seed if args.seed is not None else random.randrange(2**31))
    logger.info("Seed %d, question policy %s", config.seed, args.policy)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode(window_size(config))
    pygame.display.set_caption("Trivia Snake")
    clock = pygame.time.Clock()

    scheduler = TickScheduler(now_ms=pygame.time.get_ticks())
    driver = GameDriver(
        scheduler,
        FileHighScoreStore(args.highscore_file),
        config=config,
        policy=QuestionPolicy(args.policy),
    )
    renderer = PygameRenderer(screen, font, config)
    driver.add_listener(renderer)
    renderer(driver.state)

    running = True
    try:
        while running:
            # 1) input
            for event in pygame.event.get():
                if not handle_event(event, driver, renderer):
                    running = False
                    break

            # 2) update: fire whatever timers are due
            scheduler.run_due(pygame.time.get_ticks(), catch_up=False)

            # 3) render
            renderer.draw()
            pygame.display.flip()
            clock.tick(60)  # movement is paced by the scheduler, not the frame rate
    finally:
        driver.close()
        scheduler.cancel_all()
        pygame.quit()


if __name__ == "__main__":
    main()
