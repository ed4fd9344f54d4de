"""Tests for the pygame event routing in trivia_snake.main."""

from __future__ import annotations

import os
from dataclasses import replace
from random import Random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
pygame = pytest.importorskip("pygame")

from trivia_snake.driver import GameDriver  # noqa: E402
from trivia_snake.engine import Lifecycle  # noqa: E402
from trivia_snake.highscore import MemoryHighScoreStore  # noqa: E402
from trivia_snake.main import handle_event, parse_args  # noqa: E402
from trivia_snake.render import PygameRenderer, option_rects, window_size  # noqa: E402
from trivia_snake.timers import TickScheduler  # noqa: E402
from trivia_snake.trivia import QuestionPolicy  # noqa: E402


@pytest.fixture(scope="module", autouse=True)
def _pygame():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def scheduler() -> TickScheduler:
    return TickScheduler()


@pytest.fixture
def wired(config, bank, scheduler):
    driver = GameDriver(scheduler, MemoryHighScoreStore(), config=config, rng=Random(0), bank=bank)
    renderer = PygameRenderer(pygame.Surface(window_size(config)), pygame.font.Font(None, 24), config)
    driver.add_listener(renderer)
    return driver, renderer


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos)


class TestHandleEvent:
    def test_quit(self, wired) -> None:
        driver, renderer = wired
        assert handle_event(pygame.event.Event(pygame.QUIT), driver, renderer) is False

    def test_space_starts(self, wired) -> None:
        driver, renderer = wired
        assert handle_event(key(pygame.K_SPACE), driver, renderer) is True
        assert driver.state.lifecycle is Lifecycle.COUNTING_DOWN

    def test_arrow_steers(self, wired) -> None:
        driver, renderer = wired
        handle_event(key(pygame.K_SPACE), driver, renderer)
        handle_event(key(pygame.K_LEFT), driver, renderer)
        assert driver.state.velocity == (-1, 0)

    def test_click_on_board_steers(self, wired, config) -> None:
        driver, renderer = wired
        handle_event(key(pygame.K_SPACE), driver, renderer)
        handle_event(click((config.width // 2, config.height - 5)), driver, renderer)
        assert driver.state.velocity == (0, 1)

    def test_number_key_answers(self, wired, scheduler) -> None:
        driver, renderer = wired
        handle_event(key(pygame.K_SPACE), driver, renderer)
        driver.state = replace(driver.state, target=(0, 0))
        scheduler.advance(2400)
        driver.state = replace(driver.state, score=2, target=(12, 8))
        scheduler.advance(100)
        assert driver.state.lifecycle is Lifecycle.AWAITING_ANSWER
        handle_event(key(pygame.K_1), driver, renderer)
        assert driver.state.lifecycle is Lifecycle.RUNNING

    def test_click_on_option_answers(self, wired, scheduler, config) -> None:
        driver, renderer = wired
        handle_event(key(pygame.K_SPACE), driver, renderer)
        driver.state = replace(driver.state, target=(0, 0))
        scheduler.advance(2400)
        driver.state = replace(driver.state, score=2, target=(12, 8))
        scheduler.advance(100)
        wrong = option_rects(config, 4)[1]
        handle_event(click(wrong.center), driver, renderer)
        assert driver.state.lifecycle is Lifecycle.GAME_OVER


class TestParseArgs:
    def test_defaults(self) -> None:
        args = parse_args([])
        assert args.policy == QuestionPolicy.RANDOM.value
        assert args.seed is None

    def test_sequential(self, tmp_path) -> None:
        args = parse_args(["--policy", "sequential", "--seed", "3", "--highscore-file", str(tmp_path / "hs")])
        assert QuestionPolicy(args.policy) is QuestionPolicy.SEQUENTIAL
        assert args.seed == 3
