"""Shared fixtures for the Trivia Snake tests."""

from __future__ import annotations

from dataclasses import replace
from random import Random

import pytest

from trivia_snake.config import Config, UP
from trivia_snake.engine import GameState, Lifecycle, new_game_state
from trivia_snake.trivia import Question

ONE_QUESTION = (Question("What is 2 + 2?", ("4", "5", "6", "7"), "4"),)


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def rng() -> Random:
    return Random(0)


@pytest.fixture
def bank() -> tuple[Question, ...]:
    return ONE_QUESTION


@pytest.fixture
def running(config: Config):
    """Factory for RUNNING snapshots; the target is parked in a corner unless overridden."""

    def make(**overrides) -> GameState:
        state = replace(
            new_game_state(config),
            lifecycle=Lifecycle.RUNNING,
            velocity=UP,
            target=(0, 0),
        )
        return replace(state, **overrides)

    return make
