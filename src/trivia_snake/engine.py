# engine.py
from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Sequence, Tuple
import logging
import random

from .config import Config, UP, DOWN, LEFT, RIGHT, STILL
from .errors import InvalidTransitionError
from .placement import spawn_target
from .trivia import Question, QuestionPolicy, TriviaState, next_question

logger = logging.getLogger(__name__)

Position = Tuple[int, int]
Velocity = Tuple[int, int]

UNSET: Position = (-1, -1)  # target before first placement
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)


class Lifecycle(str, Enum):
    IDLE = "idle"
    COUNTING_DOWN = "counting_down"
    RUNNING = "running"
    AWAITING_ANSWER = "awaiting_answer"
    GAME_OVER = "game_over"


# ---------- Helpers ----------
def is_opposite(a: Velocity, b: Velocity) -> bool:
    return a[0] + b[0] == 0 and a[1] + b[1] == 0


def in_bounds(pos: Position, config: Config) -> bool:
    x, y = pos
    return 0 <= x < config.grid_w and 0 <= y < config.grid_h


def move_period_ms(score: int, config: Config) -> float:
    """Movement tick period for a score: 1000/score inside (min_speed, max_speed]."""
    if score <= config.min_speed:
        return 1000 / config.min_speed
    if score <= config.max_speed:
        return 1000 / score
    return 1000 / config.max_speed


# ---------- State ----------
@dataclass(frozen=True)
class GameState:
    head: Position
    trail: Tuple[Position, ...]        # oldest first, head not included
    target: Position
    velocity: Velocity                 # pending direction, applied on the next move
    previous_velocity: Velocity        # direction of the last committed move
    score: int
    high_score: int
    new_high_score: bool
    lifecycle: Lifecycle
    countdown: int
    trivia: TriviaState = field(default_factory=TriviaState)
    moves: int = 0

    def occupied(self) -> Tuple[Position, ...]:
        return (self.head, *self.trail)


def new_game_state(config: Config, high_score: int = 0) -> GameState:
    """The idle snapshot shown before the first game."""
    return GameState(
        head=config.start_head,
        trail=(),
        target=UNSET,
        velocity=STILL,
        previous_velocity=STILL,
        score=0,
        high_score=high_score,
        new_high_score=False,
        lifecycle=Lifecycle.IDLE,
        countdown=0,
    )


def _require(state: GameState, operation: str, *allowed: Lifecycle) -> None:
    if state.lifecycle not in allowed:
        raise InvalidTransitionError(operation, state.lifecycle)


# ---------- Transitions ----------
def start(state: GameState, config: Config, rng: random.Random) -> GameState:
    """Fresh session: reset snake, place a target, count down from 3."""
    head = config.start_head
    return GameState(
        head=head,
        trail=(),
        target=spawn_target(head, (), config, rng),
        velocity=UP,
        previous_velocity=STILL,
        score=0,
        high_score=state.high_score,
        new_high_score=False,
        lifecycle=Lifecycle.COUNTING_DOWN,
        countdown=config.countdown_from,
        trivia=TriviaState(cursor=state.trivia.cursor),
    )


def tick_countdown(state: GameState) -> GameState:
    _require(state, "tick_countdown", Lifecycle.COUNTING_DOWN)
    remaining = state.countdown - 1
    if remaining <= 0:
        return replace(state, countdown=0, lifecycle=Lifecycle.RUNNING)
    return replace(state, countdown=remaining)


def game_over(state: GameState) -> GameState:
    """Terminal transition shared by wall strikes, self collisions and wrong answers."""
    beaten = state.score > state.high_score
    if beaten:
        logger.info("New high score %d (was %d)", state.score, state.high_score)
    return replace(
        state,
        lifecycle=Lifecycle.GAME_OVER,
        velocity=STILL,
        high_score=state.score if beaten else state.high_score,
        new_high_score=beaten,
        trivia=replace(state.trivia, question=None),
    )


def tick_move(
    state: GameState,
    config: Config,
    rng: random.Random,
    bank: Sequence[Question],
    policy: QuestionPolicy = QuestionPolicy.RANDOM,
) -> GameState:
    """
    Advance the snake by one cell.
    Wall and self collisions end the game without moving the snake.
    """
    _require(state, "tick_move", Lifecycle.RUNNING)

    hx, hy = state.head
    dx, dy = state.velocity
    next_head = (hx + dx, hy + dy)

    # Wall collision
    if not in_bounds(next_head, config):
        logger.debug("Wall hit at %s, score %d", next_head, state.score)
        return game_over(state)

    # Eat; the new target avoids the snake as it is before this move and the cell being entered
    score, target = state.score, state.target
    if next_head == state.target:
        score += 1
        target = spawn_target(state.head, (*state.trail, next_head), config, rng)

    # Body keeps the last score + 2 head positions
    trail = (*state.trail, state.head)
    if len(trail) > score + 2:
        trail = trail[len(trail) - (score + 2):]

    # Self collision
    if next_head in trail:
        logger.debug("Self collision at %s, score %d", next_head, score)
        return game_over(replace(state, score=score))

    state = replace(
        state,
        head=next_head,
        trail=trail,
        target=target,
        score=score,
        previous_velocity=state.velocity,
        moves=state.moves + 1,
    )
    return _check_milestone(state, config, rng, bank, policy)


def _check_milestone(
    state: GameState,
    config: Config,
    rng: random.Random,
    bank: Sequence[Question],
    policy: QuestionPolicy,
) -> GameState:
    trivia = state.trivia
    at_milestone = state.score > 0 and state.score % config.trivia_every == 0
    if at_milestone and not trivia.asked_for_milestone:
        question, cursor = next_question(bank, policy, trivia.cursor, rng)
        logger.info("Milestone %d reached, asking %r", state.score, question.text)
        return replace(
            state,
            lifecycle=Lifecycle.AWAITING_ANSWER,
            trivia=TriviaState(question=question, asked_for_milestone=True, cursor=cursor),
        )
    if not at_milestone and trivia.asked_for_milestone:
        return replace(state, trivia=replace(trivia, asked_for_milestone=False))
    return state


def submit_answer(state: GameState, selected: str) -> GameState:
    _require(state, "submit_answer", Lifecycle.AWAITING_ANSWER)
    question = state.trivia.question
    if question is not None and selected == question.correct_option:
        return replace(
            state,
            lifecycle=Lifecycle.RUNNING,
            trivia=replace(state.trivia, question=None),
        )
    logger.info("Wrong answer %r, game over at score %d", selected, state.score)
    return game_over(state)


def steer(state: GameState, candidate: Velocity) -> GameState:
    """Buffer a direction intent unless it reverses the last committed move."""
    if state.lifecycle in (Lifecycle.IDLE, Lifecycle.GAME_OVER):
        return state
    if candidate not in DIRECTIONS:
        return state
    if is_opposite(candidate, state.previous_velocity):
        return state
    if candidate == state.velocity:
        return state
    return replace(state, velocity=candidate)
