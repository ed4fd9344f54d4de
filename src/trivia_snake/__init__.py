"""Grid snake with a trivia gate every few apples."""

from .config import CFG, Config
from .driver import GameDriver
from .engine import (
    GameState,
    Lifecycle,
    UNSET,
    game_over,
    move_period_ms,
    new_game_state,
    start,
    steer,
    submit_answer,
    tick_countdown,
    tick_move,
)
from .errors import InvalidTransitionError, PlacementError, TriviaSnakeError
from .highscore import FileHighScoreStore, MemoryHighScoreStore
from .timers import TickScheduler
from .trivia import DEFAULT_BANK, Question, QuestionPolicy, TriviaState

__all__ = [
    "CFG",
    "Config",
    "DEFAULT_BANK",
    "FileHighScoreStore",
    "GameDriver",
    "GameState",
    "InvalidTransitionError",
    "Lifecycle",
    "MemoryHighScoreStore",
    "PlacementError",
    "Question",
    "QuestionPolicy",
    "TickScheduler",
    "TriviaSnakeError",
    "TriviaState",
    "UNSET",
    "game_over",
    "move_period_ms",
    "new_game_state",
    "start",
    "steer",
    "submit_answer",
    "tick_countdown",
    "tick_move",
]
