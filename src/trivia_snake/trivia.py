# trivia.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple
import random


class QuestionPolicy(str, Enum):
    RANDOM = "random"          # uniform, with replacement
    SEQUENTIAL = "sequential"  # bank order, wraps around


@dataclass(frozen=True)
class Question:
    text: str
    options: Tuple[str, ...]
    correct_option: str

    def __post_init__(self):
        if not self.options:
            raise ValueError(f"Question {self.text!r} has no options")
        if self.correct_option not in self.options:
            raise ValueError(
                f"Correct option {self.correct_option!r} is not one of {self.options!r}"
            )


@dataclass(frozen=True)
class TriviaState:
    question: Optional[Question] = None
    asked_for_milestone: bool = False
    cursor: int = 0


DEFAULT_BANK: Tuple[Question, ...] = (
    Question("What is 2 + 2?", ("4", "5", "6", "7"), "4"),
    Question("How many sides does a hexagon have?", ("5", "6", "7", "8"), "6"),
    Question("What is the chemical symbol for gold?", ("Ag", "Au", "Gd", "Go"), "Au"),
    Question("Which planet is known as the Red Planet?", ("Venus", "Jupiter", "Mars", "Mercury"), "Mars"),
    Question("What is 9 x 7?", ("56", "63", "72", "81"), "63"),
    Question("How many minutes are in two hours?", ("60", "100", "120", "200"), "120"),
)


def next_question(
    bank: Sequence[Question],
    policy: QuestionPolicy,
    cursor: int,
    rng: random.Random,
) -> Tuple[Question, int]:
    """
    Draw the next question. Returns (question, new_cursor).
    RANDOM ignores the cursor; SEQUENTIAL reads bank[cursor] and advances it.
    """
    if not bank:
        raise ValueError("Question bank is empty")
    if policy is QuestionPolicy.RANDOM:
        return bank[rng.randrange(len(bank))], cursor
    index = cursor % len(bank)
    return bank[index], (index + 1) % len(bank)
