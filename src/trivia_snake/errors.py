"""Exception types for Trivia Snake.

Gameplay outcomes (wall strike, self collision, wrong answer) are never
exceptions; they are the ``GAME_OVER`` lifecycle. These types cover calls
made in the wrong lifecycle and broken invariants.
"""


class TriviaSnakeError(Exception):
    """Base class for all Trivia Snake errors."""


class InvalidTransitionError(TriviaSnakeError):
    """A transition was requested in a lifecycle where it is not valid."""

    def __init__(self, operation: str, lifecycle) -> None:
        super().__init__(f"{operation}() is not valid while {lifecycle.value}")
        self.operation = operation
        self.lifecycle = lifecycle


class PlacementError(TriviaSnakeError):
    """No free cell was left for the target."""
