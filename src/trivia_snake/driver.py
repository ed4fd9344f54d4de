# driver.py
from __future__ import annotations
from typing import Callable, List, Optional, Sequence
import logging
import random

from . import engine
from .config import Config, CFG
from .controls import direction_for_key, direction_for_tap
from .engine import GameState, Lifecycle, Velocity
from .highscore import HighScoreStore
from .timers import Scheduler, Timer
from .trivia import DEFAULT_BANK, Question, QuestionPolicy

logger = logging.getLogger(__name__)

Listener = Callable[[GameState], None]


class GameDriver:
    """
    Owns the one GameState and the two periodic triggers that advance it.

    - countdown timer: scheduled only while COUNTING_DOWN, fixed period
    - movement timer: scheduled only while RUNNING, period from the speed ramp
    Every callback reads the state, applies one engine transition and commits
    it before anything else runs.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        store: HighScoreStore,
        config: Config = CFG,
        rng: Optional[random.Random] = None,
        bank: Sequence[Question] = DEFAULT_BANK,
        policy: QuestionPolicy = QuestionPolicy.RANDOM,
    ):
        self.config = config
        self.scheduler = scheduler
        self.store = store
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.bank = tuple(bank)
        self.policy = policy
        self.state = engine.new_game_state(config, high_score=store.get())

        self._listeners: List[Listener] = []
        self._countdown_timer: Optional[Timer] = None
        self._move_timer: Optional[Timer] = None
        self._move_period: Optional[float] = None

    # ----- Collaborators -----
    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    # ----- Commands -----
    def start(self) -> None:
        logger.info("Starting a new game (high score %d)", self.state.high_score)
        self.close()
        self._commit(engine.start(self.state, self.config, self.rng))

    def steer(self, velocity: Velocity) -> None:
        self._commit(engine.steer(self.state, velocity))

    def press_key(self, name: str) -> None:
        velocity = direction_for_key(name)
        if velocity is not None:
            self.steer(velocity)

    def tap(self, x: float, y: float) -> None:
        self.steer(direction_for_tap(x, y, self.config.width, self.config.height))

    def answer(self, option: str) -> None:
        self._commit(engine.submit_answer(self.state, option))

    def close(self) -> None:
        """Release both timers; safe to call more than once."""
        self._stop_countdown()
        self._stop_movement()

    # ----- Timer callbacks -----
    def _on_countdown(self) -> None:
        self._commit(engine.tick_countdown(self.state))

    def _on_move(self) -> None:
        self._commit(
            engine.tick_move(self.state, self.config, self.rng, self.bank, self.policy)
        )

    # ----- Internals -----
    def _commit(self, new_state: GameState) -> None:
        old = self.state
        if new_state is old:
            return
        self.state = new_state
        if new_state.lifecycle is not old.lifecycle:
            logger.debug("Lifecycle %s -> %s", old.lifecycle.value, new_state.lifecycle.value)
        # timers follow the committed state before any collaborator runs
        self._sync_timers()
        try:
            if new_state.new_high_score and not old.new_high_score:
                self.store.set(new_state.high_score)
        finally:
            for listener in self._listeners:
                listener(new_state)

    def _sync_timers(self) -> None:
        lifecycle = self.state.lifecycle

        if lifecycle is Lifecycle.COUNTING_DOWN:
            if self._countdown_timer is None:
                self._countdown_timer = self.scheduler.schedule(
                    self.config.countdown_ms, self._on_countdown
                )
        else:
            self._stop_countdown()

        if lifecycle is Lifecycle.RUNNING:
            period = engine.move_period_ms(self.state.score, self.config)
            if self._move_timer is not None and period != self._move_period:
                logger.debug("Move period %.1f ms -> %.1f ms", self._move_period, period)
                self._stop_movement()
            if self._move_timer is None:
                self._move_timer = self.scheduler.schedule(period, self._on_move)
                self._move_period = period
        else:
            self._stop_movement()

    def _stop_countdown(self) -> None:
        if self._countdown_timer is not None:
            self._countdown_timer.cancel()
            self._countdown_timer = None

    def _stop_movement(self) -> None:
        if self._move_timer is not None:
            self._move_timer.cancel()
            self._move_timer = None
            self._move_period = None
