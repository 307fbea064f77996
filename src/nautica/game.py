"""Game flow for a single Nautica round: attempt budget, difficulty and win/lose state."""

from __future__ import annotations

import enum
import logging
from typing import Optional

import numpy as np

from . import config as _cfg
from .board import CellCode, NauticaBoard

logger = logging.getLogger(__name__)


class GameState(enum.Enum):
    NOT_STARTED = enum.auto()
    PLAYING = enum.auto()
    WON = enum.auto()
    LOST = enum.auto()


class Difficulty(enum.Enum):
    """Difficulty levels, valued by their configuration key."""

    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"

    @property
    def ship_probability(self) -> float:
        return _cfg.SHIP_PROBABILITY[self.value]


class NauticaGame:
    """
    Owns one board and drives it through rounds.

    Only misses consume attempts; hits are free. A round is won once every
    ship cell has been hit and lost once the attempts run out, whichever
    drop_bomb() notices first.
    """

    def __init__(
        self,
        board_size: int,
        difficulty: Difficulty = Difficulty.NORMAL,
        rng: Optional[np.random.Generator] = None,
    ):
        self.board = NauticaBoard(board_size, rng=rng)
        self.difficulty = Difficulty(difficulty)
        self.max_attempts = 0
        self.attempts_remaining = 0
        self._state = GameState.NOT_STARTED

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state is GameState.PLAYING

    @property
    def is_over(self) -> bool:
        return self._state in (GameState.WON, GameState.LOST)

    @property
    def attempts_used(self) -> int:
        return self.max_attempts - self.attempts_remaining

    def _set_state(self, state: GameState) -> None:
        if state is not self._state:
            logger.debug("state %s -> %s", self._state.name, state.name)
        self._state = state

    def start_new_game(self, max_attempts: Optional[int] = None) -> None:
        """Reset the attempt budget and reseed the board for a fresh round.

        *max_attempts* defaults to the board size when omitted or not positive.
        """
        if max_attempts is None or max_attempts <= 0:
            max_attempts = self.board.size

        self.max_attempts = max_attempts
        self.attempts_remaining = max_attempts
        self._set_state(GameState.PLAYING)

        self.board.randomize(self.difficulty.ship_probability)
        logger.info(
            "New round – size=%d difficulty=%s ships=%d attempts=%d",
            self.board.size,
            self.difficulty.value,
            self.board.ship_count,
            self.max_attempts,
        )

    def drop_bomb(self, x: int, y: int) -> bool:
        """Try to drop a bomb on the board; return True if the board changed.

        A drop that finishes the round still reports its own result, the
        state is already WON or LOST for the next call.
        """
        if self._state is not GameState.PLAYING:
            return False

        # Round ended before the caller noticed.
        if not self.board.has_ships_remaining():
            self._set_state(GameState.WON)
            return False
        elif self.attempts_remaining <= 0:
            self._set_state(GameState.LOST)
            return False

        dropped = self.board.try_drop_bomb(x, y)

        if dropped and self.board.cell_equals(x, y, CellCode.MISS):
            self.attempts_remaining -= 1

        if not self.board.has_ships_remaining():
            self._set_state(GameState.WON)
        elif self.attempts_remaining <= 0:
            self._set_state(GameState.LOST)

        return dropped
