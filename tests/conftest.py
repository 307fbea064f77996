import logging

import numpy as np
import pytest

from nautica.board import NauticaBoard

# Keep per-drop DEBUG records out of the test output
logging.basicConfig(level=logging.WARNING)


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so ship placement is reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture
def board_factory(rng):
    """Factory building a board with ships at the given ``(x, y)`` cells."""

    def _factory(size: int, ships=()) -> NauticaBoard:
        board = NauticaBoard(size, rng=rng)
        board.place_ships(ships)
        return board

    return _factory


class ScriptedInput:
    """Stand-in for ``input()`` replaying a fixed list of answers."""

    def __init__(self, answers):
        self._answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError("scripted input exhausted")
        return self._answers.pop(0)


@pytest.fixture
def scripted_input():
    return ScriptedInput
