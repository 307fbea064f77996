"""
board.py

Contains the grid half of Nautica:
 - CellCode, the four stored cell states plus the display-only UNKNOWN
 - NauticaBoard, the square cell matrix with randomized ship seeding,
   bomb drops and ship-destruction accounting
 - display_code(), the projection a renderer uses to conceal the board

"""

from __future__ import annotations

import enum
import logging
from typing import Iterable, Iterator, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)


class CellCode(enum.IntEnum):
    """State of a single grid position."""

    WATER = 0
    SHIP = 1
    MISS = 2  # failed attempt
    HIT = 3  # successful attempt
    UNKNOWN = 4  # display only, never stored


_STORED_CODES = frozenset({CellCode.WATER, CellCode.SHIP, CellCode.MISS, CellCode.HIT})
_CONCEALED_CODES = frozenset({CellCode.WATER, CellCode.SHIP})


def display_code(code: CellCode, hide: bool) -> CellCode:
    """Return the code a player should see for *code*.

    While *hide* is set, water and intact ships are indistinguishable and
    both become UNKNOWN. Misses and hits are always shown.
    """
    if hide and code in _CONCEALED_CODES:
        return CellCode.UNKNOWN
    return CellCode(code)


class NauticaBoard:
    """
    Represents the square Nautica board with hidden ships.
    We store:
      - self.cells: numpy matrix of CellCode values indexed [y, x]
      - self.ship_count: ship cells placed by the last randomize()
      - self.successful_hits: ship cells turned into hits since then
      - self.bombs_dropped: every successful drop, hit or miss

    Ships are tracked per cell, not per vessel: a hit never lowers
    ship_count, the board is cleared once successful_hits catches up.
    """

    def __init__(self, size: int = 2, rng: Optional[np.random.Generator] = None):
        """Initialise an all-water *size*×*size* board with no ships placed."""
        if size <= 0:
            raise ValueError(f"board size must be positive, got {size}")
        self.size = size
        self.cells = np.full((size, size), CellCode.WATER, dtype=np.int8)
        self.ship_count = 0
        self.successful_hits = 0
        self.bombs_dropped = 0
        self._rng = rng if rng is not None else np.random.default_rng()

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------

    def randomize(self, ship_probability: float = 0.2) -> None:
        """Clear the board and scatter ships with *ship_probability* per cell.

        The whole grid is re-drawn until at least ``size² × ship_probability``
        cells hold a ship, so a small board on a low probability never ends
        up with fewer ships than its target density.
        """
        if not 0.0 <= ship_probability <= 1.0:
            raise ValueError(f"ship probability must be within [0, 1], got {ship_probability}")

        self.cells.fill(CellCode.WATER)
        self.ship_count = 0
        self.successful_hits = 0

        # Zero would never satisfy the retry loop below.
        if ship_probability == 0.0:
            logger.debug("randomize() – probability 0, board left as water")
            return

        target = self.cells.size * ship_probability
        trials = 0
        while self.ship_count < target:
            trials += 1
            ships = self._rng.random(self.cells.shape) <= ship_probability
            self.cells.fill(CellCode.WATER)
            self.cells[ships] = CellCode.SHIP
            self.ship_count = int(np.count_nonzero(ships))

        logger.debug(
            "randomize() – size=%d p=%.2f ships=%d trials=%d",
            self.size,
            ship_probability,
            self.ship_count,
            trials,
        )

    def place_ships(self, positions: Iterable[Tuple[int, int]]) -> None:
        """Clear the board and put a ship on each ``(x, y)`` in *positions*."""
        coords = list(positions)
        for x, y in coords:
            if not self.is_valid_coordinate(x, y):
                raise ValueError(f"ship position ({x}, {y}) is outside a {self.size}x{self.size} board")

        self.cells.fill(CellCode.WATER)
        for x, y in coords:
            self.cells[y, x] = CellCode.SHIP
        self.ship_count = int(np.count_nonzero(self.cells == CellCode.SHIP))
        self.successful_hits = 0
        logger.debug("place_ships() – ships=%d", self.ship_count)

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def is_valid_coordinate(self, x: int, y: int) -> bool:
        """Return True if (*x*, *y*) lies inside the board."""
        return 0 <= x < self.size and 0 <= y < self.size

    def cell(self, x: int, y: int) -> Optional[CellCode]:
        if not self.is_valid_coordinate(x, y):
            return None
        return CellCode(int(self.cells[y, x]))

    def cell_equals(self, x: int, y: int, code: CellCode) -> bool:
        if not self.is_valid_coordinate(x, y):
            return False
        return int(self.cells[y, x]) == code

    def try_set_cell(self, x: int, y: int, code: CellCode) -> None:
        """Overwrite the cell at (*x*, *y*); out-of-range coordinates are ignored."""
        code = CellCode(code)
        if code not in _STORED_CODES:
            raise ValueError(f"{code.name} cannot be stored in the board")
        if not self.is_valid_coordinate(x, y):
            return
        self.cells[y, x] = code

    def rows(self, hide: bool = False) -> Iterator[Tuple[CellCode, ...]]:
        """Yield each row, top to bottom, optionally concealed via display_code()."""
        for row in self.cells:
            yield tuple(display_code(CellCode(int(value)), hide) for value in row)

    # ------------------------------------------------------------------
    # Bombing
    # ------------------------------------------------------------------

    def try_drop_bomb(self, x: int, y: int) -> bool:
        """Drop a bomb on (*x*, *y*); return True if the cell changed.

        Water becomes a miss and a ship becomes a hit. A cell that was
        already bombed, or a coordinate off the board, is left untouched.
        """
        if not self.is_valid_coordinate(x, y):
            logger.debug("try_drop_bomb() – (%d, %d) out of range", x, y)
            return False

        if self.cell_equals(x, y, CellCode.SHIP):
            code = CellCode.HIT
            self.successful_hits += 1
        elif self.cell_equals(x, y, CellCode.WATER):
            code = CellCode.MISS
        else:
            logger.debug("try_drop_bomb() – (%d, %d) already bombed", x, y)
            return False

        self.cells[y, x] = code
        self.bombs_dropped += 1
        logger.debug(
            "try_drop_bomb() – (%d, %d) -> %s hits=%d/%d",
            x,
            y,
            code.name,
            self.successful_hits,
            self.ship_count,
        )
        return True

    def has_ships_remaining(self) -> bool:
        """Return True while some ship cell has not been hit.

        A board seeded without any ship has nothing to destroy.
        """
        if self.ship_count <= 0:
            return False
        return self.successful_hits < self.ship_count
