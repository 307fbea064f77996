"""Central configuration for runtime-tunable parameters.

All constants can be overridden via environment variables so that a player
can pin their preferred board without retyping CLI flags, while the
automated test-suite can run with colours and screen clearing disabled.
"""

from __future__ import annotations

import os


# ===========================================================================
# Game Constants
# ===========================================================================
# NAUTICA_BOARD_SIZE: Width and height of the square board.
#   Unset by default, in which case the CLI prompts for it.
#   Example: export NAUTICA_BOARD_SIZE=3
BOARD_SIZE: int | None = int(os.environ["NAUTICA_BOARD_SIZE"]) if os.getenv("NAUTICA_BOARD_SIZE") else None

# NAUTICA_DIFFICULTY: One of "easy", "normal" or "hard".
#   Defaults to "normal".
#   Example: export NAUTICA_DIFFICULTY=hard
DIFFICULTY: str = os.getenv("NAUTICA_DIFFICULTY", "normal").lower()

# NAUTICA_MAX_ATTEMPTS: Number of misses allowed per round.
#   Defaults to 0, meaning "same as the board size".
#   Example: export NAUTICA_MAX_ATTEMPTS=5
MAX_ATTEMPTS: int = int(os.getenv("NAUTICA_MAX_ATTEMPTS", "0"))

# Probability of a cell holding a ship for each difficulty. A higher value
# seeds more ship cells, so EASY has the densest board.
SHIP_PROBABILITY = {
    "easy": 0.8,
    "normal": 0.5,
    "hard": 0.2,
}


# ===========================================================================
# Console Output
# ===========================================================================
# NAUTICA_NO_COLOR / NO_COLOR: If set to any non-empty value, the board is
#   drawn without ANSI background colours.
#   Example: export NO_COLOR=1
COLOR: bool = not (os.getenv("NAUTICA_NO_COLOR") or os.getenv("NO_COLOR"))

# NAUTICA_CLEAR_LINES: Number of blank lines printed to scroll the previous
#   board out of view. 80 covers most terminal heights.
#   Example: export NAUTICA_CLEAR_LINES=40
CLEAR_LINES: int = int(os.getenv("NAUTICA_CLEAR_LINES", "80"))


# ===========================================================================
# Debugging and Logging
# ===========================================================================
# NAUTICA_DEBUG: If "1", enables detailed debug logging across modules.
#   Defaults to "0" (disabled).
#   Example: export NAUTICA_DEBUG=1
DEBUG: bool = os.getenv("NAUTICA_DEBUG", "0") == "1"
