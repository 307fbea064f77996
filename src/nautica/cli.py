"""Interactive console front-end for Nautica."""

from __future__ import annotations

import argparse
import logging
from typing import Callable, Optional

import numpy as np

from . import config as _cfg
from .commands import AxisCommand, CommandParseError, parse_command
from .game import Difficulty, GameState, NauticaGame
from .render import clear_screen_text, render_board, render_references

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]

SIZE_PROMPT = "\nEnter board size: (3 is the best)\n_ "
X_PROMPT = "\n\nEnter the Horizontal coordinate:\n_ "
Y_PROMPT = "\nEnter the Vertical coordinate:\n_ "


class QuitRequested(Exception):
    """Raised when the player types QUIT at any prompt."""


def _parse_axis(line: str) -> Optional[int]:
    """Return the integer in *line*, or None if it did not parse."""
    try:
        cmd = parse_command(line)
    except CommandParseError as e:
        logger.debug("ignored input – %s", e)
        return None
    if isinstance(cmd, AxisCommand):
        return cmd.value
    raise QuitRequested()


def prompt_board_size(read: Optional[Reader] = None) -> int:
    """Ask for a board size until an integer greater than 1 is entered."""
    read = read or input
    while True:
        size = _parse_axis(read(SIZE_PROMPT))
        if size is not None and size > 1:
            return size


def _show_board(game: NauticaGame, write: Writer, *, clear: bool, color: bool) -> None:
    if clear:
        write(clear_screen_text())
    for line in render_board(game.board, hide=game.is_playing, color=color):
        write(line)


def play(
    game: NauticaGame,
    *,
    max_attempts: Optional[int] = None,
    read: Optional[Reader] = None,
    write: Optional[Writer] = None,
    clear: bool = True,
    color: bool = True,
) -> GameState:
    """Run one round on *game* until it is won or lost and return the final state.

    *read* and *write* default to ``input`` and ``print``.
    Raises QuitRequested if the player abandons the round.
    """
    read = read or input
    write = write or print

    game.start_new_game(max_attempts)
    _show_board(game, write, clear=clear, color=color)

    while game.is_playing:
        x_line = read(X_PROMPT)
        y_line = read(Y_PROMPT)

        # if either coordinate does not parse, ask again
        x = _parse_axis(x_line)
        y = _parse_axis(y_line)
        if x is None or y is None:
            continue

        # Failed drop, ask again
        if not game.drop_bomb(x, y):
            continue

        if game.is_playing:
            _show_board(game, write, clear=clear, color=color)
            write(f"\nAttempts remaining: {game.attempts_remaining}")

    if clear:
        write(clear_screen_text())
    for line in render_references(color=color):
        write(line)
    write("\n")
    _show_board(game, write, clear=False, color=color)

    write("")
    if game.state is GameState.WON:
        write("You have won! :)")
    else:
        write("You have lost :(")
    return game.state


# ----------------------------- main -------------------------------


def main(argv: Optional[list[str]] = None) -> int:
    """Console entry point; returns 0 on a win and 1 otherwise."""

    parser = argparse.ArgumentParser(description="Nautica console game")
    parser.add_argument("--size", type=int, default=_cfg.BOARD_SIZE, help="Board width and height (prompted if unset)")
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=_cfg.DIFFICULTY,
        help="Ship density: easy is densest, hard is sparsest",
    )
    parser.add_argument(
        "--attempts",
        type=int,
        default=_cfg.MAX_ATTEMPTS,
        help="Misses allowed per round (defaults to the board size)",
    )
    parser.add_argument("--seed", type=int, help="Seed for reproducible ship placement")
    parser.add_argument("--no-color", action="store_true", help="Draw the board without colours")
    parser.add_argument("--no-clear", action="store_true", help="Do not scroll the previous board away")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log errors.",
    )
    args = parser.parse_args(argv)

    # Determine log level from CLI flags:
    if args.quiet:
        level = logging.ERROR
    elif args.debug or _cfg.DEBUG:
        level = logging.DEBUG
    elif args.verbose >= 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.size is not None and args.size <= 1:
        parser.error("--size must be greater than 1")
    # argparse does not check defaults taken from NAUTICA_DIFFICULTY
    if args.difficulty not in {d.value for d in Difficulty}:
        parser.error(f"unknown difficulty {args.difficulty!r}")

    try:
        size = args.size if args.size is not None else prompt_board_size()
        game = NauticaGame(size, Difficulty(args.difficulty), rng=np.random.default_rng(args.seed))
        state = play(
            game,
            max_attempts=args.attempts,
            clear=not args.no_clear,
            color=_cfg.COLOR and not args.no_color,
        )
    except QuitRequested:
        logger.info("Round abandoned by player")
        return 1
    except (EOFError, KeyboardInterrupt):
        logger.info("Nautica exiting")
        return 1

    return 0 if state is GameState.WON else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
