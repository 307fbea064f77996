"""Text rendering of a NauticaBoard for the console.

The board only knows cell codes; glyphs and colours live here so any other
front-end can project the same codes its own way.
"""

from __future__ import annotations

from typing import List

from . import config as _cfg
from .board import CellCode, NauticaBoard

GLYPHS = {
    CellCode.WATER: " ",
    CellCode.SHIP: "=",
    CellCode.MISS: ".",
    CellCode.HIT: "X",
    CellCode.UNKNOWN: "?",
}

# ANSI background colours; None keeps the terminal default.
BACKGROUNDS = {
    CellCode.WATER: None,
    CellCode.SHIP: "\033[100m",  # dark grey
    CellCode.MISS: "\033[41m",  # dark red
    CellCode.HIT: "\033[42m",  # dark green
    CellCode.UNKNOWN: None,
}

RESET = "\033[0m"

SEPARATOR = "|"
BORDER = "-"

REFERENCES = [
    (CellCode.WATER, "Water"),
    (CellCode.SHIP, "Ship"),
    (CellCode.MISS, "Failed attempt"),
    (CellCode.HIT, "Successful attempt"),
]


def glyph(code: CellCode, color: bool = True) -> str:
    """Return the printable glyph for *code*, wrapped in its colour if any."""
    text = GLYPHS[CellCode(code)]
    background = BACKGROUNDS[CellCode(code)]
    if color and background:
        return f"{background}{text}{RESET}"
    return text


def render_board(board: NauticaBoard, hide: bool = True, color: bool = True) -> List[str]:
    """Return the board as console lines, concealing ships and water if *hide*.

    Column indices run along the top, zero-padded row indices down the left.
    """
    pad = " " * (len(str(board.size)) - 1)
    digits = len(str(board.size))
    border = BORDER * (board.size * 2 + 1)

    lines = ["    " + pad + "".join(f"{i} " for i in range(board.size))]
    lines.append("   " + pad + border)
    for y, row in enumerate(board.rows(hide=hide)):
        cells = "".join(glyph(code, color) + SEPARATOR for code in row)
        lines.append(f" {y:0{digits}d} {SEPARATOR}{cells}")
    lines.append(pad + "   " + border)
    return lines


def render_references(color: bool = True) -> List[str]:
    lines = ["References:"]
    for code, label in REFERENCES:
        lines.append(f"{glyph(code, color)} -> {label}")
    return lines


def clear_screen_text(lines: int = _cfg.CLEAR_LINES) -> str:
    """Newlines enough to scroll the previous board out of view."""
    return "\n" * lines
