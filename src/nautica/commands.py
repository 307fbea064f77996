import re
from dataclasses import dataclass
from typing import Union

# Optionally signed decimal integer
AXIS_RE = re.compile(r"^[+-]?\d+$")


class CommandParseError(Exception):
    """Raised when a line cannot be parsed as a valid command."""


@dataclass(frozen=True)
class AxisCommand:
    value: int


@dataclass(frozen=True)
class QuitCommand:
    pass


Command = Union[AxisCommand, QuitCommand]


def parse_command(line: str) -> Command:
    if line is None:
        raise CommandParseError("No command to parse")
    raw = line.strip()
    if not raw:
        raise CommandParseError("Empty command")
    if raw.upper() in ("QUIT", "Q"):
        return QuitCommand()
    if not AXIS_RE.match(raw):
        raise CommandParseError(f"Not a number: {raw}")
    return AxisCommand(value=int(raw))
