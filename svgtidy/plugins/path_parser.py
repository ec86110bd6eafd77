"""Parsing of SVG path data into absolute drawing commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

_SEPARATORS = frozenset(" \t\n\x0b\x0c\r,")
_DIGITS = frozenset("0123456789")


class CommandKind(Enum):
    """The drawing operations a path can contain."""

    MOVE = "M"
    LINE = "L"
    HORIZ = "H"
    VERT = "V"
    CURVE = "C"
    SMOOTH_CURVE = "S"
    QUAD = "Q"
    SMOOTH_QUAD = "T"
    ARC = "A"
    CLOSE = "Z"


_KINDS = {kind.value: kind for kind in CommandKind}

_ARITY = {
    CommandKind.MOVE: 2,
    CommandKind.LINE: 2,
    CommandKind.HORIZ: 1,
    CommandKind.VERT: 1,
    CommandKind.CURVE: 6,
    CommandKind.SMOOTH_CURVE: 4,
    CommandKind.QUAD: 4,
    CommandKind.SMOOTH_QUAD: 2,
}


@dataclass(frozen=True)
class PathCommand:
    """One command with absolute coordinates.

    ``args`` holds the coordinates in the order the command takes them:
    ``(x, y)`` for MOVE, LINE and SMOOTH_QUAD, ``(x,)`` for HORIZ, ``(y,)``
    for VERT, ``(x1, y1, x2, y2, x, y)`` for CURVE, ``(x2, y2, x, y)`` for
    SMOOTH_CURVE, ``(x1, y1, x, y)`` for QUAD, ``(rx, ry, rotation, x, y)``
    for ARC and nothing for CLOSE. Arc flags live in ``large_arc`` and
    ``sweep``.
    """

    kind: CommandKind
    args: tuple[float, ...] = ()
    large_arc: bool = False
    sweep: bool = False


class _PathLexer:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def skip_separators(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in _SEPARATORS:
            self.pos += 1

    def peek(self) -> Optional[str]:
        return self.text[self.pos] if self.pos < len(self.text) else None

    def next_char(self) -> Optional[str]:
        char = self.peek()
        if char is not None:
            self.pos += 1
        return char

    def read_number(self) -> Optional[float]:
        self.skip_separators()
        if self.pos >= len(self.text):
            return None
        start = self.pos
        if self.peek() in ("+", "-"):
            self.pos += 1
        seen_dot = seen_exp = False
        while self.pos < len(self.text):
            char = self.text[self.pos]
            if char in _DIGITS:
                self.pos += 1
            elif char == "." and not seen_dot and not seen_exp:
                seen_dot = True
                self.pos += 1
            elif char in ("e", "E") and not seen_exp:
                seen_exp = True
                self.pos += 1
                if self.peek() in ("+", "-"):
                    self.pos += 1
            else:
                break
        try:
            return float(self.text[start : self.pos])
        except ValueError:
            return None

    def read_numbers(self, count: int) -> Optional[tuple[float, ...]]:
        # Every number is attempted, even after a failure, before giving up.
        values = [self.read_number() for _ in range(count)]
        if any(value is None for value in values):
            return None
        return tuple(values)  # type: ignore[arg-type]

    def read_flag(self) -> Optional[bool]:
        self.skip_separators()
        return {"0": False, "1": True}.get(self.next_char() or "")

    def read_arc(self) -> Optional[tuple[float, float, float, bool, bool, float, float]]:
        radii_and_rotation = []
        for _ in range(3):
            value = self.read_number()
            if value is None:
                return None
            radii_and_rotation.append(value)
        large_arc = self.read_flag()
        if large_arc is None:
            return None
        sweep = self.read_flag()
        if sweep is None:
            return None
        end = []
        for _ in range(2):
            value = self.read_number()
            if value is None:
                return None
            end.append(value)
        rx, ry, rotation = radii_and_rotation
        return rx, ry, rotation, large_arc, sweep, end[0], end[1]


def _is_ascii_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _absolute(
    kind: CommandKind, values: tuple[float, ...], cur_x: float, cur_y: float
) -> tuple[float, ...]:
    if kind is CommandKind.HORIZ:
        return (values[0] + cur_x,)
    if kind is CommandKind.VERT:
        return (values[0] + cur_y,)
    return tuple(
        value + (cur_y if index % 2 else cur_x) for index, value in enumerate(values)
    )


def parse_path_data(d: str) -> list[PathCommand]:
    """Parse path data, converting relative commands to absolute ones.

    Parsing stops quietly at the first unknown command or malformed input;
    whatever was read up to that point is returned.
    """
    lexer = _PathLexer(d)
    commands: list[PathCommand] = []
    cur_x = cur_y = 0.0
    current: Optional[str] = None

    while True:
        lexer.skip_separators()
        char = lexer.peek()
        if char is None:
            break
        implicit = not _is_ascii_letter(char)
        if implicit:
            if current is None:
                break
            letter = {"M": "L", "m": "l"}.get(current, current)
        else:
            letter = lexer.next_char() or ""
        current = letter
        kind = _KINDS.get(letter.upper())
        if kind is None:
            break
        if kind is CommandKind.CLOSE:
            if implicit:
                break
            commands.append(PathCommand(CommandKind.CLOSE))
            continue

        relative = letter.islower()
        start = lexer.pos
        while True:
            if kind is CommandKind.ARC:
                arc = lexer.read_arc()
                if arc is None:
                    break
                rx, ry, rotation, large_arc, sweep, x, y = arc
                if relative:
                    x, y = x + cur_x, y + cur_y
                commands.append(
                    PathCommand(kind, (rx, ry, rotation, x, y), large_arc, sweep)
                )
                cur_x, cur_y = x, y
                continue
            values = lexer.read_numbers(_ARITY[kind])
            if values is None:
                break
            if relative:
                values = _absolute(kind, values, cur_x, cur_y)
            commands.append(PathCommand(kind, values))
            if kind is CommandKind.HORIZ:
                cur_x = values[0]
            elif kind is CommandKind.VERT:
                cur_y = values[0]
            else:
                cur_x, cur_y = values[-2], values[-1]

        if implicit and lexer.pos == start:
            break

    return commands