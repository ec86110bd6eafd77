"""Rewriting of path data in its shortest absolute or relative form."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from svgtidy.plugins.base import Plugin, format_rounded, iter_elements
from svgtidy.plugins.path_parser import CommandKind, PathCommand, parse_path_data
from svgtidy.tree import Document

_EPSILON = sys.float_info.epsilon


def _num(value: float, precision: int) -> str:
    return format_rounded(value, precision, True)


def _shorter(absolute: str, relative: str) -> str:
    """Prefer the relative spelling only when it is strictly shorter."""
    return relative if len(relative) < len(absolute) else absolute


def _offsets(values: Sequence[float], cur_x: float, cur_y: float) -> list[float]:
    return [value - (cur_y if index % 2 else cur_x) for index, value in enumerate(values)]


def _joined(values: Iterable[float], precision: int) -> str:
    return " ".join(_num(value, precision) for value in values)


def _line(x: float, y: float, cur_x: float, cur_y: float, precision: int) -> str:
    abs_x, abs_y = _num(x, precision), _num(y, precision)
    rel_x, rel_y = _num(x - cur_x, precision), _num(y - cur_y, precision)

    candidates = [f"l{rel_x} {rel_y}"]
    if abs(y - cur_y) < _EPSILON:
        candidates += [f"H{abs_x}", f"h{rel_x}"]
    if abs(x - cur_x) < _EPSILON:
        candidates += [f"V{abs_y}", f"v{rel_y}"]

    best = f"L{abs_x} {abs_y}"
    for candidate in candidates:
        if len(candidate) < len(best):
            best = candidate
    return best


def stringify_path(commands: Iterable[PathCommand], precision: int) -> str:
    """Write absolute commands, choosing the shortest spelling for each."""
    pieces: list[str] = []
    cur_x = cur_y = 0.0
    start_x = start_y = 0.0

    for command in commands:
        kind, args = command.kind, command.args
        letter = kind.value

        if kind is CommandKind.CLOSE:
            pieces.append("z")
            cur_x, cur_y = start_x, start_y
            continue

        if kind is CommandKind.LINE:
            x, y = args
            pieces.append(_line(x, y, cur_x, cur_y, precision))
            cur_x, cur_y = x, y
            continue

        if kind is CommandKind.HORIZ:
            (x,) = args
            pieces.append(
                _shorter(
                    f"H{_num(x, precision)}",
                    f"h{_num(x - cur_x, precision)}",
                )
            )
            cur_x = x
            continue

        if kind is CommandKind.VERT:
            (y,) = args
            pieces.append(
                _shorter(
                    f"V{_num(y, precision)}",
                    f"v{_num(y - cur_y, precision)}",
                )
            )
            cur_y = y
            continue

        if kind is CommandKind.ARC:
            rx, ry, rotation, x, y = args
            head = (
                f"{_joined((rx, ry, rotation), precision)} "
                f"{int(command.large_arc)} {int(command.sweep)}"
            )
            absolute = f"A{head} {_joined((x, y), precision)}"
            relative = f"a{head} {_joined((x - cur_x, y - cur_y), precision)}"
            pieces.append(_shorter(absolute, relative))
            cur_x, cur_y = x, y
            continue

        absolute = letter + _joined(args, precision)
        relative = letter.lower() + _joined(_offsets(args, cur_x, cur_y), precision)
        pieces.append(_shorter(absolute, relative))
        cur_x, cur_y = args[-2], args[-1]
        if kind is CommandKind.MOVE:
            start_x, start_y = cur_x, cur_y

    return "".join(pieces)


@dataclass
class ConvertPathData(Plugin):
    """Round path coordinates and pick the shortest command for each segment."""

    float_precision: int = 3
    leading_zero: bool = True

    def apply(self, doc: Document) -> None:
        for element in iter_elements(doc.root):
            if element.name == "path" and "d" in element.attributes:
                element.attributes["d"] = self.optimize(element.attributes["d"])

    def optimize(self, d: str) -> str:
        """Return the shortened form of path data ``d``."""
        return stringify_path(parse_path_data(d), self.float_precision)