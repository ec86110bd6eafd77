"""Folding of transform lists into one compact transform."""

from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass
from typing import Optional

from svgtidy.plugins.base import Plugin, format_rounded, iter_elements
from svgtidy.tree import Document

_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_APPROX = 1e-10


def _approx(a: float, b: float) -> bool:
    return abs(a - b) < _APPROX


@dataclass(frozen=True)
class Matrix:
    """A 2D affine matrix ``[a c e; b d f; 0 0 1]``."""

    a: float
    b: float
    c: float
    d: float
    e: float
    f: float

    @classmethod
    def identity(cls) -> Matrix:
        return cls(1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    def multiply(self, other: Matrix) -> Matrix:
        """Return ``self * other``: ``other`` is applied to points first."""
        return Matrix(
            a=self.a * other.a + self.c * other.b,
            b=self.b * other.a + self.d * other.b,
            c=self.a * other.c + self.c * other.d,
            d=self.b * other.c + self.d * other.d,
            e=self.a * other.e + self.c * other.f + self.e,
            f=self.b * other.e + self.d * other.f + self.f,
        )

    def is_identity(self) -> bool:
        return (
            _approx(self.a, 1.0)
            and _approx(self.b, 0.0)
            and _approx(self.c, 0.0)
            and _approx(self.d, 1.0)
            and _approx(self.e, 0.0)
            and _approx(self.f, 0.0)
        )


def _translation(tx: float, ty: float) -> Matrix:
    return Matrix(1.0, 0.0, 0.0, 1.0, tx, ty)


def _arg(args: list[float], index: int, default: float) -> float:
    return args[index] if index < len(args) else default


def _build(name: str, args: list[float]) -> Optional[Matrix]:
    if name == "translate":
        return _translation(_arg(args, 0, 0.0), _arg(args, 1, 0.0))
    if name == "scale":
        sx = _arg(args, 0, 1.0)
        return Matrix(sx, 0.0, 0.0, _arg(args, 1, sx), 0.0, 0.0)
    if name == "rotate":
        rad = _arg(args, 0, 0.0) * math.pi / 180.0
        cx, cy = _arg(args, 1, 0.0), _arg(args, 2, 0.0)
        cos, sin = math.cos(rad), math.sin(rad)
        result = Matrix.identity()
        pivoted = cx != 0.0 or cy != 0.0
        if pivoted:
            result = result.multiply(_translation(cx, cy))
        result = result.multiply(Matrix(cos, sin, -sin, cos, 0.0, 0.0))
        if pivoted:
            result = result.multiply(_translation(-cx, -cy))
        return result
    if name == "skewX":
        rad = _arg(args, 0, 0.0) * math.pi / 180.0
        return Matrix(1.0, 0.0, math.tan(rad), 1.0, 0.0, 0.0)
    if name == "skewY":
        rad = _arg(args, 0, 0.0) * math.pi / 180.0
        return Matrix(1.0, math.tan(rad), 0.0, 1.0, 0.0, 0.0)
    if name == "matrix" and len(args) == 6:
        return Matrix(*args)
    return None


def _is_ascii_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def parse_transform(text: str) -> list[Matrix]:
    """Parse a transform list into matrices; unknown or malformed parts are skipped."""
    matrices: list[Matrix] = []
    pos, end = 0, len(text)

    while pos < end:
        char = text[pos]
        pos += 1
        if not _is_ascii_letter(char):
            continue

        start = pos - 1
        while pos < end and _is_ascii_letter(text[pos]):
            pos += 1
        name = text[start:pos]

        while pos < end:
            pos += 1
            if text[pos - 1] == "(":
                break

        args: list[float] = []
        token = ""

        def flush() -> None:
            nonlocal token
            if token and _NUMBER.fullmatch(token):
                args.append(float(token))
            token = ""

        while pos < end:
            char = text[pos]
            pos += 1
            if char == ")":
                break
            if char.isnumeric() or char in ".-eE":
                token += char
            else:
                flush()
        flush()

        matrix = _build(name, args)
        if matrix is not None:
            matrices.append(matrix)

    return matrices


@dataclass
class ConvertTransform(Plugin):
    """Multiply out ``transform`` lists and write the shortest equivalent."""

    float_precision: int = 3
    deg_precision: int = 3

    def apply(self, doc: Document) -> None:
        for element in iter_elements(doc.root):
            transform = element.attributes.get("transform")
            if transform is None:
                continue
            optimized = self.optimize(transform)
            if optimized:
                element.attributes["transform"] = optimized
            else:
                del element.attributes["transform"]

    def _num(self, value: float) -> str:
        return format_rounded(value, self.float_precision, True)

    def optimize(self, transform: str) -> str:
        """Return the compact form of ``transform``, or ``""`` for the identity."""
        matrices = parse_transform(transform)
        if not matrices:
            return ""
        combined = Matrix.identity()
        for matrix in matrices:
            combined = combined.multiply(matrix)

        if combined.is_identity():
            return ""

        m = combined
        if (
            _approx(m.a, 1.0)
            and _approx(m.d, 1.0)
            and _approx(m.b, 0.0)
            and _approx(m.c, 0.0)
        ):
            return f"translate({self._num(m.e)} {self._num(m.f)})"

        if (
            _approx(m.b, 0.0)
            and _approx(m.c, 0.0)
            and _approx(m.e, 0.0)
            and _approx(m.f, 0.0)
        ):
            if abs(m.a - m.d) < sys.float_info.epsilon:
                return f"scale({self._num(m.a)})"
            return f"scale({self._num(m.a)} {self._num(m.d)})"

        values = " ".join(self._num(v) for v in (m.a, m.b, m.c, m.d, m.e, m.f))
        return f"matrix({values})"