"""Plugin interface and helpers shared by the optimisation passes."""

from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from decimal import Decimal

from svgtidy.tree import Document, Element, Node

_URL_REFERENCE = re.compile(r"url\s*\(\s*#([^\s)]+)\s*\)")


class Plugin(ABC):
    """A single transformation applied to a document in place."""

    @abstractmethod
    def apply(self, doc: Document) -> None:
        """Transform ``doc`` in place."""


def iter_elements(nodes: Iterable[Node]) -> Iterator[Element]:
    """Yield every element under ``nodes`` in document order."""
    for node in nodes:
        if isinstance(node, Element):
            yield node
            yield from iter_elements(node.children)


def find_used_ids(nodes: Iterable[Node]) -> set[str]:
    """Collect ids referenced as ``url(#id)`` or ``#id`` in any attribute."""
    used: set[str] = set()
    for element in iter_elements(nodes):
        for value in element.attributes.values():
            used.update(_URL_REFERENCE.findall(value))
            if value.startswith("#") and len(value) > 1:
                used.add(value[1:])
    return used


def format_float(value: float) -> str:
    """Shortest round-tripping decimal form, never in exponent notation."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _round_half_away(value: float) -> float:
    if not math.isfinite(value):
        return value
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(float(whole), value)


def format_rounded(value: float, precision: int, strip_leading_zero: bool) -> str:
    """Round to ``precision`` decimals and format, optionally as ``.5``/``-.5``."""
    if precision < 0:
        raise ValueError("precision must not be negative")
    factor = float(10**precision)
    text = format_float(_round_half_away(value * factor) / factor)
    if strip_leading_zero:
        if text.startswith("0."):
            return text[1:]
        if text.startswith("-0."):
            return "-" + text[2:]
    return text