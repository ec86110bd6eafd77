"""Passes that turn basic shapes into paths or into simpler shapes."""

from __future__ import annotations

import re
from typing import Optional

from svgtidy.plugins.base import Plugin, format_float, iter_elements
from svgtidy.tree import Document, Element

_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SPECIAL = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)

_SHAPE_ATTRS = (
    "x",
    "y",
    "width",
    "height",
    "rx",
    "ry",
    "r",
    "cx",
    "cy",
    "x1",
    "y1",
    "x2",
    "y2",
    "points",
)


def _parse(text: Optional[str]) -> Optional[float]:
    if text is None:
        return None
    if _DECIMAL.fullmatch(text) or _SPECIAL.fullmatch(text):
        return float(text)
    return None


def _num(element: Element, name: str, default: float = 0.0) -> float:
    value = _parse(element.attributes.get(name))
    return default if value is None else value


def _f(value: float) -> str:
    return format_float(value)


def _rect(element: Element) -> Optional[str]:
    width, height = _num(element, "width"), _num(element, "height")
    x, y = _num(element, "x"), _num(element, "y")
    if width == 0.0 or height == 0.0:
        return None
    rx = _parse(element.attributes.get("rx"))
    ry = _parse(element.attributes.get("ry"))
    if rx is not None or ry is not None:
        return None
    return f"M{_f(x)} {_f(y)}h{_f(width)}v{_f(height)}h-{_f(width)}z"


def _two_arcs(cx: float, cy: float, rx: float, ry: float) -> str:
    left, right = _f(cx - rx), _f(cx + rx)
    radii = f"{_f(rx)} {_f(ry)}"
    return f"M{left} {_f(cy)}A{radii} 0 1 0 {right} {_f(cy)}A{radii} 0 1 0 {left} {_f(cy)}z"


def _circle(element: Element) -> Optional[str]:
    r = _num(element, "r")
    if r <= 0.0:
        return None
    return _two_arcs(_num(element, "cx"), _num(element, "cy"), r, r)


def _ellipse(element: Element) -> Optional[str]:
    rx, ry = _num(element, "rx"), _num(element, "ry")
    if rx <= 0.0 or ry <= 0.0:
        return None
    return _two_arcs(_num(element, "cx"), _num(element, "cy"), rx, ry)


def _line(element: Element) -> Optional[str]:
    x1, y1 = _num(element, "x1"), _num(element, "y1")
    x2, y2 = _num(element, "x2"), _num(element, "y2")
    return f"M{_f(x1)} {_f(y1)}L{_f(x2)} {_f(y2)}"


def _poly(element: Element, close: bool) -> Optional[str]:
    points = element.attributes.get("points")
    if points is None:
        return None
    coords = points.replace(",", " ").split()
    if len(coords) < 2:
        return None
    pairs = list(zip(coords[0::2], coords[1::2]))
    first, rest = pairs[0], pairs[1:]
    d = f"M{first[0]} {first[1]}" + "".join(f"L{x} {y}" for x, y in rest)
    return d + "z" if close else d


def _path_data(element: Element) -> Optional[str]:
    name = element.name
    if name == "rect":
        return _rect(element)
    if name == "circle":
        return _circle(element)
    if name == "ellipse":
        return _ellipse(element)
    if name == "line":
        return _line(element)
    if name == "polygon":
        return _poly(element, True)
    if name == "polyline":
        return _poly(element, False)
    return None


class ConvertShapeToPath(Plugin):
    """Replace rectangles, circles, ellipses, lines and polygons with paths."""

    def apply(self, doc: Document) -> None:
        for element in iter_elements(doc.root):
            d = _path_data(element)
            if d is None:
                continue
            element.name = "path"
            for name in _SHAPE_ATTRS:
                element.attributes.pop(name, None)
            element.attributes["d"] = d


class ConvertEllipseToCircle(Plugin):
    """Turn ellipses with equal radii into circles."""

    def apply(self, doc: Document) -> None:
        for element in iter_elements(doc.root):
            if element.name != "ellipse":
                continue
            rx = element.attributes.get("rx")
            ry = element.attributes.get("ry")
            if rx is None or ry is None or rx != ry:
                continue
            element.name = "circle"
            del element.attributes["rx"]
            del element.attributes["ry"]
            element.attributes["r"] = rx