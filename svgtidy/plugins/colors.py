"""Passes that shorten colour values and inline single-stop gradients."""

from __future__ import annotations

import re

from svgtidy.plugins.base import Plugin, iter_elements
from svgtidy.tree import Document, Element

_RGB = re.compile(r"rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)", re.ASCII)

_COLOR_ATTRS = ("fill", "stroke", "stop-color", "flood-color", "lighting-color")

_NAMED_COLORS = {
    "black": "#000",
    "white": "#fff",
    "red": "#f00",
    "green": "#008000",
    "blue": "#00f",
    "yellow": "#ff0",
    "cyan": "#0ff",
    "magenta": "#f0f",
    "gray": "#808080",
    "grey": "#808080",
    "rebeccapurple": "#663399",
}

_GRADIENTS = frozenset({"linearGradient", "radialGradient"})


def _shorten_hex(hex_color: str) -> str:
    """Turn ``#rrggbb`` into ``#rgb`` when each channel repeats its digit."""
    if len(hex_color) == 7 and hex_color.startswith("#"):
        r1, r2, g1, g2, b1, b2 = hex_color[1:]
        if r1 == r2 and g1 == g2 and b1 == b2:
            return f"#{r1}{g1}{b1}"
    return hex_color


def convert_color(value: str) -> str:
    """Return the shortest known spelling of a colour value."""
    lower = value.lower()

    match = _RGB.search(lower)
    if match:
        channels = [int(group) for group in match.groups()]
        if all(channel <= 255 for channel in channels):
            return _shorten_hex("#" + "".join(f"{c:02x}" for c in channels))

    named = _NAMED_COLORS.get(lower)
    if named is not None and len(named) < len(lower):
        return named

    shortened = _shorten_hex(lower)
    if shortened != lower:
        return shortened

    return value


class ConvertColors(Plugin):
    """Shorten colours in paint attributes."""

    def apply(self, doc: Document) -> None:
        for element in iter_elements(doc.root):
            attrs = element.attributes
            for name in _COLOR_ATTRS:
                if name in attrs:
                    attrs[name] = convert_color(attrs[name])


def _solid_color(gradient: Element) -> str | None:
    stops = [
        child
        for child in gradient.children
        if isinstance(child, Element) and child.name == "stop"
    ]
    if not stops:
        return "none"
    if len(stops) == 1:
        return stops[0].attributes.get("stop-color")
    return None


class ConvertOneStopGradients(Plugin):
    """Replace references to gradients with one stop (or none) by a plain colour."""

    def apply(self, doc: Document) -> None:
        replacements: dict[str, str] = {}
        for element in iter_elements(doc.root):
            if element.name not in _GRADIENTS:
                continue
            identifier = element.attributes.get("id")
            if identifier is None:
                continue
            color = _solid_color(element)
            if color is not None:
                replacements[identifier] = color

        if not replacements:
            return

        for element in iter_elements(doc.root):
            attrs = element.attributes
            for name in ("fill", "stroke"):
                value = attrs.get(name)
                if value is None or not (value.startswith("url(#") and value.endswith(")")):
                    continue
                color = replacements.get(value[5:-1])
                if color is not None:
                    attrs[name] = color