"""Passes that tidy attribute values and drop unused ids, defaults and definitions."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional

from svgtidy.plugins.base import Plugin, find_used_ids, format_rounded, iter_elements
from svgtidy.tree import Document, Element, Node

_WHITESPACE = re.compile(r"\s+")
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SPECIAL = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)

_NUMERIC_ATTRS = (
    "x",
    "y",
    "width",
    "height",
    "r",
    "cx",
    "cy",
    "rx",
    "ry",
    "opacity",
    "fill-opacity",
    "stroke-opacity",
    "stroke-width",
    "font-size",
    "offset",
)

_LIST_ATTRS = ("viewBox", "points", "dx", "dy", "x", "y", "rotate")

_SHAPES = frozenset(
    {"rect", "circle", "ellipse", "line", "polygon", "polyline", "path"}
)

_ZERO_WIDTHS = frozenset({"0", "0px"})


def _parse_number(text: str) -> Optional[float]:
    """Parse a plain decimal number; return None for anything else."""
    if _DECIMAL.fullmatch(text) or _SPECIAL.fullmatch(text):
        return float(text)
    return None


def _strip_px_suffixes(text: str) -> str:
    while text.endswith("px"):
        text = text[:-2]
    return text


class CleanupAttrs(Plugin):
    """Collapse whitespace runs in attribute values and trim them."""

    def apply(self, doc: Document) -> None:
        for element in iter_elements(doc.root):
            attrs = element.attributes
            for key, value in list(attrs.items()):
                attrs[key] = _WHITESPACE.sub(" ", value).strip()


class CleanupIds(Plugin):
    """Remove ``id`` attributes that nothing references."""

    def apply(self, doc: Document) -> None:
        used = find_used_ids(doc.root)
        for element in iter_elements(doc.root):
            identifier = element.attributes.get("id")
            if identifier is not None and identifier not in used:
                del element.attributes["id"]


@dataclass
class CleanupListOfValues(Plugin):
    """Round the numbers in list attributes and separate them with spaces."""

    float_precision: int = 3
    leading_zero: bool = True
    default_px: bool = True
    convert_to_px: bool = True

    def apply(self, doc: Document) -> None:
        for element in iter_elements(doc.root):
            attrs = element.attributes
            for name in _LIST_ATTRS:
                if name in attrs:
                    attrs[name] = self.clean(attrs[name])

    def clean(self, value: str) -> str:
        """Return ``value`` with each numeric item rounded and space separated."""
        items = []
        for part in value.replace(",", " ").split():
            number = _parse_number(_strip_px_suffixes(part))
            if number is None:
                items.append(part)
            else:
                items.append(
                    format_rounded(number, self.float_precision, self.leading_zero)
                )
        return " ".join(items)


@dataclass
class CleanupNumericValues(Plugin):
    """Round single numeric attribute values and drop a ``px`` unit."""

    float_precision: int = 3
    remove_px: bool = True
    leading_zero: bool = True

    def apply(self, doc: Document) -> None:
        for element in iter_elements(doc.root):
            attrs = element.attributes
            for name in _NUMERIC_ATTRS:
                if name in attrs:
                    attrs[name] = self.clean(attrs[name])

    def clean(self, value: str) -> str:
        """Return the rounded form of ``value``, or ``value`` if it is not a number."""
        text = value.strip()
        if self.remove_px and text.endswith("px"):
            text = text[:-2]
        number = _parse_number(text)
        if number is None:
            return value
        return format_rounded(number, self.float_precision, self.leading_zero)


class RemoveEmptyAttrs(Plugin):
    """Remove attributes whose value is empty."""

    def apply(self, doc: Document) -> None:
        for element in iter_elements(doc.root):
            for key in [k for k, v in element.attributes.items() if not v]:
                del element.attributes[key]


def _default_attrs() -> dict[str, str]:
    return {
        "cx": "0",
        "cy": "0",
        "x": "0",
        "y": "0",
        "r": "0",
        "rx": "0",
        "ry": "0",
        "rotate": "0",
        "scale": "1",
        "stroke-width": "1",
        "stroke-opacity": "1",
        "fill-opacity": "1",
        "stop-opacity": "1",
        "letter-spacing": "normal",
        "word-spacing": "normal",
    }


@dataclass
class RemoveUnknownsAndDefaults(Plugin):
    """Remove attributes that merely restate their default value."""

    default_attrs: dict[str, str] = field(default_factory=_default_attrs)

    def _is_default(self, name: str, value: str) -> bool:
        default = self.default_attrs.get(name)
        if default is None:
            return False
        if value == default:
            return True
        if default == "0" and value in ("0px", "0pt", "0em"):
            return True
        return default == "1" and value == "1px"

    def apply(self, doc: Document) -> None:
        for element in iter_elements(doc.root):
            attrs = element.attributes
            for key in [k for k, v in attrs.items() if self._is_default(k, v)]:
                del attrs[key]


def _prune_defs(nodes: list[Node], used: set[str]) -> None:
    for node in nodes:
        if isinstance(node, Element):
            _prune_defs(node.children, used)
            if node.name == "defs":
                node.children[:] = [
                    child
                    for child in node.children
                    if isinstance(child, Element) and child.attributes.get("id") in used
                ]
    nodes[:] = [
        node
        for node in nodes
        if not (isinstance(node, Element) and node.name == "defs" and not node.children)
    ]


class RemoveUselessDefs(Plugin):
    """Drop unreferenced definitions and then any empty ``<defs>``."""

    def apply(self, doc: Document) -> None:
        _prune_defs(doc.root, find_used_ids(doc.root))


def _is_invisible_shape(node: Node) -> bool:
    if not isinstance(node, Element) or node.name not in _SHAPES:
        return False
    attrs = node.attributes
    stroke = attrs.get("stroke")
    has_stroke = stroke is not None and stroke != "none"
    visible_stroke = has_stroke and attrs.get("stroke-width") not in _ZERO_WIDTHS
    fill = attrs.get("fill")
    has_fill = fill is None or fill != "none"
    return not visible_stroke and not has_fill and "id" not in attrs


def _strip_stroke_and_fill(nodes: list[Node]) -> None:
    nodes[:] = [node for node in nodes if not _is_invisible_shape(node)]
    for node in nodes:
        if isinstance(node, Element):
            attrs = node.attributes
            if attrs.get("stroke") == "none":
                del attrs["stroke"]
            if attrs.get("stroke-width") in _ZERO_WIDTHS:
                attrs.pop("stroke", None)
                del attrs["stroke-width"]
            _strip_stroke_and_fill(node.children)


class RemoveUselessStrokeAndFill(Plugin):
    """Remove invisible shapes and stroke attributes that draw nothing."""

    def apply(self, doc: Document) -> None:
        _strip_stroke_and_fill(doc.root)