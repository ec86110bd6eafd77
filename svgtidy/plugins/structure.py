"""Passes that reshape the tree: groups, paths, ordering, styles and dimensions."""

from __future__ import annotations

from svgtidy.plugins.base import Plugin, iter_elements
from svgtidy.tree import Document, Element, Node

_UNWRAP_BLOCKERS = frozenset({"switch", "foreignObject"})

_NEVER_HOISTED = frozenset({"transform", "id", "d"})

_INHERITABLE = frozenset(
    {
        "clip-rule",
        "color",
        "color-interpolation",
        "color-interpolation-filters",
        "color-profile",
        "color-rendering",
        "cursor",
        "direction",
        "fill",
        "fill-opacity",
        "fill-rule",
        "font",
        "font-family",
        "font-size",
        "font-size-adjust",
        "font-stretch",
        "font-style",
        "font-variant",
        "font-weight",
        "glyph-orientation-horizontal",
        "glyph-orientation-vertical",
        "image-rendering",
        "kerning",
        "letter-spacing",
        "marker",
        "marker-end",
        "marker-mid",
        "marker-start",
        "pointer-events",
        "shape-rendering",
        "stroke",
        "stroke-dasharray",
        "stroke-dashoffset",
        "stroke-linecap",
        "stroke-linejoin",
        "stroke-miterlimit",
        "stroke-opacity",
        "stroke-width",
        "text-anchor",
        "text-rendering",
        "visibility",
        "white-space",
        "word-spacing",
        "writing-mode",
    }
)


def _collapse(nodes: list[Node], parent_name: str) -> None:
    for node in nodes:
        if isinstance(node, Element):
            _collapse(node.children, node.name)
    if parent_name in _UNWRAP_BLOCKERS:
        return
    flattened: list[Node] = []
    for node in nodes:
        if isinstance(node, Element) and node.name == "g" and not node.attributes:
            flattened.extend(node.children)
        else:
            flattened.append(node)
    nodes[:] = flattened


class CollapseGroups(Plugin):
    """Unwrap ``<g>`` elements that carry no attributes."""

    def apply(self, doc: Document) -> None:
        _collapse(doc.root, "svg")


def _common_attrs(group: Element) -> list[tuple[str, str]]:
    children = [child for child in group.children if isinstance(child, Element)]
    if not children:
        return []
    return [
        (key, value)
        for key, value in children[0].attributes.items()
        if key not in _NEVER_HOISTED
        and key in _INHERITABLE
        and all(child.attributes.get(key) == value for child in children)
    ]


class MoveElemsAttrsToGroup(Plugin):
    """Hoist inheritable attributes shared by all children of a group onto it."""

    def apply(self, doc: Document) -> None:
        for element in iter_elements(doc.root):
            if element.name != "g" or not element.children:
                continue
            for key, value in _common_attrs(element):
                element.attributes[key] = value
                for child in element.children:
                    if isinstance(child, Element):
                        child.attributes.pop(key, None)


class MoveGroupAttrsToElems(Plugin):
    """Push a group's ``transform`` down onto its element children."""

    def apply(self, doc: Document) -> None:
        for element in iter_elements(doc.root):
            if element.name != "g" or not element.children:
                continue
            transform = element.attributes.get("transform")
            if transform is None:
                continue
            for child in element.children:
                if not isinstance(child, Element):
                    continue
                own = child.attributes.get("transform")
                child.attributes["transform"] = (
                    transform if own is None else f"{transform} {own}"
                )
            del element.attributes["transform"]


def _same_attrs_except_d(first: Element, second: Element) -> bool:
    if len(first.attributes) != len(second.attributes):
        return False
    return all(
        key in second.attributes and second.attributes[key] == value
        for key, value in first.attributes.items()
        if key != "d"
    )


def _can_merge(first: Node, second: Node) -> bool:
    return (
        isinstance(first, Element)
        and isinstance(second, Element)
        and first.name == "path"
        and second.name == "path"
        and _same_attrs_except_d(first, second)
    )


def _merge(nodes: list[Node]) -> None:
    for node in nodes:
        if isinstance(node, Element):
            _merge(node.children)
    merged: list[Node] = []
    for node in nodes:
        if merged and _can_merge(merged[-1], node):
            target = merged[-1]
            assert isinstance(target, Element) and isinstance(node, Element)
            if "d" in target.attributes:
                target.attributes["d"] += " " + node.attributes.get("d", "")
        else:
            merged.append(node)
    nodes[:] = merged


class MergePaths(Plugin):
    """Join adjacent ``<path>`` siblings whose other attributes are identical."""

    def apply(self, doc: Document) -> None:
        _merge(doc.root)


class SortAttrs(Plugin):
    """Order every element's attributes by name."""

    def apply(self, doc: Document) -> None:
        for element in iter_elements(doc.root):
            element.attributes = dict(sorted(element.attributes.items()))


def _sort_key(node: Node) -> str:
    return node.name if isinstance(node, Element) else ""


class SortDefsChildren(Plugin):
    """Order the children of ``<defs>`` by tag name."""

    def apply(self, doc: Document) -> None:
        for element in iter_elements(doc.root):
            if element.name == "defs":
                element.children.sort(key=_sort_key)


def parse_style(style: str) -> list[tuple[str, str]]:
    """Split ``key: value; ...`` declarations, skipping empty keys or values."""
    props = []
    for declaration in style.split(";"):
        declaration = declaration.strip()
        if not declaration or ":" not in declaration:
            continue
        key, value = declaration.split(":", 1)
        key, value = key.strip(), value.strip()
        if key and value:
            props.append((key, value))
    return props


class ConvertStyleToAttrs(Plugin):
    """Replace a ``style`` attribute with one attribute per declaration."""

    def apply(self, doc: Document) -> None:
        for element in iter_elements(doc.root):
            style = element.attributes.pop("style", None)
            if style is None:
                continue
            for key, value in parse_style(style):
                element.attributes[key] = value


class RemoveDimensions(Plugin):
    """Drop ``width`` and ``height`` from ``<svg>`` elements that have a viewBox."""

    def apply(self, doc: Document) -> None:
        for element in iter_elements(doc.root):
            if element.name == "svg" and "viewBox" in element.attributes:
                element.attributes.pop("width", None)
                element.attributes.pop("height", None)