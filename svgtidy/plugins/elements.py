"""Passes that drop whole nodes: comments, metadata, hidden and empty elements."""

from __future__ import annotations

from collections.abc import Callable

from svgtidy.plugins.base import Plugin
from svgtidy.tree import (
    Comment,
    Doctype,
    Document,
    Element,
    Node,
    ProcessingInstruction,
    Text,
)

_CONTAINERS = frozenset(
    {"defs", "g", "marker", "mask", "missing-glyph", "pattern", "switch", "symbol"}
)


def _prune(nodes: list[Node], doomed: Callable[[Node], bool]) -> None:
    """Drop matching nodes at this level, then descend into the survivors."""
    nodes[:] = [node for node in nodes if not doomed(node)]
    for node in nodes:
        if isinstance(node, Element):
            _prune(node.children, doomed)


def _named(*names: str) -> Callable[[Node], bool]:
    wanted = frozenset(names)
    return lambda node: isinstance(node, Element) and node.name in wanted


class RemoveComments(Plugin):
    """Remove every comment."""

    def apply(self, doc: Document) -> None:
        _prune(doc.root, lambda node: isinstance(node, Comment))


class RemoveDesc(Plugin):
    """Remove ``<desc>`` elements."""

    def apply(self, doc: Document) -> None:
        _prune(doc.root, _named("desc"))


class RemoveDoctype(Plugin):
    """Remove the document type declaration."""

    def apply(self, doc: Document) -> None:
        doc.root[:] = [node for node in doc.root if not isinstance(node, Doctype)]


class RemoveMetadata(Plugin):
    """Remove ``<metadata>`` elements."""

    def apply(self, doc: Document) -> None:
        _prune(doc.root, _named("metadata"))


class RemoveRasterImages(Plugin):
    """Remove ``<image>`` and ``<img>`` elements."""

    def apply(self, doc: Document) -> None:
        _prune(doc.root, _named("image", "img"))


class RemoveScriptElement(Plugin):
    """Remove ``<script>`` elements."""

    def apply(self, doc: Document) -> None:
        _prune(doc.root, _named("script"))


class RemoveStyleElement(Plugin):
    """Remove ``<style>`` elements."""

    def apply(self, doc: Document) -> None:
        _prune(doc.root, _named("style"))


class RemoveTitle(Plugin):
    """Remove ``<title>`` elements."""

    def apply(self, doc: Document) -> None:
        _prune(doc.root, _named("title"))


class RemoveXMLProcInst(Plugin):
    """Remove the top-level ``<?xml ...?>`` declaration."""

    def apply(self, doc: Document) -> None:
        doc.root[:] = [
            node
            for node in doc.root
            if not (isinstance(node, ProcessingInstruction) and node.target == "xml")
        ]


def _strip_blank_text(nodes: list[Node], preserve: bool) -> None:
    if not preserve:
        nodes[:] = [
            node
            for node in nodes
            if not (isinstance(node, Text) and not node.text.strip())
        ]
    for node in nodes:
        if isinstance(node, Element):
            space = node.attributes.get("xml:space")
            inner = {"preserve": True, "default": False}.get(space, preserve)
            _strip_blank_text(node.children, inner)


class RemoveEmptyText(Plugin):
    """Remove whitespace-only text unless ``xml:space="preserve"`` applies."""

    def apply(self, doc: Document) -> None:
        _strip_blank_text(doc.root, False)


def _is_hidden(node: Node) -> bool:
    if not isinstance(node, Element):
        return False
    attrs = node.attributes
    if attrs.get("display") == "none" or attrs.get("opacity") == "0":
        return True
    if node.name == "circle" and attrs.get("r") == "0":
        return True
    if node.name == "rect" and (attrs.get("width") == "0" or attrs.get("height") == "0"):
        return True
    return False


class RemoveHiddenElems(Plugin):
    """Remove elements that cannot render: hidden, transparent or zero-sized."""

    def apply(self, doc: Document) -> None:
        _prune(doc.root, _is_hidden)


class RemoveEmptyContainers(Plugin):
    """Remove container elements that have no children."""

    def apply(self, doc: Document) -> None:
        _prune(
            doc.root,
            lambda node: isinstance(node, Element)
            and node.name in _CONTAINERS
            and not node.children,
        )