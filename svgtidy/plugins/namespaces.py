"""Passes that drop editor-specific and unused XML namespaces."""

from __future__ import annotations

from svgtidy.plugins.base import Plugin, iter_elements
from svgtidy.tree import Document, Element, Node

_EDITOR_NAMESPACES = frozenset(
    {
        "http://www.inkscape.org/namespaces/inkscape",
        "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd",
        "http://ns.adobe.com/AdobeIllustrator/10.0/",
        "http://ns.adobe.com/SaveForWeb/1.0/",
    }
)

_XMLNS = "xmlns:"


def _prefix(name: str) -> str | None:
    head, sep, _ = name.partition(":")
    return head if sep else None


def _editor_prefixes(nodes: list[Node]) -> set[str]:
    return {
        key[len(_XMLNS):]
        for element in iter_elements(nodes)
        for key, value in element.attributes.items()
        if key.startswith(_XMLNS) and value in _EDITOR_NAMESPACES
    }


def _is_editor_attr(key: str, value: str, prefixes: set[str]) -> bool:
    if key.startswith(_XMLNS):
        if key[len(_XMLNS):] in prefixes and value in _EDITOR_NAMESPACES:
            return True
    return _prefix(key) in prefixes


def _strip_editor_data(nodes: list[Node], prefixes: set[str]) -> None:
    nodes[:] = [
        node
        for node in nodes
        if not (isinstance(node, Element) and _prefix(node.name) in prefixes)
    ]
    for node in nodes:
        if isinstance(node, Element):
            node.attributes = {
                key: value
                for key, value in node.attributes.items()
                if not _is_editor_attr(key, value, prefixes)
            }
            _strip_editor_data(node.children, prefixes)


class RemoveEditorsNSData(Plugin):
    """Remove elements, attributes and declarations in editor namespaces."""

    def apply(self, doc: Document) -> None:
        _strip_editor_data(doc.root, _editor_prefixes(doc.root))


class RemoveUnusedNS(Plugin):
    """Remove ``xmlns:prefix`` declarations whose prefix nothing uses."""

    def apply(self, doc: Document) -> None:
        used: set[str] = set()
        for element in iter_elements(doc.root):
            for name in (element.name, *element.attributes):
                prefix = _prefix(name)
                if prefix is not None:
                    used.add(prefix)
        for element in iter_elements(doc.root):
            for key in [
                k
                for k in element.attributes
                if k.startswith(_XMLNS) and k[len(_XMLNS):] not in used
            ]:
                del element.attributes[key]