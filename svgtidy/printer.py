"""Serialisation of a document tree back to compact markup."""

from __future__ import annotations

from collections.abc import Iterator

from svgtidy.tree import (
    Cdata,
    Comment,
    Doctype,
    Document,
    Element,
    Node,
    ProcessingInstruction,
    Text,
)


def render(doc: Document) -> str:
    """Render a whole document without added whitespace."""
    return "".join(piece for node in doc.root for piece in _emit(node))


def render_node(node: Node) -> str:
    """Render a single node and its descendants."""
    return "".join(_emit(node))


def _emit(node: Node) -> Iterator[str]:
    if isinstance(node, Element):
        yield "<" + node.name
        for key, value in node.attributes.items():
            yield f' {key}="{value}"'
        if not node.children:
            yield "/>"
            return
        yield ">"
        for child in node.children:
            yield from _emit(child)
        yield f"</{node.name}>"
    elif isinstance(node, Text):
        yield node.text
    elif isinstance(node, Comment):
        yield f"<!--{node.text}-->"
    elif isinstance(node, Cdata):
        yield f"<![CDATA[{node.text}]]>"
    elif isinstance(node, ProcessingInstruction):
        yield "<?" + node.target
        if node.content is not None:
            yield " " + node.content
        yield "?>"
    elif isinstance(node, Doctype):
        yield f"<!DOCTYPE {node.text}>"
    else:
        raise TypeError(f"cannot render {type(node).__name__}")