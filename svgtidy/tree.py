"""Document tree for SVG markup and a depth-first visitor over it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass
class Element:
    """An element with ordered attributes and child nodes."""

    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)


@dataclass
class Text:
    """Character data between tags."""

    text: str


@dataclass
class Comment:
    """An XML comment, without its delimiters."""

    text: str


@dataclass
class Cdata:
    """A CDATA section, without its delimiters."""

    text: str


@dataclass
class Doctype:
    """A document type declaration, without ``<!DOCTYPE`` and ``>``."""

    text: str


@dataclass
class ProcessingInstruction:
    """A processing instruction such as ``<?xml version="1.0"?>``."""

    target: str
    content: Optional[str] = None


Node = Union[Element, Text, Comment, Cdata, Doctype, ProcessingInstruction]


@dataclass
class Document:
    """Top-level nodes: usually one root element plus prolog nodes."""

    root: list[Node] = field(default_factory=list)


class Visitor:
    """Walks a document depth first; override the hooks that matter."""

    def visit_document(self, doc: Document) -> None:
        self.visit_nodes(doc.root)

    def visit_nodes(self, nodes: list[Node]) -> None:
        for node in nodes:
            self.visit_node(node)

    def visit_node(self, node: Node) -> None:
        if isinstance(node, Element):
            self.visit_element(node)

    def visit_element(self, element: Element) -> None:
        self.visit_nodes(element.children)