"""A simple tree of reference-counted nodes built by an HTML or XML tree builder.

Nodes own their children and keep only weak references to their parents.
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Union


@dataclass(frozen=True)
class QualName:
    """A fully qualified name: optional prefix, namespace URL and local name."""

    prefix: Optional[str]
    ns: str
    local: str

    def expanded(self) -> tuple[str, str]:
        """Return the expanded name as a ``(namespace, local)`` pair."""
        return (self.ns, self.local)


@dataclass
class Attribute:
    """An attribute of an element."""

    name: QualName
    value: str


class QuirksMode(Enum):
    """The document's quirks mode."""

    QUIRKS = "quirks"
    LIMITED_QUIRKS = "limited-quirks"
    NO_QUIRKS = "no-quirks"


@dataclass(frozen=True)
class ElementFlags:
    """Flags the tree builder passes along when creating an element."""

    template: bool = False
    mathml_annotation_xml_integration_point: bool = False


@dataclass
class Document:
    """The document itself, the root of a tree."""


@dataclass
class Doctype:
    """A DOCTYPE with name, public id and system id."""

    name: str
    public_id: str
    system_id: str


@dataclass
class Text:
    """A text node; its contents grow as adjacent text is appended."""

    contents: str


@dataclass
class Comment:
    """A comment."""

    contents: str


@dataclass
class Element:
    """An element with attributes."""

    name: QualName
    attrs: list[Attribute] = field(default_factory=list)
    template_contents: Optional["Node"] = None
    mathml_annotation_xml_integration_point: bool = False


@dataclass
class ProcessingInstruction:
    """A processing instruction."""

    target: str
    contents: str


NodeData = Union[Document, Doctype, Text, Comment, Element, ProcessingInstruction]
NodeOrText = Union["Node", str]


class Node:
    """A node of the tree: its data, its children and a weak link to its parent."""

    __slots__ = ("data", "children", "_parent", "__weakref__")

    def __init__(self, data: NodeData) -> None:
        self.data = data
        self.children: list[Node] = []
        self._parent: Optional[weakref.ReferenceType[Node]] = None

    @property
    def parent(self) -> Optional[Node]:
        """The parent node, or None when the node is detached."""
        if self._parent is None:
            return None
        parent = self._parent()
        if parent is None:
            raise RuntimeError("dangling weak pointer")
        return parent

    def __repr__(self) -> str:
        return f"Node(data={self.data!r}, children={self.children!r})"


def _append(new_parent: Node, child: Node) -> None:
    if child._parent is not None:
        raise ValueError("child already has a parent")
    child._parent = weakref.ref(new_parent)
    new_parent.children.append(child)


def _parent_and_index(target: Node) -> Optional[tuple[Node, int]]:
    parent = target.parent
    if parent is None:
        return None
    index = next(
        (i for i, child in enumerate(parent.children) if child is target), None
    )
    if index is None:
        raise RuntimeError("have parent but couldn't find in parent's children")
    return parent, index


def _append_to_existing_text(prev: Node, text: str) -> bool:
    if isinstance(prev.data, Text):
        prev.data.contents += text
        return True
    return False


def _remove_from_parent(target: Node) -> None:
    located = _parent_and_index(target)
    if located is not None:
        parent, index = located
        del parent.children[index]
        target._parent = None


def _element_data(target: Node) -> Element:
    if not isinstance(target.data, Element):
        raise TypeError("not an element")
    return target.data


class RcDom:
    """A tree sink that builds a node tree, collecting parse errors and quirks mode."""

    def __init__(self) -> None:
        self.document = Node(Document())
        self.errors: list[str] = []
        self.quirks_mode = QuirksMode.NO_QUIRKS

    def finish(self) -> RcDom:
        return self

    def parse_error(self, msg: str) -> None:
        self.errors.append(msg)

    def get_document(self) -> Node:
        return self.document

    def get_template_contents(self, target: Node) -> Node:
        data = target.data
        if not isinstance(data, Element) or data.template_contents is None:
            raise TypeError("not a template element")
        return data.template_contents

    def set_quirks_mode(self, mode: QuirksMode) -> None:
        self.quirks_mode = mode

    def same_node(self, x: Node, y: Node) -> bool:
        return x is y

    def elem_name(self, target: Node) -> tuple[str, str]:
        return _element_data(target).name.expanded()

    def create_element(
        self, name: QualName, attrs: Iterable[Attribute], flags: ElementFlags
    ) -> Node:
        return Node(
            Element(
                name=name,
                attrs=list(attrs),
                template_contents=Node(Document()) if flags.template else None,
                mathml_annotation_xml_integration_point=(
                    flags.mathml_annotation_xml_integration_point
                ),
            )
        )

    def create_comment(self, text: str) -> Node:
        return Node(Comment(text))

    def create_pi(self, target: str, data: str) -> Node:
        return Node(ProcessingInstruction(target, data))

    def append(self, parent: Node, child: NodeOrText) -> None:
        if isinstance(child, str):
            if parent.children and _append_to_existing_text(parent.children[-1], child):
                return
            child = Node(Text(child))
        _append(parent, child)

    def append_before_sibling(self, sibling: Node, child: NodeOrText) -> None:
        located = _parent_and_index(sibling)
        if located is None:
            raise ValueError("append_before_sibling called on node without parent")
        parent, index = located

        if isinstance(child, str):
            if index > 0 and _append_to_existing_text(parent.children[index - 1], child):
                return
            node = Node(Text(child))
        else:
            node = child

        _remove_from_parent(node)
        node._parent = weakref.ref(parent)
        parent.children.insert(index, node)

    def append_based_on_parent_node(
        self, element: Node, prev_element: Node, child: NodeOrText
    ) -> None:
        if element._parent is not None:
            self.append_before_sibling(element, child)
        else:
            self.append(prev_element, child)

    def append_doctype_to_document(
        self, name: str, public_id: str, system_id: str
    ) -> None:
        _append(self.document, Node(Doctype(name, public_id, system_id)))

    def add_attrs_if_missing(self, target: Node, attrs: Iterable[Attribute]) -> None:
        existing = _element_data(target).attrs
        existing_names = {attr.name for attr in existing}
        existing.extend(attr for attr in attrs if attr.name not in existing_names)

    def remove_from_parent(self, target: Node) -> None:
        _remove_from_parent(target)

    def reparent_children(self, node: Node, new_parent: Node) -> None:
        for child in node.children:
            if child.parent is not node:
                raise RuntimeError("child's parent link does not point at its parent")
            child._parent = weakref.ref(new_parent)
        new_parent.children.extend(node.children)
        node.children = []

    def is_mathml_annotation_xml_integration_point(self, target: Node) -> bool:
        return _element_data(target).mathml_annotation_xml_integration_point