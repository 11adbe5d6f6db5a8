"""Walking a node tree and feeding its contents to a serializer."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

from rcdom.dom import (
    Comment,
    Doctype,
    Document,
    Element,
    Node,
    ProcessingInstruction,
    QualName,
    Text,
)


class TraversalScope(Enum):
    """Whether serialization includes the node itself or only its children."""

    INCLUDE_NODE = "include-node"
    CHILDREN_ONLY = "children-only"


class Serializer:
    """Receives serialization events.

    The base class records every event in ``events`` in the order received;
    subclasses override the methods to produce output.
    """

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def start_elem(self, name: QualName, attrs: Iterable[tuple[QualName, str]]) -> None:
        self.events.append(("start", name, list(attrs)))

    def end_elem(self, name: QualName) -> None:
        self.events.append(("end", name))

    def write_text(self, text: str) -> None:
        self.events.append(("text", text))

    def write_comment(self, text: str) -> None:
        self.events.append(("comment", text))

    def write_doctype(self, name: str) -> None:
        self.events.append(("doctype", name))

    def write_processing_instruction(self, target: str, data: str) -> None:
        self.events.append(("pi", target, data))


@dataclass(frozen=True)
class _Open:
    node: Node


@dataclass(frozen=True)
class _Close:
    name: QualName


class SerializableHandle:
    """Wraps a node so that its subtree can be fed to a serializer."""

    def __init__(self, handle: Node) -> None:
        self.handle = handle

    def serialize(
        self,
        serializer: Serializer,
        traversal_scope: TraversalScope = TraversalScope.CHILDREN_ONLY,
    ) -> None:
        """Feed the subtree to *serializer* in document order, without recursion."""
        ops: deque[Union[_Open, _Close]] = deque()
        if traversal_scope is TraversalScope.INCLUDE_NODE:
            ops.append(_Open(self.handle))
        else:
            ops.extend(_Open(child) for child in self.handle.children)

        while ops:
            op = ops.popleft()
            if isinstance(op, _Close):
                serializer.end_elem(op.name)
                continue

            node = op.node
            data = node.data
            if isinstance(data, Element):
                serializer.start_elem(
                    data.name, [(attr.name, attr.value) for attr in data.attrs]
                )
                ops.appendleft(_Close(data.name))
                ops.extendleft(_Open(child) for child in reversed(node.children))
            elif isinstance(data, Doctype):
                serializer.write_doctype(data.name)
            elif isinstance(data, Text):
                serializer.write_text(data.contents)
            elif isinstance(data, Comment):
                serializer.write_comment(data.contents)
            elif isinstance(data, ProcessingInstruction):
                serializer.write_processing_instruction(data.target, data.contents)
            elif isinstance(data, Document):
                raise ValueError("can't serialize Document node itself")