"""Plain-text dumps of a node tree, one node per line, indented by depth."""

from __future__ import annotations

from typing import Iterable, Iterator

from rcdom.dom import (
    Comment,
    Doctype,
    Document,
    Element,
    Node,
    ProcessingInstruction,
    Text,
)

_HTML_NAMESPACE = "http://www.w3.org/1999/xhtml"

_ESCAPES = {
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "'": "\\'",
    '"': '\\"',
    "\\": "\\\\",
}


def _escape_default(text: str) -> str:
    """Escape like a debugging dump: printable ASCII kept, everything else escaped."""
    return "".join(
        _ESCAPES.get(ch)
        or (ch if " " <= ch <= "~" else f"\\u{{{ord(ch):x}}}")
        for ch in text
    )


def _html_line(node: Node) -> str:
    data = node.data
    if isinstance(data, Document):
        return "#Document"
    if isinstance(data, Doctype):
        return f'<!DOCTYPE {data.name} "{data.public_id}" "{data.system_id}">'
    if isinstance(data, Text):
        return f"#text: {_escape_default(data.contents)}"
    if isinstance(data, Comment):
        return f"<!-- {_escape_default(data.contents)} -->"
    if isinstance(data, Element):
        if data.name.ns != _HTML_NAMESPACE:
            raise ValueError(f"element {data.name.local!r} is not in the HTML namespace")
        parts = [f"<{data.name.local}"]
        for attr in data.attrs:
            if attr.name.ns != "":
                raise ValueError(f"attribute {attr.name.local!r} has a namespace")
            parts.append(f' {attr.name.local}="{attr.value}"')
        parts.append(">")
        return "".join(parts)
    if isinstance(data, ProcessingInstruction):
        raise ValueError("processing instructions do not occur in an HTML tree")
    raise TypeError(f"unknown node data {data!r}")


def _walk(root: Node, include_child) -> Iterator[tuple[int, Node]]:
    stack = [(0, root)]
    while stack:
        depth, node = stack.pop()
        yield depth, node
        stack.extend(
            (depth + 1, child)
            for child in reversed(node.children)
            if include_child(child)
        )


def format_html_tree(document: Node, errors: Iterable[str] = ()) -> str:
    """Dump an HTML tree with four spaces of indent per level, then any parse errors."""
    lines = [
        " " * (4 * depth) + _html_line(node)
        for depth, node in _walk(document, lambda child: True)
    ]
    out = "".join(line + "\n" for line in lines)

    errors = list(errors)
    if errors:
        out += "\nParse errors:\n"
        out += "".join(f"    {err}\n" for err in errors)
    return out


def _xml_piece(node: Node) -> str:
    data = node.data
    if isinstance(data, Document):
        return "#document\n"
    if isinstance(data, Text):
        return f"#text {_escape_default(data.contents)}\n"
    if isinstance(data, Element):
        return f"{data.name.local}\n"
    return ""


def format_xml_tree(document: Node) -> str:
    """Dump the elements and text of an XML tree, four spaces of indent per level."""
    return "".join(
        " " * (4 * depth) + _xml_piece(node)
        for depth, node in _walk(
            document, lambda child: isinstance(child.data, (Text, Element))
        )
    )