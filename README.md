# rcdom

A small document tree for HTML and XML tree builders. A tree builder
drives an `RcDom` through its sink methods, and the finished tree can be
walked, fed to a serializer, or printed as indented text.

The tree is meant as a static parse result, not as a full browser DOM.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Building a tree (`rcdom.dom`)

```python
from rcdom.dom import RcDom, QualName, Attribute, ElementFlags

HTML_NS = "http://www.w3.org/1999/xhtml"

dom = RcDom()
doc = dom.get_document()
div = dom.create_element(
    QualName(None, HTML_NS, "div"),
    [Attribute(QualName(None, "", "id"), "main")],
    ElementFlags(),
)
dom.append(doc, div)
dom.append(div, "text node")
dom.append(div, " continues")   # joined onto the existing text node
```

Each `Node` holds its `data` (one of `Document`, `Doctype`, `Text`,
`Comment`, `Element` or `ProcessingInstruction`) and its ordered
`children`. The `node.parent` property gives the parent node, or `None`
for a detached node; parents are held by weak reference only.

`RcDom` offers the methods a tree builder calls:

- `create_element`, `create_comment`, `create_pi`
- `append(parent, child)` and `append_before_sibling(sibling, child)`,
  where `child` is a `Node` or a string; a string is merged into an
  adjacent text node when there is one
- `append_based_on_parent_node`, `append_doctype_to_document`
- `add_attrs_if_missing`, `remove_from_parent`, `reparent_children`
- `get_document`, `get_template_contents`, `elem_name`, `same_node`,
  `is_mathml_annotation_xml_integration_point`
- `parse_error` (messages are collected in `dom.errors`),
  `set_quirks_mode` (stored in `dom.quirks_mode`, a `QuirksMode`,
  `NO_QUIRKS` by default) and `finish`, which returns the `RcDom` itself

Template elements, created with `ElementFlags(template=True)`, carry their
own document fragment, reached through `dom.get_template_contents(element)`.

Misuse raises: `TypeError` when an element is expected but another node is
given, `ValueError` when appending a node that already has a parent or
inserting before a node that has none.

## Serializing (`rcdom.serialize`)

`SerializableHandle(node).serialize(serializer, traversal_scope)` walks the
tree in document order and calls the serializer's `start_elem`,
`end_elem`, `write_text`, `write_comment`, `write_doctype` and
`write_processing_instruction`. `TraversalScope.CHILDREN_ONLY` (the
default) writes only the node's children; `TraversalScope.INCLUDE_NODE`
writes the node itself too. Serializing a `Document` node itself raises
`ValueError`.

The base `Serializer` records every call as a tuple in its `events` list;
subclass it and override the methods to produce real output.

```python
from rcdom.serialize import SerializableHandle, Serializer

recorder = Serializer()
SerializableHandle(doc).serialize(recorder)
print(recorder.events)
```

## Printing trees (`rcdom.printing`)

- `format_html_tree(document, errors=())` lists every node, four spaces of
  indent per level: doctypes with their identifiers, escaped text and
  comments, and elements with their attributes, followed by a
  "Parse errors:" section when there are errors. It raises `ValueError` for
  elements outside the HTML namespace, namespaced attributes and
  processing instructions.
- `format_xml_tree(document)` lists only elements (by local name) and text
  nodes.

## What this package does not do

It contains no tokenizer, parser or markup writer: it does not read HTML
or XML text and does not produce it. A tree builder must call the `RcDom`
methods, and output text comes from a `Serializer` subclass you supply.
There is no command-line program.