import pytest

from rcdom.dom import Attribute, ElementFlags, QualName, RcDom
from rcdom.serialize import SerializableHandle, Serializer, TraversalScope

HTML_NS = "http://www.w3.org/1999/xhtml"


def qn(local, ns=HTML_NS):
    return QualName(None, ns, local)


class _Markup(Serializer):
    def __init__(self):
        super().__init__()
        self.parts = []

    def start_elem(self, name, attrs):
        rendered = "".join(f' {n.local}="{v}"' for n, v in attrs)
        self.parts.append(f"<{name.local}{rendered}>")

    def end_elem(self, name):
        self.parts.append(f"</{name.local}>")

    def write_text(self, text):
        self.parts.append(text)

    def write_comment(self, text):
        self.parts.append(f"<!--{text}-->")

    def write_doctype(self, name):
        self.parts.append(f"<!DOCTYPE {name}>")

    def write_processing_instruction(self, target, data):
        self.parts.append(f"<?{target} {data}>")


@pytest.fixture
def sample():
    dom = RcDom()
    div = dom.create_element(qn("div"), [], ElementFlags())
    dom.append(dom.document, div)
    dom.append(div, "text node")
    span = dom.create_element(qn("span"), [Attribute(qn("id", ""), "s")], ElementFlags())
    dom.append(div, span)
    return dom, div, span


def test_children_only_from_document(sample):
    dom, _, _ = sample
    out = _Markup()
    SerializableHandle(dom.document).serialize(out, TraversalScope.CHILDREN_ONLY)
    assert "".join(out.parts) == '<div>text node<span id="s"></span></div>'


def test_default_scope_is_children_only(sample):
    dom, _, _ = sample
    out = _Markup()
    SerializableHandle(dom.document).serialize(out)
    assert "".join(out.parts) == '<div>text node<span id="s"></span></div>'


def test_include_node_of_element(sample):
    _, div, span = sample
    out = Serializer()
    SerializableHandle(div).serialize(out, TraversalScope.INCLUDE_NODE)
    assert out.events == [
        ("start", qn("div"), []),
        ("text", "text node"),
        ("start", qn("span"), [(qn("id", ""), "s")]),
        ("end", qn("span")),
        ("end", qn("div")),
    ]


def test_children_only_of_element_omits_element(sample):
    _, div, _ = sample
    out = Serializer()
    SerializableHandle(div).serialize(out, TraversalScope.CHILDREN_ONLY)
    assert out.events[0] == ("text", "text node")
    assert out.events[-1] == ("end", qn("span"))


def test_include_document_raises():
    dom = RcDom()
    with pytest.raises(ValueError):
        SerializableHandle(dom.document).serialize(Serializer(), TraversalScope.INCLUDE_NODE)


def test_doctype_comment_and_pi_events():
    dom = RcDom()
    dom.append_doctype_to_document("html", "pub", "sys")
    dom.append(dom.document, dom.create_comment("note"))
    dom.append(dom.document, dom.create_pi("target", "data"))
    out = Serializer()
    SerializableHandle(dom.document).serialize(out, TraversalScope.CHILDREN_ONLY)
    assert out.events == [
        ("doctype", "html"),
        ("comment", "note"),
        ("pi", "target", "data"),
    ]


def test_start_and_end_events_balance_on_deep_tree():
    dom = RcDom()
    parent = dom.document
    for _ in range(5000):
        child = dom.create_element(qn("div"), [], ElementFlags())
        dom.append(parent, child)
        parent = child
    out = Serializer()
    SerializableHandle(dom.document).serialize(out)
    starts = [e for e in out.events if e[0] == "start"]
    ends = [e for e in out.events if e[0] == "end"]
    assert len(starts) == len(ends) == 5000
    assert out.events[4999][0] == "start"
    assert out.events[5000][0] == "end"


def test_empty_document_produces_no_events():
    out = Serializer()
    SerializableHandle(RcDom().document).serialize(out)
    assert out.events == []


def test_template_contents_not_serialized():
    dom = RcDom()
    template = dom.create_element(qn("template"), [], ElementFlags(template=True))
    dom.append(dom.document, template)
    dom.append(dom.get_template_contents(template), "inside")
    out = Serializer()
    SerializableHandle(dom.document).serialize(out)
    assert out.events == [("start", qn("template"), []), ("end", qn("template"))]