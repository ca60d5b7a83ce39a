import pytest

from sitecake.services.page.document import Document, DocumentError, parse


def test_parse_tolerates_malformed_markup() -> None:
    doc = parse("<div><p>unclosed <span>text</div><li>stray")
    assert len(doc.query("p")) == 1
    assert doc.query_one("body") is not None


def test_query_supports_convention_selectors() -> None:
    doc = Document(
        '<div class="sc-content-a"><p id="x">one</p></div>'
        '<section class="other"><a href="b.html">b</a></section>'
    )
    assert len(doc.query('[class*="sc-content"]')) == 1
    assert len(doc.query('[id="x"]')) == 1
    assert len(doc.query(".other a")) == 1
    assert len(doc.query("p, a")) == 2


def test_query_within_root() -> None:
    doc = Document("<div id='a'><p>1</p></div><div id='b'><p>2</p><p>3</p></div>")
    root = doc.query_one("#b")
    assert root is not None
    assert [doc.get_text(p) for p in doc.query("p", root)] == ["2", "3"]


def test_invalid_selector_raises_document_error() -> None:
    doc = Document("<p>x</p>")
    with pytest.raises(DocumentError):
        doc.query("div[")


def test_attribute_access_and_revision() -> None:
    doc = Document('<p class="a b" title="t">x</p>')
    p = doc.query_one("p")
    assert p is not None
    assert doc.get_attr(p, "class") == "a b"
    assert doc.class_list(p) == ["a", "b"]
    assert doc.get_attr(p, "missing") is None
    start = doc.revision
    doc.set_attr(p, "title", "u")
    doc.remove_attr(p, "title")
    assert doc.get_attr(p, "title") is None
    assert doc.revision == start + 2


def test_set_and_get_inner_html() -> None:
    doc = Document("<div><p>old</p></div>")
    div = doc.query_one("div")
    assert div is not None
    doc.set_html(div, "<em>new</em> text")
    assert doc.get_html(div) == "<em>new</em> text"
    assert doc.query("p") == []


def test_head_insertion_creates_missing_head() -> None:
    doc = Document("<div>body only</div>")
    doc.prepend_to_head('<meta name="x" content="y">')
    doc.append_to_head("<title>T</title>")
    head = doc.query_one("head")
    assert head is not None
    assert [child.name for child in head.find_all(True)] == ["meta", "title"]
    assert doc.query_one("html").contents[0] is head


def test_prepend_keeps_fragment_order() -> None:
    doc = Document("<html><head><title>T</title></head><body></body></html>")
    doc.prepend_to_head("<meta name='a' content='1'><meta name='b' content='2'>")
    head = doc.query_one("head")
    assert head is not None
    assert [child.get("name", child.name) for child in head.find_all(True)] == ["a", "b", "title"]


def test_serialize_preserves_attributes() -> None:
    html = '<html><head></head><body><img src="images/a.png" alt="A"/></body></html>'
    doc = Document(html)
    again = Document(str(doc))
    img = again.query_one("img")
    assert img is not None
    assert again.get_attr(img, "src") == "images/a.png"
    assert again.get_attr(img, "alt") == "A"


def test_set_html_repairs_unclosed_fragment_locally() -> None:
    doc = Document("<div id='a'></div><div id='b'><p>kept</p></div>")
    target = doc.query_one("#a")
    assert target is not None
    doc.set_html(target, "<p>open <b>bold")
    assert doc.get_html(target) == "<p>open <b>bold</b></p>"
    sibling = doc.query_one("#b")
    assert sibling is not None
    assert doc.get_html(sibling) == "<p>kept</p>"
