from pathlib import Path

from sitecake.services.page.document import Document
from sitecake.services.page.rewriter import UrlRewriter
from sitecake.services.page.urls import map_url_list, prefix_url, unprefix_url

FIXTURES = Path(__file__).parent / "fixtures"
PREFIX = "sitecake-content/draft/"


def load_document() -> Document:
    return Document((FIXTURES / "page_sample.html").read_text(encoding="utf-8"))


def snapshot(doc: Document) -> list[tuple[str, str | None, str | None, str | None]]:
    return [
        (
            element.name,
            doc.get_attr(element, "src"),
            doc.get_attr(element, "href"),
            doc.get_attr(element, "srcset"),
        )
        for element in doc.query("a, img")
    ]


def test_prefix_rewrites_only_resource_urls() -> None:
    doc = load_document()
    UrlRewriter(doc).prefix_resource_urls(PREFIX)
    img = doc.query_one('img[alt="Logo"]')
    assert img is not None
    assert doc.get_attr(img, "src") == PREFIX + "images/logo-sc1234567890123.png"
    assert doc.get_attr(img, "srcset") == (
        f"{PREFIX}images/logo-sc1234567890123.png 1x, "
        f"{PREFIX}images/logo-2x-sc0123456789abc.png 2x"
    )
    brochure = doc.query_one("a[href$='.pdf']")
    assert brochure is not None
    assert doc.get_attr(brochure, "href") == PREFIX + "files/brochure-sc00000000000ff.pdf"

    plain = doc.query_one('img[alt="Plain"]')
    assert plain is not None
    assert doc.get_attr(plain, "src") == "images/plain.png"
    hrefs = [doc.get_attr(a, "href") for a in doc.query("a")]
    assert "https://example.com/" in hrefs
    assert "mailto:hello@example.com" in hrefs
    assert "#top" in hrefs


def test_prefix_then_unprefix_restores_attributes() -> None:
    doc = load_document()
    before = snapshot(doc)
    serialized = str(doc)
    rewriter = UrlRewriter(doc)
    assert rewriter.prefix_resource_urls(PREFIX) == 4
    rewriter.unprefix_resource_urls(PREFIX)
    assert snapshot(doc) == before
    assert str(doc) == serialized


def test_unprefix_without_prefix_is_noop() -> None:
    doc = load_document()
    serialized = str(doc)
    assert UrlRewriter(doc).unprefix_resource_urls(PREFIX) == 0
    assert str(doc) == serialized


def test_double_prefix_needs_two_unprefixes() -> None:
    url = "images/a-sc1234567890123.png"
    twice = prefix_url(prefix_url(url, "p/"), "p/")
    assert twice == "p/p/" + url
    assert unprefix_url(twice, "p/") == "p/" + url
    assert unprefix_url(unprefix_url(twice, "p/"), "p/") == url


def test_absolute_prefix_round_trip() -> None:
    url = "images/a-sc1234567890123.png"
    prefixed = prefix_url(url, "https://static.example.com/")
    assert prefixed == "https://static.example.com/" + url
    assert unprefix_url(prefixed, "https://static.example.com/") == url


def test_empty_prefix_changes_nothing() -> None:
    url = "images/a-sc1234567890123.png"
    assert prefix_url(url, "") == url
    assert unprefix_url(url, "") == url


def test_map_url_list_keeps_descriptors_and_spacing() -> None:
    value = "a.png 1x,  b.png 2x ,c.png"
    assert map_url_list(value, str.upper) == "A.PNG 1x,  B.PNG 2x ,C.PNG"


def test_prefix_keeps_leading_whitespace_in_front() -> None:
    doc = Document('<img src=" images/a-sc1234567890123.png">')
    rewriter = UrlRewriter(doc)
    rewriter.prefix_resource_urls("draft/")
    img = doc.query_one("img")
    assert img is not None
    assert doc.get_attr(img, "src") == " draft/images/a-sc1234567890123.png"
    rewriter.unprefix_resource_urls("draft/")
    assert doc.get_attr(img, "src") == " images/a-sc1234567890123.png"
