"""Mutable HTML document model backed by BeautifulSoup."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from bs4 import BeautifulSoup, Doctype, PageElement, Tag
from soupsieve import SelectorSyntaxError

logger = logging.getLogger(__name__)

DOCUMENT_PARSER = "lxml"
FRAGMENT_PARSER = "html.parser"


class DocumentError(Exception):
    """Raised when a document query cannot be evaluated."""


def parse_fragment(html: str) -> List[PageElement]:
    """Parse a markup fragment into detached nodes, without html/body wrappers.

    Fragments go through html.parser rather than lxml: lxml would wrap bare
    text in a paragraph and move head-only tags out of place. Unclosed tags
    are closed at the end of the fragment, so editor markup is repaired
    locally and never leaks into surrounding elements.
    """
    fragment = BeautifulSoup(html or "", FRAGMENT_PARSER)
    return [node.extract() for node in list(fragment.contents)]


class Document:
    """A parsed HTML page mutated in place.

    The tree is produced by the lenient lxml parser, so hand-authored markup
    with unclosed tags or a missing head/body still parses. Every mutation
    made through this class bumps ``revision`` so that callers can drop
    cached query results.
    """

    def __init__(self, html: str | None) -> None:
        self.soup = BeautifulSoup(html or "", DOCUMENT_PARSER)
        self.revision = 0

    def __str__(self) -> str:
        return self.serialize()

    def serialize(self) -> str:
        return str(self.soup)

    def touch(self) -> None:
        self.revision += 1

    def query(self, selector: str, root: Optional[Tag] = None) -> List[Tag]:
        """Return elements matching a CSS selector, in document order."""
        scope = root if root is not None else self.soup
        try:
            return list(scope.select(selector))
        except SelectorSyntaxError as exc:
            raise DocumentError(f"Invalid selector {selector!r}: {exc}") from exc

    def query_one(self, selector: str, root: Optional[Tag] = None) -> Optional[Tag]:
        found = self.query(selector, root)
        return found[0] if found else None

    @staticmethod
    def get_attr(element: Tag, name: str) -> Optional[str]:
        value = element.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def set_attr(self, element: Tag, name: str, value: str) -> None:
        element[name] = value
        self.touch()

    def remove_attr(self, element: Tag, name: str) -> None:
        if name in element.attrs:
            del element[name]
            self.touch()

    @staticmethod
    def class_list(element: Tag) -> List[str]:
        value = element.get("class")
        if not value:
            return []
        if isinstance(value, str):
            return value.split()
        return list(value)

    def set_class_list(self, element: Tag, tokens: Iterable[str]) -> None:
        tokens = list(tokens)
        if tokens:
            element["class"] = tokens
        elif "class" in element.attrs:
            del element["class"]
        self.touch()

    @staticmethod
    def get_html(element: Tag) -> str:
        return element.decode_contents()

    @staticmethod
    def outer_html(element: Tag) -> str:
        return str(element)

    @staticmethod
    def get_text(element: Tag) -> str:
        return element.get_text()

    def set_html(self, element: Tag, html: str) -> None:
        element.clear()
        for node in parse_fragment(html):
            element.append(node)
        self.touch()

    def remove(self, element: Tag) -> None:
        element.decompose()
        self.touch()

    def head(self) -> Tag:
        """Return the head element, creating it when the parser produced none."""
        if self.soup.head is not None:
            return self.soup.head
        root = self.soup.html
        if root is None:
            root = self.soup.new_tag("html")
            for node in list(self.soup.contents):
                if not isinstance(node, Doctype):
                    root.append(node.extract())
            self.soup.append(root)
        head = self.soup.new_tag("head")
        root.insert(0, head)
        logger.debug("Created missing <head> element")
        return head

    def prepend_to_head(self, html: str) -> None:
        head = self.head()
        for index, node in enumerate(parse_fragment(html)):
            head.insert(index, node)
        self.touch()

    def append_to_head(self, html: str) -> None:
        head = self.head()
        for node in parse_fragment(html):
            head.append(node)
        self.touch()

    def new_tag(self, tag_name: str, attrs: Dict[str, str]) -> Tag:
        return self.soup.new_tag(tag_name, attrs=attrs)

    def prepend_tag_to_head(self, tag: Tag) -> None:
        self.head().insert(0, tag)
        self.touch()


def parse(html: str | None) -> Document:
    """Parse an HTML string into a Document."""
    return Document(html)
