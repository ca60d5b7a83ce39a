"""Resource URL discovery inside content containers."""

from __future__ import annotations

from typing import List

from sitecake.services.page.containers import ContainerLocator
from sitecake.services.page.document import Document
from sitecake.services.page.models import ContainerNode
from sitecake.services.page.urls import RESOURCE_URL_SCAN_PATTERN, is_resource_url


class ResourceUrlScanner:
    """Finds content-addressed asset URLs in container markup.

    Matching runs over the serialized container rather than over attribute
    values, so references inside inline styles, srcset lists or data
    attributes are found as well.
    """

    def __init__(self, document: Document, locator: ContainerLocator) -> None:
        self.document = document
        self.locator = locator

    def scan_container(self, node: ContainerNode) -> List[str]:
        html = self.document.outer_html(node.element)
        return [
            match.group(0)
            for match in RESOURCE_URL_SCAN_PATTERN.finditer(html)
            if is_resource_url(match.group(0))
        ]

    def list_all_resource_urls(self) -> List[str]:
        urls: List[str] = []
        for node in self.locator.list_containers():
            urls.extend(self.scan_container(node))
        return urls
