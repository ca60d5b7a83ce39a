"""Prefixing of resource URLs on anchors and images."""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable

from sitecake.services.page.document import Document
from sitecake.services.page.urls import map_url_list, prefix_url, unprefix_url

logger = logging.getLogger(__name__)

RESOURCE_ELEMENTS = "a, img"
URL_ATTRIBUTES = ("src", "href")
URL_LIST_ATTRIBUTES = ("srcset",)


class UrlRewriter:
    """Adds or strips a path prefix on resource URLs.

    Only values that pass ``is_resource_url`` are changed, so external links,
    fragments and mailto links keep their exact value. Prefixing and then
    unprefixing with the same prefix restores every attribute.
    """

    def __init__(self, document: Document) -> None:
        self.document = document

    def prefix_resource_urls(self, prefix: str) -> int:
        return self._rewrite(partial(prefix_url, prefix=prefix))

    def unprefix_resource_urls(self, prefix: str) -> int:
        return self._rewrite(partial(unprefix_url, prefix=prefix))

    def _rewrite(self, rewrite: Callable[[str], str]) -> int:
        changed = 0
        for element in self.document.query(RESOURCE_ELEMENTS):
            for attr in URL_ATTRIBUTES + URL_LIST_ATTRIBUTES:
                value = self.document.get_attr(element, attr)
                if value is None:
                    continue
                if attr in URL_LIST_ATTRIBUTES:
                    new_value = map_url_list(value, rewrite)
                else:
                    new_value = rewrite(value)
                if new_value != value:
                    self.document.set_attr(element, attr, new_value)
                    changed += 1
        logger.debug("Rewrote %d resource attribute(s)", changed)
        return changed
