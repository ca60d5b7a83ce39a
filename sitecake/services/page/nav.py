"""Render-time routing of internal navigation links."""

from __future__ import annotations

from typing import Callable, Optional
from urllib.parse import quote, urldefrag

from sitecake.config import get_settings
from sitecake.services.page.document import Document
from sitecake.services.page.urls import is_external_nav_link


class NavRewriter:
    """Points internal anchors at the CMS entry point.

    One-way: only ever applied to the rendered copy of a page.
    """

    def __init__(
        self,
        document: Document,
        is_external: Callable[[Optional[str]], bool] = is_external_nav_link,
        target: Optional[str] = None,
    ) -> None:
        self.document = document
        self.is_external = is_external
        self.target = target if target is not None else get_settings().nav_target

    def rewrite_internal_links(self) -> None:
        for anchor in self.document.query("a[href]"):
            href = self.document.get_attr(anchor, "href")
            if self.is_external(href):
                continue
            url, fragment = urldefrag(href or "")
            routed = self.target + quote(url, safe="/")
            if fragment:
                routed += "#" + fragment
            self.document.set_attr(anchor, "href", routed)
