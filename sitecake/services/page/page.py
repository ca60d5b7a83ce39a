"""Page facade used by the CMS to edit and render hand-authored HTML pages."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from sitecake.config import get_settings
from sitecake.services.page.containers import ContainerLocator
from sitecake.services.page.document import Document
from sitecake.services.page.ids import IdGenerator, new_id
from sitecake.services.page.metadata import MetadataManager
from sitecake.services.page.models import ContainerNode
from sitecake.services.page.nav import NavRewriter
from sitecake.services.page.resources import ResourceUrlScanner
from sitecake.services.page.rewriter import UrlRewriter
from sitecake.services.page.urls import is_external_nav_link

logger = logging.getLogger(__name__)


class Page:
    """One parsed page and the operations the CMS performs on it.

    The page owns its document; container nodes returned from it are views
    that do not survive later mutations.
    """

    def __init__(
        self,
        html: str,
        id_generator: IdGenerator = new_id,
        is_external_link: Callable[[Optional[str]], bool] = is_external_nav_link,
    ) -> None:
        self.source_html = html
        self.id_generator = id_generator
        self.is_external_link = is_external_link
        self.doc = Document(html)
        self.locator = ContainerLocator(self.doc, id_generator)
        self.scanner = ResourceUrlScanner(self.doc, self.locator)
        self.rewriter = UrlRewriter(self.doc)
        self.metadata = MetadataManager(self.doc, id_generator)

    def __str__(self) -> str:
        return self.doc.serialize()

    def serialize(self) -> str:
        return self.doc.serialize()

    def render(self) -> str:
        """Return the served version of the page with routed nav links."""
        rendered = Document(self.doc.serialize())
        NavRewriter(rendered, self.is_external_link).rewrite_internal_links()
        return rendered.serialize()

    # containers

    def containers(self) -> List[str]:
        return self.locator.container_names()

    def container_names(self, include_temporary: bool = False) -> List[str]:
        return self.locator.container_names(include_temporary)

    def container_nodes(self) -> List[ContainerNode]:
        return self.locator.list_containers()

    def normalize_container_names(self) -> None:
        self.locator.normalize_container_names()

    def cleanup_container_names(self) -> None:
        self.locator.cleanup_container_names()

    def set_container_content(self, container_name: str, content: str) -> None:
        nodes = self.locator.find_containers(container_name)
        if not nodes:
            logger.debug("No container named %s", container_name)
        for node in nodes:
            self.doc.set_html(node.element, content)

    # resources

    def list_resource_urls(self) -> List[str]:
        return self.scanner.list_all_resource_urls()

    def prefix_resource_urls(self, prefix: Optional[str] = None) -> None:
        """Prefix resource URLs, by default with the draft content path."""
        if prefix is None:
            prefix = get_settings().draft_prefix
        self.rewriter.prefix_resource_urls(prefix)

    def unprefix_resource_urls(self, prefix: Optional[str] = None) -> None:
        if prefix is None:
            prefix = get_settings().draft_prefix
        self.rewriter.unprefix_resource_urls(prefix)

    # navigation

    def list_nav_urls(self, selector: str) -> Dict[str, str]:
        """Map href to link text for the selected nav items."""
        urls: Dict[str, str] = {}
        for element in self.doc.query(selector):
            href = self.doc.get_attr(element, "href")
            if href is not None:
                urls[href] = self.doc.get_text(element)
        return urls

    def set_nav(self, selector: str, html: str) -> None:
        for element in self.doc.query(selector):
            self.doc.set_html(element, html)

    # metadata

    def get_page_description(self) -> str:
        return self.metadata.get_description()

    def set_page_description(self, text: str) -> None:
        self.metadata.set_description(text)

    def add_robots_noindex(self) -> None:
        self.metadata.add_robots_noindex()

    def remove_robots_noindex(self) -> None:
        self.metadata.remove_robots_noindex()

    def is_robots_noindex(self) -> bool:
        return self.metadata.is_robots_noindex()

    def add_metadata(self) -> None:
        self.metadata.add_metadata()

    def remove_metadata(self) -> None:
        self.metadata.remove_metadata()

    def ensure_page_id(self) -> str:
        return self.metadata.ensure_page_id()

    def page_id(self) -> Optional[str]:
        return self.metadata.page_id()

    def remove_page_id(self) -> None:
        self.metadata.remove_page_id()

    def append_code_to_head(self, code: str) -> None:
        self.doc.append_to_head(code)
