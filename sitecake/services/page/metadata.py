"""Page-level meta tag markers."""

from __future__ import annotations

import logging
from typing import List, Optional

from bs4 import Tag

from sitecake.config import get_settings
from sitecake.services.page.document import Document
from sitecake.services.page.ids import IdGenerator, new_id
from sitecake.services.page.models import DESCRIPTION, ROBOTS_NOINDEX, MetaMarker

logger = logging.getLogger(__name__)

PAGE_ID_ATTR = "data-pageid"


class MetadataManager:
    """Creates, updates and removes marker ``<meta>`` tags in the page head.

    Markers are created on first use and removed instead of being left empty;
    repeating a setter with the same value does not change the document.
    """

    def __init__(
        self,
        document: Document,
        id_generator: IdGenerator = new_id,
        app_marker: Optional[MetaMarker] = None,
    ) -> None:
        self.document = document
        self.id_generator = id_generator
        if app_marker is None:
            settings = get_settings()
            app_marker = MetaMarker(
                name=settings.app_marker_name, content=settings.app_marker_content
            )
        self.app_marker = app_marker

    def _find(self, marker: MetaMarker) -> List[Tag]:
        return self.document.query(marker.selector)

    def _insert(self, marker: MetaMarker, content: str) -> None:
        tag = self.document.new_tag("meta", {"name": marker.name, "content": content})
        self.document.prepend_tag_to_head(tag)

    def get_description(self) -> str:
        tags = self._find(DESCRIPTION)
        if not tags:
            return ""
        return self.document.get_attr(tags[0], "content") or ""

    def set_description(self, text: str) -> None:
        tags = self._find(DESCRIPTION)
        if text == "":
            for tag in tags:
                self.document.remove(tag)
        elif tags:
            for tag in tags:
                if self.document.get_attr(tag, "content") != text:
                    self.document.set_attr(tag, "content", text)
        else:
            self._insert(DESCRIPTION, text)

    def add_robots_noindex(self) -> None:
        if not self._find(ROBOTS_NOINDEX):
            self._insert(ROBOTS_NOINDEX, ROBOTS_NOINDEX.content or "")

    def remove_robots_noindex(self) -> None:
        for tag in self._find(ROBOTS_NOINDEX):
            self.document.remove(tag)

    def is_robots_noindex(self) -> bool:
        return bool(self._find(ROBOTS_NOINDEX))

    def add_metadata(self) -> None:
        """Ensure the CMS application marker is present."""
        if not self._find(self.app_marker):
            self._insert(self.app_marker, self.app_marker.content or "")

    def remove_metadata(self) -> None:
        for tag in self._find(self.app_marker):
            self.document.remove(tag)

    def ensure_page_id(self) -> str:
        """Stamp a fresh page id on the application marker.

        Any existing id is overwritten; check ``page_id()`` first to keep it.
        """
        self.add_metadata()
        page_id = self.id_generator()
        for tag in self._find(self.app_marker):
            self.document.set_attr(tag, PAGE_ID_ATTR, page_id)
        logger.debug("Assigned page id %s", page_id)
        return page_id

    def page_id(self) -> Optional[str]:
        tags = self._find(self.app_marker)
        if not tags:
            return None
        return self.document.get_attr(tags[0], PAGE_ID_ATTR)

    def remove_page_id(self) -> None:
        for tag in self._find(self.app_marker):
            self.document.remove_attr(tag, PAGE_ID_ATTR)
