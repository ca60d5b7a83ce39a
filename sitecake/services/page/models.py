"""Typed views over a parsed page."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from bs4 import Tag

CONTAINER_CLASS = "sc-content"
TEMPORARY_NAME_PREFIX = "_cnt_"

CONTAINER_PATTERN = re.compile(r"(^|\s)sc-content(-[^\s]+)*(\s|$)")
CONTAINER_NAME_PATTERN = re.compile(r"(^|\s)sc-content-([^\s]+)")


class ContainerKind(str, Enum):
    UNTAGGED = "untagged"
    NAMED = "named"
    TEMPORARY = "temporary"


def is_container_class(class_string: str) -> bool:
    """Return True if a class attribute value marks a content container."""
    return bool(CONTAINER_PATTERN.search(class_string or ""))


@dataclass
class ContainerNode:
    """A content container element and its class tokens at query time."""

    element: Tag
    class_list: List[str]

    @property
    def class_string(self) -> str:
        return " ".join(self.class_list)

    @property
    def name(self) -> Optional[str]:
        match = CONTAINER_NAME_PATTERN.search(self.class_string)
        return match.group(2) if match else None

    @property
    def kind(self) -> ContainerKind:
        name = self.name
        if name is None:
            return ContainerKind.UNTAGGED
        if name.startswith(TEMPORARY_NAME_PREFIX):
            return ContainerKind.TEMPORARY
        return ContainerKind.NAMED

    @property
    def has_bare_token(self) -> bool:
        # a named container may still carry the bare token
        return CONTAINER_CLASS in self.class_list


@dataclass(frozen=True)
class MetaMarker:
    """Attribute signature identifying a marker meta tag."""

    name: str
    content: Optional[str] = None

    @property
    def selector(self) -> str:
        selector = f'meta[name="{self.name}"]'
        if self.content is not None:
            selector += f'[content="{self.content}"]'
        return selector


DESCRIPTION = MetaMarker(name="description")
ROBOTS_NOINDEX = MetaMarker(name="robots", content="noindex")
