"""Content container lookup and session naming."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from sitecake.services.page.document import Document
from sitecake.services.page.ids import IdGenerator, new_id
from sitecake.services.page.models import (
    CONTAINER_CLASS,
    TEMPORARY_NAME_PREFIX,
    ContainerKind,
    ContainerNode,
    is_container_class,
)

logger = logging.getLogger(__name__)

CANDIDATE_SELECTOR = f'[class*="{CONTAINER_CLASS}"]'
TEMPORARY_CLASS_PREFIX = f"{CONTAINER_CLASS}-{TEMPORARY_NAME_PREFIX}"


class ContainerLocator:
    """Finds editable regions marked with the ``sc-content`` class convention."""

    def __init__(self, document: Document, id_generator: IdGenerator = new_id) -> None:
        self.document = document
        self.id_generator = id_generator
        self._names: Optional[Tuple[int, List[str], List[str]]] = None

    def list_containers(self) -> List[ContainerNode]:
        containers: List[ContainerNode] = []
        for element in self.document.query(CANDIDATE_SELECTOR):
            class_list = self.document.class_list(element)
            if is_container_class(" ".join(class_list)):
                containers.append(ContainerNode(element=element, class_list=class_list))
        return containers

    def container_names(self, include_temporary: bool = False) -> List[str]:
        """Return container names in document order, duplicates included."""
        revision = self.document.revision
        if self._names is None or self._names[0] != revision:
            named: List[str] = []
            every: List[str] = []
            for node in self.list_containers():
                if node.name is None:
                    continue
                every.append(node.name)
                if node.kind is ContainerKind.NAMED:
                    named.append(node.name)
            self._names = (revision, named, every)
        return list(self._names[2] if include_temporary else self._names[1])

    def find_containers(self, name: str) -> List[ContainerNode]:
        token = f"{CONTAINER_CLASS}-{name}"
        return [node for node in self.list_containers() if token in node.class_list]

    def normalize_container_names(self) -> None:
        """Give every untagged container a temporary session name."""
        for node in self.list_containers():
            if not node.has_bare_token:
                continue
            token = TEMPORARY_CLASS_PREFIX + self.id_generator()
            self.document.set_class_list(node.element, node.class_list + [token])
            logger.debug("Assigned temporary container name %s", token)

    def cleanup_container_names(self) -> None:
        """Drop the temporary session name added by normalize_container_names."""
        for node in self.list_containers():
            for index, token in enumerate(node.class_list):
                if token.startswith(TEMPORARY_CLASS_PREFIX) and len(token) > len(
                    TEMPORARY_CLASS_PREFIX
                ):
                    tokens = node.class_list[:index] + node.class_list[index + 1 :]
                    self.document.set_class_list(node.element, tokens)
                    break
