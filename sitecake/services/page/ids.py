"""Unique id generation for session container names and page ids."""

from __future__ import annotations

import uuid
from typing import Callable

IdGenerator = Callable[[], str]


def new_id() -> str:
    """Return a globally unique, class-token safe identifier."""
    return uuid.uuid4().hex
