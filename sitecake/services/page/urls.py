"""URL predicates and rewriting helpers shared by the page services."""

from __future__ import annotations

import re
from typing import Callable

# Content-addressed asset: files/ or images/ path segment, filename carrying
# "-sc" plus 13 hex chars before the extension.
RESOURCE_URL_PATTERN = re.compile(
    r"(?:^|/)(?:files|images)/(?:[^\s/]*/)*[^\s/]*-sc[0-9a-f]{13}[^./\s]*"
    r"\.[0-9a-zA-Z]+(?:[?#]\S*)?$"
)
# Same convention, searched inside raw markup.
RESOURCE_URL_SCAN_PATTERN = re.compile(
    r"[^\s\"'(),;<>=]*(?:files|images)/[^\s\"'()<>]*-sc[0-9a-f]{13}[^.\s\"'()<>]*"
    r"\.[0-9a-zA-Z]+"
)
SCHEME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")
URL_LIST_ITEM_PATTERN = re.compile(r"(^|,)(\s*)([^\s,]+)")


def is_absolute_url(url: str) -> bool:
    return bool(SCHEME_PATTERN.match(url)) or url.startswith("//")


def is_resource_url(url: str | None) -> bool:
    """Return True if url is a relative reference to a CMS managed asset."""
    if not url:
        return False
    url = url.strip()
    if is_absolute_url(url):
        return False
    return bool(RESOURCE_URL_PATTERN.search(url))


def is_external_nav_link(href: str | None) -> bool:
    """Return True for links that must not be routed through the entry point."""
    if href is None:
        return True
    href = href.strip()
    if not href or href.startswith("#"):
        return True
    return is_absolute_url(href)


def _split_leading_space(url: str) -> tuple[str, str]:
    body = url.lstrip()
    return url[: len(url) - len(body)], body


def prefix_url(url: str, prefix: str) -> str:
    lead, body = _split_leading_space(url)
    if prefix and is_resource_url(body):
        return lead + prefix + body
    return url


def unprefix_url(url: str, prefix: str) -> str:
    lead, body = _split_leading_space(url)
    if prefix and body.startswith(prefix) and is_resource_url(body[len(prefix) :]):
        return lead + body[len(prefix) :]
    return url


def map_url_list(value: str, rewrite: Callable[[str], str]) -> str:
    """Rewrite each URL of a srcset-style list, keeping descriptors verbatim."""

    def _replace(match: re.Match[str]) -> str:
        return match.group(1) + match.group(2) + rewrite(match.group(3))

    return URL_LIST_ITEM_PATTERN.sub(_replace, value)
