"""Audit content containers and managed assets across site pages."""

from __future__ import annotations

import argparse
import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List

from sitecake.config import get_settings
from sitecake.services.page.models import ContainerKind
from sitecake.services.page.page import Page

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Audit editable containers of HTML pages.")
    parser.add_argument("--site-root", default=".")
    parser.add_argument("--pattern", default="*.html")
    parser.add_argument("--out", default=None, help="Write the JSON report to this file")
    return parser.parse_args()


def audit_page(html: str) -> Dict[str, Any]:
    page = Page(html)
    nodes = page.container_nodes()
    names = page.containers()
    kinds = Counter(node.kind.value for node in nodes)
    resources = page.list_resource_urls()
    return {
        "containers": names,
        "duplicate_names": sorted(name for name, count in Counter(names).items() if count > 1),
        "untagged": kinds.get(ContainerKind.UNTAGGED.value, 0),
        "temporary": kinds.get(ContainerKind.TEMPORARY.value, 0),
        "resource_urls": len(resources),
        "unique_resource_urls": len(set(resources)),
        "noindex": page.is_robots_noindex(),
        "page_id": page.page_id(),
        "description": page.get_page_description(),
    }


def audit_pages(pages: Dict[str, str]) -> Dict[str, Any]:
    report: Dict[str, Any] = {"pages": {}}
    resources: List[int] = []
    for name, html in sorted(pages.items()):
        stats = audit_page(html)
        report["pages"][name] = stats
        resources.append(stats["resource_urls"])
    report["total_pages"] = len(pages)
    report["total_resource_urls"] = sum(resources)
    report["pages_without_page_id"] = sorted(
        name for name, stats in report["pages"].items() if not stats["page_id"]
    )
    report["pages_with_leftover_names"] = sorted(
        name for name, stats in report["pages"].items() if stats["temporary"]
    )
    return report


def load_pages(root: Path, pattern: str) -> Dict[str, str]:
    pages: Dict[str, str] = {}
    for path in sorted(root.glob(pattern)):
        if not path.is_file():
            continue
        try:
            pages[path.relative_to(root).as_posix()] = path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            logger.warning("Skipping %s: not UTF-8 text", path)
    return pages


def main() -> int:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    args = parse_args()
    root = Path(args.site_root)
    pages = load_pages(root, args.pattern)
    report = audit_pages(pages)
    payload = json.dumps(report, ensure_ascii=False, indent=2)
    if args.out:
        out_path = Path(args.out)
        out_path.write_text(payload, encoding="utf-8")
        print(f"[audit] saved to {out_path}")
    else:
        print(payload)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
