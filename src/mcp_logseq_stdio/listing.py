"""Turn a raw ``getAllPages`` response into the ``list_pages`` text."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from .errors import RemoteContractError
from .models import RemotePage

JOURNAL_MARKER = "📅"
TAGS_PREFIX = "🏷️"
PROPERTIES_PREFIX = "📝"


def _utf16_key(line: str) -> bytes:
    return line.encode("utf-16-be", "surrogatepass")


def decode_pages(raw: Any, *, logger: logging.Logger) -> list[RemotePage]:
    """Decode the page records, skipping entries that are not objects."""
    if not isinstance(raw, list):
        raise RemoteContractError("Invalid response: expected a sequence of pages")

    pages: list[RemotePage] = []
    for entry in raw:
        if not isinstance(entry, dict):
            logger.error("Invalid page object in response: %s", json.dumps(entry, default=str))
            continue
        pages.append(RemotePage.model_validate(entry))
    return pages


def describe_page(page: RemotePage) -> str:
    parts = [f"- {page.display_name}"]
    if page.journal:
        parts.append(JOURNAL_MARKER)
    if page.tags:
        parts.append(f"{TAGS_PREFIX} {', '.join(page.tags)}")
    if page.properties:
        props = ", ".join(f"{k}: {v}" for k, v in page.properties.items())
        parts.append(f"{PROPERTIES_PREFIX} {props}")
    return " ".join(parts)


@dataclass(slots=True)
class PageListing:
    include_journals: bool
    lines: list[str] = field(default_factory=list)
    journal_pages: int = 0

    @property
    def shown_pages(self) -> int:
        return len(self.lines)

    def render(self) -> str:
        journals = f"- Journal pages: {self.journal_pages}"
        if not self.include_journals:
            journals += " (hidden)"
        # Sorted on the whole composed line, markers included, by UTF-16 code unit.
        return "\n".join(
            [
                "LogSeq Pages:",
                "",
                *sorted(self.lines, key=_utf16_key),
                "",
                "📊 Statistics:",
                f"- Total pages shown: {self.shown_pages}",
                journals,
            ]
        )


def build_listing(pages: list[RemotePage], *, include_journals: bool) -> PageListing:
    listing = PageListing(include_journals=include_journals)
    for page in pages:
        if page.journal:
            listing.journal_pages += 1
            if not include_journals:
                continue
        listing.lines.append(describe_page(page))
    return listing
