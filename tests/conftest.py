from __future__ import annotations

import logging
from typing import Any

import pytest


class FakePagesApi:
    """Records calls and replays a canned response or error."""

    def __init__(self, *, result: Any = None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    async def create_page(self, title: str, content: str) -> Any:
        self.calls.append(("create_page", (title, content)))
        if self.error is not None:
            raise self.error
        return self.result

    async def list_pages(self) -> Any:
        self.calls.append(("list_pages", ()))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger("tests.mcp_logseq_stdio")


THREE_PAGES = [
    {"originalName": "Zebra", "name": "zebra", "journal?": False},
    {"originalName": "Oct 19th, 2026", "name": "oct 19th, 2026", "journal?": True},
    {
        "name": "alpha",
        "journal?": False,
        "tags": ["project"],
        "properties": {"status": "active"},
    },
]


@pytest.fixture
def three_pages() -> list[dict[str, Any]]:
    return [dict(page) for page in THREE_PAGES]
