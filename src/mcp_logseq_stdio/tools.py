"""Handlers behind the ``create_page`` and ``list_pages`` tools.

Each handler returns a :class:`ToolResult`; failures never escape to the
transport, they come back as ``is_error=True`` with a readable message.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel, ValidationError

from .errors import InputValidationError
from .listing import build_listing, decode_pages
from .models import PageCreateRequest, PageListFilter, ToolResult

ArgsT = TypeVar("ArgsT", bound=BaseModel)


class PagesApi(Protocol):
    async def create_page(self, title: str, content: str) -> Any: ...

    async def list_pages(self) -> Any: ...


def _parse_arguments(model: type[ArgsT], **arguments: Any) -> ArgsT:
    try:
        return model(**arguments)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise InputValidationError(f"Invalid arguments: {problems}") from exc


class PageTools:
    def __init__(self, api: PagesApi, *, logger: logging.Logger | None = None) -> None:
        self._api = api
        self._logger = logger or logging.getLogger(__name__)

    async def create_page(self, title: Any, content: Any) -> ToolResult:
        try:
            request = _parse_arguments(PageCreateRequest, title=title, content=content)
        except InputValidationError as exc:
            self._logger.error("Rejected create_page call: %s", exc)
            return ToolResult(is_error=True, text=str(exc))

        self._logger.info("Creating page with title: %s", request.title)
        try:
            result = await self._api.create_page(request.title, request.content)
        except Exception as exc:
            self._logger.error("Failed to create page: %s", exc)
            return ToolResult(is_error=True, text=f"Failed to create page: {exc}")

        self._logger.info("Successfully created page")
        self._logger.debug("API response: %s", json.dumps(result, default=str))
        return ToolResult(text=f"Successfully created page '{request.title}'")

    async def list_pages(self, include_journals: Any = False) -> ToolResult:
        try:
            page_filter = _parse_arguments(PageListFilter, include_journals=include_journals)
        except InputValidationError as exc:
            self._logger.error("Rejected list_pages call: %s", exc)
            return ToolResult(is_error=True, text=str(exc))

        self._logger.info("Listing pages")
        try:
            raw = await self._api.list_pages()
            self._logger.debug("Raw API response: %s", json.dumps(raw, default=str))
            pages = decode_pages(raw, logger=self._logger)
            listing = build_listing(pages, include_journals=page_filter.include_journals)
        except Exception as exc:
            self._logger.error("Failed to list pages: %s", exc)
            return ToolResult(is_error=True, text=f"Failed to list pages: {exc}")

        self._logger.info(
            "Found %d pages%s",
            listing.shown_pages,
            "" if page_filter.include_journals else " (excluding journals)",
        )
        return ToolResult(text=listing.render())
