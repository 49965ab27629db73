"""FastMCP server definition (tools)."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Annotated

import httpx
from mcp.server.fastmcp import Context, FastMCP
from mcp.types import CallToolResult
from pydantic import Field

from .logseq_client import LogseqClient
from .settings import Settings
from .tools import PageTools


@dataclass(slots=True)
class AppContext:
    settings: Settings
    logseq: LogseqClient
    tools: PageTools


def create_mcp_server(
    settings: Settings,
    *,
    logger: logging.Logger | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastMCP:
    log = logger or logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(_: FastMCP) -> AsyncIterator[AppContext]:
        logseq = LogseqClient(
            base_url=settings.logseq_base_url,
            token=settings.logseq_api_token,
            timeout_seconds=settings.http_timeout_seconds,
            logger=log,
            transport=transport,
        )
        try:
            yield AppContext(settings=settings, logseq=logseq, tools=PageTools(logseq, logger=log))
        finally:
            await logseq.aclose()

    mcp = FastMCP(
        "LogSeq-MCP",
        instructions=(
            "Create and list Logseq pages via the local Logseq HTTP API server. "
            "Use create_page to add a page and list_pages to see what exists."
        ),
        lifespan=lifespan,
    )

    @mcp.tool()
    async def create_page(
        title: Annotated[str, Field(description="Title of the new page")],
        content: Annotated[str, Field(description="Markdown content of the page")],
        ctx: Context,
    ) -> CallToolResult:
        """Create a new page in Logseq."""
        app: AppContext = ctx.request_context.lifespan_context
        result = await app.tools.create_page(title, content)
        return result.to_call_tool_result()

    @mcp.tool()
    async def list_pages(
        ctx: Context,
        include_journals: Annotated[
            bool, Field(description="Whether to include journal/daily notes in the list")
        ] = False,
    ) -> CallToolResult:
        """List the pages in the Logseq graph."""
        app: AppContext = ctx.request_context.lifespan_context
        result = await app.tools.list_pages(include_journals)
        return result.to_call_tool_result()

    return mcp
