"""Async client for the Logseq local HTTP API."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from .errors import RemoteCallError, RemoteContractError

API_PATH = "/api"
INSERT_BLOCK_METHOD = "logseq.Editor.insertBlock"
GET_ALL_PAGES_METHOD = "logseq.Editor.getAllPages"


class LogseqClient:
    """Thin wrapper around Logseq's ``POST /api`` method-call endpoint."""

    def __init__(
        self,
        *,
        base_url: str,
        token: str,
        timeout_seconds: float = 6.0,
        logger: logging.Logger | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=httpx.Timeout(timeout_seconds),
            headers={
                "Authorization": f"Bearer {token}",
                "Content-Type": "application/json",
            },
            transport=transport,
        )
        self._logger.debug("Logseq client initialized with base_url=%s", self._client.base_url)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def call(self, method: str, *args: Any) -> Any:
        """Invoke a Logseq API method and return the decoded JSON body."""
        payload: dict[str, Any] = {"method": method}
        if args:
            payload["args"] = list(args)
        self._logger.debug("Request payload: %s", json.dumps(payload))

        try:
            resp = await self._client.post(API_PATH, json=payload)
        except httpx.HTTPError as exc:
            message = str(exc) or type(exc).__name__
            self._logger.error("Error calling %s: %s", method, message)
            raise RemoteCallError(method=method, message=message) from exc

        self._logger.debug("Response status: %s", resp.status_code)
        if not resp.is_success:
            message = f"Logseq API error {resp.status_code} for {method}"
            response_text = (resp.text or "").strip()
            if response_text:
                message = f"{message}: {response_text}"
            self._logger.error("Error calling %s: %s", method, message)
            raise RemoteCallError(method=method, message=message, status_code=resp.status_code)

        try:
            return resp.json()
        except ValueError as exc:
            self._logger.error("Non-JSON response for %s", method)
            raise RemoteContractError(f"Invalid response from Logseq API for {method}: not JSON") from exc

    async def create_page(self, title: str, content: str) -> Any:
        self._logger.info("Creating page '%s'", title)
        return await self.call(INSERT_BLOCK_METHOD, title, content, {"isPageBlock": True})

    async def list_pages(self) -> Any:
        self._logger.info("Listing all pages")
        return await self.call(GET_ALL_PAGES_METHOD)
