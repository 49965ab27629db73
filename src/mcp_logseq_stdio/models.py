"""Tool argument, upstream page and tool result models."""

from __future__ import annotations

import json
from typing import Any

from mcp.types import CallToolResult, TextContent
from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_TITLE_LENGTH = 1000
MAX_CONTENT_BYTES = 1_000_000


class PageCreateRequest(BaseModel):
    title: str = Field(min_length=1, max_length=MAX_TITLE_LENGTH)
    content: str = Field(min_length=1)

    @field_validator("content")
    @classmethod
    def _content_size(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_CONTENT_BYTES:
            raise ValueError(f"Content is too long (limit {MAX_CONTENT_BYTES} bytes)")
        return value


class PageListFilter(BaseModel):
    include_journals: bool = False


def _render_scalar(value: Any) -> str:
    # Match how the values read in Logseq's own JSON.
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else _render_scalar(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


class RemotePage(BaseModel):
    """A page record from ``getAllPages``; every field is optional upstream."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    original_name: str | None = Field(default=None, alias="originalName")
    journal: bool = Field(default=False, alias="journal?")
    tags: list[str] = Field(default_factory=list)
    properties: dict[str, str] = Field(default_factory=dict)

    @field_validator("name", "original_name", mode="before")
    @classmethod
    def _non_empty_str(cls, value: Any) -> str | None:
        return value if isinstance(value, str) and value else None

    @field_validator("journal", mode="before")
    @classmethod
    def _strict_bool(cls, value: Any) -> bool:
        return value if isinstance(value, bool) else False

    @field_validator("tags", mode="before")
    @classmethod
    def _tag_names(cls, value: Any) -> list[str]:
        if not isinstance(value, list):
            return []
        names: list[str] = []
        for tag in value:
            if isinstance(tag, str):
                names.append(tag)
            elif isinstance(tag, dict):
                tag_name = tag.get("originalName") or tag.get("name")
                if isinstance(tag_name, str) and tag_name:
                    names.append(tag_name)
        return names

    @field_validator("properties", mode="before")
    @classmethod
    def _flat_properties(cls, value: Any) -> dict[str, str]:
        if not isinstance(value, dict):
            return {}
        return {str(k): _render_scalar(v) for k, v in value.items()}

    @property
    def display_name(self) -> str:
        return self.original_name or self.name or "<unknown>"


class ToolResult(BaseModel):
    is_error: bool = False
    text: str

    def to_call_tool_result(self) -> CallToolResult:
        return CallToolResult(
            content=[TextContent(type="text", text=self.text)],
            isError=self.is_error,
        )
