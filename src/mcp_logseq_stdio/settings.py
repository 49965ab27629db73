"""Application settings (env/.env)."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError


class Settings(BaseSettings):
    """Settings for the MCP server and the Logseq HTTP API."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    logseq_api_token: str = Field(alias="LOGSEQ_API_TOKEN", min_length=1)
    logseq_host: str = Field(default="127.0.0.1", alias="LOGSEQ_HOST", min_length=1)
    logseq_port: int = Field(default=12315, alias="LOGSEQ_PORT", ge=1, le=65535)

    http_timeout_seconds: float = Field(
        default=6.0,
        alias="HTTP_TIMEOUT_SECONDS",
        gt=0,
    )

    log_dir: Path = Field(default=Path("logs"), alias="LOG_DIR")
    log_level: str = Field(default="DEBUG", alias="LOG_LEVEL")

    @property
    def logseq_base_url(self) -> str:
        return f"http://{self.logseq_host}:{self.logseq_port}"


def load_settings(**overrides: Any) -> Settings:
    """Build settings, reporting any problem as a ``ConfigurationError``."""
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'settings'}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {problems}") from exc
