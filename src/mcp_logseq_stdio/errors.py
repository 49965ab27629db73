"""Domain errors."""

from __future__ import annotations

from dataclasses import dataclass


class LogseqError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(LogseqError):
    """Raised when the process cannot be configured (e.g. missing API token)."""


class InputValidationError(LogseqError):
    """Raised when tool arguments fail validation."""


class RemoteContractError(LogseqError):
    """Raised when the Logseq API returns a shape we cannot interpret."""


@dataclass(eq=False)
class RemoteCallError(LogseqError):
    """Raised when a call to the Logseq HTTP API fails."""

    method: str
    message: str
    status_code: int | None = None

    def __str__(self) -> str:
        return self.message
