from __future__ import annotations

import pytest

from mcp_logseq_stdio.errors import ConfigurationError
from mcp_logseq_stdio.settings import Settings, load_settings


def test_settings_load_from_env(monkeypatch) -> None:
    monkeypatch.setenv("LOGSEQ_API_TOKEN", "t")
    monkeypatch.setenv("LOGSEQ_PORT", "8080")
    s = Settings(_env_file=None)
    assert s.logseq_api_token == "t"
    assert s.logseq_port == 8080
    assert s.logseq_base_url == "http://127.0.0.1:8080"


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.setenv("LOGSEQ_API_TOKEN", "t")
    for name in ("LOGSEQ_HOST", "LOGSEQ_PORT", "HTTP_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    s = Settings(_env_file=None)
    assert s.logseq_host == "127.0.0.1"
    assert s.logseq_port == 12315
    assert s.http_timeout_seconds == 6.0


def test_missing_token_is_a_configuration_error(monkeypatch) -> None:
    monkeypatch.delenv("LOGSEQ_API_TOKEN", raising=False)
    with pytest.raises(ConfigurationError, match="LOGSEQ_API_TOKEN"):
        load_settings(_env_file=None)


def test_empty_token_is_a_configuration_error(monkeypatch) -> None:
    monkeypatch.setenv("LOGSEQ_API_TOKEN", "")
    with pytest.raises(ConfigurationError):
        load_settings(_env_file=None)
