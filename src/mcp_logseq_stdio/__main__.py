"""CLI entrypoint."""

from __future__ import annotations

import sys

from .errors import ConfigurationError
from .logging_setup import configure_logging
from .mcp_server import create_mcp_server
from .settings import load_settings


def main() -> None:
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        try:
            configure_logging().error("%s", exc)
        except OSError as log_exc:
            print(f"Could not write log file: {log_exc}", file=sys.stderr)
        raise SystemExit(str(exc)) from exc

    logger = configure_logging(settings.log_dir, settings.log_level)
    logger.info("Starting LogSeq MCP server on stdio")
    create_mcp_server(settings, logger=logger).run(transport="stdio")


if __name__ == "__main__":
    main()
