"""File logging for the server.

stdout carries the MCP stdio transport, so log records only go to an
append-only file under the configured log directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOGGER_NAME = "mcp_logseq_stdio"
LOG_FILENAME = "logseq-client.log"
LOG_FORMAT = '[%(asctime)s] %(levelname)s "%(message)s"'


def configure_logging(log_dir: Path = Path("logs"), level: str = "DEBUG") -> logging.Logger:
    """Attach a single file handler to the package logger and return it."""
    log_dir.mkdir(parents=True, exist_ok=True)

    numeric_level = logging._nameToLevel.get(level.upper(), logging.DEBUG)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = logging.FileHandler(log_dir / LOG_FILENAME, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
