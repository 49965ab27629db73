from __future__ import annotations

import logging
import re

from mcp_logseq_stdio.logging_setup import LOG_FILENAME, configure_logging


def test_writes_timestamped_lines_to_file(tmp_path) -> None:
    logger = configure_logging(tmp_path / "logs", "debug")
    logger.debug("payload body")
    logger.info("Creating page 'x'")
    logger.error("boom")
    for handler in logger.handlers:
        handler.flush()

    lines = (tmp_path / "logs" / LOG_FILENAME).read_text(encoding="utf-8").splitlines()
    assert len(lines) == 3
    assert re.match(r'^\[\d{4}-\d{2}-\d{2} [\d:,]+\] DEBUG "payload body"$', lines[0])
    assert lines[1].endswith('INFO "Creating page \'x\'"')
    assert lines[2].endswith('ERROR "boom"')


def test_reconfiguring_keeps_a_single_handler(tmp_path) -> None:
    configure_logging(tmp_path, "INFO")
    logger = configure_logging(tmp_path, "INFO")
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
    assert logger.propagate is False


def test_appends_across_configurations(tmp_path) -> None:
    configure_logging(tmp_path).info("first")
    logger = configure_logging(tmp_path)
    logger.info("second")
    for handler in logger.handlers:
        handler.flush()
    text = (tmp_path / LOG_FILENAME).read_text(encoding="utf-8")
    assert '"first"' in text
    assert '"second"' in text
