# tests/unit/core/test_logging.py
"""Tests for structlog configuration."""

import json
import logging

import pytest

from proptree.core.logging import configure_logging, get_logger

pytestmark = pytest.mark.usefixtures("restore_logging")


class TestConfigureLogging:
    def test_sets_root_level(self) -> None:
        configure_logging(level="ERROR")

        assert logging.getLogger().level == logging.ERROR

    def test_single_handler_after_reconfigure(self) -> None:
        configure_logging()
        configure_logging()

        assert len(logging.getLogger().handlers) == 1

    def test_json_output_is_parseable(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_output=True, level="INFO")

        get_logger("proptree.test").info("shrink_completed", steps=3)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "shrink_completed"
        assert record["steps"] == 3
        assert record["level"] == "info"
        assert "_record" not in record

    def test_stdlib_records_share_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_output=True, level="INFO")

        logging.getLogger("plain").warning("from stdlib")

        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["event"] == "from stdlib"
