"""Tests for structured logging."""

import json
import logging
from pathlib import Path

import pytest

from lcovreport.config.models import LoggingConfig, LogOutputConfig
from lcovreport.core.logging import configure_logging, get_logger


class TestConfigureLogging:
    """Handler setup tests."""

    def test_simple_setup_installs_one_handler(self) -> None:
        configure_logging(level="DEBUG")

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

    def test_reconfigure_replaces_handlers(self) -> None:
        configure_logging()
        configure_logging()

        assert len(logging.getLogger().handlers) == 1

    def test_output_level_inherits_from_root(self) -> None:
        configure_logging(config=LoggingConfig(level="WARNING"))

        (handler,) = logging.getLogger().handlers
        assert handler.level == logging.WARNING

    def test_output_level_overrides_root(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(
            config=LoggingConfig(
                level="DEBUG",
                outputs=[LogOutputConfig(destination="stdout", level="ERROR")],
            )
        )

        get_logger().warning("comment.skipped")
        get_logger().error("report.no_records")

        out = capsys.readouterr().out
        assert "comment.skipped" not in out
        assert "report.no_records" in out

    def test_json_file_output(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "report.log"
        config = LoggingConfig(
            level="INFO",
            outputs=[LogOutputConfig(format="json", destination=str(log_file))],
        )
        configure_logging(config=config)

        get_logger("test").info("report.rendered", records=3)
        for handler in logging.getLogger().handlers:
            handler.flush()

        entry = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert entry["event"] == "report.rendered"
        assert entry["records"] == 3
        assert entry["logger"] == "test"
        assert entry["level"] == "info"
        assert "timestamp" in entry

    def test_debug_filtered_at_info(self, tmp_path: Path) -> None:
        log_file = tmp_path / "report.log"
        configure_logging(
            config=LoggingConfig(
                level="INFO",
                outputs=[LogOutputConfig(format="json", destination=str(log_file))],
            )
        )

        get_logger().debug("hidden")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "hidden" not in log_file.read_text()

    def test_console_output_written_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level="INFO")

        get_logger().warning("comment.skipped", reason="Not a PR")

        assert "comment.skipped" in capsys.readouterr().err
