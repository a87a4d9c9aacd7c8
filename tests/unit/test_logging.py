"""Unit tests for logging setup."""

import logging

import structlog

from src.utils.logging import get_logger, setup_logging


class TestSetupLogging:
    """Tests for structlog configuration."""

    def test_sets_root_level(self):
        setup_logging(level="warning", log_format="json")
        assert logging.getLogger().level == logging.WARNING

    def test_json_output(self, capsys):
        setup_logging(level="INFO", log_format="json")

        get_logger("tests").info("Container started", container_id="abc123")

        out = capsys.readouterr().out
        assert '"event": "Container started"' in out
        assert '"container_id": "abc123"' in out

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "runner.log"

        setup_logging(level="INFO", log_format="json", log_file=str(log_file))
        get_logger("tests").warning("Error stopping/removing container")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "Error stopping/removing container" in log_file.read_text()

    def teardown_method(self):
        structlog.reset_defaults()
        root = logging.getLogger()
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
