"""Tests for logging configuration."""

import logging
import sys

from bwdraw.logging_config import setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_single_stderr_handler_after_repeat_calls(self) -> None:
        setup_logging(logging.DEBUG)
        setup_logging(logging.DEBUG)
        handlers = logging.getLogger("bwdraw").handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert handlers[0].stream is sys.stderr

    def test_level(self) -> None:
        setup_logging(logging.INFO)
        assert logging.getLogger("bwdraw").level == logging.INFO

    def test_records_go_to_stderr(self, capsys) -> None:
        setup_logging(logging.DEBUG)
        logging.getLogger("bwdraw.core.canvas").debug("hello from canvas")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "hello from canvas" in captured.err

    def test_log_file(self, tmp_path) -> None:
        log_path = tmp_path / "out.log"
        setup_logging(logging.DEBUG, log_file=str(log_path))
        logging.getLogger("bwdraw").warning("written to file")
        assert len(logging.getLogger("bwdraw").handlers) == 2
        assert "written to file" in log_path.read_text(encoding="utf-8")
