# Area: Shared Tests
"""Tests for logging setup and formatters."""

import json
import logging

import pytest
from ctf_leaders._shared.logging_config import setup_logging
from ctf_leaders._shared.logging_formatters import (
    JSONFormatter,
    QuietFilter,
    TerminalFormatter,
    enable_quiet_mode,
    disable_quiet_mode,
    is_quiet_mode_enabled,
)


@pytest.fixture(autouse=True)
def restore_package_logger():
    yield
    pkg_logger = logging.getLogger("ctf_leaders")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()
    pkg_logger.propagate = True
    pkg_logger.setLevel(logging.NOTSET)
    disable_quiet_mode()


def make_record(level=logging.INFO, msg="hello"):
    return logging.LogRecord("ctf_leaders.test", level, __file__, 1, msg, None, None)


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_installs_terminal_and_file_handlers(self, tmp_path):
        setup_logging(str(tmp_path / "out.log"), level="debug")
        pkg_logger = logging.getLogger("ctf_leaders")
        assert pkg_logger.level == logging.DEBUG
        assert len(pkg_logger.handlers) == 2
        assert pkg_logger.propagate is False

    def test_without_file(self):
        setup_logging(None)
        assert len(logging.getLogger("ctf_leaders").handlers) == 1

    def test_repeated_setup_does_not_stack_handlers(self, tmp_path):
        setup_logging(str(tmp_path / "out.log"))
        setup_logging(str(tmp_path / "out.log"))
        assert len(logging.getLogger("ctf_leaders").handlers) == 2

    def test_file_receives_json_lines(self, tmp_path):
        log_path = tmp_path / "logs" / "out.log"
        setup_logging(str(log_path), level=logging.DEBUG)
        logging.getLogger("ctf_leaders.leaders.state_machine").debug("Detect blue team leader")
        for handler in logging.getLogger("ctf_leaders").handlers:
            handler.flush()

        entry = json.loads(log_path.read_text().splitlines()[-1])
        assert entry["level"] == "DEBUG"
        assert entry["logger"] == "ctf_leaders.leaders.state_machine"
        assert entry["message"] == "Detect blue team leader"


class TestFormatters:
    """Tests for formatter and filter classes."""

    def test_terminal_formatter_colors_level(self):
        formatter = TerminalFormatter(fmt="%(levelname)s %(message)s")
        output = formatter.format(make_record(logging.WARNING))
        assert "\033[33m" in output
        assert output.endswith("hello")

    def test_terminal_formatter_leaves_record_untouched(self):
        record = make_record(logging.ERROR)
        TerminalFormatter().format(record)
        assert record.levelname == "ERROR"

    def test_json_formatter(self):
        data = json.loads(JSONFormatter().format(make_record(msg="x %s")))
        assert data["level"] == "INFO"
        assert data["message"] == "x %s"

    def test_quiet_filter(self):
        quiet = QuietFilter()
        assert quiet.filter(make_record()) is True
        enable_quiet_mode()
        assert is_quiet_mode_enabled() is True
        assert quiet.filter(make_record()) is False
        disable_quiet_mode()
        assert quiet.filter(make_record()) is True
