"""
Tests for the log() entry point.
"""
import os
import sys
from unittest.mock import MagicMock, patch

import pytest

from linelog import Verbosity, log
from linelog.errors import ClockError
from linelog.manager import CallSite

from conftest import LINE_PATTERN

THIS_FILE = os.path.basename(__file__)


def _log_via_wrapper(message, logger_instance):
    """Helper that wraps log() the way an application helper would."""
    log(message, Verbosity.WARNING, logger_instance=logger_instance, stacklevel=2)


class TestLog:
    """Test suite for log()."""

    def test_start_scenario(self, shared_logger, log_path):
        """log("start") records INFO with this file and the calling line."""
        expected_line = sys._getframe().f_lineno + 1
        log("start")

        match = LINE_PATTERN.match(log_path.read_text(encoding="utf-8").rstrip("\n"))
        assert match is not None
        assert match.group("level") == "INFO"
        assert match.group("message") == "start"
        assert match.group("file") == THIS_FILE
        assert match.group("line") == str(expected_line)

    def test_error_scenario(self, shared_logger, log_path):
        log("bad", Verbosity.ERROR)
        assert "[ERROR]" in log_path.read_text(encoding="utf-8")
        assert "[INFO]" not in log_path.read_text(encoding="utf-8")

    @pytest.mark.parametrize("verbosity, label", [
        (Verbosity.INFO, "INFO"),
        (Verbosity.WARNING, "WARNING"),
        (Verbosity.ERROR, "ERROR"),
    ])
    def test_labels(self, shared_logger, log_path, verbosity, label):
        log("m", verbosity)
        assert LINE_PATTERN.match(log_path.read_text(encoding="utf-8").rstrip("\n")).group("level") == label

    def test_label_string_accepted(self, shared_logger, log_path):
        log("m", "WARNING")
        assert "[WARNING]" in log_path.read_text(encoding="utf-8")

    def test_unknown_verbosity_rejected(self, shared_logger, log_path):
        with pytest.raises(ValueError):
            log("m", "DEBUG")
        assert log_path.read_text(encoding="utf-8") == ""

    def test_negative_call_site_line_rejected(self, shared_logger, log_path):
        """A bad explicit call site is a caller mistake and writes nothing."""
        with pytest.raises(ValueError, match="non-negative"):
            log("m", call_site=("x.py", -1))
        assert log_path.read_text(encoding="utf-8") == ""

    def test_non_integer_call_site_line_rejected(self, shared_logger):
        with pytest.raises(ValueError):
            log("m", call_site=("x.py", "12"))

    @pytest.mark.parametrize("stacklevel", [0, 10_000])
    def test_bad_stacklevel_rejected(self, shared_logger, log_path, stacklevel):
        with pytest.raises(ValueError, match="stacklevel"):
            log("m", stacklevel=stacklevel)
        assert log_path.read_text(encoding="utf-8") == ""

    def test_calls_kept_in_order(self, shared_logger, log_path):
        log("first")
        log("second")
        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert [LINE_PATTERN.match(line).group("message") for line in lines] == ["first", "second"]

    def test_console_matches_file(self, shared_logger, log_path, console_stream):
        log("same text", Verbosity.WARNING)
        assert console_stream.getvalue() == log_path.read_text(encoding="utf-8")

    def test_explicit_call_site(self, shared_logger, log_path):
        log("m", call_site=("/somewhere/else.py", 77))
        assert log_path.read_text(encoding="utf-8").endswith("(else.py) (77)\n")

    def test_stacklevel_skips_wrapper(self, file_logger, log_path):
        expected_line = sys._getframe().f_lineno + 1
        _log_via_wrapper("wrapped", file_logger)
        match = LINE_PATTERN.match(log_path.read_text(encoding="utf-8").rstrip("\n"))
        assert match.group("line") == str(expected_line)
        assert match.group("level") == "WARNING"

    def test_injected_logger_used(self):
        target = MagicMock()
        log("m", Verbosity.ERROR, call_site=CallSite("x.py", 3), logger_instance=target)
        target.write.assert_called_once_with("m", "ERROR", CallSite("x.py", 3))

    def test_clock_error_not_raised(self, shared_logger, log_path, console_stream):
        """Logging failures stay inside the facility."""
        with patch("linelog.formatting.current_timestamp", side_effect=ClockError("no clock")):
            log("lost")
        assert log_path.read_text(encoding="utf-8") == ""
        assert console_stream.getvalue() == ""


class TestVerbosity:
    """Test suite for Verbosity."""

    def test_labels_are_values(self):
        assert [member.label for member in Verbosity] == ["INFO", "WARNING", "ERROR"]
