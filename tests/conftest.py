"""
Test fixtures and shared utilities for linelog tests.
"""
import io
import re

import pytest

from linelog.manager import Logger
from linelog.sinks import ConsoleSink, FileSink


LINE_PATTERN = re.compile(
    r'^\{(?P<timestamp>\d{4}-\d{2}-\d{2} [^}]+)\} '
    r'\[(?P<level>INFO|WARNING|ERROR)\] : '
    r'"(?P<message>.*)" '
    r'\((?P<file>[^()]+)\) '
    r'\((?P<line>\d+)\)$'
)


class FailingStream:
    """Stream stub whose writes always raise."""

    def __init__(self, exc: Exception = None):
        self.exc = exc or OSError("disk full")
        self.write_count = 0
        self.closed = False

    def write(self, text: str):
        self.write_count += 1
        raise self.exc

    def flush(self):
        pass

    def close(self):
        self.closed = True


@pytest.fixture
def log_path(tmp_path):
    """Path of a log file inside the test's temporary directory."""
    return tmp_path / "log_file.txt"


@pytest.fixture
def console_stream():
    """In-memory stand-in for stdout."""
    return io.StringIO()


@pytest.fixture
def file_logger(log_path, console_stream):
    """Create an isolated Logger writing to a temp file and a StringIO console."""
    instance = Logger(file_sink=FileSink(log_path), console_sink=ConsoleSink(console_stream))
    yield instance
    instance.close()


@pytest.fixture
def shared_logger(file_logger, monkeypatch):
    """Install the isolated Logger as the shared instance for the test."""
    monkeypatch.setattr(Logger, "_instance", file_logger)
    return file_logger
