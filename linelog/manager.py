"""
The process-wide Logger that fans each entry out to the file and the console.
"""
import logging
import threading
from typing import NamedTuple, Optional

from configuration.definitions import LINE_TERMINATOR
from configuration.logger_setup import setup_diagnostics_logging
from core.lifecycle import TeardownHandler
from .errors import FileSinkError
from .formatting import build_log_message
from .sinks import ConsoleSink, FileSink

logger = logging.getLogger(__name__)


class CallSite(NamedTuple):
    """Source file and line a log call was issued from."""

    filename: str
    lineno: int


class Logger:
    """
    Owns one FileSink and one ConsoleSink and writes every entry to both.

    Logger.get() returns the shared instance, created on first use and
    closed at interpreter exit. Components that want an isolated logger
    (tests, embedded hosts) can construct one directly and pass it along.
    """

    _instance: Optional['Logger'] = None
    _instance_lock = threading.Lock()

    def __init__(self, file_sink: Optional[FileSink] = None, console_sink: Optional[ConsoleSink] = None) -> None:
        self._file = file_sink if file_sink is not None else FileSink()
        self._console = console_sink if console_sink is not None else ConsoleSink()
        # One lock per entry, covering formatting and both sinks
        self._lock = threading.Lock()

        try:
            self._file.open()
        except FileSinkError as e:
            self._report_file_failure(e)

    @classmethod
    def get(cls) -> 'Logger':
        """Return the shared Logger, creating it on first access."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    setup_diagnostics_logging()
                    instance = cls()
                    TeardownHandler().register_cleanup(instance.close, "Log file close")
                    logger.debug("[LOGGER] Shared logger created")
                    cls._instance = instance
        return cls._instance

    @property
    def file_sink(self) -> FileSink:
        return self._file

    @property
    def console_sink(self) -> ConsoleSink:
        return self._console

    @property
    def file_enabled(self) -> bool:
        return not self._file.disabled

    def write(self, message: str, verbosity: str, location: CallSite) -> None:
        """
        Format one entry and write it to the file, then to the console.

        Args:
            message: Text supplied by the caller
            verbosity: Label such as "INFO"
            location: Call site of the log statement

        Raises:
            ClockError: If the timestamp cannot be produced; nothing is written
        """
        with self._lock:
            line = build_log_message(message, verbosity, location.filename, location.lineno) + LINE_TERMINATOR
            try:
                self._file.write(line)
            except FileSinkError as e:
                self._report_file_failure(e)
            self._console.write(line)

    def close(self) -> None:
        """Flush and close the log file."""
        with self._lock:
            self._file.close()

    def _report_file_failure(self, error: FileSinkError) -> None:
        """Tell the console once that the file sink is gone."""
        logger.error(f"[LOGGER] File sink disabled: {error}")
        site = _raise_site(error)
        notice = build_log_message(f"file logging disabled: {error}", "ERROR", site.filename, site.lineno)
        self._console.write(notice + LINE_TERMINATOR)


def _raise_site(error: BaseException) -> CallSite:
    """Location of the innermost frame of an exception's traceback."""
    tb = error.__traceback__
    if tb is None:
        return CallSite(__file__, 0)
    while tb.tb_next is not None:
        tb = tb.tb_next
    return CallSite(tb.tb_frame.f_code.co_filename, tb.tb_lineno)


def get_logger() -> Logger:
    """Module-level accessor for the shared Logger."""
    return Logger.get()
