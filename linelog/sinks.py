"""
Output sinks for formatted log lines.

Both sinks write text verbatim; the Logger decides what a line looks like.
"""
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from configuration.definitions import LOG_FILE_NAME
from configuration.parameters import parameters
from .errors import FileSinkError

logger = logging.getLogger(__name__)


class FileSink:
    """
    Appends formatted lines to the log file.

    The file is opened in append mode, so lines from earlier runs are kept.
    Characters the encoding cannot represent are written as backslash escapes.
    Any OSError disables the sink for the rest of the process and is raised
    once as FileSinkError; later writes are dropped.
    """

    def __init__(self, path: Union[str, Path] = LOG_FILE_NAME, encoding: Optional[str] = None):
        self.path = Path(path)
        self.encoding = encoding or parameters.LOG_FILE_ENCODING
        self._stream: Optional[TextIO] = None
        self.disabled = False

    @property
    def is_open(self) -> bool:
        return self._stream is not None

    def open(self) -> None:
        """
        Open the log file for appending, creating it if absent.

        Raises:
            FileSinkError: If the file cannot be opened
        """
        if self._stream is not None or self.disabled:
            return
        try:
            # buffering=1 flushes on every newline, one flush per log call
            self._stream = open(
                self.path, "a", encoding=self.encoding, errors="backslashreplace", buffering=1
            )
        except OSError as e:
            self._disable()
            raise FileSinkError(self.path, f"open failed: {e}") from e
        logger.debug(f"[FILE] Opened {self.path} for appending")

    def write(self, text: str) -> None:
        """
        Append text verbatim.

        Raises:
            FileSinkError: On the first failed write; the sink is disabled afterwards
        """
        if self.disabled:
            return
        if self._stream is None:
            self.open()
        try:
            self._stream.write(text)
        except OSError as e:
            self._disable()
            raise FileSinkError(self.path, f"write failed: {e}") from e

    def close(self) -> None:
        """Flush and close the file. Safe to call more than once."""
        stream, self._stream = self._stream, None
        if stream is None:
            return
        try:
            stream.close()
        except OSError as e:
            logger.error(f"[FILE] Closing {self.path} failed: {e}")

    def _disable(self) -> None:
        self.disabled = True
        stream, self._stream = self._stream, None
        if stream is not None:
            try:
                stream.close()
            except OSError as e:
                # The original failure is the one that gets reported
                logger.debug(f"[FILE] Closing broken stream failed: {e}")


class ConsoleSink:
    """
    Writes formatted lines to standard output.

    sys.stdout is looked up on every write so redirections made after the
    sink was created are honoured. Stream errors are ignored.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> None:
        stream = self.stream
        if stream is None:
            return
        try:
            stream.write(text)
            stream.flush()
        except (OSError, ValueError) as e:
            logger.debug(f"[CONSOLE] Write ignored: {e}")
