"""
Timestamp and line formatting for log entries.

A log entry is rendered as:

    {2026-10-19 14:03:07} [INFO] : "message" (caller.py) (42)

The message is embedded verbatim; quotes and newlines are not escaped.
"""
import os
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from configuration.definitions import TIMESTAMP_FORMAT
from .errors import ClockError


def current_timestamp(now: Optional[datetime] = None) -> str:
    """
    Render the local date and time.

    Args:
        now: Moment to render, defaults to the current local time

    Returns:
        The timestamp as "YYYY-MM-DD <locale time>"

    Raises:
        ClockError: If the clock cannot be read or the value cannot be rendered
    """
    try:
        if now is None:
            now = datetime.now()
        return now.strftime(TIMESTAMP_FORMAT)
    except (OSError, OverflowError, ValueError) as e:
        raise ClockError(f"local time unavailable: {e}") from e


def source_basename(source_name: str) -> str:
    """Strip the directory part of a source path."""
    return os.path.basename(os.fspath(source_name))


class LogRecord(BaseModel):
    """One log entry, built per call and discarded once rendered."""

    model_config = ConfigDict(frozen=True)

    timestamp: str
    verbosity: str
    message: str
    source_file: str
    source_line: int = Field(ge=0)

    def render(self) -> str:
        return (
            "{" + self.timestamp + "} "
            + "[" + self.verbosity + "] : "
            + "\"" + self.message + "\" "
            + "(" + source_basename(self.source_file) + ") "
            + "(" + str(self.source_line) + ")"
        )


def build_log_message(
    message: str,
    verbosity: str,
    source_name: str,
    line: int,
    timestamp: Optional[str] = None,
) -> str:
    """
    Build the formatted line for one entry, without a line terminator.

    Args:
        message: Text supplied by the caller
        verbosity: Label such as "INFO"
        source_name: Path of the calling source file
        line: Line number of the call
        timestamp: Pre-rendered timestamp, defaults to current_timestamp()

    Returns:
        The single formatted line
    """
    record = LogRecord(
        timestamp=current_timestamp() if timestamp is None else timestamp,
        verbosity=verbosity,
        message=str(message),
        source_file=os.fspath(source_name),
        source_line=line,
    )
    return record.render()
