"""
Public entry point of the logging facility.

Usage:
    from linelog import log, Verbosity
    log("Service started")
    log("Disk almost full", Verbosity.WARNING)
"""
import logging
import sys
from enum import Enum
from typing import Optional, Union

from .errors import LinelogError
from .manager import CallSite, Logger

logger = logging.getLogger(__name__)


class Verbosity(Enum):
    """Severity of a log entry; the value is the label written to the sinks."""

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    @property
    def label(self) -> str:
        return self.value


def _caller_site(stacklevel: int) -> CallSite:
    """File and line of the frame `stacklevel` levels above log()."""
    if stacklevel < 1:
        raise ValueError(f"stacklevel must be at least 1 (got {stacklevel})")
    try:
        # 0 is this helper, 1 is log(), 2 is log()'s caller
        frame = sys._getframe(stacklevel + 1)
    except ValueError:
        raise ValueError(f"stacklevel {stacklevel} is deeper than the call stack") from None
    return CallSite(frame.f_code.co_filename, frame.f_lineno)


def _explicit_site(call_site) -> CallSite:
    """Normalise a caller-supplied (filename, lineno) pair."""
    filename, lineno = call_site
    if not isinstance(lineno, int) or lineno < 0:
        raise ValueError(f"call_site line must be a non-negative integer (got {lineno!r})")
    return CallSite(str(filename), lineno)


def log(
    message: str,
    verbosity: Union[Verbosity, str] = Verbosity.INFO,
    call_site: Optional[CallSite] = None,
    *,
    logger_instance: Optional[Logger] = None,
    stacklevel: int = 1,
) -> None:
    """
    Write one entry to the log file and the console.

    The caller's file and line are captured automatically. Errors inside the
    facility (clock, log file) are reported on its diagnostics channel and
    never raised here.

    Args:
        message: Text to log, embedded verbatim
        verbosity: Verbosity member or its label ("INFO", "WARNING", "ERROR")
        call_site: Explicit (filename, lineno), overrides stack inspection
        logger_instance: Logger to write to, defaults to the shared one
        stacklevel: 1 is the direct caller; raise it when wrapping log()

    Raises:
        ValueError: On caller mistakes only: an unknown verbosity, a call_site
            with a negative or non-integer line, or a stacklevel below 1 or
            deeper than the call stack. Nothing is written in that case.
    """
    verbosity = Verbosity(verbosity)
    if call_site is None:
        call_site = _caller_site(stacklevel)
    else:
        call_site = _explicit_site(call_site)

    try:
        target = logger_instance if logger_instance is not None else Logger.get()
        target.write(message, verbosity.label, call_site)
    except LinelogError as e:
        logger.error(f"[LOG] Entry from {call_site.filename}:{call_site.lineno} dropped: {e}")
