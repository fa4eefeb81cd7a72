"""
Configuration of the facility's internal diagnostics channel.

Sink failures, lifecycle events and similar messages about the logging
facility itself go to stderr through the standard library logging module.
They never reach stdout or the log file, and the root logger is left alone.
"""
import logging
import sys
from typing import Optional

from .definitions import DIAGNOSTICS_LOGGER_NAME
from .parameters import parameters

# Detailed format with timestamp, level, logger name, and location
detailed_format = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"


# Custom formatter that keeps each diagnostic record on a single line
class SingleLineFormatter(logging.Formatter):
    def format(self, record):
        msg = super().format(record)
        return msg.replace("\r", "\\r").replace("\n", "\\n")


def setup_diagnostics_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a stderr handler to the diagnostics logger.

    Safe to call more than once; the handler is only added the first time.

    Args:
        level: Level name, defaults to parameters.LOG_LEVEL

    Returns:
        The configured diagnostics logger
    """
    diagnostics_logger = logging.getLogger(DIAGNOSTICS_LOGGER_NAME)
    diagnostics_logger.setLevel(level or parameters.LOG_LEVEL)

    if not any(getattr(h, "_linelog_diagnostics", False) for h in diagnostics_logger.handlers):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(SingleLineFormatter(detailed_format))
        console_handler._linelog_diagnostics = True
        diagnostics_logger.addHandler(console_handler)
        # Keep diagnostics out of whatever the host application configured on root
        diagnostics_logger.propagate = False
        diagnostics_logger.debug("Diagnostics logging initialized.")

    return diagnostics_logger
