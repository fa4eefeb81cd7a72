from .errors import LinelogError, ClockError, FileSinkError
from .formatting import LogRecord, build_log_message, current_timestamp
from .sinks import FileSink, ConsoleSink
from .manager import CallSite, Logger, get_logger
from .facade import Verbosity, log

__all__ = [
    "log",
    "Verbosity",
    "Logger",
    "get_logger",
    "CallSite",
    "FileSink",
    "ConsoleSink",
    "LogRecord",
    "build_log_message",
    "current_timestamp",
    "LinelogError",
    "ClockError",
    "FileSinkError",
]
