from .parameters import parameters
from .definitions import LOG_FILE_NAME, LINE_TERMINATOR, TIMESTAMP_FORMAT

__all__ = ["parameters", "LOG_FILE_NAME", "LINE_TERMINATOR", "TIMESTAMP_FORMAT"]
