"""
Exception taxonomy for the logging facility.

None of these ever escape linelog.log(); they are raised between the
internal layers and handled inside the facility.
"""


class LinelogError(Exception):
    """Base class for every error raised by the facility."""


class ClockError(LinelogError):
    """The local time could not be read or rendered."""


class FileSinkError(LinelogError, OSError):
    """The log file could not be opened or written.

    The file sink disables itself before raising this, so it is raised at
    most once per sink.
    """

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"log file {self.path} unavailable: {reason}")

    def __str__(self) -> str:
        return f"log file {self.path} unavailable: {self.reason}"
