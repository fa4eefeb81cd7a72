"""Fixed constants for the logging facility."""

# The log file lives in the working directory and is not configurable.
LOG_FILE_NAME = "log_file.txt"

LINE_TERMINATOR = "\n"

# %X is the locale's time representation (HH:MM:SS in the C locale)
TIMESTAMP_FORMAT = "%Y-%m-%d %X"

# Name of the logger hierarchy used for the facility's own diagnostics
DIAGNOSTICS_LOGGER_NAME = "linelog"
