"""Process-level support code for the logging facility."""
