from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
import codecs
import logging


class Settings(BaseSettings):
    """
    Ambient parameters loaded from environment variables.

    Every variable is prefixed with LINELOG_, for example:
        LINELOG_LOG_LEVEL=DEBUG

    A .env file in the working directory is read as well. The sinks
    themselves (file name, console) are fixed and cannot be changed here.
    """
    model_config = SettingsConfigDict(
        env_prefix="LINELOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Level of the internal diagnostics logger (never the log file itself)
    LOG_LEVEL: str = "WARNING"

    # Encoding used when appending to the log file
    LOG_FILE_ENCODING: str = "utf-8"

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise the level name and reject unknown ones."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL (got {v!r})")
        return level

    @field_validator("LOG_FILE_ENCODING")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Make sure the codec exists before the file sink tries to use it."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown LOG_FILE_ENCODING: {v!r}")
        return v


def _get_parameters():
    """Get parameters instance with helpful error messages."""
    try:
        return Settings()
    except Exception as e:
        import sys
        print(f"Configuration Error: {e}", file=sys.stderr)
        print("Tip: check the LINELOG_* environment variables or your .env file", file=sys.stderr)
        raise


# Create parameters instance
parameters = _get_parameters()
