"""
Configuration settings for the shell.
"""

import logging
import os

from dotenv import load_dotenv

from myshell.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Shell settings loaded from environment variables.

    Every value defaults to the interpreter's stock behaviour, so an empty
    environment changes nothing.
    """

    def __init__(self):
        self.program_name: str = self._get_env("MYSHELL_PROGRAM_NAME", "myshell")
        self.prompt_delimiter: str = self._get_env("MYSHELL_PROMPT_DELIMITER", ">")
        self.max_line_length: int = self._get_positive_int_env(
            "MYSHELL_MAX_LINE_LENGTH", 256
        )
        self.cat_chunk_size: int = self._get_positive_int_env(
            "MYSHELL_CAT_CHUNK_SIZE", 2048
        )
        self.ls_column_width: int = self._get_positive_int_env(
            "MYSHELL_LS_COLUMN_WIDTH", 30
        )
        self.log_level: str = self._get_log_level_env("MYSHELL_LOG_LEVEL", "WARNING")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_positive_int_env(self, key: str, default: int) -> int:
        """Get a positive integer environment variable, raise error if malformed."""
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer, got {raw!r}")
        if value <= 0:
            raise ConfigurationError(f"Environment variable {key} must be positive, got {value}")
        return value

    def _get_log_level_env(self, key: str, default: str) -> str:
        """Get a logging level name, raise error if logging does not know it."""
        level = self._get_env(key, default).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigurationError(f"Environment variable {key} is not a logging level: {level}")
        return level
