"""Application configuration using pydantic-settings."""

import logging
import sys

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from c5517h.protocol.constants import SERIAL_BAUD, SERIAL_TIMEOUT

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Front-end settings loaded from environment variables.

    Every field can be overridden via an environment variable prefixed
    with C5517H_ (e.g., C5517H_SERIAL_PORT=/dev/ttyUSB0).
    """

    serial_port: str = "/dev/ttyS1"
    serial_baud: int = SERIAL_BAUD
    serial_timeout: float = SERIAL_TIMEOUT
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(env_prefix="C5517H_")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown ones."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def setup_logging(level: str = "WARNING") -> int:
    """Configure logging to stderr.

    Args:
        level: Log level name, case-insensitive. Unknown names fall back
            to WARNING.

    Returns:
        The numeric level applied
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
    return numeric_level
