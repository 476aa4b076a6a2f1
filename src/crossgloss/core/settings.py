"""Centralized application configuration using Pydantic Settings (v2).

`load_settings` returns a single, cached `Settings` instance read from:
- Real environment variables (highest precedence)
- `.env` files in the working directory: .env, .env.local
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Typed application configuration loaded from env and `.env` files.

    Attributes
    ----------
    log_level : LogLevelName
        Global log level string; maps from `LOG_LEVEL`.
    encoding : str
        Text encoding of the input glossary; maps from `CROSSGLOSS_ENCODING`.
        Pages are always written as UTF-8.
    link_base : Optional[str]
        Prefix used in generated hrefs. When unset, the output directory is
        used exactly as given on the command line. Maps from `CROSSGLOSS_LINK_BASE`.
    """

    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")
    encoding: str = Field(default="utf-8", min_length=1, alias="CROSSGLOSS_ENCODING")
    link_base: str | None = Field(default=None, alias="CROSSGLOSS_LINK_BASE")

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    Tests can force a rebuild via `load_settings.cache_clear()` after
    mutating `os.environ`.
    """
    return Settings()


def get_logger(name: str = "crossgloss") -> logging.Logger:
    """Return a process-global logger configured to the current `LOG_LEVEL`."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger
