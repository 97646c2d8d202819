"""Library configuration (settings and environment).

Single source of truth for matcher configuration. Uses pydantic-settings
with .env support. All variables are read with the ASSOC_MATCHERS_ prefix
(e.g. ASSOC_MATCHERS_DATABASE_URL) so they do not collide with the settings
of the application under test.
"""

import logging
from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Matcher settings loaded from environment and .env.

    All settings are optional. When database_url is empty, column and join
    table checks use the mapped MetaData instead of the live catalog.
    """

    debug: bool = False
    log_level: str = "INFO"

    # Live catalog: when set, the default provider inspects this database
    database_url: str = ""
    database_echo: bool = False

    # Naming convention for foreign keys a relationship does not record itself
    foreign_key_suffix: str = "_id"

    model_config = SettingsConfigDict(
        env_prefix="ASSOC_MATCHERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_logging_and_naming(self) -> "Settings":
        """Validate log level and foreign key suffix.

        - log_level must be a stdlib logging level name (case-insensitive).
        - foreign_key_suffix must be non-empty.
        """
        level = self.log_level.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got: {self.log_level!r}"
            )
        self.log_level = level
        if not self.foreign_key_suffix:
            raise ValueError(
                "foreign_key_suffix must not be empty. "
                "Set ASSOC_MATCHERS_FOREIGN_KEY_SUFFIX (e.g. '_id')."
            )
        return self

    @property
    def log_level_number(self) -> int:
        """Numeric logging level (DEBUG when debug is set)."""
        if self.debug:
            return logging.DEBUG
        return logging.getLevelName(self.log_level)


@lru_cache
def get_settings() -> Settings:
    """Return cached settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
