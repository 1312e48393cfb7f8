"""CLI configuration using pydantic-settings.

Every setting can be overridden with a ``SHEETADDR_``-prefixed environment
variable or a ``.env`` file in the working directory, e.g.::

    SHEETADDR_LOG_LEVEL=DEBUG
    SHEETADDR_DEFAULT_DELIMITER=tab
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sheetaddr.delimited import resolve_delimiter


class Settings(BaseSettings):
    """Settings for the sheetaddr command line."""

    model_config = SettingsConfigDict(
        env_prefix="SHEETADDR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "WARNING"
    json_logs: bool = False

    # Used when neither the file extension nor its content decides
    default_delimiter: str = ","

    # Decimal places for sum/avg/median/stdDev
    stats_precision: int = 2

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known loguru level."""
        allowed = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"log_level must be one of: {sorted(allowed)}")
        return v_upper

    @field_validator("default_delimiter")
    @classmethod
    def validate_default_delimiter(cls, v: str) -> str:
        """Accept comma/tab/pipe names or a single character."""
        delimiter = resolve_delimiter(v)
        if len(delimiter) != 1 or delimiter in "\"\r\n":
            raise ValueError("default_delimiter must be a single character")
        return delimiter

    @field_validator("stats_precision")
    @classmethod
    def validate_stats_precision(cls, v: int) -> int:
        if not 0 <= v <= 10:
            raise ValueError("stats_precision must be between 0 and 10")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
