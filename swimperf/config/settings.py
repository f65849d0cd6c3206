"""
Engine configuration using Pydantic settings.

Configuration is loaded from environment variables with sensible defaults.
Using Pydantic's BaseSettings means we get:
- Type validation at startup (fail fast if config is wrong)
- Documentation of what can be tuned
- Easy testing with different configurations
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.performance.estimation import DEFAULT_EXTRAPOLATION_EXPONENT
from ..core.performance.history import RESULT_FILTERS


class Settings(BaseSettings):
    """
    Engine settings loaded from environment variables.

    All settings can be overridden via environment variables, e.g.
    EXTRAPOLATION_EXPONENT=1.07.
    """

    # Estimation
    extrapolation_exponent: float = Field(
        default=DEFAULT_EXTRAPOLATION_EXPONENT,
        gt=0,
        description="Power-law exponent used to scale a known time to a different distance."
    )

    # Results view
    default_result_filter: str = Field(
        default="all",
        description="Result type shown when none is requested: all, practice or competition."
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @field_validator("default_result_filter")
    @classmethod
    def _check_result_filter(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in RESULT_FILTERS:
            raise ValueError(f"must be one of {', '.join(RESULT_FILTERS)}")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper()


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once per process. For tests, call
    get_settings.cache_clear() to reset.
    """
    return Settings()
