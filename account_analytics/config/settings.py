"""
Configuration Management for Account Analytics

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here. The pure query
functions take no configuration; only the executor reads these values.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AnalyticsSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from ACCOUNT_ANALYTICS_* environment variables
    and the .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="ACCOUNT_ANALYTICS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    default_tie_break: str = Field(
        default="lowest_id",
        description="Tie-break policy used when a query does not name one"
    )

    max_result_rows: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Row cap for listing queries that do not set a limit"
    )

    @field_validator('default_tie_break')
    @classmethod
    def validate_tie_break(cls, v: str) -> str:
        """Only policies registered in TIE_BREAKERS can be the default."""
        # queries imports config, so the registry is looked up at validation time
        from account_analytics.queries.statistics import TIE_BREAKERS

        if v not in TIE_BREAKERS:
            raise ValueError(
                f"Unknown tie-break policy: {v}. Known: {sorted(TIE_BREAKERS)}"
            )
        return v


@lru_cache()
def get_settings() -> AnalyticsSettings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return AnalyticsSettings()
