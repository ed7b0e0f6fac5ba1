"""Configuration package."""

from account_analytics.config.settings import AnalyticsSettings, get_settings

__all__ = ["AnalyticsSettings", "get_settings"]
