"""Settings for the Public Transport widget."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

WIDGET_NAME = "Public Transport"
WIDGET_VERSION = "1.0.0"

# How often the host should call run(), in seconds
UPDATE_CYCLE_SECONDS = 90

# Raw connections requested per pair; the formatter truncates afterwards
RAW_RESULT_LIMIT = 16

# Sentinel the host passes before the widget has been configured
EMPTY_CONFIG = "{}"


class Settings(BaseSettings):
    """Overrides read from TRANSPORT_WIDGET_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TRANSPORT_WIDGET_",
        extra="ignore",
    )

    # transport.opendata.ch journey planner
    api_url: str = "http://transport.opendata.ch/v1/connections"
    timeout: float = 10.0  # Per-request timeout in seconds


@lru_cache
def get_settings() -> Settings:
    """Settings loaded on first use, so a bad environment never breaks import."""
    return Settings()
