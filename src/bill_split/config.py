"""Configuration management for bill-split."""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BILL_SPLIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Tip used when neither --tip nor the bill sets one
    default_tip_percentage: Decimal | None = None

    # Logging
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Load application settings from environment variables."""
    try:
        return Settings()
    except Exception as e:
        raise ConfigurationError(
            f"Failed to load settings. Check the BILL_SPLIT_* variables in your "
            f"environment or .env file.\n"
            f"Error: {e}"
        ) from e
