"""Layer configuration using Pydantic Settings."""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``C2H_``-prefixed environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="C2H_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Echo the offending input value back inside validation issues
    error_include_input: bool = False

    # Schemes accepted for Webhook.url
    webhook_url_schemes: str = "http,https"

    @property
    def webhook_url_schemes_list(self) -> List[str]:
        """Parse webhook URL schemes from comma-separated string."""
        return [
            scheme.strip().lower()
            for scheme in self.webhook_url_schemes.split(",")
            if scheme.strip()
        ]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
