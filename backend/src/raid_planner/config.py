"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Settings
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # CORS - comma-separated origins (env var: CORS_ORIGINS)
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"

    @computed_field
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # Free-form deployment value echoed by the root endpoint (env var: CUSTOM_KEY)
    custom_key: str | None = None

    # IANA timezone used to place raids on calendar days
    timezone: str = "Europe/Paris"

    # Load the demo guild (users, characters, raids, registrations) at startup
    seed_mock_data: bool = True

    # Raid creation stands in for a remote call: artificial delay + timeout
    raid_creation_delay_seconds: float = 1.0
    raid_creation_timeout_seconds: float = 10.0

    # When False, any raid status can be set from any other
    strict_status_transitions: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
