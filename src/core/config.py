"""Client configuration via Pydantic settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared.enums import UserType


class Settings(BaseSettings):
    """Central configuration object loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    api_url: str = Field("http://localhost:3005", alias="NEXT_PUBLIC_API_URL")
    api_timeout_ms: int = Field(30000, alias="NEXT_PUBLIC_API_TIMEOUT")
    api_token: str | None = Field(None, alias="API_TOKEN")
    api_user_type: UserType | None = Field(None, alias="API_USER_TYPE")

    default_page: int = Field(1, alias="DEFAULT_PAGE")
    default_limit: int = Field(10, alias="DEFAULT_LIMIT")
    max_limit: int = Field(100, alias="MAX_LIMIT")

    log_level: str = Field("INFO", alias="LOG_LEVEL")

    @property
    def api_timeout_seconds(self) -> float:
        return self.api_timeout_ms / 1000


@lru_cache(1)
def get_settings() -> Settings:
    """Return a cached settings instance."""
    return Settings()


settings = get_settings()
