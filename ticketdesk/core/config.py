# ticketdesk/core/config.py
from functools import lru_cache
from urllib.parse import quote_plus

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Postgres connection parts, all supplied by the environment
    DB_HOST: str | None = None
    DB_NAME: str | None = None
    DB_USER: str | None = None
    DB_PASSWORD: str | None = None
    DB_PORT: int = 5432

    # Full URL override (sqlite for local runs and tests)
    DATABASE_URL: str | None = None

    HOST: str = "0.0.0.0"
    PORT: int = Field(default=3000)
    LOG_LEVEL: str = "INFO"

    APP_NAME: str = "Ticketdesk API"
    APP_DESC: str = "Accounts, support tickets and account requests"
    APP_VERSION: str = "1.0.0"

    # Comma separated, all origins when unset
    CORS_ORIGINS: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def db_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        missing = [
            name
            for name in ("DB_HOST", "DB_NAME", "DB_USER", "DB_PASSWORD")
            if not getattr(self, name)
        ]
        if missing:
            raise ValueError(f"Database settings missing: {', '.join(missing)}")
        return (
            f"postgresql+psycopg://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASSWORD)}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def cors_origins(self) -> list[str]:
        if not self.CORS_ORIGINS:
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
