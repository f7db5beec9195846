from functools import lru_cache
from typing import Any
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_parse_none_str="none",
    )

    # Database
    DATABASE_URL: str = "postgresql+asyncpg://postgres:postgres@db:5432/apartments"

    # API
    API_TITLE: str = "Apartment Listings API"
    API_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "info"

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    # Environment
    ENV: str = "development"

    # Listings
    DEFAULT_PAGE_SIZE: int = 10
    SEED_ON_STARTUP: bool = True

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Any) -> list[str]:
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        elif isinstance(v, list):
            return v
        return []

    @property
    def is_production(self) -> bool:
        return self.ENV.lower() == "production"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
