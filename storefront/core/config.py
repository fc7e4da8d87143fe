"""Storefront Configuration"""

import logging
from typing import Optional
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Scooter Storefront"
    debug: bool = False
    log_level: str = "INFO"
    locale: str = "fr"

    # Storefront API
    api_base_url: str = "http://localhost:8000/api"
    api_timeout: float = 30.0
    api_token: Optional[str] = None

    # Local cart persistence
    cart_store_dir: str = ".storefront"
    cart_store_name: str = "cart-store"

    # Mock API (development)
    mock_api_host: str = "127.0.0.1"
    mock_api_port: int = 8000

    @property
    def effective_log_level(self) -> int:
        if self.debug:
            return logging.DEBUG
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from settings"""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.effective_log_level,
        format=LOG_FORMAT,
    )


settings = get_settings()
