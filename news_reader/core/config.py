# core/config.py

"""
Configuration management for the news reader gateway and feed client.
"""

from typing import List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    # Service configuration
    app_name: str = "news-reader-gateway"
    debug: bool = False
    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"]
    )

    # Upstream provider (NewsAPI.org)
    newsapi_api_key: Optional[str] = Field(
        default=None, description="Provider credential, never sent to clients"
    )
    newsapi_base_url: str = "https://newsapi.org/v2"
    newsapi_language: str = "en"
    upstream_timeout_seconds: float = Field(
        default=10.0, description="Total timeout of one upstream call"
    )

    # Feed configuration
    default_page_size: int = 10
    max_page_size: int = 100
    default_all_news_query: str = "world"

    # Feed client configuration
    gateway_url: str = "http://localhost:8000"
    client_timeout_seconds: float = 15.0

    # Logging configuration
    log_level: str = "INFO"
    log_file_path: str = "logs/"
    enable_file_logging: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in levels:
            raise ValueError(f"log_level must be one of {sorted(levels)}")
        return v.upper()

    @field_validator("default_page_size", "max_page_size")
    @classmethod
    def validate_page_size(cls, v):
        if v < 1 or v > 100:
            raise ValueError("page size must be between 1 and 100")
        return v

    @field_validator("upstream_timeout_seconds", "client_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("timeouts must be positive")
        return v

    @field_validator("newsapi_base_url", "gateway_url")
    @classmethod
    def strip_trailing_slash(cls, v):
        return v.rstrip("/")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @property
    def has_provider_credential(self) -> bool:
        return bool(self.newsapi_api_key)

    def log_file(self, name: str) -> Optional[str]:
        """Log file path for a component, or None when file logging is off."""
        if not self.enable_file_logging:
            return None
        return f"{self.log_file_path}{name}.log"


# Global settings instance
settings = Settings()
