"""
Application settings and configuration management.
All probe, DNS and rate limit tuning should be managed here.
"""
from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application Info
    app_name: str = "Email Login Finder API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = Field(default=3000, validation_alias="PORT")

    # CORS Settings
    cors_origins: list = ["*"]  # Configure appropriately for production

    # Static frontend (mounted only if the directory exists)
    static_dir: str = "./public"

    # Probe Configuration
    user_agent: str = "EmailLoginFinder/1.0"
    probe_batch_size: int = 6
    probe_timeout_ms: int = 5000

    # DNS Configuration
    dns_lifetime: float = 5.0
    dns_nameservers: List[str] = []  # Empty means use the system resolver

    # Rate Limiting
    rate_limit_window_seconds: float = 60.0
    rate_limit_max_requests: int = 30

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    This ensures settings are loaded only once.
    """
    return Settings()


# Global settings instance
settings = get_settings()
