"""Configuration management for the client."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    # Endpoint Configuration
    api_base: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta/models",
        description="Base URL of the versioned model endpoints",
    )

    # Transport Configuration
    proxy: str | None = Field(default=None, description="HTTP proxy URL")
    timeout: int = Field(default=120, description="Request timeout in seconds")
    impersonate: str = Field(
        default="chrome131", description="Browser fingerprint used by curl_cffi"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Minimum log level")

    # Demo Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")

    class Config:
        env_prefix = "GEMINI_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()
