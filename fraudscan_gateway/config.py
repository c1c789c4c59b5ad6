"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./fraudscan.db"

    # Remote prediction service
    prediction_api_base: str = "http://localhost:8000"
    prediction_timeout_seconds: float = 5.0
    default_model_version: str = "2.1"

    # Service
    service_name: str = "fraudscan-gateway"
    log_level: str = "INFO"


settings = Settings()
