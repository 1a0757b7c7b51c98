"""Application configuration management"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "ResumeAI"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # API
    API_V1_PREFIX: str = "/api/v1"

    # Simulated analysis
    ANALYSIS_DELAY_SECONDS: float = 3.0
    RESET_DELAY_SECONDS: float = 2.0
    DEFAULT_POSITION: str = "Software Developer"
    ANALYSIS_SEED: Optional[int] = None  # Fixed seed makes mock scores reproducible

    # File Upload
    ALLOWED_CONTENT_TYPES: list[str] = [
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ]

    # Candidate store
    LOAD_SEED_DATA: bool = True

    # Notifications
    NOTIFICATION_HISTORY_LIMIT: int = 50

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:8080"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )


# Global settings instance
settings = Settings()
