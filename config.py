"""
Configuration settings for the User Directory Service.

Load settings from environment variables.
"""

import os
from pathlib import Path
from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent
DEFAULT_USERS_DATA_FILE = BASE_DIR / "app" / "api" / "db" / "data" / "users.json"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    # Application Configuration
    APP_NAME: str = os.getenv("APP_NAME", "User Directory Service")
    APP_VERSION: str = os.getenv("APP_VERSION", "1.0.0")
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    APP_PORT: int = int(os.getenv("APP_PORT", "8000"))

    # URLs
    APP_URL: str = os.getenv("APP_URL", "https://api.userdirectory.com")
    DEV_URL: str = os.getenv("DEV_URL", "http://localhost:3000")
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:3000")

    # Data
    USERS_DATA_FILE: str = os.getenv("USERS_DATA_FILE", str(DEFAULT_USERS_DATA_FILE))

    # Listing defaults
    DEFAULT_PAGE: int = 1
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    # Client
    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:8000/api/v1")
    CLIENT_TIMEOUT: int = int(os.getenv("CLIENT_TIMEOUT", "10"))
    MAX_VISIBLE_PAGES: int = int(os.getenv("MAX_VISIBLE_PAGES", "5"))
    PAGE_SIZE_OPTIONS: list[int] = [5, 10, 25, 50]

    # API Settings
    API_V1_PREFIX: str = "/api/v1"
    API_LEGACY_PREFIX: str = "/api"

    class Config:
        """Pydantic config."""
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


# Create settings instance
settings = Settings()


# Validation: Ensure production deployments are not misconfigured
if settings.ENVIRONMENT == "production":
    if settings.DEBUG:
        raise ValueError("DEBUG must be disabled in production")

    if not Path(settings.USERS_DATA_FILE).is_file():
        raise ValueError(
            f"Users data file not found: {settings.USERS_DATA_FILE}"
        )
