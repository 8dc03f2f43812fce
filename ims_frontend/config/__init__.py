"""
Application Configuration
"""
from pydantic_settings import BaseSettings
from typing import List
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "IMS Pro Inventory Management"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Backend REST API
    API_BASE_URL: str = "http://localhost:8080"
    API_TIMEOUT_SECONDS: float = 30.0

    # Persisted client state (token, user, theme)
    SESSION_FILE: str = "~/.ims_session.json"

    # Theme
    DEFAULT_THEME: str = "light"  # or "dark"

    # Reports auto-refresh
    REPORT_REFRESH_INTERVALS: List[int] = [10, 30, 60, 300]
    REPORT_REFRESH_SECONDS: int = 30
    REPORT_AUTO_REFRESH: bool = True

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Notifications kept for GET /notifications
    NOTIFICATION_LIMIT: int = 50

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
