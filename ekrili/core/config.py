"""
Ekrili Application Configuration
Loads settings from .env file using Pydantic v2 with BaseSettings
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # ==================== Project Info ====================
    PROJECT_NAME: str = "Ekrili API"
    PROJECT_DESCRIPTION: str = "Location de maisons, appartements et équipements en Tunisie"
    VERSION: str = "1.0.0"

    # ==================== Security & Authentication ====================
    SECRET_KEY: str = "ekrili-secret-key-change-this-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 1440  # 24 hours

    # ==================== CORS & Frontend ====================
    FRONTEND_URL: str = "http://localhost:5000"
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5000",
    ]

    # ==================== Server Configuration ====================
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # ==================== Data ====================
    SEED_DEMO_DATA: bool = True

    # ==================== Features ====================
    DEBUG: bool = False
    TESTING: bool = False
    LOG_LEVEL: str = "INFO"

    # ==================== Configuration Loading ====================
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow",
    )


# ==================== Settings Singleton ====================
@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()


# ==================== Helper Functions ====================
def is_production() -> bool:
    """Check if running in production"""
    return not settings.DEBUG and settings.FRONTEND_URL.startswith("https")


def is_development() -> bool:
    """Check if running in development"""
    return settings.DEBUG or "localhost" in settings.FRONTEND_URL


def is_testing() -> bool:
    """Check if running in testing mode"""
    return settings.TESTING
