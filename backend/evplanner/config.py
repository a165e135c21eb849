"""
EVPlanner - Application Configuration
"""
from typing import List
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "EVPlanner"
    debug: bool = False

    # Database
    # SQLite file next to the working directory; tests point this at a temp file
    database_url: str = "sqlite+aiosqlite:///./evplanner.db"
    seed_on_startup: bool = True

    # CORS
    cors_origins: List[str] = ["*"]

    # Admin authentication
    jwt_secret_key: str = "evplanner-secret-key-change-in-production"
    jwt_expire_minutes: int = 480  # 8 hours
    admin_username: str = "admin"
    admin_password: str = "admin123"

    # Geocoding (OpenStreetMap Nominatim)
    geocoding_url: str = "https://nominatim.openstreetmap.org/search"
    geocoding_country_codes: str = "us"

    # Base URL used by the headless map editor client
    api_base_url: str = "http://localhost:8000/api"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "EVPLANNER_"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
