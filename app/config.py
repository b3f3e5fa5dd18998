"""Application configuration management using Pydantic's BaseSettings."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """Defines all configuration settings for the API, loaded from .env file."""

    model_config = SettingsConfigDict(env_file=".env")

    # App settings
    app_name: str = "Blogify Sign-In API"
    debug: bool = True
    log_level: str = "INFO"

    # Example account accepted by the mock sign-in endpoint
    example_email: str = "demo@blogify.test"
    example_password: str = "password123"
    example_display_name: str = "Demo User"

    # CORS
    cors_allow_origins: List[str] = ["*"]


settings = Settings()
