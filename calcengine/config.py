"""Configuration management using Pydantic Settings"""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class Settings(BaseSettings):
    """Application configuration loaded from environment variables (CALCENGINE_*)"""

    model_config = SettingsConfigDict(
        env_prefix="CALCENGINE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Site
    site_name: str = "CalcEngine"
    site_url: str = "https://calcengine.org"

    # Logging
    log_level: str = "INFO"
    log_dir: str = os.path.join(PROJECT_ROOT, "logs")
    log_to_file: bool = True

    debug: bool = False


settings = Settings()
