"""
Classroom Hub - Merkezi Konfigürasyon Modülü
Pydantic V2 uyumlu
"""
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    # ===== Database =====
    database_url: str = "sqlite:///./classroom.db"

    # ===== Firebase Authentication =====
    firebase_credentials_path: str = "firebase-service-account.json"

    # ===== Frontend URL (for CORS) =====
    frontend_url: str = "http://localhost:3000"

    # ===== Application =====
    debug: bool = False
    log_level: str = "INFO"

    # ===== Join Codes =====
    join_code_length: int = 6
    join_code_max_attempts: int = 10  # Regenerate on collision at most this many times

    # ===== Rate Limiting =====
    rate_limit_enabled: bool = True
    join_rate_limit: str = "30/minute"
    health_rate_limit: str = "10/minute"

    # ===== Dashboard =====
    default_theme: Literal["light", "dark", "system"] = "light"

    # Pydantic V2 Modern Config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"  # Don't error on extra env vars
    )


@lru_cache()
def get_settings() -> Settings:
    """Singleton settings instance"""
    return Settings()
