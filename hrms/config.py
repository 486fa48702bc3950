"""Application configuration via environment variables."""

import json
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 4000

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./hrms.db"
    DATABASE_ECHO: bool = False
    CREATE_TABLES: bool = True

    # Auth: SECRET_KEY MUST be set via environment / .env (no default)
    SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    TOKEN_EXPIRY_MINUTES: int = 60
    BCRYPT_ROUNDS: int = 10

    # App
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "info"
    CORS_ORIGINS: str = '["*"]'

    @field_validator("SECRET_KEY")
    @classmethod
    def _secret_key_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("SECRET_KEY must not be empty")
        return value

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS_ORIGINS JSON string into a list."""
        try:
            return json.loads(self.CORS_ORIGINS)
        except (json.JSONDecodeError, TypeError):
            return ["*"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


settings = Settings()
