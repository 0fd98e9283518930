"""
Environment configuration for the StayHub client SDK.
Uses Pydantic's settings management to handle environment variables
with proper type validation and default values.
"""

import json
from typing import List, Optional, Union
from pathlib import Path
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path('.') / '.env'
load_dotenv(dotenv_path=env_path)


class Settings(BaseSettings):
    """SDK settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    # Application configuration
    APP_NAME: str = "StayHub"
    ENVIRONMENT: str = "development"

    # Backend API
    API_BASE_URL: str = Field(default="http://localhost:3000/api", alias="STAYHUB_API_URL")
    API_TIMEOUT_SECONDS: float = 30.0

    # Third-party login (authorization redirect only)
    OAUTH_CLIENT_ID: Optional[str] = Field(default=None, alias="GOOGLE_CLIENT_ID")
    OAUTH_REDIRECT_URI: Optional[str] = Field(default=None, alias="GOOGLE_REDIRECT_URI")
    OAUTH_AUTHORIZE_URL: str = "https://accounts.google.com/o/oauth2/v2/auth"
    OAUTH_SCOPES: List[str] = Field(default=["openid", "email", "profile"])

    # Persisted session/wishlist storage
    STORAGE_URL: str = "sqlite:///./stayhub.db"
    STORAGE_ECHO: bool = False

    # Booking and payment flow
    PAYMENT_POLL_INTERVAL_SECONDS: float = 3.0
    PAYMENT_POLL_MAX_ATTEMPTS: Optional[int] = None
    MAX_COMPARISON_ROOMS: int = 4
    CURRENCY: str = "USD"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"
    LOG_FILE: Optional[str] = None
    ENABLE_STRUCTURED_LOGGING: bool = True

    # Validators
    @field_validator('OAUTH_SCOPES', mode='before')
    @classmethod
    def parse_scopes(cls, v: Union[str, List[str]]) -> List[str]:
        """Parse OAUTH_SCOPES from a JSON list or comma/space separated string"""
        if isinstance(v, str):
            if v.startswith('[') and v.endswith(']'):
                try:
                    return json.loads(v)
                except json.JSONDecodeError:
                    pass
            return [scope.strip() for scope in v.replace(",", " ").split() if scope.strip()]
        return v

    @field_validator('API_BASE_URL')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {v}")
        return level

    @field_validator('LOG_FORMAT')
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        fmt = v.lower()
        if fmt not in {"json", "text"}:
            raise ValueError("LOG_FORMAT must be 'json' or 'text'")
        return fmt

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.ENVIRONMENT == "production"

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.ENVIRONMENT == "development"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
