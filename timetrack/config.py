"""
Application configuration using Pydantic Settings.
Loads environment variables and provides type-safe configuration.
"""

from typing import List, Optional
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, validator
from pathlib import Path

# Get the base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: str = Field(default="development", description="Current environment")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Root log level when not in debug mode")

    # API Configuration
    api_title: str = Field(default="Timetrack Timesheet Service")
    api_version: str = Field(default="1.0.0")
    api_prefix: str = Field(default="/api/v1")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Database
    database_url: str = Field(
        default=f"sqlite:///{BASE_DIR / 'timetrack.db'}",
        description="SQLAlchemy database URL"
    )

    # JWT Configuration
    jwt_secret_key: str = Field(default="development-secret-key-change-in-production", description="JWT secret key")
    jwt_algorithm: str = Field(default="HS256")

    # CORS
    cors_origins: str | List[str] = Field(
        default="http://localhost:3000,http://localhost:5173"
    )
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: List[str] = Field(default=["*"])
    cors_allow_headers: List[str] = Field(default=["*"])

    # Time tracking policy
    min_timer_seconds: int = Field(default=60, ge=0, description="Shortest timer session that can be saved")
    max_daily_hours: float = Field(default=24.0, gt=0, description="Upper bound of logged hours per user and day")
    timer_default_description: str = Field(default="Timer session")

    # Collaborating services (in-memory / logging adapters are used when unset)
    directory_service_url: Optional[str] = Field(default=None, description="Task and user directory base URL")
    notification_service_url: Optional[str] = Field(default=None, description="Notification service base URL")
    directory_seed_path: Optional[str] = Field(default=None, description="JSON seed for the in-memory directory")
    collaborator_timeout_seconds: float = Field(default=5.0)

    @validator("cors_origins", pre=True)
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string or list."""
        if isinstance(v, str):
            if not v or v.strip() == "":
                return ["http://localhost:3000", "http://localhost:5173"]
            return [origin.strip() for origin in v.split(",")]
        elif v is None:
            return ["http://localhost:3000", "http://localhost:5173"]
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment.lower() == "testing"

    def validate_environment(self) -> None:
        """Validate that all required environment variables are set."""
        missing_vars = []
        if not self.database_url:
            missing_vars.append("DATABASE_URL")
        if not self.jwt_secret_key or self.jwt_secret_key.startswith("development-"):
            missing_vars.append("JWT_SECRET_KEY")

        if missing_vars:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing_vars)}"
            )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Use this function to get settings throughout the application.
    """
    settings = Settings()

    # Validate environment in production
    if settings.is_production:
        settings.validate_environment()

    return settings


# Create a global settings instance
settings = get_settings()
