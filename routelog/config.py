"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from typing import List, Literal
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, ConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === Storage ===
    database_url: str = Field(
        default="sqlite:///./routelog.db",
        description="Database connection URL"
    )
    storage_backend: Literal["sqlite", "memory"] = Field(
        default="sqlite",
        description="Where the workout log blob is kept"
    )
    storage_key: str = Field(
        default="workouts",
        description="Key of the single workout log blob"
    )

    # === Map ===
    default_center_lat: float = Field(default=51.505, ge=-90, le=90)
    default_center_lng: float = Field(default=-0.09, ge=-180, le=180)
    default_zoom: int = Field(default=13, ge=0, le=20)

    # === CORS ===
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"],
        description="Allowed CORS origins"
    )

    @field_validator('database_url')
    @classmethod
    def fix_postgres_url(cls, v: str) -> str:
        """Fix Render/Railway postgres:// URL to postgresql://"""
        if v.startswith("postgres://"):
            return v.replace("postgres://", "postgresql://", 1)
        return v

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',')]
        return v

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
