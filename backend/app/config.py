"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from typing import Annotated, List, Optional
from pydantic_settings import BaseSettings, NoDecode
from pydantic import Field, field_validator, ConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === Database ===
    database_url: str = Field(
        default="sqlite:///./app.db",
        description="Database connection URL"
    )

    # === CORS ===
    cors_origins: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["*"],
        description="Allowed CORS origins"
    )

    # === Gemini ===
    gemini_api_key: Optional[str] = Field(default=None)
    gemini_model: str = Field(default="gemini-1.5-flash")
    gemini_temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    gemini_top_k: int = Field(default=40, ge=1)
    gemini_top_p: float = Field(default=0.95, ge=0.0, le=1.0)
    gemini_max_output_tokens: int = Field(default=8192, ge=1)

    # === Result fetching ===
    fetch_timeout: float = Field(default=30.0, description="HyResult request timeout, seconds")
    fetch_user_agent: str = Field(
        default="Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
    )

    # === Uploads ===
    max_upload_bytes: int = Field(default=1024 * 1024, description="Max CSV upload size")

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
