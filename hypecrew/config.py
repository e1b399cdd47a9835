"""
Application configuration using Pydantic Settings.
Loads environment variables and provides type-safe configuration.
"""

from typing import List, Optional
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]


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
    log_level: Optional[str] = Field(default=None, description="Overrides the debug-derived log level")

    # API Configuration
    api_title: str = Field(default="HypeCrew")
    api_version: str = Field(default="0.1.0")
    api_prefix: str = Field(default="/api/v1")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Supabase Configuration. Empty values are tolerated at load time;
    # the first backend call reports the problem instead.
    supabase_url: str = Field(default="", description="Supabase project URL")
    supabase_anon_key: str = Field(default="", description="Supabase public (anon) key")

    # CORS
    cors_origins: str | List[str] = Field(default=",".join(DEFAULT_CORS_ORIGINS))
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: List[str] = Field(default=["*"])
    cors_allow_headers: List[str] = Field(default=["*"])

    # Browser sessions
    session_cookie_name: str = Field(default="hypecrew_session")
    session_cookie_secure: bool = Field(default=False)
    session_cookie_max_age: int = Field(default=60 * 60 * 24 * 7)  # seconds
    session_load_timeout_seconds: float = Field(default=15.0, gt=0)
    session_idle_timeout_seconds: float = Field(default=60 * 60, gt=0)
    session_max_count: int = Field(default=10_000, ge=1)

    # Profile resolution after signup
    profile_retry_max_attempts: int = Field(default=5, ge=1)
    profile_retry_delay_seconds: float = Field(default=2.0, ge=0)
    profile_signup_initial_delay_seconds: float = Field(default=2.0, ge=0)

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string or list."""
        if v is None:
            return list(DEFAULT_CORS_ORIGINS)
        if isinstance(v, str):
            if not v.strip():
                return list(DEFAULT_CORS_ORIGINS)
            return [origin.strip() for origin in v.split(",") if origin.strip()]
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
    def effective_log_level(self) -> str:
        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.debug else "INFO"

    def missing_backend_settings(self) -> List[str]:
        """Return the names of unset Supabase environment variables."""
        return [
            name.upper()
            for name in ("supabase_url", "supabase_anon_key")
            if not getattr(self, name, None)
        ]


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Use this function to get settings throughout the application.
    """
    return Settings()


settings = get_settings()
