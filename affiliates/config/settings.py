"""
Application settings.

Loads configuration from environment variables using pydantic-settings.
"""

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str
    database_echo: bool = False

    # Redis (for Dramatiq)
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_password: str | None = None
    redis_db: int = 0

    # Application
    environment: str = "production"
    debug: bool = False
    log_level: str = "INFO"
    log_file: str | None = "logs/affiliates.log"
    health_check_port: int = Field(
        default=8081, ge=1, le=65535, description="Health check HTTP server port"
    )

    # Sessions
    session_lifetime_days: int = Field(
        default=30, gt=0, description="Absolute session lifetime in days"
    )
    session_purge_on_issue: bool = Field(
        default=True,
        description="Delete expired sessions before issuing a new one",
    )
    session_sweep_interval_minutes: int = Field(
        default=60, gt=0, description="Scheduled expired-session sweep interval"
    )

    # Notifications
    admin_email: str = ""
    program_name: str = "Noyes Boys"
    smtp_host: str | None = None
    smtp_port: int = 587
    smtp_username: str | None = None
    smtp_password: str | None = None
    smtp_use_tls: bool = True
    smtp_timeout: int = Field(default=10, gt=0)
    mail_from: str = "noreply@example.com"

    # Dashboard
    recent_activity_limit: int = Field(
        default=10, gt=0, le=100, description="Sales shown in recent activity"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Validate database URL."""
        if not v.startswith(
            ("postgresql://", "postgresql+asyncpg://", "sqlite+aiosqlite://")
        ):
            raise ValueError(
                "DATABASE_URL must start with postgresql://, "
                "postgresql+asyncpg:// or sqlite+aiosqlite://"
            )
        if v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize log level name."""
        level = v.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode="after")
    def validate_production(self) -> "Settings":
        """Validate production-specific requirements."""
        if self.environment == "production":
            if self.debug:
                raise ValueError(
                    "DEBUG must be False in production environment. "
                    "Set DEBUG=false in your .env file."
                )
            if not self.admin_email:
                raise ValueError(
                    "ADMIN_EMAIL is required in production. "
                    "New affiliate applications are sent to this address."
                )
            if not self.smtp_host:
                raise ValueError(
                    "SMTP_HOST is required in production. "
                    "Notification emails cannot be delivered without it."
                )
        return self

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured database is SQLite."""
        return self.database_url.startswith("sqlite")


# Global settings instance
settings = Settings()
