"""
Settings module for ClarityCanvas.

Environment-based configuration with sensible defaults.
All settings can be overridden via CLARITY_* environment variables or a .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

from domain.records import RiskThresholds


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Database settings default to a local SQLite file so the service runs
    without any infrastructure in development.
    """

    # Environment
    environment: str = Field(
        default="development",
        description="Environment name (development, staging, production)"
    )
    debug: bool = Field(
        default=True,
        description="Enable debug mode"
    )

    # Database
    database_url: Optional[str] = Field(
        default=None,
        description="Full SQLAlchemy URL; takes precedence over the db_* fields"
    )
    db_host: Optional[str] = Field(default=None, description="PostgreSQL host")
    db_port: int = Field(default=5432, description="PostgreSQL port")
    db_user: Optional[str] = Field(default=None, description="PostgreSQL user")
    db_password: Optional[str] = Field(default=None, description="PostgreSQL password")
    db_name: str = Field(default="claritycanvas", description="PostgreSQL database name")
    sqlite_path: str = Field(
        default="./claritycanvas.db",
        description="SQLite file used when no PostgreSQL host is configured"
    )

    # Planning rules
    default_capacity_hours: float = Field(
        default=40,
        description="Weekly capacity assumed for designers without a capacity record"
    )
    risk_days_threshold: int = Field(
        default=7,
        description="Projects due within this many days may be flagged at risk"
    )
    risk_min_remaining_hours: float = Field(
        default=8,
        description="Projects need more than this many hours left to be flagged at risk"
    )

    # Team context
    team_cookie_name: str = Field(
        default="selected-team-id",
        description="Cookie carrying the selected team id"
    )
    default_team_name: str = Field(
        default="Default Team",
        description="Name of the team created when none exists"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string"
    )
    datadog_api_key: Optional[str] = Field(
        default=None,
        description="Datadog API key; log shipping is disabled when unset"
    )
    datadog_log_url: str = Field(
        default="https://http-intake.logs.datadoghq.com/v1/input",
        description="Datadog HTTP log intake URL"
    )

    model_config = SettingsConfigDict(
        env_prefix="CLARITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment == "development"

    @property
    def resolved_database_url(self):
        """Explicit URL, else PostgreSQL when a host is set, else SQLite."""
        if self.database_url:
            return self.database_url
        if self.db_host:
            return URL.create(
                drivername="postgresql",
                username=self.db_user,
                password=self.db_password,
                host=self.db_host,
                database=self.db_name,
                port=self.db_port,
            )
        return f"sqlite:///{self.sqlite_path}"

    @property
    def risk_thresholds(self) -> RiskThresholds:
        return RiskThresholds(
            days_threshold=self.risk_days_threshold,
            min_remaining_hours=self.risk_min_remaining_hours,
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are cached for performance. To reload, use:
        get_settings.cache_clear()
    """
    return Settings()
