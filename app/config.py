"""
Configuration settings for the Task Board API application.
Uses Pydantic BaseSettings for environment variable management.
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False
    )

    # Application settings
    app_name: str = "Task Board API"
    log_level: str = "INFO"

    # Server settings
    host: str = "0.0.0.0"
    port: int = Field(default=5001, description="Port the launcher binds to")
    cors_allow_origins: str = Field(
        default="*", description="Comma-separated list of allowed origins"
    )

    # Database settings
    database_url: str | None = None
    db_host: str | None = None
    db_port: int = 3306
    db_user: str | None = None
    db_password: str | None = None
    db_name: str | None = None
    sqlite_path: str = Field(
        default="./todos.db", description="SQLite database file path"
    )

    @property
    def database_connection_url(self) -> str:
        """Resolve the SQLAlchemy URL: DATABASE_URL, then MySQL parts, then SQLite."""
        if self.database_url:
            return self.database_url

        if self.db_host:
            credentials = self.db_user or ""
            if self.db_password:
                credentials = f"{credentials}:{self.db_password}"
            if credentials:
                credentials = f"{credentials}@"
            return (
                f"mysql+pymysql://{credentials}{self.db_host}:{self.db_port}"
                f"/{self.db_name or ''}"
            )

        return f"sqlite:///{self.sqlite_path}"

    @property
    def cors_origins(self) -> List[str]:
        """Allowed CORS origins as a list."""
        origins = [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]
        return origins or ["*"]


# Global settings instance
settings = Settings()
