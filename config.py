"""
Application configuration for Circle Thumbnail Studio.

Settings are grouped by concern and can be overridden through environment
variables prefixed with ``THUMBNAIL_`` (nested fields use ``__``), e.g.
``THUMBNAIL_API__PORT=8080`` or ``THUMBNAIL_SYSTEM__LOG_LEVEL=DEBUG``.
"""

from functools import lru_cache
from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.constants import LoaderConstants, SessionConstants, StorageConstants


class APISettings(BaseModel):
    """HTTP server settings"""

    host: str = "0.0.0.0"
    port: int = Field(3000, ge=1, le=65535)
    cors_enabled: bool = True
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])


class SystemSettings(BaseModel):
    """Process-wide settings"""

    debug: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {value}")
        return level


class StorageSettings(BaseModel):
    """Filesystem locations"""

    thumbnails_dir: str = StorageConstants.DEFAULT_THUMBNAILS_DIR
    static_dir: str = StorageConstants.DEFAULT_STATIC_DIR


class SessionSettings(BaseModel):
    """Editor session registry settings"""

    max_sessions: int = Field(
        SessionConstants.DEFAULT_MAX_SESSIONS,
        ge=SessionConstants.MIN_SESSIONS,
        le=SessionConstants.MAX_SESSIONS,
    )


class LoaderSettings(BaseModel):
    """Remote image acquisition settings"""

    url_timeout_s: float = Field(LoaderConstants.DEFAULT_URL_TIMEOUT_S, gt=0)
    max_download_mb: int = Field(LoaderConstants.DEFAULT_MAX_DOWNLOAD_MB, ge=1)


class Settings(BaseSettings):
    """Root settings object"""

    model_config = SettingsConfigDict(
        env_prefix="THUMBNAIL_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    environment: str = "development"
    api: APISettings = Field(default_factory=APISettings)
    system: SystemSettings = Field(default_factory=SystemSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    session: SessionSettings = Field(default_factory=SessionSettings)
    loader: LoaderSettings = Field(default_factory=LoaderSettings)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dictionary view, stored on app.state.config"""
        return self.model_dump()


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings"""
    return Settings()
