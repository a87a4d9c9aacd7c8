"""Configuration management for the Freerouting container runner.

This module provides a unified Settings class with flat, environment-backed
fields and grouped views over them.

Usage:
    from src.config import settings

    # Access grouped settings
    settings.docker.freerouting_image
    settings.logging.log_level

    # Or use flat access
    settings.freerouting_image
    settings.log_level
"""

from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Import grouped configurations
from .docker import DockerConfig
from .logging import LoggingConfig

_ALLOWED_LOG_FORMATS = ("json", "console")
_ALLOWED_URL_SCHEMES = ("unix://", "npipe://", "tcp://", "http://", "https://")


class Settings(BaseSettings):
    """Application settings with environment variable support.

    This class provides both:
    1. Grouped access via nested configs (settings.docker.docker_tcp_port)
    2. Flat access (settings.docker_tcp_port)
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Image Configuration
    freerouting_image: str = Field(
        default="ghcr.io/tscircuit/freerouting:master",
        description="Image reference pulled and run by every container session",
    )

    # Docker Daemon Configuration
    # On Windows the daemon is reached over TCP, which must be enabled in
    # Docker Desktop ("Expose daemon on tcp://localhost:2375 without TLS").
    docker_base_url: Optional[str] = Field(
        default=None,
        description="Explicit daemon URL, overrides platform-based selection",
    )
    docker_tcp_host: str = Field(default="localhost")
    docker_tcp_port: int = Field(default=2375, ge=1, le=65535)
    docker_timeout_seconds: int = Field(
        default=60,
        ge=1,
        le=3600,
        description="Per-request timeout of the Docker SDK client",
    )
    docker_ready_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        le=300,
        description="How long wait_until_running polls before giving up",
    )
    docker_ready_poll_interval: float = Field(default=0.25, gt=0, le=10)

    # Logging Configuration
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")
    log_file: Optional[str] = Field(default=None)

    # ========================================================================
    # VALIDATORS
    # ========================================================================

    @validator("log_level")
    def normalize_log_level(cls, v):
        """Upper-case the log level name."""
        return v.upper()

    @validator("log_format")
    def validate_log_format(cls, v):
        """Ensure the log format is one the logging setup can render."""
        v = v.lower()
        if v not in _ALLOWED_LOG_FORMATS:
            raise ValueError(
                f"log_format must be one of {', '.join(_ALLOWED_LOG_FORMATS)}"
            )
        return v

    @validator("docker_base_url")
    def validate_docker_base_url(cls, v):
        """Ensure an explicit daemon URL carries a scheme."""
        if v is None:
            return v
        v = v.strip()
        if not v:
            return None
        if not v.startswith(_ALLOWED_URL_SCHEMES):
            raise ValueError(
                "docker_base_url must start with one of "
                + ", ".join(_ALLOWED_URL_SCHEMES)
            )
        return v

    # ========================================================================
    # GROUPED CONFIG ACCESS
    # ========================================================================

    @property
    def docker(self) -> DockerConfig:
        """Access Docker configuration group."""
        return DockerConfig(
            freerouting_image=self.freerouting_image,
            docker_base_url=self.docker_base_url,
            docker_tcp_host=self.docker_tcp_host,
            docker_tcp_port=self.docker_tcp_port,
            docker_timeout_seconds=self.docker_timeout_seconds,
            docker_ready_timeout_seconds=self.docker_ready_timeout_seconds,
            docker_ready_poll_interval=self.docker_ready_poll_interval,
        )

    @property
    def logging(self) -> LoggingConfig:
        """Access logging configuration group."""
        return LoggingConfig(
            log_level=self.log_level,
            log_format=self.log_format,
            log_file=self.log_file,
        )

    # ========================================================================
    # HELPER METHODS
    # ========================================================================

    def get_docker_tcp_url(self) -> str:
        """Get the daemon TCP endpoint used when the local socket is unavailable."""
        return self.docker.get_tcp_url()


# Global settings instance
settings = Settings()

__all__ = [
    "Settings",
    "settings",
    # Grouped configs
    "DockerConfig",
    "LoggingConfig",
]
