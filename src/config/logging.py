"""Logging configuration."""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings


class LoggingConfig(BaseSettings):
    """Log level, format and destination."""

    log_level: str = Field(default="INFO", alias="log_level")
    log_format: str = Field(default="json", alias="log_format")
    log_file: Optional[str] = Field(default=None, alias="log_file")

    class Config:
        env_prefix = ""
        extra = "ignore"
