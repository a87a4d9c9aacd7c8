"""Docker daemon and image configuration."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class DockerConfig(BaseSettings):
    """Docker connection and container settings."""

    freerouting_image: str = Field(
        default="ghcr.io/tscircuit/freerouting:master", alias="freerouting_image"
    )
    docker_base_url: Optional[str] = Field(default=None, alias="docker_base_url")
    docker_tcp_host: str = Field(default="localhost", alias="docker_tcp_host")
    docker_tcp_port: int = Field(default=2375, ge=1, le=65535, alias="docker_tcp_port")
    docker_timeout_seconds: int = Field(
        default=60, ge=1, le=3600, alias="docker_timeout_seconds"
    )
    docker_ready_timeout_seconds: float = Field(
        default=10.0, gt=0, le=300, alias="docker_ready_timeout_seconds"
    )
    docker_ready_poll_interval: float = Field(
        default=0.25, gt=0, le=10, alias="docker_ready_poll_interval"
    )

    def get_tcp_url(self) -> str:
        """Get the daemon TCP endpoint URL."""
        return f"tcp://{self.docker_tcp_host}:{self.docker_tcp_port}"

    class Config:
        env_prefix = ""
        extra = "ignore"
