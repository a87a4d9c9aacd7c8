"""Services for the container runner."""

from .interfaces import ContainerRuntimeInterface
from .container import ContainerSession, DockerRuntime, DockerClientFactory

__all__ = [
    "ContainerRuntimeInterface",
    "ContainerSession",
    "DockerRuntime",
    "DockerClientFactory",
]
