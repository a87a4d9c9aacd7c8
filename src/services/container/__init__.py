"""Container management services.

This package provides Docker container management functionality split into:
- client.py: Docker client factory and connection mode selection
- runtime.py: Docker SDK implementation of the runtime interface
- session.py: Single-container session lifecycle
- utils.py: Shared utilities for container operations
"""

from .client import DockerClientFactory
from .runtime import DockerRuntime
from .session import ContainerSession
from .utils import wait_for_container_ready, run_in_executor

__all__ = [
    "DockerClientFactory",
    "DockerRuntime",
    "ContainerSession",
    "wait_for_container_ready",
    "run_in_executor",
]
