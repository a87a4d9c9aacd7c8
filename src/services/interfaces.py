"""Service interfaces.

The container session talks to the daemon only through
``ContainerRuntimeInterface``, so the connection mode (local socket or TCP)
is decided once by whoever builds the runtime.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..models.container import ConnectionMode


class ContainerRuntimeInterface(ABC):
    """Interface for a container runtime client."""

    connection_mode: ConnectionMode

    @property
    @abstractmethod
    def base_url(self) -> Optional[str]:
        """Daemon URL, or None when the environment default is used."""
        pass

    @abstractmethod
    async def pull_image(self, image: str) -> Optional[Dict[str, Any]]:
        """Pull an image and wait for the progress stream to end.

        Returns the last progress event.
        """
        pass

    @abstractmethod
    async def create_container(self, image: str, port: int) -> str:
        """Create an auto-removing container publishing ``port`` on the same host port.

        Returns the container identifier.
        """
        pass

    @abstractmethod
    async def start_container(self, container_id: str) -> None:
        pass

    @abstractmethod
    async def kill_container(self, container_id: str) -> None:
        pass

    @abstractmethod
    async def remove_container(self, container_id: str) -> None:
        """Force-remove a container."""
        pass

    @abstractmethod
    async def inspect_container(self, container_id: str) -> Dict[str, Any]:
        """Return the daemon's inspect document for a container."""
        pass

    @abstractmethod
    async def ping(self) -> bool:
        """Check whether the daemon answers. Never raises."""
        pass

    @abstractmethod
    async def close(self) -> None:
        pass
