"""Container session data models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Tuple


class ConnectionMode(str, Enum):
    """How the runtime client reaches the Docker daemon."""

    LOCAL_SOCKET = "local_socket"
    TCP = "tcp"


@dataclass(frozen=True)
class PortBinding:
    """A container port published on the same host port."""

    port: int
    protocol: str = "tcp"

    @property
    def key(self) -> str:
        """Docker port key, e.g. ``37500/tcp``."""
        return f"{self.port}/{self.protocol}"

    def container_ports(self) -> List[Tuple[int, str]]:
        """``ports`` argument of ``APIClient.create_container``."""
        return [(self.port, self.protocol)]

    def host_port_bindings(self) -> Dict[str, str]:
        """``port_bindings`` argument of ``APIClient.create_host_config``."""
        return {self.key: str(self.port)}


@dataclass
class SessionInfo:
    """Point-in-time view of a container session."""

    port: int
    image: str
    connection_mode: ConnectionMode
    container_id: Optional[str] = None
    started_at: Optional[datetime] = None

    @property
    def has_container(self) -> bool:
        return self.container_id is not None

    def to_dict(self) -> dict:
        return {
            "port": self.port,
            "image": self.image,
            "connection_mode": self.connection_mode.value,
            "container_id": self.container_id,
            "started_at": self.started_at.isoformat() if self.started_at else None,
        }
