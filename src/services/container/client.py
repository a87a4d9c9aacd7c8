"""Docker client factory.

Linux and macOS reach the daemon through the default local socket
(``DOCKER_HOST`` and friends are honoured). Windows has no default socket
access from the SDK here, so the daemon is reached over TCP, which must be
enabled in Docker Desktop.
"""

import sys
from typing import Optional

import docker
import structlog

from ...config import settings, DockerConfig
from ...models.container import ConnectionMode

logger = structlog.get_logger(__name__)


class DockerClientFactory:
    """Builds low-level Docker SDK clients for a connection mode."""

    def __init__(self, config: Optional[DockerConfig] = None):
        self._config = config or settings.docker

    @staticmethod
    def select_connection_mode(platform: Optional[str] = None) -> ConnectionMode:
        """Pick the connection mode for the host OS."""
        platform = platform or sys.platform
        if platform.startswith("win"):
            return ConnectionMode.TCP
        return ConnectionMode.LOCAL_SOCKET

    def get_base_url(self, mode: ConnectionMode) -> Optional[str]:
        """Daemon URL for ``mode``.

        An explicit ``docker_base_url`` wins. None means "use the environment
        default", i.e. what ``docker.from_env()`` resolves.
        """
        if self._config.docker_base_url:
            return self._config.docker_base_url
        if mode == ConnectionMode.TCP:
            return self._config.get_tcp_url()
        return None

    def create_client(self, mode: ConnectionMode) -> docker.APIClient:
        """Create a low-level API client.

        The SDK negotiates the API version on construction, so this talks to
        the daemon and raises ``docker.errors.DockerException`` when it is
        unreachable.
        """
        base_url = self.get_base_url(mode)
        timeout = self._config.docker_timeout_seconds

        if base_url is None:
            client = docker.from_env(timeout=timeout).api
        else:
            client = docker.APIClient(base_url=base_url, timeout=timeout)

        logger.debug(
            "Docker client created",
            connection_mode=mode.value,
            base_url=base_url or "environment default",
            timeout=timeout,
        )
        return client
