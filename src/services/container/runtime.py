"""Docker SDK implementation of the container runtime interface.

Every SDK call is blocking, so each one runs in the default executor.
The SDK client is created on first use: constructing a runtime never
touches the daemon.
"""

import threading
from typing import Any, Dict, Optional

import docker
import structlog
from docker.utils import parse_repository_tag

from ...models.container import ConnectionMode, PortBinding
from ...models.errors import PullStreamError
from ..interfaces import ContainerRuntimeInterface
from .client import DockerClientFactory
from .utils import run_in_executor

logger = structlog.get_logger(__name__)


class DockerRuntime(ContainerRuntimeInterface):
    """Container runtime backed by ``docker.APIClient``."""

    def __init__(
        self,
        connection_mode: Optional[ConnectionMode] = None,
        factory: Optional[DockerClientFactory] = None,
    ):
        self._factory = factory or DockerClientFactory()
        self.connection_mode = (
            connection_mode or self._factory.select_connection_mode()
        )
        self._client: Optional[docker.APIClient] = None
        self._client_lock = threading.Lock()

    @property
    def base_url(self) -> Optional[str]:
        return self._factory.get_base_url(self.connection_mode)

    def _get_client(self) -> docker.APIClient:
        with self._client_lock:
            if self._client is None:
                self._client = self._factory.create_client(self.connection_mode)
            return self._client

    # -- pull ----------------------------------------------------------------

    async def pull_image(self, image: str) -> Optional[Dict[str, Any]]:
        return await run_in_executor(self._pull_image_sync, image)

    def _pull_image_sync(self, image: str) -> Optional[Dict[str, Any]]:
        repository, tag = parse_repository_tag(image)
        client = self._get_client()

        last_event: Optional[Dict[str, Any]] = None
        for event in client.pull(repository, tag=tag or "latest", stream=True, decode=True):
            if "error" in event:
                raise PullStreamError(
                    event.get("error") or "unknown pull error",
                    detail=event.get("errorDetail"),
                )
            last_event = event

        logger.debug(
            "Pull stream finished",
            image=image,
            status=(last_event or {}).get("status"),
        )
        return last_event

    # -- container lifecycle ---------------------------------------------------

    async def create_container(self, image: str, port: int) -> str:
        return await run_in_executor(self._create_container_sync, image, port)

    def _create_container_sync(self, image: str, port: int) -> str:
        client = self._get_client()
        binding = PortBinding(port)
        host_config = client.create_host_config(
            port_bindings=binding.host_port_bindings(),
            auto_remove=True,
        )
        response = client.create_container(
            image,
            ports=binding.container_ports(),
            host_config=host_config,
        )
        for warning in response.get("Warnings") or []:
            logger.warning("Docker create warning", image=image, warning=warning)
        return response.get("Id")

    async def start_container(self, container_id: str) -> None:
        await run_in_executor(self._get_client_call("start"), container_id)

    async def kill_container(self, container_id: str) -> None:
        await run_in_executor(self._get_client_call("kill"), container_id)

    async def remove_container(self, container_id: str) -> None:
        await run_in_executor(self._remove_container_sync, container_id)

    def _remove_container_sync(self, container_id: str) -> None:
        self._get_client().remove_container(container_id, force=True)

    async def inspect_container(self, container_id: str) -> Dict[str, Any]:
        return await run_in_executor(
            self._get_client_call("inspect_container"), container_id
        )

    def _get_client_call(self, name: str):
        def call(*args):
            return getattr(self._get_client(), name)(*args)

        return call

    # -- daemon ----------------------------------------------------------------

    async def ping(self) -> bool:
        try:
            return bool(await run_in_executor(self._get_client_call("ping")))
        except Exception as e:
            logger.debug(
                "Docker daemon not reachable",
                connection_mode=self.connection_mode.value,
                error=str(e),
            )
            return False

    async def close(self) -> None:
        with self._client_lock:
            client, self._client = self._client, None
        if client is not None:
            await run_in_executor(client.close)
