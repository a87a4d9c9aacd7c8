"""Freerouting container session.

A session owns at most one container: it pulls the image, runs it with the
session port published on the same host port, and kills it on stop. The
container is created with auto-remove, so killing it also deletes it.

Typical lifecycle::

    session = ContainerSession(37500)
    await session.start()          # pull + create + start
    await session.is_running()     # True
    await session.stop()           # kill, auto-removed by the daemon
"""

from datetime import datetime
from typing import Optional

import structlog

from ...config import settings
from ...models.container import ConnectionMode, SessionInfo
from ...models.errors import CreateError, ErrorType, PullError, StartError
from ..interfaces import ContainerRuntimeInterface
from .runtime import DockerRuntime
from .utils import wait_for_container_ready

logger = structlog.get_logger(__name__)


class ContainerSession:
    """Lifecycle of a single Freerouting container bound to one port.

    Not safe for concurrent use: ``start()`` and ``stop()`` must be driven
    by a single caller.
    """

    def __init__(
        self,
        port: int,
        runtime: Optional[ContainerRuntimeInterface] = None,
        image: Optional[str] = None,
    ):
        """Initialize the session.

        Args:
            port: Port exposed by the container and published on the host
            runtime: Runtime client; defaults to a DockerRuntime whose
                connection mode is picked from the host OS
            image: Image reference; defaults to ``settings.freerouting_image``
        """
        self.port = port
        self.image = image or settings.freerouting_image
        self._runtime = runtime or DockerRuntime()
        self._container_id: Optional[str] = None
        self._started_at: Optional[datetime] = None

        logger.info(
            "Container session initialized",
            port=port,
            image=self.image,
            connection_mode=self.connection_mode.value,
        )

    @property
    def connection_mode(self) -> ConnectionMode:
        return self._runtime.connection_mode

    @property
    def runtime(self) -> ContainerRuntimeInterface:
        return self._runtime

    def _tcp_url(self) -> Optional[str]:
        if self.connection_mode != ConnectionMode.TCP:
            return None
        base_url = self._runtime.base_url
        if base_url and base_url.startswith("tcp://"):
            return base_url
        return settings.get_docker_tcp_url()

    # -- lifecycle -----------------------------------------------------------

    async def start(self) -> str:
        """Pull the image, then create and start the container.

        Returns:
            The new container identifier

        Raises:
            PullError: The image could not be pulled
            CreateError: The daemon refused to create the container
            StartError: The container was created but did not start
        """
        if self._container_id is not None:
            # Not deduplicated: the previous container keeps running until
            # the caller stops it, and this session forgets it.
            logger.warning(
                "Session already has a container, starting another one",
                container_id=self._container_id[:12],
                port=self.port,
            )

        tcp_url = self._tcp_url()
        logger.info("Starting docker container", image=self.image, port=self.port)

        logger.info("Pulling docker image", image=self.image)
        try:
            await self._runtime.pull_image(self.image)
        except Exception as e:
            error = PullError(e, image=self.image, tcp_url=tcp_url)
            logger.error("Pull error", **error.to_dict())
            raise error from e
        logger.info("Pull completed", image=self.image)

        logger.info("Creating container", image=self.image, port=self.port)
        try:
            container_id = await self._runtime.create_container(self.image, self.port)
        except Exception as e:
            error = CreateError(e, image=self.image, tcp_url=tcp_url)
            logger.error("Failed to create container", port=self.port, **error.to_dict())
            raise error from e
        if not container_id:
            e = RuntimeError("Failed to create container")
            raise CreateError(e, image=self.image, tcp_url=tcp_url)

        try:
            await self._runtime.start_container(container_id)
        except Exception as e:
            error = StartError(e, image=self.image, tcp_url=tcp_url)
            logger.error(
                "Failed to start container",
                container_id=container_id[:12],
                **error.to_dict(),
            )
            await self._discard(container_id)
            raise error from e

        self._container_id = container_id
        self._started_at = datetime.utcnow()
        logger.info(
            "Container started", container_id=container_id[:12], port=self.port
        )
        return container_id

    async def _discard(self, container_id: str) -> None:
        """Remove a container that was created but never started."""
        try:
            await self._runtime.remove_container(container_id)
        except Exception as e:
            logger.warning(
                "Failed to remove unstarted container",
                container_id=container_id[:12],
                error=str(e),
            )

    async def stop(self) -> None:
        """Kill the container. Never raises.

        The recorded identifier is cleared whether or not the kill succeeds.
        """
        if not self._container_id:
            return

        container_id = self._container_id
        self._container_id = None
        self._started_at = None

        try:
            await self._runtime.kill_container(container_id)
            logger.info(
                "Docker container stopped and removed",
                container_id=container_id[:12],
            )
        except Exception as e:
            logger.warning(
                "Error stopping/removing container",
                container_id=container_id[:12],
                error_type=ErrorType.STOP_FAILED.value,
                error=str(e),
            )

    async def is_running(self) -> bool:
        """Whether the recorded container is running.

        Any inspection failure (e.g. the container is already gone) counts
        as not running.
        """
        container_id = self._container_id
        if not container_id:
            return False

        try:
            info = await self._runtime.inspect_container(container_id)
        except Exception as e:
            logger.debug(
                "Container inspect failed",
                container_id=container_id[:12],
                error_type=ErrorType.INSPECT_FAILED.value,
                error=str(e),
            )
            return False

        state = (info or {}).get("State") or {}
        return bool(state.get("Running", False))

    def get_container_id(self) -> Optional[str]:
        return self._container_id

    # -- helpers -------------------------------------------------------------

    async def wait_until_running(
        self,
        max_wait: Optional[float] = None,
        interval: Optional[float] = None,
        stable_checks_required: int = 3,
    ) -> bool:
        """Poll until the container reports running on consecutive checks.

        Defaults come from ``settings.docker``.
        """
        if not self._container_id:
            return False
        config = settings.docker
        return await wait_for_container_ready(
            self.is_running,
            max_wait=max_wait if max_wait is not None else config.docker_ready_timeout_seconds,
            interval=interval if interval is not None else config.docker_ready_poll_interval,
            stable_checks_required=stable_checks_required,
        )

    async def is_docker_available(self) -> bool:
        """Check whether the daemon answers."""
        return await self._runtime.ping()

    def info(self) -> SessionInfo:
        """Snapshot of the session state."""
        return SessionInfo(
            port=self.port,
            image=self.image,
            connection_mode=self.connection_mode,
            container_id=self._container_id,
            started_at=self._started_at,
        )

    async def close(self) -> None:
        """Stop the container, then release the runtime client."""
        await self.stop()
        await self._runtime.close()

    async def __aenter__(self) -> "ContainerSession":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()
