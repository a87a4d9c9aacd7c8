"""Pytest configuration and shared fixtures."""

import os
from unittest.mock import AsyncMock, MagicMock

import docker
import pytest

# Set test environment before importing config
# Use setdefault to allow environment variables to override defaults
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("LOG_FORMAT", "console")

from src.models.container import ConnectionMode
from src.services.container.client import DockerClientFactory
from src.services.container.runtime import DockerRuntime
from src.services.container.session import ContainerSession
from src.services.interfaces import ContainerRuntimeInterface


TEST_PORT = 37500
TEST_IMAGE = "ghcr.io/tscircuit/freerouting:master"


@pytest.fixture
def mock_runtime():
    """Mock container runtime whose calls all succeed."""
    runtime = AsyncMock(spec=ContainerRuntimeInterface)
    runtime.connection_mode = ConnectionMode.LOCAL_SOCKET
    runtime.base_url = None

    runtime.pull_image.return_value = {"status": "Status: Image is up to date"}
    runtime.create_container.return_value = "abc123"
    runtime.start_container.return_value = None
    runtime.kill_container.return_value = None
    runtime.remove_container.return_value = None
    runtime.inspect_container.return_value = {"State": {"Running": True}}
    runtime.ping.return_value = True
    runtime.close.return_value = None

    return runtime


@pytest.fixture
def mock_tcp_runtime(mock_runtime):
    """Mock runtime reaching the daemon over TCP, as on Windows."""
    mock_runtime.connection_mode = ConnectionMode.TCP
    mock_runtime.base_url = "tcp://localhost:2375"
    return mock_runtime


@pytest.fixture
def session(mock_runtime):
    """Container session on the test port with a mocked runtime."""
    return ContainerSession(TEST_PORT, runtime=mock_runtime, image=TEST_IMAGE)


@pytest.fixture
def mock_api_client():
    """Mock low-level Docker SDK client."""
    client = MagicMock(spec=docker.APIClient)

    client.pull.return_value = iter(
        [
            {"status": "Pulling from tscircuit/freerouting", "id": "master"},
            {"status": "Digest: sha256:0123"},
            {"status": "Status: Downloaded newer image for ghcr.io/tscircuit/freerouting:master"},
        ]
    )
    client.create_host_config.return_value = {"AutoRemove": True}
    client.create_container.return_value = {"Id": "abc123def4567890", "Warnings": []}
    client.start.return_value = None
    client.kill.return_value = None
    client.remove_container.return_value = None
    client.inspect_container.return_value = {"State": {"Running": True}}
    client.ping.return_value = True
    client.close.return_value = None

    return client


@pytest.fixture
def mock_factory(mock_api_client):
    """Client factory handing out the mock SDK client."""
    factory = MagicMock(spec=DockerClientFactory)
    factory.create_client.return_value = mock_api_client
    factory.get_base_url.return_value = None
    return factory


@pytest.fixture
def docker_runtime(mock_factory):
    """DockerRuntime wired to the mock SDK client."""
    return DockerRuntime(
        connection_mode=ConnectionMode.LOCAL_SOCKET, factory=mock_factory
    )
