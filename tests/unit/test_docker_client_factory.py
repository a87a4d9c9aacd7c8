"""Unit tests for DockerClientFactory."""

import pytest
from unittest.mock import MagicMock, patch

from src.config import DockerConfig
from src.models.container import ConnectionMode
from src.services.container.client import DockerClientFactory


def _config(**overrides) -> DockerConfig:
    values = {
        "freerouting_image": "ghcr.io/tscircuit/freerouting:master",
        "docker_base_url": None,
        "docker_tcp_host": "localhost",
        "docker_tcp_port": 2375,
        "docker_timeout_seconds": 30,
    }
    values.update(overrides)
    return DockerConfig(**values)


class TestConnectionMode:
    """Connection mode follows the host OS."""

    @pytest.mark.parametrize("platform", ["linux", "darwin", "freebsd13"])
    def test_socket_on_unix(self, platform):
        assert (
            DockerClientFactory.select_connection_mode(platform)
            == ConnectionMode.LOCAL_SOCKET
        )

    def test_tcp_on_windows(self):
        assert DockerClientFactory.select_connection_mode("win32") == ConnectionMode.TCP

    def test_uses_sys_platform(self):
        with patch("src.services.container.client.sys") as mock_sys:
            mock_sys.platform = "win32"
            assert DockerClientFactory.select_connection_mode() == ConnectionMode.TCP


class TestBaseUrl:
    """Daemon URL resolution."""

    def test_socket_uses_environment_default(self):
        factory = DockerClientFactory(_config())
        assert factory.get_base_url(ConnectionMode.LOCAL_SOCKET) is None

    def test_tcp_uses_fixed_local_endpoint(self):
        factory = DockerClientFactory(_config())
        assert factory.get_base_url(ConnectionMode.TCP) == "tcp://localhost:2375"

    def test_tcp_endpoint_configurable(self):
        factory = DockerClientFactory(_config(docker_tcp_host="127.0.0.1", docker_tcp_port=2376))
        assert factory.get_base_url(ConnectionMode.TCP) == "tcp://127.0.0.1:2376"

    @pytest.mark.parametrize("mode", list(ConnectionMode))
    def test_explicit_base_url_wins(self, mode):
        factory = DockerClientFactory(_config(docker_base_url="unix:///run/user/1000/docker.sock"))
        assert factory.get_base_url(mode) == "unix:///run/user/1000/docker.sock"


class TestCreateClient:
    """SDK client construction."""

    def test_socket_client_from_env(self):
        factory = DockerClientFactory(_config())
        mock_docker_client = MagicMock()

        with patch("docker.from_env", return_value=mock_docker_client) as mock_from_env:
            client = factory.create_client(ConnectionMode.LOCAL_SOCKET)

        mock_from_env.assert_called_once_with(timeout=30)
        assert client is mock_docker_client.api

    def test_tcp_client(self):
        factory = DockerClientFactory(_config())

        with patch("docker.APIClient") as mock_api_client:
            client = factory.create_client(ConnectionMode.TCP)

        mock_api_client.assert_called_once_with(base_url="tcp://localhost:2375", timeout=30)
        assert client is mock_api_client.return_value

    def test_unreachable_daemon_raises(self):
        from docker.errors import DockerException

        factory = DockerClientFactory(_config())

        with patch(
            "docker.APIClient",
            side_effect=DockerException("Error while fetching server API version"),
        ):
            with pytest.raises(DockerException):
                factory.create_client(ConnectionMode.TCP)
