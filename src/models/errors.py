"""Error models and exception classes for the container runner."""

from enum import Enum
from typing import Optional


class ErrorType(str, Enum):
    """Error type enumeration."""

    PULL_FAILED = "pull_failed"
    CREATE_FAILED = "create_failed"
    START_FAILED = "start_failed"
    STOP_FAILED = "stop_failed"
    INSPECT_FAILED = "inspect_failed"
    INTERNAL = "internal"


TCP_SOCKET_HINT = (
    "For Windows, Docker must be running with TCP socket enabled: "
    "Go to Docker Desktop -> Settings -> General -> Enable "
    '"Expose daemon on {tcp_url} without TLS"'
)


# Custom Exception Classes


class ContainerRuntimeException(Exception):
    """Base exception for the container runner."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.INTERNAL,
        cause: Optional[BaseException] = None,
    ):
        self.message = message
        self.error_type = error_type
        self.cause = cause
        super().__init__(message)

    def to_dict(self) -> dict:
        """Serialize for structured logging."""
        return {
            "error": self.message,
            "error_type": self.error_type.value,
            "cause": str(self.cause) if self.cause is not None else None,
        }


class ContainerStartupError(ContainerRuntimeException):
    """A step of the pull/create/start sequence failed.

    The message always embeds the underlying daemon error. When the daemon
    is reached over TCP, it is prefixed with the remediation for a daemon
    that is not listening on that endpoint.
    """

    stage = "start"
    error_type_for_stage = ErrorType.START_FAILED

    def __init__(
        self,
        cause: BaseException,
        image: Optional[str] = None,
        tcp_url: Optional[str] = None,
    ):
        self.image = image
        self.tcp_url = tcp_url
        detail = self._default_message(cause)
        if tcp_url:
            detail = f"{TCP_SOCKET_HINT.format(tcp_url=tcp_url)} \n Error: {cause}"
        super().__init__(detail, error_type=self.error_type_for_stage, cause=cause)

    def _default_message(self, cause: BaseException) -> str:
        return f"Failed to start container: {cause}"

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update({"stage": self.stage, "image": self.image})
        return data


class PullError(ContainerStartupError):
    """Registry unreachable, image not found, or daemon not reachable over TCP."""

    stage = "pull"
    error_type_for_stage = ErrorType.PULL_FAILED

    def _default_message(self, cause: BaseException) -> str:
        return f"Failed to pull image {self.image}: {cause}"


class CreateError(ContainerStartupError):
    """The daemon rejected container creation (e.g. port already bound)."""

    stage = "create"
    error_type_for_stage = ErrorType.CREATE_FAILED


class StartError(ContainerStartupError):
    """The container was created but failed to start."""

    stage = "start"
    error_type_for_stage = ErrorType.START_FAILED


class PullStreamError(ContainerRuntimeException):
    """The daemon reported an error inside the pull progress stream."""

    def __init__(self, message: str, detail: Optional[dict] = None):
        self.detail = detail or {}
        super().__init__(message, error_type=ErrorType.PULL_FAILED)

