"""Data models for the container runner."""

from .container import ConnectionMode, PortBinding, SessionInfo
from .errors import (
    ErrorType,
    ContainerRuntimeException,
    ContainerStartupError,
    PullError,
    CreateError,
    StartError,
    PullStreamError,
)

__all__ = [
    # Container models
    "ConnectionMode",
    "PortBinding",
    "SessionInfo",
    # Error models
    "ErrorType",
    "ContainerRuntimeException",
    "ContainerStartupError",
    "PullError",
    "CreateError",
    "StartError",
    "PullStreamError",
]
