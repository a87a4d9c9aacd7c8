"""Shared utilities for container operations."""

import asyncio
from typing import Awaitable, Callable

import structlog

logger = structlog.get_logger(__name__)


async def wait_for_container_ready(
    is_running: Callable[[], Awaitable[bool]],
    max_wait: float = 2.0,
    interval: float = 0.05,
    stable_checks_required: int = 3,
) -> bool:
    """
    Wait for a container to reach a stable running state.

    Uses polling with stability checks to ensure the container
    is truly running before returning.

    Args:
        is_running: Coroutine function reporting the container's running flag
        max_wait: Maximum time to wait in seconds
        interval: Polling interval in seconds
        stable_checks_required: Number of consecutive running checks required

    Returns:
        True if container is running, False otherwise
    """
    stable_checks = 0
    total_wait = 0.0

    while total_wait < max_wait:
        if await is_running():
            stable_checks += 1
            if stable_checks >= stable_checks_required:
                return True
        else:
            stable_checks = 0
        await asyncio.sleep(interval)
        total_wait += interval

    # Final check
    return await is_running()


async def run_in_executor(func, *args):
    """
    Run a blocking function in the default thread pool executor.

    Args:
        func: Blocking function to run
        *args: Arguments to pass to the function

    Returns:
        Result of the function
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, func, *args)
