"""
Bounded completion poller for job style endpoints.

A job is started once, then its status is fetched on a fixed interval until
it reaches a terminal state or the deadline passes. The wait between polls is
a plain ``asyncio.sleep``, so cancelling the awaiting task interrupts it at
once and ``asyncio.CancelledError`` reaches the caller unchanged.
"""

import asyncio
import time
from typing import Awaitable, Callable, Optional, TypeVar

from ..config import get_logger
from ..exceptions import JobFailedError, JobTimeoutError

logger = get_logger("polling")

StartT = TypeVar("StartT")
JobT = TypeVar("JobT")

# Single item jobs (one screenshot, one extraction)
DEFAULT_POLL_INTERVAL = 1.0
DEFAULT_TIMEOUT = 60.0

# Batch jobs
DEFAULT_BATCH_POLL_INTERVAL = 2.0
DEFAULT_BATCH_TIMEOUT = 300.0


def resolve_duration(value: Optional[float], default: float) -> float:
    """Use ``default`` unless a positive duration was given."""
    if value is None or value <= 0:
        return default
    return float(value)


async def poll_until(
    start: Callable[[], Awaitable[StartT]],
    get: Callable[[StartT], Awaitable[JobT]],
    *,
    is_success: Callable[[JobT], bool],
    is_failure: Callable[[JobT], bool] = lambda job: False,
    failure_message: Callable[[JobT], str] = lambda job: "Job failed",
    timeout_message: str = "Job timed out",
    poll_interval: float = DEFAULT_POLL_INTERVAL,
    timeout: float = DEFAULT_TIMEOUT,
) -> JobT:
    """Start a job and wait for it to reach a terminal state.

    Args:
        start: Coroutine factory that creates the job. Called exactly once.
        get: Fetches the current job record given the value ``start`` returned.
        is_success: True when the record is a terminal state to return.
        is_failure: True when the record is a terminal state to raise on.
        failure_message: Builds the :class:`JobFailedError` message.
        timeout_message: Message for the :class:`JobTimeoutError`.
        poll_interval: Seconds to sleep between status fetches.
        timeout: Seconds after which polling stops.

    Raises:
        JobFailedError: The job reported a failure terminal state.
        JobTimeoutError: The deadline passed first.
        TransportError: Either network call failed. Never retried.
    """
    started = await start()
    began = time.monotonic()
    polls = 0

    while time.monotonic() - began < timeout:
        job = await get(started)
        polls += 1

        status = getattr(job, "status", None)
        logger.debug(
            "Poll %d: job=%s status=%s elapsed=%.3fs",
            polls,
            getattr(job, "id", None),
            getattr(status, "value", status),
            time.monotonic() - began,
        )

        if is_success(job):
            return job
        if is_failure(job):
            raise JobFailedError(failure_message(job), job=job)

        await asyncio.sleep(poll_interval)

    raise JobTimeoutError(timeout_message)
