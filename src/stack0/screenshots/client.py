"""
Client for the webpage screenshot service.
"""

from typing import Any, Optional

from ..core.polling import DEFAULT_POLL_INTERVAL, DEFAULT_TIMEOUT, poll_until, resolve_duration
from ..core.query import with_query
from ..http import HTTPClient
from ..models import (
    BatchJob,
    CreateBatchResponse,
    CreateScheduleResponse,
    Environment,
    SuccessResponse,
    coerce_request,
)
from ..webdata import WebDataJobsMixin, scope_params, scoped_body
from .models import (
    CreateBatchScreenshotsRequest,
    CreateScreenshotRequest,
    CreateScreenshotResponse,
    CreateScreenshotScheduleRequest,
    ListScreenshotsRequest,
    ListScreenshotsResponse,
    Screenshot,
    ScreenshotStatus,
)


class ScreenshotsClient(WebDataJobsMixin):
    """Capture webpage screenshots, singly, in batches or on a schedule."""

    job_type = "screenshot"

    def __init__(self, http: HTTPClient):
        self._http = http

    async def capture(
        self, request: Optional[CreateScreenshotRequest] = None, **options: Any
    ) -> CreateScreenshotResponse:
        """Queue a capture. Returns immediately with the screenshot id."""
        request = coerce_request(CreateScreenshotRequest, request, options)
        return await self._http.post(
            "/webdata/screenshots", request, CreateScreenshotResponse
        )

    async def get(
        self,
        id: str,
        *,
        environment: Optional[Environment] = None,
        project_id: Optional[str] = None,
    ) -> Screenshot:
        path = with_query(
            f"/webdata/screenshots/{id}", scope_params(environment, project_id)
        )
        return await self._http.get(path, Screenshot)

    async def list(
        self, request: Optional[ListScreenshotsRequest] = None, **filters: Any
    ) -> ListScreenshotsResponse:
        request = coerce_request(ListScreenshotsRequest, request, filters)
        return await self._http.get(
            with_query("/webdata/screenshots", request.to_query()),
            ListScreenshotsResponse,
        )

    async def delete(
        self,
        id: str,
        *,
        environment: Optional[Environment] = None,
        project_id: Optional[str] = None,
    ) -> SuccessResponse:
        path = with_query(
            f"/webdata/screenshots/{id}", scope_params(environment, project_id)
        )
        return await self._http.delete(
            path, SuccessResponse, scoped_body(id, environment, project_id)
        )

    async def capture_and_wait(
        self,
        request: Optional[CreateScreenshotRequest] = None,
        *,
        poll_interval: Optional[float] = None,
        timeout: Optional[float] = None,
        **options: Any,
    ) -> Screenshot:
        """Capture a screenshot and wait until it is completed.

        Polls every ``poll_interval`` seconds (default 1) for at most
        ``timeout`` seconds (default 60).

        Raises:
            JobFailedError: The capture failed; the message is the job's error.
            JobTimeoutError: The capture was still running at the deadline.
        """
        request = coerce_request(CreateScreenshotRequest, request, options)

        async def fetch(created: CreateScreenshotResponse) -> Screenshot:
            return await self.get(
                created.id,
                environment=request.environment,
                project_id=request.project_id,
            )

        return await poll_until(
            lambda: self.capture(request),
            fetch,
            is_success=lambda shot: shot.status == ScreenshotStatus.COMPLETED,
            is_failure=lambda shot: shot.status == ScreenshotStatus.FAILED,
            failure_message=lambda shot: shot.error or "Screenshot failed",
            timeout_message="Screenshot timed out",
            poll_interval=resolve_duration(poll_interval, DEFAULT_POLL_INTERVAL),
            timeout=resolve_duration(timeout, DEFAULT_TIMEOUT),
        )

    async def batch(
        self, request: Optional[CreateBatchScreenshotsRequest] = None, **options: Any
    ) -> CreateBatchResponse:
        """Queue a batch of captures sharing one configuration."""
        request = coerce_request(CreateBatchScreenshotsRequest, request, options)
        return await self._create_batch(request)

    async def batch_and_wait(
        self,
        request: Optional[CreateBatchScreenshotsRequest] = None,
        *,
        poll_interval: Optional[float] = None,
        timeout: Optional[float] = None,
        **options: Any,
    ) -> BatchJob:
        """Queue a batch and wait until it is completed, failed or cancelled.

        The batch record is returned for every terminal status; inspect
        ``status`` and ``failed_urls`` to tell full from partial success.
        Defaults to polling every 2 seconds for at most 300 seconds.
        """
        request = coerce_request(CreateBatchScreenshotsRequest, request, options)
        return await self._batch_and_wait(request, poll_interval, timeout)

    async def create_schedule(
        self, request: Optional[CreateScreenshotScheduleRequest] = None, **options: Any
    ) -> CreateScheduleResponse:
        request = coerce_request(CreateScreenshotScheduleRequest, request, options)
        return await self._create_schedule(request)
