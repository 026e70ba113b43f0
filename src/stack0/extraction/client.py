"""
Client for the AI content extraction service.
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
    CreateBatchExtractionsRequest,
    CreateExtractionRequest,
    CreateExtractionResponse,
    CreateExtractionScheduleRequest,
    ExtractionResult,
    ExtractionStatus,
    ExtractionUsage,
    GetDailyUsageResponse,
    GetUsageRequest,
    ListExtractionsRequest,
    ListExtractionsResponse,
)


class ExtractionClient(WebDataJobsMixin):
    """Extract structured data, markdown or raw HTML from webpages."""

    job_type = "extraction"

    def __init__(self, http: HTTPClient):
        self._http = http

    async def extract(
        self, request: Optional[CreateExtractionRequest] = None, **options: Any
    ) -> CreateExtractionResponse:
        """Queue an extraction. Returns immediately with its id."""
        request = coerce_request(CreateExtractionRequest, request, options)
        return await self._http.post(
            "/webdata/extractions", request, CreateExtractionResponse
        )

    async def get(
        self,
        id: str,
        *,
        environment: Optional[Environment] = None,
        project_id: Optional[str] = None,
    ) -> ExtractionResult:
        path = with_query(
            f"/webdata/extractions/{id}", scope_params(environment, project_id)
        )
        return await self._http.get(path, ExtractionResult)

    async def list(
        self, request: Optional[ListExtractionsRequest] = None, **filters: Any
    ) -> ListExtractionsResponse:
        request = coerce_request(ListExtractionsRequest, request, filters)
        return await self._http.get(
            with_query("/webdata/extractions", request.to_query()),
            ListExtractionsResponse,
        )

    async def delete(
        self,
        id: str,
        *,
        environment: Optional[Environment] = None,
        project_id: Optional[str] = None,
    ) -> SuccessResponse:
        path = with_query(
            f"/webdata/extractions/{id}", scope_params(environment, project_id)
        )
        return await self._http.delete(
            path, SuccessResponse, scoped_body(id, environment, project_id)
        )

    async def extract_and_wait(
        self,
        request: Optional[CreateExtractionRequest] = None,
        *,
        poll_interval: Optional[float] = None,
        timeout: Optional[float] = None,
        **options: Any,
    ) -> ExtractionResult:
        """Extract a page and wait until the result is completed.

        Polls every ``poll_interval`` seconds (default 1) for at most
        ``timeout`` seconds (default 60).

        Raises:
            JobFailedError: The extraction failed; the message is the job's error.
            JobTimeoutError: The extraction was still running at the deadline.
        """
        request = coerce_request(CreateExtractionRequest, request, options)

        async def fetch(created: CreateExtractionResponse) -> ExtractionResult:
            return await self.get(
                created.id,
                environment=request.environment,
                project_id=request.project_id,
            )

        return await poll_until(
            lambda: self.extract(request),
            fetch,
            is_success=lambda result: result.status == ExtractionStatus.COMPLETED,
            is_failure=lambda result: result.status == ExtractionStatus.FAILED,
            failure_message=lambda result: result.error or "Extraction failed",
            timeout_message="Extraction timed out",
            poll_interval=resolve_duration(poll_interval, DEFAULT_POLL_INTERVAL),
            timeout=resolve_duration(timeout, DEFAULT_TIMEOUT),
        )

    async def batch(
        self, request: Optional[CreateBatchExtractionsRequest] = None, **options: Any
    ) -> CreateBatchResponse:
        request = coerce_request(CreateBatchExtractionsRequest, request, options)
        return await self._create_batch(request)

    async def batch_and_wait(
        self,
        request: Optional[CreateBatchExtractionsRequest] = None,
        *,
        poll_interval: Optional[float] = None,
        timeout: Optional[float] = None,
        **options: Any,
    ) -> BatchJob:
        """Queue a batch and wait until it is completed, failed or cancelled.

        Defaults to polling every 2 seconds for at most 300 seconds.
        """
        request = coerce_request(CreateBatchExtractionsRequest, request, options)
        return await self._batch_and_wait(request, poll_interval, timeout)

    async def create_schedule(
        self, request: Optional[CreateExtractionScheduleRequest] = None, **options: Any
    ) -> CreateScheduleResponse:
        request = coerce_request(CreateExtractionScheduleRequest, request, options)
        return await self._create_schedule(request)

    async def get_usage(
        self, request: Optional[GetUsageRequest] = None, **filters: Any
    ) -> ExtractionUsage:
        """Usage totals for the billing period."""
        request = coerce_request(GetUsageRequest, request, filters)
        return await self._http.get(
            with_query("/webdata/usage", request.to_query()), ExtractionUsage
        )

    async def get_usage_daily(
        self, request: Optional[GetUsageRequest] = None, **filters: Any
    ) -> GetDailyUsageResponse:
        request = coerce_request(GetUsageRequest, request, filters)
        return await self._http.get(
            with_query("/webdata/usage/daily", request.to_query()),
            GetDailyUsageResponse,
        )
