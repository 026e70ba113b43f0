"""
Batch and schedule endpoints shared by the screenshot and extraction clients.

Both services expose the same ``/webdata/batch`` and ``/webdata/schedules``
resources and tell them apart by a ``type`` discriminator, so one mixin
parameterized by that type serves both.
"""

from typing import Any, Dict, Optional

from .core.polling import (
    DEFAULT_BATCH_POLL_INTERVAL,
    DEFAULT_BATCH_TIMEOUT,
    poll_until,
    resolve_duration,
)
from .core.query import with_query
from .http import HTTPClient
from .models import (
    BatchJob,
    BatchJobsResponse,
    BatchJobStatus,
    CreateBatchResponse,
    CreateScheduleResponse,
    Environment,
    ListBatchJobsRequest,
    ListSchedulesRequest,
    RequestModel,
    Schedule,
    SchedulesResponse,
    SuccessResponse,
    ToggleResponse,
    UpdateScheduleRequest,
    coerce_request,
)

BATCH_TERMINAL_STATES = frozenset(
    {BatchJobStatus.COMPLETED, BatchJobStatus.FAILED, BatchJobStatus.CANCELLED}
)


def scope_params(
    environment: Optional[Environment] = None, project_id: Optional[str] = None
) -> Dict[str, Any]:
    """Query parameters that scope a request to an environment or project."""
    return {"environment": environment, "projectId": project_id}


def scoped_body(
    id: str, environment: Optional[Environment] = None, project_id: Optional[str] = None
) -> Dict[str, Any]:
    """Delete body echoing the id and whichever scoping fields were given."""
    body: Dict[str, Any] = {"id": id}
    if environment is not None:
        body["environment"] = getattr(environment, "value", environment)
    if project_id is not None:
        body["projectId"] = project_id
    return body


class WebDataJobsMixin:
    """Batch jobs and schedules for one web data job type."""

    _http: HTTPClient
    job_type: str

    async def _create_batch(self, request: RequestModel) -> CreateBatchResponse:
        return await self._http.post(
            f"/webdata/batch/{self.job_type}s", request, CreateBatchResponse
        )

    async def get_batch_job(
        self,
        id: str,
        *,
        environment: Optional[Environment] = None,
        project_id: Optional[str] = None,
    ) -> BatchJob:
        path = with_query(f"/webdata/batch/{id}", scope_params(environment, project_id))
        return await self._http.get(path, BatchJob)

    async def list_batch_jobs(
        self, request: Optional[ListBatchJobsRequest] = None, **filters: Any
    ) -> BatchJobsResponse:
        request = coerce_request(ListBatchJobsRequest, request, filters)
        params = {**request.to_query(), "type": self.job_type}
        return await self._http.get(with_query("/webdata/batch", params), BatchJobsResponse)

    async def cancel_batch_job(
        self,
        id: str,
        *,
        environment: Optional[Environment] = None,
        project_id: Optional[str] = None,
    ) -> SuccessResponse:
        path = with_query(
            f"/webdata/batch/{id}/cancel", scope_params(environment, project_id)
        )
        return await self._http.post(path, {}, SuccessResponse)

    async def _batch_and_wait(
        self,
        request: RequestModel,
        poll_interval: Optional[float],
        timeout: Optional[float],
    ) -> BatchJob:
        scope = request.to_body()
        environment = scope.get("environment")
        project_id = scope.get("projectId")

        async def fetch(created: CreateBatchResponse) -> BatchJob:
            return await self.get_batch_job(
                created.id, environment=environment, project_id=project_id
            )

        # A failed or cancelled batch is still a finished batch: the caller
        # inspects the per-URL counts.
        return await poll_until(
            lambda: self._create_batch(request),
            fetch,
            is_success=lambda job: job.status in BATCH_TERMINAL_STATES,
            timeout_message="Batch job timed out",
            poll_interval=resolve_duration(poll_interval, DEFAULT_BATCH_POLL_INTERVAL),
            timeout=resolve_duration(timeout, DEFAULT_BATCH_TIMEOUT),
        )

    async def _create_schedule(self, request: RequestModel) -> CreateScheduleResponse:
        body = {"type": self.job_type, **request.to_body()}
        return await self._http.post("/webdata/schedules", body, CreateScheduleResponse)

    async def update_schedule(
        self, request: Optional[UpdateScheduleRequest] = None, **fields: Any
    ) -> SuccessResponse:
        """Change only the schedule fields that were set."""
        request = coerce_request(UpdateScheduleRequest, request, fields)
        path = with_query(
            f"/webdata/schedules/{request.id}",
            scope_params(request.environment, request.project_id),
        )
        return await self._http.post(path, request, SuccessResponse)

    async def get_schedule(
        self,
        id: str,
        *,
        environment: Optional[Environment] = None,
        project_id: Optional[str] = None,
    ) -> Schedule:
        path = with_query(
            f"/webdata/schedules/{id}", scope_params(environment, project_id)
        )
        return await self._http.get(path, Schedule)

    async def list_schedules(
        self, request: Optional[ListSchedulesRequest] = None, **filters: Any
    ) -> SchedulesResponse:
        request = coerce_request(ListSchedulesRequest, request, filters)
        params = {**request.to_query(), "type": self.job_type}
        return await self._http.get(
            with_query("/webdata/schedules", params), SchedulesResponse
        )

    async def delete_schedule(
        self,
        id: str,
        *,
        environment: Optional[Environment] = None,
        project_id: Optional[str] = None,
    ) -> SuccessResponse:
        path = with_query(
            f"/webdata/schedules/{id}", scope_params(environment, project_id)
        )
        return await self._http.delete(
            path, SuccessResponse, scoped_body(id, environment, project_id)
        )

    async def toggle_schedule(
        self,
        id: str,
        *,
        environment: Optional[Environment] = None,
        project_id: Optional[str] = None,
    ) -> ToggleResponse:
        """Flip a schedule between active and paused."""
        path = with_query(
            f"/webdata/schedules/{id}/toggle", scope_params(environment, project_id)
        )
        return await self._http.post(path, {}, ToggleResponse)
