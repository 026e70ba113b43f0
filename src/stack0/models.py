"""
Data models shared across the Stack0 resource clients.

Every model is immutable. Request models serialize only the fields the caller
actually set, so "not specified" never reaches the API as ``null``; a field
explicitly set to ``None`` is sent as ``null``. Response models accept fields
this SDK does not know about yet.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

RequestT = TypeVar("RequestT", bound="RequestModel")


class Stack0Model(BaseModel):
    """Base for all wire models: snake_case attributes, camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class RequestModel(Stack0Model):
    """Base for request bodies and filter sets."""

    model_config = ConfigDict(extra="forbid")

    def to_body(self) -> Dict[str, Any]:
        """JSON body containing only the fields that were set."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def to_query(self) -> Dict[str, Any]:
        """Query parameters for the fields that carry a value."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ResponseModel(Stack0Model):
    """Base for decoded API responses."""

    model_config = ConfigDict(extra="allow")

    @model_validator(mode="before")
    @classmethod
    def _null_as_default(cls, data: Any) -> Any:
        """Read a JSON null in a field with a non-null default as that default."""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        for name, field in cls.model_fields.items():
            if field.is_required() or field.default is None:
                continue
            for key in {field.alias or name, name}:
                if key in data and data[key] is None:
                    del data[key]
        return data


def coerce_request(
    model: Type[RequestT], request: Optional[RequestT], fields: Mapping[str, Any]
) -> RequestT:
    """Accept either a ready request model or its fields as keyword arguments."""
    if request is not None:
        if fields:
            raise TypeError(
                f"Pass either a {model.__name__} or keyword arguments, not both"
            )
        return request
    return model(**fields)


class Environment(str, Enum):
    SANDBOX = "sandbox"
    PRODUCTION = "production"


class BatchJobStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


class ScheduleFrequency(str, Enum):
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class ErrorResponse(ResponseModel):
    """Error payload returned with any HTTP status of 400 or above."""

    message: str = ""
    code: Optional[str] = None


class SuccessResponse(ResponseModel):
    success: bool = False


class ToggleResponse(ResponseModel):
    is_active: bool = False


class Cookie(RequestModel):
    """Browser cookie sent with a capture or extraction."""

    name: str
    value: str
    domain: Optional[str] = None


class BatchJob(ResponseModel):
    """A batch of screenshot or extraction URLs processed together."""

    id: str
    organization_id: Optional[str] = None
    project_id: Optional[str] = None
    environment: Optional[Environment] = None
    type: Optional[str] = None
    name: Optional[str] = None
    status: Union[BatchJobStatus, str] = Field(union_mode="left_to_right")
    urls: List[str] = Field(default_factory=list)
    config: Dict[str, Any] = Field(default_factory=dict)
    total_urls: int = 0
    processed_urls: int = 0
    successful_urls: int = 0
    failed_urls: int = 0
    webhook_url: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None


class CreateBatchResponse(ResponseModel):
    id: str
    status: Optional[Union[BatchJobStatus, str]] = Field(
        default=None, union_mode="left_to_right"
    )
    total_urls: int = 0


class BatchJobsResponse(ResponseModel):
    items: List[BatchJob] = Field(default_factory=list)
    next_cursor: Optional[str] = None


class ListBatchJobsRequest(RequestModel):
    environment: Optional[Environment] = None
    project_id: Optional[str] = None
    status: Optional[BatchJobStatus] = None
    limit: Optional[int] = None
    cursor: Optional[str] = None


class Schedule(ResponseModel):
    """A recurring screenshot or extraction of one URL."""

    id: str
    organization_id: Optional[str] = None
    project_id: Optional[str] = None
    environment: Optional[Environment] = None
    name: str = ""
    url: str = ""
    type: Optional[str] = None
    frequency: Optional[ScheduleFrequency] = None
    config: Dict[str, Any] = Field(default_factory=dict)
    is_active: bool = False
    detect_changes: bool = False
    change_threshold: Optional[int] = None
    webhook_url: Optional[str] = None
    total_runs: int = 0
    successful_runs: int = 0
    failed_runs: int = 0
    last_run_at: Optional[datetime] = None
    next_run_at: Optional[datetime] = None
    metadata: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CreateScheduleResponse(ResponseModel):
    id: str


class SchedulesResponse(ResponseModel):
    items: List[Schedule] = Field(default_factory=list)
    next_cursor: Optional[str] = None


class ListSchedulesRequest(RequestModel):
    environment: Optional[Environment] = None
    project_id: Optional[str] = None
    is_active: Optional[bool] = None
    limit: Optional[int] = None
    cursor: Optional[str] = None


class UpdateScheduleRequest(RequestModel):
    """Changes to a schedule. ``id`` and the scoping fields go in the URL."""

    id: str = Field(exclude=True)
    environment: Optional[Environment] = Field(default=None, exclude=True)
    project_id: Optional[str] = Field(default=None, exclude=True)
    name: Optional[str] = None
    frequency: Optional[ScheduleFrequency] = None
    config: Optional[Dict[str, Any]] = None
    is_active: Optional[bool] = None
    detect_changes: Optional[bool] = None
    change_threshold: Optional[int] = None
    webhook_url: Optional[str] = None
    webhook_secret: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
