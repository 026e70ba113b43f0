"""
Data models for the AI content extraction service.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import Field

from ..models import Cookie, Environment, RequestModel, ResponseModel, ScheduleFrequency


class ExtractionStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class ExtractionMode(str, Enum):
    AUTO = "auto"
    SCHEMA = "schema"
    MARKDOWN = "markdown"
    RAW = "raw"


class PageMetadata(ResponseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    og_image: Optional[str] = None
    favicon: Optional[str] = None
    links: Optional[List[str]] = None
    images: Optional[List[str]] = None


class ExtractionResult(ResponseModel):
    """An extraction job and, once completed, its output.

    Which of ``extracted_data``, ``markdown`` and ``raw_html`` is filled
    depends on the requested mode.
    """

    id: str
    organization_id: Optional[str] = None
    project_id: Optional[str] = None
    environment: Optional[Environment] = None
    url: str = ""
    mode: Optional[str] = None
    status: Union[ExtractionStatus, str] = Field(union_mode="left_to_right")
    extracted_data: Optional[Dict[str, Any]] = None
    markdown: Optional[str] = None
    raw_html: Optional[str] = None
    page_metadata: Optional[PageMetadata] = None
    error: Optional[str] = None
    processing_time_ms: Optional[int] = None
    tokens_used: Optional[int] = None
    metadata: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None


class CreateExtractionRequest(RequestModel):
    """Options for extracting one page.

    ``schema_`` is sent as ``schema`` and describes the JSON shape to extract
    in ``schema`` mode.
    """

    url: str
    environment: Optional[Environment] = None
    project_id: Optional[str] = None
    mode: Optional[ExtractionMode] = None
    schema_: Optional[Dict[str, Any]] = Field(default=None, alias="schema")
    prompt: Optional[str] = None
    include_links: Optional[bool] = None
    include_images: Optional[bool] = None
    include_metadata: Optional[bool] = None
    wait_for_selector: Optional[str] = None
    wait_for_timeout: Optional[int] = None
    headers: Optional[Dict[str, str]] = None
    cookies: Optional[List[Cookie]] = None
    webhook_url: Optional[str] = None
    webhook_secret: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class CreateExtractionResponse(ResponseModel):
    id: str
    status: Union[ExtractionStatus, str] = Field(union_mode="left_to_right")


class ListExtractionsRequest(RequestModel):
    environment: Optional[Environment] = None
    project_id: Optional[str] = None
    status: Optional[ExtractionStatus] = None
    url: Optional[str] = None
    limit: Optional[int] = None
    cursor: Optional[str] = None


class ListExtractionsResponse(ResponseModel):
    items: List[ExtractionResult] = Field(default_factory=list)
    next_cursor: Optional[str] = None


class BatchExtractionConfig(RequestModel):
    mode: Optional[ExtractionMode] = None
    schema_: Optional[Dict[str, Any]] = Field(default=None, alias="schema")
    prompt: Optional[str] = None
    include_links: Optional[bool] = None
    include_images: Optional[bool] = None
    include_metadata: Optional[bool] = None
    wait_for_selector: Optional[str] = None
    wait_for_timeout: Optional[int] = None


class CreateBatchExtractionsRequest(RequestModel):
    urls: List[str]
    environment: Optional[Environment] = None
    project_id: Optional[str] = None
    name: Optional[str] = None
    config: Optional[BatchExtractionConfig] = None
    webhook_url: Optional[str] = None
    webhook_secret: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class CreateExtractionScheduleRequest(RequestModel):
    name: str
    url: str
    environment: Optional[Environment] = None
    project_id: Optional[str] = None
    frequency: Optional[ScheduleFrequency] = None
    config: Optional[BatchExtractionConfig] = None
    detect_changes: Optional[bool] = None
    change_threshold: Optional[int] = None
    webhook_url: Optional[str] = None
    webhook_secret: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class GetUsageRequest(RequestModel):
    environment: Optional[Environment] = None
    period_start: Optional[Union[datetime, str]] = None
    period_end: Optional[Union[datetime, str]] = None


class ExtractionUsage(ResponseModel):
    period_start: Optional[datetime] = None
    period_end: Optional[datetime] = None
    extractions_total: int = 0
    extractions_successful: int = 0
    extractions_failed: int = 0
    extraction_credits_used: int = 0
    extraction_tokens_used: int = 0


class DailyUsageItem(ResponseModel):
    date: str
    screenshots: int = 0
    extractions: int = 0
    credits_used: int = 0


class GetDailyUsageResponse(ResponseModel):
    days: List[DailyUsageItem] = Field(default_factory=list)
