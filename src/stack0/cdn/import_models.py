"""
Data models for bulk imports from external S3 buckets.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from ..models import Environment, RequestModel, ResponseModel, SortOrder


class ImportJobStatus(str, Enum):
    PENDING = "pending"
    VALIDATING = "validating"
    IMPORTING = "importing"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


class ImportAuthType(str, Enum):
    IAM_CREDENTIALS = "iam_credentials"
    ROLE_ASSUMPTION = "role_assumption"


class ImportPathMode(str, Enum):
    PRESERVE = "preserve"
    FLATTEN = "flatten"


class ImportFileStatus(str, Enum):
    PENDING = "pending"
    IMPORTING = "importing"
    COMPLETED = "completed"
    FAILED = "failed"
    SKIPPED = "skipped"


class ImportFailure(ResponseModel):
    """A source object that could not be imported."""

    key: str
    error: str
    timestamp: str = ""


class CreateImportRequest(RequestModel):
    """
    Import every object under ``source_prefix`` of an S3 bucket.

    With ``iam_credentials`` give ``access_key_id`` and ``secret_access_key``;
    with ``role_assumption`` give ``role_arn`` and optionally ``external_id``.
    """

    project_slug: str
    source_bucket: str
    source_region: str
    auth_type: ImportAuthType
    environment: Optional[Environment] = None
    source_prefix: Optional[str] = None
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    role_arn: Optional[str] = None
    external_id: Optional[str] = None
    path_mode: Optional[ImportPathMode] = None
    target_folder: Optional[str] = None
    notify_email: Optional[str] = None


class CreateImportResponse(ResponseModel):
    import_id: str
    status: ImportJobStatus
    source_bucket: str = ""
    source_region: str = ""
    source_prefix: Optional[str] = None
    created_at: Optional[datetime] = None


class ImportJobSummary(ResponseModel):
    id: str
    source_bucket: str = ""
    source_region: str = ""
    source_prefix: Optional[str] = None
    status: ImportJobStatus
    total_files: int = 0
    processed_files: int = 0
    skipped_files: int = 0
    failed_files: int = 0
    total_bytes: int = 0
    processed_bytes: int = 0
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None


class ImportJob(ImportJobSummary):
    organization_id: Optional[str] = None
    project_id: Optional[str] = None
    environment: Optional[Environment] = None
    auth_type: Optional[ImportAuthType] = None
    path_mode: Optional[ImportPathMode] = None
    target_folder: Optional[str] = None
    errors: Optional[List[ImportFailure]] = None
    notify_email: Optional[str] = None
    updated_at: Optional[datetime] = None


class ListImportsRequest(RequestModel):
    project_slug: str
    environment: Optional[Environment] = None
    status: Optional[ImportJobStatus] = None
    sort_by: Optional[str] = None
    sort_order: Optional[SortOrder] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


class ListImportsResponse(ResponseModel):
    imports: List[ImportJobSummary] = Field(default_factory=list)
    total: int = 0
    has_more: bool = False


class CancelImportResponse(ResponseModel):
    success: bool = False
    status: Optional[ImportJobStatus] = None


class RetryImportResponse(ResponseModel):
    success: bool = False
    retried_count: int = 0
    status: Optional[ImportJobStatus] = None


class ListImportFilesRequest(RequestModel):
    import_id: str = Field(exclude=True)
    status: Optional[ImportFileStatus] = None
    sort_by: Optional[str] = None
    sort_order: Optional[SortOrder] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


class ImportFile(ResponseModel):
    id: str
    import_job_id: str = ""
    source_key: str = ""
    source_size: int = 0
    source_mime_type: Optional[str] = None
    source_etag: Optional[str] = None
    asset_id: Optional[str] = None
    status: ImportFileStatus
    error_message: Optional[str] = None
    retry_count: int = 0
    last_attempt_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None


class ListImportFilesResponse(ResponseModel):
    files: List[ImportFile] = Field(default_factory=list)
    total: int = 0
    has_more: bool = False
