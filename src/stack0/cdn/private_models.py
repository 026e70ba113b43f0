"""
Data models for private files and download bundles.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from ..models import RequestModel, ResponseModel, SortOrder


class PrivateFileStatus(str, Enum):
    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"
    DELETED = "deleted"


class BundleStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    READY = "ready"
    FAILED = "failed"
    EXPIRED = "expired"


class PrivateFile(ResponseModel):
    """A file only reachable through short lived signed download URLs."""

    id: str
    filename: str = ""
    original_filename: str = ""
    mime_type: str = ""
    size: int = 0
    s3_key: str = ""
    folder: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None
    status: Optional[PrivateFileStatus] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PrivateUploadURLRequest(RequestModel):
    project_slug: str
    filename: str
    mime_type: str
    size: int
    folder: Optional[str] = None
    description: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class PrivateUploadURLResponse(ResponseModel):
    upload_url: str
    file_id: str
    expires_at: Optional[datetime] = None


class DownloadURLResponse(ResponseModel):
    download_url: str
    expires_at: Optional[datetime] = None


class ListPrivateFilesRequest(RequestModel):
    project_slug: str
    folder: Optional[str] = None
    status: Optional[PrivateFileStatus] = None
    search: Optional[str] = None
    sort_by: Optional[str] = None
    sort_order: Optional[SortOrder] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


class ListPrivateFilesResponse(ResponseModel):
    files: List[PrivateFile] = Field(default_factory=list)
    total: int = 0
    has_more: bool = False


class UpdatePrivateFileRequest(RequestModel):
    file_id: str
    description: Optional[str] = None
    folder: Optional[str] = None
    tags: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None


class MovePrivateFilesRequest(RequestModel):
    """Move files into ``folder``. ``None`` moves them to the root."""

    file_ids: List[str]
    folder: Optional[str]


class MovePrivateFilesResponse(ResponseModel):
    success: bool = False
    moved_count: int = 0


class DownloadBundle(ResponseModel):
    """A zip archive of assets and private files, built asynchronously."""

    id: str
    name: str = ""
    description: Optional[str] = None
    asset_ids: Optional[List[str]] = None
    private_file_ids: Optional[List[str]] = None
    s3_key: Optional[str] = None
    size: Optional[int] = None
    file_count: Optional[int] = None
    status: Optional[BundleStatus] = None
    error: Optional[str] = None
    expires_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None


class CreateBundleRequest(RequestModel):
    project_slug: str
    name: str
    description: Optional[str] = None
    asset_ids: Optional[List[str]] = None
    private_file_ids: Optional[List[str]] = None
    expires_in: Optional[int] = None


class CreateBundleResponse(ResponseModel):
    bundle: DownloadBundle


class ListBundlesRequest(RequestModel):
    project_slug: str
    status: Optional[BundleStatus] = None
    search: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


class ListBundlesResponse(ResponseModel):
    bundles: List[DownloadBundle] = Field(default_factory=list)
    total: int = 0
    has_more: bool = False
