"""
Data models for CDN assets, folders and image transforms.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from ..models import RequestModel, ResponseModel, SortOrder


class AssetStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    READY = "ready"
    FAILED = "failed"
    DELETED = "deleted"


class AssetType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    DOCUMENT = "document"
    OTHER = "other"


class Asset(ResponseModel):
    """
    A file served through the CDN.

    Attributes:
        id: Asset identifier
        cdn_url: Public URL of the original file
        s3_key: Storage key, usable with ``CDNClient.get_transform_url``
        width: Pixel width, for images and videos
        height: Pixel height, for images and videos
        duration: Length in seconds, for audio and video

    Example:
        >>> asset = await client.cdn.get("asset_123")
        >>> print(asset.cdn_url, asset.status)
    """

    id: str
    filename: str = ""
    original_filename: str = ""
    mime_type: str = ""
    size: int = 0
    type: Optional[AssetType] = None
    s3_key: str = ""
    cdn_url: str = ""
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[float] = None
    status: Optional[AssetStatus] = None
    folder: Optional[str] = None
    tags: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None
    alt: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ImageWatermarkPosition(str, Enum):
    TOP_LEFT = "top-left"
    TOP_CENTER = "top-center"
    TOP_RIGHT = "top-right"
    CENTER_LEFT = "center-left"
    CENTER = "center"
    CENTER_RIGHT = "center-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_CENTER = "bottom-center"
    BOTTOM_RIGHT = "bottom-right"


class ImageWatermarkSizingMode(str, Enum):
    ABSOLUTE = "absolute"
    RELATIVE = "relative"


class ImageWatermarkConfig(RequestModel):
    """Watermark burned into an uploaded image. Give ``asset_id`` or ``url``."""

    asset_id: Optional[str] = None
    url: Optional[str] = None
    position: Optional[ImageWatermarkPosition] = None
    offset_x: Optional[int] = None
    offset_y: Optional[int] = None
    sizing_mode: Optional[ImageWatermarkSizingMode] = None
    width: Optional[int] = None
    height: Optional[int] = None
    opacity: Optional[int] = None
    rotation: Optional[int] = None
    tile: Optional[bool] = None
    tile_spacing: Optional[int] = None
    border_radius: Optional[int] = None


class UploadURLRequest(RequestModel):
    project_slug: str
    filename: str
    mime_type: str
    size: int
    folder: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    watermark: Optional[ImageWatermarkConfig] = None


class UploadURLResponse(ResponseModel):
    """Presigned upload target. PUT the file to ``upload_url``, then confirm."""

    upload_url: str
    asset_id: str
    cdn_url: str = ""
    expires_at: Optional[datetime] = None


class UpdateAssetRequest(RequestModel):
    id: str
    filename: Optional[str] = None
    folder: Optional[str] = None
    tags: Optional[List[str]] = None
    alt: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class DeleteAssetsResponse(ResponseModel):
    success: bool = False
    deleted_count: int = 0


class ListAssetsRequest(RequestModel):
    """Asset filters. ``tags`` are sent comma separated."""

    project_slug: str
    folder: Optional[str] = None
    type: Optional[AssetType] = None
    status: Optional[AssetStatus] = None
    search: Optional[str] = None
    tags: Optional[List[str]] = None
    sort_by: Optional[str] = None
    sort_order: Optional[SortOrder] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


class ListAssetsResponse(ResponseModel):
    assets: List[Asset] = Field(default_factory=list)
    total: int = 0
    has_more: bool = False


class MoveAssetsRequest(RequestModel):
    """Move assets into ``folder``. ``None`` moves them to the root."""

    asset_ids: List[str]
    folder: Optional[str]


class MoveAssetsResponse(ResponseModel):
    success: bool = False
    moved_count: int = 0


class TransformOptions(RequestModel):
    """
    Image transformation applied by the CDN edge.

    ``width`` is snapped to the nearest allowed width; every other value is
    passed through as given. Flags only take effect when true.
    """

    width: Optional[int] = None
    height: Optional[int] = None
    fit: Optional[str] = None
    format: Optional[str] = None
    quality: Optional[int] = None
    crop: Optional[str] = None
    crop_x: Optional[int] = None
    crop_y: Optional[int] = None
    crop_width: Optional[int] = None
    crop_height: Optional[int] = None
    blur: Optional[int] = None
    sharpen: Optional[int] = None
    brightness: Optional[int] = None
    saturation: Optional[int] = None
    grayscale: bool = False
    rotate: Optional[int] = None
    flip: bool = False
    flop: bool = False


class FolderTreeNode(ResponseModel):
    id: str
    name: str = ""
    path: str = ""
    asset_count: int = 0
    children: List["FolderTreeNode"] = Field(default_factory=list)


class FolderTreeResponse(ResponseModel):
    tree: List[FolderTreeNode] = Field(default_factory=list)


class GetFolderTreeRequest(RequestModel):
    project_slug: str
    max_depth: Optional[int] = None


class CreateFolderRequest(RequestModel):
    project_slug: str
    name: str
    parent_id: Optional[str] = None


class Folder(ResponseModel):
    id: str
    name: str = ""
    path: str = ""
    parent_id: Optional[str] = None
    asset_count: int = 0
    total_size: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UpdateFolderRequest(RequestModel):
    id: str
    name: Optional[str] = None


class ListFoldersRequest(RequestModel):
    parent_id: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    search: Optional[str] = None


class ListFoldersResponse(ResponseModel):
    folders: List[Folder] = Field(default_factory=list)
    total: int = 0
    has_more: bool = False


class MoveFolderRequest(RequestModel):
    """Reparent a folder. ``new_parent_id=None`` moves it to the root."""

    id: str
    new_parent_id: Optional[str]


class MoveFolderResponse(ResponseModel):
    success: bool = False
