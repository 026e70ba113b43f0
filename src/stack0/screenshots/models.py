"""
Data models for the screenshot service.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import Field

from ..models import Cookie, Environment, RequestModel, ResponseModel, ScheduleFrequency


class ScreenshotStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class ScreenshotFormat(str, Enum):
    PNG = "png"
    JPEG = "jpeg"
    WEBP = "webp"
    PDF = "pdf"


class DeviceType(str, Enum):
    DESKTOP = "desktop"
    TABLET = "tablet"
    MOBILE = "mobile"


class ResourceType(str, Enum):
    """Resource classes the renderer can block."""

    IMAGE = "image"
    STYLESHEET = "stylesheet"
    SCRIPT = "script"
    FONT = "font"
    MEDIA = "media"
    XHR = "xhr"
    FETCH = "fetch"
    WEBSOCKET = "websocket"


class Clip(RequestModel):
    """Region of the page to capture, in CSS pixels."""

    x: int
    y: int
    width: int
    height: int


class Screenshot(ResponseModel):
    """A captured screenshot.

    ``image_url`` and the image dimensions are only present once ``status``
    is ``completed``; ``error`` is only present once it is ``failed``.
    A status this SDK does not know yet is kept as a plain string.
    """

    id: str
    organization_id: Optional[str] = None
    project_id: Optional[str] = None
    environment: Optional[Environment] = None
    url: str = ""
    format: Optional[ScreenshotFormat] = None
    quality: Optional[int] = None
    full_page: bool = False
    device_type: Optional[DeviceType] = None
    viewport_width: Optional[int] = None
    viewport_height: Optional[int] = None
    status: Union[ScreenshotStatus, str] = Field(union_mode="left_to_right")
    image_url: Optional[str] = None
    image_size: Optional[int] = None
    image_width: Optional[int] = None
    image_height: Optional[int] = None
    error: Optional[str] = None
    processing_time_ms: Optional[int] = None
    metadata: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None


class CreateScreenshotRequest(RequestModel):
    """Options for capturing one page."""

    url: str
    environment: Optional[Environment] = None
    project_id: Optional[str] = None
    format: Optional[ScreenshotFormat] = None
    quality: Optional[int] = None
    full_page: Optional[bool] = None
    device_type: Optional[DeviceType] = None
    viewport_width: Optional[int] = None
    viewport_height: Optional[int] = None
    device_scale_factor: Optional[int] = None
    wait_for_selector: Optional[str] = None
    wait_for_timeout: Optional[int] = None
    block_ads: Optional[bool] = None
    block_cookie_banners: Optional[bool] = None
    block_chat_widgets: Optional[bool] = None
    block_trackers: Optional[bool] = None
    block_urls: Optional[List[str]] = None
    block_resources: Optional[List[ResourceType]] = None
    dark_mode: Optional[bool] = None
    custom_css: Optional[str] = None
    custom_js: Optional[str] = None
    headers: Optional[Dict[str, str]] = None
    cookies: Optional[List[Cookie]] = None
    selector: Optional[str] = None
    hide_selectors: Optional[List[str]] = None
    click_selector: Optional[str] = None
    omit_background: Optional[bool] = None
    user_agent: Optional[str] = None
    clip: Optional[Clip] = None
    thumbnail_width: Optional[int] = None
    thumbnail_height: Optional[int] = None
    cache_key: Optional[str] = None
    cache_ttl: Optional[int] = None
    webhook_url: Optional[str] = None
    webhook_secret: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class CreateScreenshotResponse(ResponseModel):
    id: str
    status: Union[ScreenshotStatus, str] = Field(union_mode="left_to_right")


class ListScreenshotsRequest(RequestModel):
    environment: Optional[Environment] = None
    project_id: Optional[str] = None
    status: Optional[ScreenshotStatus] = None
    url: Optional[str] = None
    limit: Optional[int] = None
    cursor: Optional[str] = None


class ListScreenshotsResponse(ResponseModel):
    items: List[Screenshot] = Field(default_factory=list)
    next_cursor: Optional[str] = None


class BatchScreenshotConfig(RequestModel):
    """Capture options applied to every URL of a batch or schedule."""

    format: Optional[ScreenshotFormat] = None
    quality: Optional[int] = None
    full_page: Optional[bool] = None
    device_type: Optional[DeviceType] = None
    viewport_width: Optional[int] = None
    viewport_height: Optional[int] = None
    block_ads: Optional[bool] = None
    block_cookie_banners: Optional[bool] = None
    wait_for_selector: Optional[str] = None
    wait_for_timeout: Optional[int] = None


class CreateBatchScreenshotsRequest(RequestModel):
    urls: List[str]
    environment: Optional[Environment] = None
    project_id: Optional[str] = None
    name: Optional[str] = None
    config: Optional[BatchScreenshotConfig] = None
    webhook_url: Optional[str] = None
    webhook_secret: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class CreateScreenshotScheduleRequest(RequestModel):
    name: str
    url: str
    environment: Optional[Environment] = None
    project_id: Optional[str] = None
    frequency: Optional[ScheduleFrequency] = None
    config: Optional[BatchScreenshotConfig] = None
    detect_changes: Optional[bool] = None
    change_threshold: Optional[int] = None
    webhook_url: Optional[str] = None
    webhook_secret: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
