from .client import ScreenshotsClient
from .models import (
    BatchScreenshotConfig,
    Clip,
    CreateBatchScreenshotsRequest,
    CreateScreenshotRequest,
    CreateScreenshotResponse,
    CreateScreenshotScheduleRequest,
    DeviceType,
    ListScreenshotsRequest,
    ListScreenshotsResponse,
    ResourceType,
    Screenshot,
    ScreenshotFormat,
    ScreenshotStatus,
)

__all__ = [
    "ScreenshotsClient",
    "BatchScreenshotConfig",
    "Clip",
    "CreateBatchScreenshotsRequest",
    "CreateScreenshotRequest",
    "CreateScreenshotResponse",
    "CreateScreenshotScheduleRequest",
    "DeviceType",
    "ListScreenshotsRequest",
    "ListScreenshotsResponse",
    "ResourceType",
    "Screenshot",
    "ScreenshotFormat",
    "ScreenshotStatus",
]
