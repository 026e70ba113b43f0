from .client import ExtractionClient
from .models import (
    BatchExtractionConfig,
    CreateBatchExtractionsRequest,
    CreateExtractionRequest,
    CreateExtractionResponse,
    CreateExtractionScheduleRequest,
    DailyUsageItem,
    ExtractionMode,
    ExtractionResult,
    ExtractionStatus,
    ExtractionUsage,
    GetDailyUsageResponse,
    GetUsageRequest,
    ListExtractionsRequest,
    ListExtractionsResponse,
    PageMetadata,
)

__all__ = [
    "ExtractionClient",
    "BatchExtractionConfig",
    "CreateBatchExtractionsRequest",
    "CreateExtractionRequest",
    "CreateExtractionResponse",
    "CreateExtractionScheduleRequest",
    "DailyUsageItem",
    "ExtractionMode",
    "ExtractionResult",
    "ExtractionStatus",
    "ExtractionUsage",
    "GetDailyUsageResponse",
    "GetUsageRequest",
    "ListExtractionsRequest",
    "ListExtractionsResponse",
    "PageMetadata",
]
