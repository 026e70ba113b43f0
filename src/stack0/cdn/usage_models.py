"""
Data models for CDN usage reporting.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from ..models import Environment, RequestModel, ResponseModel


class CdnUsageRequest(RequestModel):
    project_slug: Optional[str] = None
    environment: Optional[Environment] = None
    period_start: Optional[datetime] = None
    period_end: Optional[datetime] = None


class CdnUsageResponse(ResponseModel):
    period_start: Optional[datetime] = None
    period_end: Optional[datetime] = None
    requests: int = 0
    bandwidth_bytes: int = 0
    bandwidth_formatted: str = ""
    transformations: int = 0
    storage_bytes: int = 0
    storage_formatted: str = ""
    estimated_cost_cents: int = 0
    estimated_cost_formatted: str = ""


class CdnUsageHistoryRequest(RequestModel):
    project_slug: Optional[str] = None
    environment: Optional[Environment] = None
    days: Optional[int] = None
    granularity: Optional[str] = None


class CdnUsageDataPoint(ResponseModel):
    timestamp: datetime
    requests: int = 0
    bandwidth_bytes: int = 0
    transformations: int = 0


class CdnUsageHistoryTotals(ResponseModel):
    requests: int = 0
    bandwidth_bytes: int = 0
    transformations: int = 0


class CdnUsageHistoryResponse(ResponseModel):
    data: List[CdnUsageDataPoint] = Field(default_factory=list)
    totals: CdnUsageHistoryTotals = Field(default_factory=CdnUsageHistoryTotals)


class CdnStorageBreakdownRequest(RequestModel):
    project_slug: Optional[str] = None
    environment: Optional[Environment] = None
    group_by: Optional[str] = None


class CdnStorageBreakdownItem(ResponseModel):
    key: str
    count: int = 0
    size_bytes: int = 0
    size_formatted: str = ""
    percentage: float = 0


class CdnStorageBreakdownTotal(ResponseModel):
    count: int = 0
    size_bytes: int = 0
    size_formatted: str = ""


class CdnStorageBreakdownResponse(ResponseModel):
    items: List[CdnStorageBreakdownItem] = Field(default_factory=list)
    total: CdnStorageBreakdownTotal = Field(default_factory=CdnStorageBreakdownTotal)
