"""
Usage reporting endpoints of the CDN client.
"""

from typing import Any, Optional

from ..core.query import with_query
from ..http import HTTPClient
from ..models import coerce_request
from .usage_models import (
    CdnStorageBreakdownRequest,
    CdnStorageBreakdownResponse,
    CdnUsageHistoryRequest,
    CdnUsageHistoryResponse,
    CdnUsageRequest,
    CdnUsageResponse,
)


class UsageMixin:
    _http: HTTPClient

    async def get_usage(
        self, request: Optional[CdnUsageRequest] = None, **filters: Any
    ) -> CdnUsageResponse:
        """Usage totals and estimated cost for a billing period."""
        request = coerce_request(CdnUsageRequest, request, filters)
        return await self._http.get(
            with_query("/cdn/usage", request.to_query()), CdnUsageResponse
        )

    async def get_usage_history(
        self, request: Optional[CdnUsageHistoryRequest] = None, **filters: Any
    ) -> CdnUsageHistoryResponse:
        request = coerce_request(CdnUsageHistoryRequest, request, filters)
        return await self._http.get(
            with_query("/cdn/usage/history", request.to_query()),
            CdnUsageHistoryResponse,
        )

    async def get_storage_breakdown(
        self, request: Optional[CdnStorageBreakdownRequest] = None, **filters: Any
    ) -> CdnStorageBreakdownResponse:
        request = coerce_request(CdnStorageBreakdownRequest, request, filters)
        return await self._http.get(
            with_query("/cdn/usage/storage-breakdown", request.to_query()),
            CdnStorageBreakdownResponse,
        )
