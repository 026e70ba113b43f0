"""
Campaigns: one-off sends to an audience.
"""

from typing import Any, Optional

from ..core.query import with_query
from ..http import HTTPClient
from ..models import SuccessResponse, coerce_request
from .contact_models import (
    Campaign,
    CampaignStatsResponse,
    CreateCampaignRequest,
    ListCampaignsRequest,
    ListCampaignsResponse,
    SendCampaignRequest,
    SendCampaignResponse,
    UpdateCampaignRequest,
)


class CampaignsClient:
    def __init__(self, http: HTTPClient):
        self._http = http

    async def list(
        self, request: Optional[ListCampaignsRequest] = None, **filters: Any
    ) -> ListCampaignsResponse:
        request = coerce_request(ListCampaignsRequest, request, filters)
        return await self._http.get(
            with_query("/mail/campaigns", request.to_query()), ListCampaignsResponse
        )

    async def get(self, id: str) -> Campaign:
        return await self._http.get(f"/mail/campaigns/{id}", Campaign)

    async def create(
        self, request: Optional[CreateCampaignRequest] = None, **fields: Any
    ) -> Campaign:
        request = coerce_request(CreateCampaignRequest, request, fields)
        return await self._http.post("/mail/campaigns", request, Campaign)

    async def update(
        self, request: Optional[UpdateCampaignRequest] = None, **fields: Any
    ) -> Campaign:
        request = coerce_request(UpdateCampaignRequest, request, fields)
        return await self._http.put(f"/mail/campaigns/{request.id}", request, Campaign)

    async def delete(self, id: str) -> SuccessResponse:
        return await self._http.delete(f"/mail/campaigns/{id}", SuccessResponse)

    async def send(
        self, request: Optional[SendCampaignRequest] = None, **fields: Any
    ) -> SendCampaignResponse:
        """Send a campaign now (``send_now=True``) or at ``scheduled_at``."""
        request = coerce_request(SendCampaignRequest, request, fields)
        return await self._http.post(
            f"/mail/campaigns/{request.id}/send", request, SendCampaignResponse
        )

    async def pause(self, id: str) -> SuccessResponse:
        return await self._http.post(f"/mail/campaigns/{id}/pause", {}, SuccessResponse)

    async def cancel(self, id: str) -> SuccessResponse:
        return await self._http.post(
            f"/mail/campaigns/{id}/cancel", {}, SuccessResponse
        )

    async def duplicate(self, id: str) -> Campaign:
        return await self._http.post(f"/mail/campaigns/{id}/duplicate", {}, Campaign)

    async def get_stats(self, id: str) -> CampaignStatsResponse:
        return await self._http.get(
            f"/mail/campaigns/{id}/stats", CampaignStatsResponse
        )
