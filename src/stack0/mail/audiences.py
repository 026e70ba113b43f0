"""
Audiences: named contact lists.
"""

from typing import Any, List, Optional

from ..core.query import with_query
from ..http import HTTPClient
from ..models import SuccessResponse, coerce_request
from .contact_models import (
    AddContactsResponse,
    Audience,
    CreateAudienceRequest,
    ListAudienceContactsRequest,
    ListAudienceContactsResponse,
    ListAudiencesRequest,
    ListAudiencesResponse,
    RemoveContactsResponse,
    UpdateAudienceRequest,
)


class AudiencesClient:
    def __init__(self, http: HTTPClient):
        self._http = http

    async def list(
        self, request: Optional[ListAudiencesRequest] = None, **filters: Any
    ) -> ListAudiencesResponse:
        request = coerce_request(ListAudiencesRequest, request, filters)
        return await self._http.get(
            with_query("/mail/audiences", request.to_query()), ListAudiencesResponse
        )

    async def get(self, id: str) -> Audience:
        return await self._http.get(f"/mail/audiences/{id}", Audience)

    async def create(
        self, request: Optional[CreateAudienceRequest] = None, **fields: Any
    ) -> Audience:
        request = coerce_request(CreateAudienceRequest, request, fields)
        return await self._http.post("/mail/audiences", request, Audience)

    async def update(
        self, request: Optional[UpdateAudienceRequest] = None, **fields: Any
    ) -> Audience:
        request = coerce_request(UpdateAudienceRequest, request, fields)
        return await self._http.put(f"/mail/audiences/{request.id}", request, Audience)

    async def delete(self, id: str) -> SuccessResponse:
        return await self._http.delete(f"/mail/audiences/{id}", SuccessResponse)

    async def list_contacts(
        self, request: Optional[ListAudienceContactsRequest] = None, **filters: Any
    ) -> ListAudienceContactsResponse:
        request = coerce_request(ListAudienceContactsRequest, request, filters)
        return await self._http.get(
            with_query(f"/mail/audiences/{request.id}/contacts", request.to_query()),
            ListAudienceContactsResponse,
        )

    async def add_contacts(self, id: str, contact_ids: List[str]) -> AddContactsResponse:
        return await self._http.post(
            f"/mail/audiences/{id}/contacts",
            {"contactIds": list(contact_ids)},
            AddContactsResponse,
        )

    async def remove_contacts(
        self, id: str, contact_ids: List[str]
    ) -> RemoveContactsResponse:
        return await self._http.delete(
            f"/mail/audiences/{id}/contacts",
            RemoveContactsResponse,
            {"contactIds": list(contact_ids)},
        )
