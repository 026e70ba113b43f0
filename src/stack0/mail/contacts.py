"""
Mail contacts.
"""

from typing import Any, Optional

from ..core.query import with_query
from ..http import HTTPClient
from ..models import SuccessResponse, coerce_request
from .contact_models import (
    CreateContactRequest,
    ImportContactsRequest,
    ImportContactsResponse,
    ListContactsRequest,
    ListContactsResponse,
    MailContact,
    UpdateContactRequest,
)


class ContactsClient:
    def __init__(self, http: HTTPClient):
        self._http = http

    async def list(
        self, request: Optional[ListContactsRequest] = None, **filters: Any
    ) -> ListContactsResponse:
        request = coerce_request(ListContactsRequest, request, filters)
        return await self._http.get(
            with_query("/mail/contacts", request.to_query()), ListContactsResponse
        )

    async def get(self, id: str) -> MailContact:
        return await self._http.get(f"/mail/contacts/{id}", MailContact)

    async def create(
        self, request: Optional[CreateContactRequest] = None, **fields: Any
    ) -> MailContact:
        request = coerce_request(CreateContactRequest, request, fields)
        return await self._http.post("/mail/contacts", request, MailContact)

    async def update(
        self, request: Optional[UpdateContactRequest] = None, **fields: Any
    ) -> MailContact:
        request = coerce_request(UpdateContactRequest, request, fields)
        return await self._http.put(f"/mail/contacts/{request.id}", request, MailContact)

    async def delete(self, id: str) -> SuccessResponse:
        return await self._http.delete(f"/mail/contacts/{id}", SuccessResponse)

    async def import_contacts(
        self, request: Optional[ImportContactsRequest] = None, **fields: Any
    ) -> ImportContactsResponse:
        """Create contacts in bulk. Existing addresses are counted as skipped."""
        request = coerce_request(ImportContactsRequest, request, fields)
        return await self._http.post(
            "/mail/contacts/import", request, ImportContactsResponse
        )
