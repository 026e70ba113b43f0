"""
Sending domains.
"""

from typing import Any, List, Optional

from ..core.query import with_query
from ..http import HTTPClient
from ..models import SuccessResponse, coerce_request
from .models import (
    AddDomainRequest,
    AddDomainResponse,
    Domain,
    GetDNSRecordsResponse,
    ListDomainsRequest,
    VerifyDomainResponse,
)


class DomainsClient:
    def __init__(self, http: HTTPClient):
        self._http = http

    async def list(
        self, request: Optional[ListDomainsRequest] = None, **filters: Any
    ) -> List[Domain]:
        """Domains of a project; ``project_slug`` is required."""
        request = coerce_request(ListDomainsRequest, request, filters)
        return await self._http.get(
            with_query("/mail/domains", request.to_query()), List[Domain]
        )

    async def add(self, domain: str) -> AddDomainResponse:
        """Register a domain. Publish the returned DNS records, then ``verify``."""
        return await self._http.post(
            "/mail/domains", AddDomainRequest(domain=domain), AddDomainResponse
        )

    async def get_dns_records(self, domain_id: str) -> GetDNSRecordsResponse:
        return await self._http.get(
            f"/mail/domains/{domain_id}/dns", GetDNSRecordsResponse
        )

    async def verify(self, domain_id: str) -> VerifyDomainResponse:
        return await self._http.post(
            f"/mail/domains/{domain_id}/verify", {}, VerifyDomainResponse
        )

    async def delete(self, domain_id: str) -> SuccessResponse:
        return await self._http.delete(f"/mail/domains/{domain_id}", SuccessResponse)

    async def set_default(self, domain_id: str) -> Domain:
        return await self._http.post(f"/mail/domains/{domain_id}/default", {}, Domain)
