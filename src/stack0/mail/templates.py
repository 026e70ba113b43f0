"""
Reusable email templates.
"""

from typing import Any, Dict, Optional

from ..core.query import with_query
from ..http import HTTPClient
from ..models import SuccessResponse, coerce_request
from .models import (
    CreateTemplateRequest,
    ListTemplatesRequest,
    ListTemplatesResponse,
    PreviewTemplateResponse,
    Template,
    UpdateTemplateRequest,
)


class TemplatesClient:
    def __init__(self, http: HTTPClient):
        self._http = http

    async def list(
        self, request: Optional[ListTemplatesRequest] = None, **filters: Any
    ) -> ListTemplatesResponse:
        request = coerce_request(ListTemplatesRequest, request, filters)
        return await self._http.get(
            with_query("/mail/templates", request.to_query()), ListTemplatesResponse
        )

    async def get(self, id: str) -> Template:
        return await self._http.get(f"/mail/templates/{id}", Template)

    async def get_by_slug(self, slug: str) -> Template:
        return await self._http.get(f"/mail/templates/slug/{slug}", Template)

    async def create(
        self, request: Optional[CreateTemplateRequest] = None, **fields: Any
    ) -> Template:
        request = coerce_request(CreateTemplateRequest, request, fields)
        return await self._http.post("/mail/templates", request, Template)

    async def update(
        self, request: Optional[UpdateTemplateRequest] = None, **fields: Any
    ) -> Template:
        request = coerce_request(UpdateTemplateRequest, request, fields)
        return await self._http.put(f"/mail/templates/{request.id}", request, Template)

    async def delete(self, id: str) -> SuccessResponse:
        return await self._http.delete(f"/mail/templates/{id}", SuccessResponse)

    async def preview(
        self, id: str, variables: Optional[Dict[str, Any]] = None
    ) -> PreviewTemplateResponse:
        """Render a template with ``variables`` without sending it."""
        return await self._http.post(
            f"/mail/templates/{id}/preview",
            {"variables": dict(variables or {})},
            PreviewTemplateResponse,
        )
