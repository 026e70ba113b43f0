"""
Bulk S3 import endpoints of the CDN client.
"""

from typing import Any, Optional

from ..core.query import with_query
from ..http import HTTPClient
from ..models import coerce_request
from .import_models import (
    CancelImportResponse,
    CreateImportRequest,
    CreateImportResponse,
    ImportJob,
    ListImportFilesRequest,
    ListImportFilesResponse,
    ListImportsRequest,
    ListImportsResponse,
    RetryImportResponse,
)


class ImportsMixin:
    _http: HTTPClient

    async def create_import(
        self, request: Optional[CreateImportRequest] = None, **fields: Any
    ) -> CreateImportResponse:
        request = coerce_request(CreateImportRequest, request, fields)
        return await self._http.post("/cdn/imports", request, CreateImportResponse)

    async def get_import(self, import_id: str) -> ImportJob:
        return await self._http.get(f"/cdn/imports/{import_id}", ImportJob)

    async def list_imports(
        self, request: Optional[ListImportsRequest] = None, **filters: Any
    ) -> ListImportsResponse:
        request = coerce_request(ListImportsRequest, request, filters)
        return await self._http.get(
            with_query("/cdn/imports", request.to_query()), ListImportsResponse
        )

    async def cancel_import(self, import_id: str) -> CancelImportResponse:
        return await self._http.post(
            f"/cdn/imports/{import_id}/cancel", {}, CancelImportResponse
        )

    async def retry_import(self, import_id: str) -> RetryImportResponse:
        """Retry the files of an import that failed."""
        return await self._http.post(
            f"/cdn/imports/{import_id}/retry", {}, RetryImportResponse
        )

    async def list_import_files(
        self, request: Optional[ListImportFilesRequest] = None, **filters: Any
    ) -> ListImportFilesResponse:
        request = coerce_request(ListImportFilesRequest, request, filters)
        return await self._http.get(
            with_query(f"/cdn/imports/{request.import_id}/files", request.to_query()),
            ListImportFilesResponse,
        )
