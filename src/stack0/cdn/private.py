"""
Private file and download bundle endpoints of the CDN client.
"""

from typing import Any, List, Optional

from ..core.query import with_query
from ..http import HTTPClient
from ..models import SuccessResponse, coerce_request
from .models import DeleteAssetsResponse
from .private_models import (
    CreateBundleRequest,
    CreateBundleResponse,
    DownloadBundle,
    DownloadURLResponse,
    ListBundlesRequest,
    ListBundlesResponse,
    ListPrivateFilesRequest,
    ListPrivateFilesResponse,
    MovePrivateFilesRequest,
    MovePrivateFilesResponse,
    PrivateFile,
    PrivateUploadURLRequest,
    PrivateUploadURLResponse,
    UpdatePrivateFileRequest,
)


def _expiry_body(expires_in: Optional[int]) -> dict:
    return {} if expires_in is None else {"expiresIn": expires_in}


class PrivateFilesMixin:
    """Files served only through signed, expiring download URLs."""

    _http: HTTPClient

    async def get_private_upload_url(
        self, request: Optional[PrivateUploadURLRequest] = None, **fields: Any
    ) -> PrivateUploadURLResponse:
        request = coerce_request(PrivateUploadURLRequest, request, fields)
        return await self._http.post(
            "/cdn/private/upload", request, PrivateUploadURLResponse
        )

    async def confirm_private_upload(self, file_id: str) -> PrivateFile:
        return await self._http.post(
            f"/cdn/private/upload/{file_id}/confirm", {}, PrivateFile
        )

    async def get_private_download_url(
        self, file_id: str, expires_in: Optional[int] = None
    ) -> DownloadURLResponse:
        """Signed download URL, valid for ``expires_in`` seconds."""
        return await self._http.post(
            f"/cdn/private/{file_id}/download",
            _expiry_body(expires_in),
            DownloadURLResponse,
        )

    async def get_private_file(self, file_id: str) -> PrivateFile:
        return await self._http.get(f"/cdn/private/{file_id}", PrivateFile)

    async def update_private_file(
        self, request: Optional[UpdatePrivateFileRequest] = None, **fields: Any
    ) -> PrivateFile:
        request = coerce_request(UpdatePrivateFileRequest, request, fields)
        return await self._http.patch(
            f"/cdn/private/{request.file_id}", request, PrivateFile
        )

    async def delete_private_file(self, file_id: str) -> SuccessResponse:
        return await self._http.delete(
            f"/cdn/private/{file_id}", SuccessResponse, {"fileId": file_id}
        )

    async def delete_private_files(self, file_ids: List[str]) -> DeleteAssetsResponse:
        return await self._http.post(
            "/cdn/private/delete", {"fileIds": list(file_ids)}, DeleteAssetsResponse
        )

    async def list_private_files(
        self, request: Optional[ListPrivateFilesRequest] = None, **filters: Any
    ) -> ListPrivateFilesResponse:
        request = coerce_request(ListPrivateFilesRequest, request, filters)
        return await self._http.get(
            with_query("/cdn/private", request.to_query()), ListPrivateFilesResponse
        )

    async def move_private_files(
        self, request: Optional[MovePrivateFilesRequest] = None, **fields: Any
    ) -> MovePrivateFilesResponse:
        request = coerce_request(MovePrivateFilesRequest, request, fields)
        return await self._http.post(
            "/cdn/private/move", request, MovePrivateFilesResponse
        )

    async def create_bundle(
        self, request: Optional[CreateBundleRequest] = None, **fields: Any
    ) -> CreateBundleResponse:
        """Start building a zip of assets and private files."""
        request = coerce_request(CreateBundleRequest, request, fields)
        return await self._http.post("/cdn/bundles", request, CreateBundleResponse)

    async def get_bundle(self, bundle_id: str) -> DownloadBundle:
        return await self._http.get(f"/cdn/bundles/{bundle_id}", DownloadBundle)

    async def list_bundles(
        self, request: Optional[ListBundlesRequest] = None, **filters: Any
    ) -> ListBundlesResponse:
        request = coerce_request(ListBundlesRequest, request, filters)
        return await self._http.get(
            with_query("/cdn/bundles", request.to_query()), ListBundlesResponse
        )

    async def get_bundle_download_url(
        self, bundle_id: str, expires_in: Optional[int] = None
    ) -> DownloadURLResponse:
        return await self._http.post(
            f"/cdn/bundles/{bundle_id}/download",
            _expiry_body(expires_in),
            DownloadURLResponse,
        )

    async def delete_bundle(self, bundle_id: str) -> SuccessResponse:
        return await self._http.delete(
            f"/cdn/bundles/{bundle_id}", SuccessResponse, {"bundleId": bundle_id}
        )
