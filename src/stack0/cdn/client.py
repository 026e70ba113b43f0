"""
Client for CDN asset management.
"""

from typing import Any, List, Optional
from urllib.parse import quote

from ..core.query import with_query
from ..http import HTTPClient
from ..models import SuccessResponse, coerce_request
from .imports import ImportsMixin
from .models import (
    Asset,
    CreateFolderRequest,
    DeleteAssetsResponse,
    Folder,
    FolderTreeNode,
    FolderTreeResponse,
    GetFolderTreeRequest,
    ListAssetsRequest,
    ListAssetsResponse,
    ListFoldersRequest,
    ListFoldersResponse,
    MoveAssetsRequest,
    MoveAssetsResponse,
    MoveFolderRequest,
    MoveFolderResponse,
    TransformOptions,
    UpdateAssetRequest,
    UpdateFolderRequest,
    UploadURLRequest,
    UploadURLResponse,
)
from .private import PrivateFilesMixin
from .transform import build_transform_url
from .usage import UsageMixin
from .video import VideoMixin


class CDNClient(VideoMixin, PrivateFilesMixin, ImportsMixin, UsageMixin):
    """Upload, organize and transform CDN assets.

    ``cdn_url`` is only needed to build transform URLs from storage keys.
    """

    def __init__(self, http: HTTPClient, cdn_url: Optional[str] = None):
        self._http = http
        self.cdn_url = cdn_url

    async def get_upload_url(
        self, request: Optional[UploadURLRequest] = None, **fields: Any
    ) -> UploadURLResponse:
        """Presigned URL to PUT a new file to; confirm it afterwards."""
        request = coerce_request(UploadURLRequest, request, fields)
        return await self._http.post("/cdn/upload", request, UploadURLResponse)

    async def confirm_upload(self, asset_id: str) -> Asset:
        return await self._http.post(f"/cdn/upload/{asset_id}/confirm", {}, Asset)

    async def get(self, id: str) -> Asset:
        return await self._http.get(f"/cdn/assets/{id}", Asset)

    async def update(
        self, request: Optional[UpdateAssetRequest] = None, **fields: Any
    ) -> Asset:
        request = coerce_request(UpdateAssetRequest, request, fields)
        return await self._http.patch(f"/cdn/assets/{request.id}", request, Asset)

    async def delete(self, id: str) -> SuccessResponse:
        return await self._http.delete(f"/cdn/assets/{id}", SuccessResponse, {"id": id})

    async def delete_many(self, ids: List[str]) -> DeleteAssetsResponse:
        return await self._http.post(
            "/cdn/assets/delete", {"ids": list(ids)}, DeleteAssetsResponse
        )

    async def list(
        self, request: Optional[ListAssetsRequest] = None, **filters: Any
    ) -> ListAssetsResponse:
        request = coerce_request(ListAssetsRequest, request, filters)
        return await self._http.get(
            with_query("/cdn/assets", request.to_query()), ListAssetsResponse
        )

    async def move(
        self, request: Optional[MoveAssetsRequest] = None, **fields: Any
    ) -> MoveAssetsResponse:
        request = coerce_request(MoveAssetsRequest, request, fields)
        return await self._http.post("/cdn/assets/move", request, MoveAssetsResponse)

    def get_transform_url(
        self, asset: str, options: Optional[TransformOptions] = None, **fields: Any
    ) -> str:
        """Build an image transform URL without calling the API.

        ``asset`` is either a full asset URL or a storage key; storage keys
        require ``cdn_url``.

        Raises:
            ConfigurationError: A storage key was given without ``cdn_url``.
            TypeError: Both ``options`` and keyword options were given.
        """
        options = coerce_request(TransformOptions, options, fields)
        return build_transform_url(asset, options, self.cdn_url)

    async def get_folder_tree(
        self, request: Optional[GetFolderTreeRequest] = None, **fields: Any
    ) -> List[FolderTreeNode]:
        request = coerce_request(GetFolderTreeRequest, request, fields)
        response = await self._http.get(
            with_query("/cdn/folders/tree", request.to_query()), FolderTreeResponse
        )
        return response.tree

    async def create_folder(
        self, request: Optional[CreateFolderRequest] = None, **fields: Any
    ) -> Folder:
        request = coerce_request(CreateFolderRequest, request, fields)
        return await self._http.post("/cdn/folders", request, Folder)

    async def get_folder(self, id: str) -> Folder:
        return await self._http.get(f"/cdn/folders/{id}", Folder)

    async def get_folder_by_path(self, path: str) -> Folder:
        """Look a folder up by its full path, e.g. ``images/avatars``."""
        escaped = quote(path, safe="$&+,:;=@")
        return await self._http.get(f"/cdn/folders/path/{escaped}", Folder)

    async def update_folder(
        self, request: Optional[UpdateFolderRequest] = None, **fields: Any
    ) -> Folder:
        request = coerce_request(UpdateFolderRequest, request, fields)
        return await self._http.patch(f"/cdn/folders/{request.id}", request, Folder)

    async def list_folders(
        self, request: Optional[ListFoldersRequest] = None, **filters: Any
    ) -> ListFoldersResponse:
        request = coerce_request(ListFoldersRequest, request, filters)
        return await self._http.get(
            with_query("/cdn/folders", request.to_query()), ListFoldersResponse
        )

    async def move_folder(
        self, request: Optional[MoveFolderRequest] = None, **fields: Any
    ) -> MoveFolderResponse:
        request = coerce_request(MoveFolderRequest, request, fields)
        return await self._http.post("/cdn/folders/move", request, MoveFolderResponse)

    async def delete_folder(
        self, id: str, delete_contents: bool = False
    ) -> SuccessResponse:
        """Delete a folder, and with ``delete_contents`` every asset in it."""
        path = with_query(
            f"/cdn/folders/{id}", {"deleteContents": True if delete_contents else None}
        )
        return await self._http.delete(
            path, SuccessResponse, {"id": id, "deleteContents": delete_contents}
        )
