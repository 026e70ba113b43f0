"""
Tests for the CDN client: assets, folders, video, private files, imports and usage.
"""

import pytest
from pydantic import ValidationError

from stack0.cdn import MoveAssetsRequest, UpdateAssetRequest

ASSET = {"id": "asset_1", "filename": "a.jpg", "cdnUrl": "https://cdn.test/a.jpg", "status": "ready"}


class TestAssets:
    @pytest.mark.asyncio
    async def test_upload_flow(self, client, transport):
        transport.queue_many(
            {"uploadUrl": "https://s3.test/put", "assetId": "asset_1", "cdnUrl": "https://cdn.test/a.jpg"},
            ASSET,
        )

        upload = await client.cdn.get_upload_url(
            project_slug="my-app", filename="a.jpg", mime_type="image/jpeg", size=1024
        )
        assert upload.asset_id == "asset_1"
        assert transport.last_json() == {
            "projectSlug": "my-app",
            "filename": "a.jpg",
            "mimeType": "image/jpeg",
            "size": 1024,
        }

        asset = await client.cdn.confirm_upload(upload.asset_id)
        assert asset.status.value == "ready"
        assert transport.last.url.path == "/cdn/upload/asset_1/confirm"
        assert transport.last_json() == {}

    @pytest.mark.asyncio
    async def test_update_is_patch_with_id(self, client, transport):
        transport.queue(json_body=ASSET)

        await client.cdn.update(UpdateAssetRequest(id="asset_1", alt="A cat"))

        assert transport.last.method == "PATCH"
        assert transport.last.url.path == "/cdn/assets/asset_1"
        assert transport.last_json() == {"id": "asset_1", "alt": "A cat"}

    @pytest.mark.asyncio
    async def test_delete_sends_id_in_body(self, client, transport):
        transport.queue(json_body={"success": True})

        response = await client.cdn.delete("asset_1")

        assert response.success is True
        assert transport.last.method == "DELETE"
        assert transport.last.url.path == "/cdn/assets/asset_1"
        assert transport.last_json() == {"id": "asset_1"}

    @pytest.mark.asyncio
    async def test_delete_many(self, client, transport):
        transport.queue(json_body={"success": True, "deletedCount": 2})

        response = await client.cdn.delete_many(["a", "b"])

        assert response.deleted_count == 2
        assert transport.last.url.path == "/cdn/assets/delete"
        assert transport.last_json() == {"ids": ["a", "b"]}

    @pytest.mark.asyncio
    async def test_list_tags_are_comma_joined(self, client, transport):
        transport.queue(json_body={"assets": [ASSET], "total": 1, "hasMore": False})

        response = await client.cdn.list(
            project_slug="my-app", tags=["hero", "banner"], sort_order="desc", limit=20
        )

        assert response.assets[0].id == "asset_1"
        params = transport.last.url.params
        assert params["tags"] == "hero,banner"
        assert params["projectSlug"] == "my-app"
        assert params["sortOrder"] == "desc"
        assert "folder" not in params

    @pytest.mark.asyncio
    async def test_list_empty_tags_are_omitted(self, client, transport):
        await client.cdn.list(project_slug="my-app", tags=[])
        assert "tags" not in transport.last.url.params

    @pytest.mark.asyncio
    async def test_move_to_root_sends_null(self, client, transport):
        transport.queue(json_body={"success": True, "movedCount": 1})

        await client.cdn.move(asset_ids=["asset_1"], folder=None)

        assert transport.last_json() == {"assetIds": ["asset_1"], "folder": None}

    def test_move_requires_folder(self):
        with pytest.raises(ValidationError):
            MoveAssetsRequest(asset_ids=["asset_1"])


class TestFolders:
    @pytest.mark.asyncio
    async def test_tree_returns_nodes(self, client, transport):
        transport.queue(
            json_body={
                "tree": [
                    {"id": "f_1", "name": "images", "children": [{"id": "f_2", "name": "avatars"}]}
                ]
            }
        )

        tree = await client.cdn.get_folder_tree(project_slug="my-app", max_depth=2)

        assert tree[0].children[0].name == "avatars"
        assert transport.last.url.params["maxDepth"] == "2"

    @pytest.mark.asyncio
    async def test_get_by_path_escapes(self, client, transport):
        transport.queue(json_body={"id": "f_2", "name": "my photos"})

        await client.cdn.get_folder_by_path("images/my photos")

        assert transport.last.url.raw_path == b"/cdn/folders/path/images%2Fmy%20photos"

    @pytest.mark.asyncio
    async def test_move_folder_to_root(self, client, transport):
        await client.cdn.move_folder(id="f_2", new_parent_id=None)

        assert transport.last.url.path == "/cdn/folders/move"
        assert transport.last_json() == {"id": "f_2", "newParentId": None}

    @pytest.mark.asyncio
    async def test_delete_folder(self, client, transport):
        await client.cdn.delete_folder("f_1")
        assert transport.last.url.query == b""
        assert transport.last_json() == {"id": "f_1", "deleteContents": False}

        await client.cdn.delete_folder("f_1", delete_contents=True)
        assert transport.last.url.params["deleteContents"] == "true"
        assert transport.last_json() == {"id": "f_1", "deleteContents": True}


class TestVideo:
    @pytest.mark.asyncio
    async def test_transcode(self, client, transport):
        transport.queue(json_body={"id": "job_1", "status": "pending"})

        job = await client.cdn.transcode(
            project_slug="my-app",
            asset_id="asset_1",
            output_format="hls",
            variants=[{"quality": "720p"}, {"quality": "1080p", "codec": "h264"}],
        )

        assert job.id == "job_1"
        assert transport.last_json()["variants"] == [
            {"quality": "720p"},
            {"quality": "1080p", "codec": "h264"},
        ]

    @pytest.mark.asyncio
    async def test_thumbnail_query(self, client, transport):
        transport.queue(json_body={"url": "https://cdn.test/t.jpg", "timestamp": 1.5})

        await client.cdn.get_thumbnail(asset_id="asset_1", timestamp=1.5, width=320)

        assert transport.last.url.path == "/cdn/video/thumbnail/asset_1"
        assert dict(transport.last.url.params) == {"timestamp": "1.5", "width": "320"}

    @pytest.mark.asyncio
    async def test_list_gifs_returns_array(self, client, transport):
        transport.queue(json_body=[{"id": "gif_1", "assetId": "asset_1", "status": "completed"}])

        gifs = await client.cdn.list_gifs("asset_1")

        assert gifs[0].id == "gif_1"
        assert transport.last.url.path == "/cdn/video/asset_1/gifs"

    @pytest.mark.asyncio
    async def test_cancel_merge_job(self, client, transport):
        await client.cdn.cancel_merge_job("merge_1")
        assert transport.last.method == "POST"
        assert transport.last.url.path == "/cdn/video/merge/merge_1/cancel"


class TestPrivateFiles:
    @pytest.mark.asyncio
    async def test_download_url_expiry_is_optional(self, client, transport):
        transport.queue_many(
            {"downloadUrl": "https://s3.test/get", "expiresAt": "2024-01-01T00:00:00Z"},
            {"downloadUrl": "https://s3.test/get", "expiresAt": "2024-01-01T00:00:00Z"},
        )

        await client.cdn.get_private_download_url("file_1")
        assert transport.last_json() == {}

        await client.cdn.get_private_download_url("file_1", expires_in=600)
        assert transport.last_json() == {"expiresIn": 600}

    @pytest.mark.asyncio
    async def test_delete_sends_file_id(self, client, transport):
        await client.cdn.delete_private_file("file_1")

        assert transport.last.method == "DELETE"
        assert transport.last_json() == {"fileId": "file_1"}

    @pytest.mark.asyncio
    async def test_move_to_root(self, client, transport):
        await client.cdn.move_private_files(file_ids=["file_1"], folder=None)
        assert transport.last_json() == {"fileIds": ["file_1"], "folder": None}


class TestImportsAndUsage:
    @pytest.mark.asyncio
    async def test_retry_and_cancel_import(self, client, transport):
        await client.cdn.retry_import("imp_1")
        assert transport.last.url.path == "/cdn/imports/imp_1/retry"

        await client.cdn.cancel_import("imp_1")
        assert transport.last.url.path == "/cdn/imports/imp_1/cancel"

    @pytest.mark.asyncio
    async def test_list_import_files(self, client, transport):
        await client.cdn.list_import_files(import_id="imp_1", limit=10)

        assert transport.last.url.path == "/cdn/imports/imp_1/files"
        assert dict(transport.last.url.params) == {"limit": "10"}

    @pytest.mark.asyncio
    async def test_usage_query(self, client, transport):
        await client.cdn.get_usage(project_slug="my-app", environment="production")

        assert transport.last.url.path == "/cdn/usage"
        assert dict(transport.last.url.params) == {
            "environment": "production",
            "projectSlug": "my-app",
        }
