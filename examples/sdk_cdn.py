#!/usr/bin/env python3
"""
CDN usage examples for Stack0.

Demonstrates the presigned upload flow for public assets and private files,
folder management and transform URLs for responsive images.
"""

import asyncio
import mimetypes
import os
from pathlib import Path

import httpx

from stack0 import APIError, Stack0

PROJECT_SLUG = os.getenv("STACK0_PROJECT_SLUG", "my-app")


async def upload_asset(client: Stack0, path: Path):
    """Upload a local file as a public asset."""
    print("=== Asset Upload ===")

    mime_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    data = path.read_bytes()

    upload = await client.cdn.get_upload_url(
        project_slug=PROJECT_SLUG,
        filename=path.name,
        mime_type=mime_type,
        size=len(data),
        folder="/examples",
    )

    # The presigned URL belongs to the storage provider, not the API.
    async with httpx.AsyncClient() as storage:
        response = await storage.put(
            upload.upload_url, content=data, headers={"Content-Type": mime_type}
        )
        response.raise_for_status()

    asset = await client.cdn.confirm_upload(upload.asset_id)
    print(f"✓ Uploaded {asset.filename} ({asset.status.value})")
    print(f"✓ CDN URL: {asset.cdn_url}")
    return asset


def responsive_srcset(client: Stack0, cdn_url: str) -> str:
    """Build a srcset from transform URLs."""
    print("\n=== Responsive Images ===")

    entries = []
    for width in (640, 1080, 1920):
        url = client.cdn.get_transform_url(cdn_url, width=width, format="webp", quality=80)
        entries.append(f"{url} {width}w")

    srcset = ", ".join(entries)
    print(f"✓ srcset: {srcset}")
    return srcset


async def organize_folders(client: Stack0):
    """Create a folder and print the project's folder tree."""
    print("\n=== Folders ===")

    try:
        folder = await client.cdn.create_folder(project_slug=PROJECT_SLUG, name="examples")
        print(f"✓ Created {folder.path}")
    except APIError as e:
        print(f"⚠️  Folder not created ({e.status_code}): {e.message}")

    def show(nodes, depth=0):
        for node in nodes:
            print(f"{'  ' * depth}- {node.name}")
            show(node.children, depth + 1)

    show(await client.cdn.get_folder_tree(project_slug=PROJECT_SLUG, max_depth=3))


async def private_file(client: Stack0, path: Path):
    """Upload a private file and hand out a short-lived download link."""
    print("\n=== Private Files ===")

    data = path.read_bytes()
    upload = await client.cdn.get_private_upload_url(
        project_slug=PROJECT_SLUG,
        filename=path.name,
        mime_type="application/octet-stream",
        size=len(data),
    )

    async with httpx.AsyncClient() as storage:
        response = await storage.put(upload.upload_url, content=data)
        response.raise_for_status()

    await client.cdn.confirm_private_upload(upload.file_id)
    link = await client.cdn.get_private_download_url(upload.file_id, expires_in=300)
    print(f"✓ Download link (5 min): {link.download_url}")


async def usage_report(client: Stack0):
    """Print CDN usage for the current period."""
    print("\n=== Usage ===")

    usage = await client.cdn.get_usage(project_slug=PROJECT_SLUG)
    print(f"✓ Requests: {usage.requests}")
    print(f"✓ Bandwidth: {usage.bandwidth_formatted or usage.bandwidth_bytes}")


async def main():
    """Run all CDN examples."""
    print("Stack0 SDK - CDN Examples")
    print("=" * 40)

    sample = Path(__file__)

    async with Stack0() as client:
        try:
            asset = await upload_asset(client, sample)
            responsive_srcset(client, asset.cdn_url)
        except (APIError, httpx.HTTPError) as e:
            print(f"❌ Upload failed: {e}")

        await organize_folders(client)
        await private_file(client, sample)
        await usage_report(client)

    print("\n✓ All examples completed!")


if __name__ == "__main__":
    asyncio.run(main())
