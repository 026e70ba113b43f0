#!/usr/bin/env python3
"""
Basic SDK usage examples for Stack0.

Demonstrates sending mail, capturing a screenshot and extracting a page.
Set STACK0_API_KEY before running.
"""

import asyncio

from stack0 import APIError, JobFailedError, JobTimeoutError, Stack0
from stack0.mail import EmailAddress


async def send_email(client: Stack0):
    """Send a single transactional email."""
    print("=== Send Email ===")

    try:
        response = await client.mail.send(
            from_=EmailAddress(email="hello@example.com", name="Example"),
            to="ada@example.com",
            subject="Welcome aboard",
            html="<h1>Welcome</h1><p>Thanks for signing up.</p>",
            tags=["welcome"],
        )
        print(f"✓ Queued email {response.id} ({response.status})")

        email = await client.mail.get(response.id)
        print(f"✓ Current status: {email.status}")

    except APIError as e:
        print(f"❌ Send failed ({e.status_code}): {e.message}")


async def capture_screenshot(client: Stack0):
    """Capture a page and wait for the image."""
    print("\n=== Screenshot ===")

    try:
        shot = await client.screenshots.capture_and_wait(
            url="https://example.com",
            format="png",
            full_page=True,
            block_cookie_banners=True,
        )
        print(f"✓ Image: {shot.image_url}")
        print(f"✓ Size: {shot.image_width}x{shot.image_height}")

    except JobFailedError as e:
        print(f"❌ Capture failed: {e}")
    except JobTimeoutError:
        print("❌ Capture did not finish in time")


async def extract_markdown(client: Stack0):
    """Extract a page as markdown."""
    print("\n=== Extraction ===")

    try:
        result = await client.extraction.extract_and_wait(
            url="https://example.com",
            mode="markdown",
            include_metadata=True,
            timeout=90,
        )
        title = result.page_metadata.title if result.page_metadata else None
        print(f"✓ Title: {title}")

        markdown = result.markdown or ""
        preview = markdown[:200] + "..." if len(markdown) > 200 else markdown
        print(f"✓ Preview: {preview}")

    except JobFailedError as e:
        print(f"❌ Extraction failed: {e}")


def transform_urls(client: Stack0):
    """Build image transform URLs without touching the network."""
    print("\n=== Transform URLs ===")

    url = client.cdn.get_transform_url(
        "https://cdn.stack0.dev/org/prj/hero.jpg", width=1100, format="webp"
    )
    print(f"✓ Resized: {url}")

    url = client.cdn.get_transform_url(
        "https://cdn.stack0.dev/org/prj/hero.jpg", grayscale=True, blur=10
    )
    print(f"✓ Filtered: {url}")


async def main():
    """Run all basic examples."""
    print("Stack0 SDK - Basic Examples")
    print("=" * 40)

    async with Stack0() as client:
        await send_email(client)
        await capture_screenshot(client)
        await extract_markdown(client)
        transform_urls(client)

    print("\n✓ All examples completed!")


if __name__ == "__main__":
    asyncio.run(main())
