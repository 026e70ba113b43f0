#!/usr/bin/env python3
"""
Advanced SDK usage examples for Stack0.

Demonstrates batch jobs, concurrent requests, schedules, marketing
campaigns and error handling patterns.
"""

import asyncio
import time
from dataclasses import dataclass
from typing import List

from stack0 import APIError, BatchJobStatus, JobFailedError, NetworkError, Stack0, Stack0Error


@dataclass
class CaptureStats:
    """Statistics for concurrent capture runs."""

    total: int = 0
    successful: int = 0
    failed: int = 0
    total_time: float = 0.0

    @property
    def success_rate(self) -> float:
        return (self.successful / self.total * 100) if self.total > 0 else 0.0


async def concurrent_captures(client: Stack0, urls: List[str]):
    """Capture several pages concurrently with a bounded number in flight."""
    print("=== Concurrent Captures ===")

    stats = CaptureStats(total=len(urls))
    start_time = time.time()
    semaphore = asyncio.Semaphore(3)

    async def capture(url: str):
        async with semaphore:
            try:
                shot = await client.screenshots.capture_and_wait(
                    url=url, device_type="mobile", poll_interval=2
                )
                stats.successful += 1
                print(f"✓ {url} -> {shot.image_url}")
            except (JobFailedError, APIError) as e:
                stats.failed += 1
                print(f"❌ {url}: {e}")

    await asyncio.gather(*(capture(url) for url in urls))

    stats.total_time = time.time() - start_time
    print(f"✓ {stats.successful}/{stats.total} captured ({stats.success_rate:.0f}%)")
    print(f"✓ Took {stats.total_time:.1f}s")


async def batch_extraction(client: Stack0, urls: List[str]):
    """Run one server-side batch and inspect the per-URL counts."""
    print("\n=== Batch Extraction ===")

    job = await client.extraction.batch_and_wait(
        urls=urls,
        name="pricing-pages",
        config={
            "mode": "schema",
            "schema": {
                "type": "object",
                "properties": {"plan": {"type": "string"}, "price": {"type": "number"}},
            },
        },
    )

    # Failed and cancelled batches are returned too.
    if job.status == BatchJobStatus.COMPLETED:
        print(f"✓ Batch {job.id} completed")
    else:
        print(f"⚠️  Batch {job.id} ended as {job.status.value}")
    print(f"  - successful: {job.successful_urls}")
    print(f"  - failed: {job.failed_urls}")


async def monitoring_schedule(client: Stack0):
    """Create a daily screenshot schedule with change detection."""
    print("\n=== Schedules ===")

    created = await client.screenshots.create_schedule(
        name="Homepage monitor",
        url="https://example.com",
        frequency="daily",
        detect_changes=True,
        change_threshold=5,
    )
    print(f"✓ Created schedule {created.id}")

    toggled = await client.screenshots.toggle_schedule(created.id)
    print(f"✓ Active: {toggled.is_active}")

    schedules = await client.screenshots.list_schedules(limit=10)
    for schedule in schedules.items:
        print(f"  - {schedule.name}: {schedule.total_runs} runs")

    await client.screenshots.delete_schedule(created.id)
    print("✓ Cleaned up")


async def newsletter_campaign(client: Stack0):
    """Build an audience and send a campaign to it."""
    print("\n=== Campaign ===")

    audience = await client.mail.audiences.create(name="Beta testers")
    contact = await client.mail.contacts.create(email="ada@example.com", first_name="Ada")
    await client.mail.audiences.add_contacts(audience.id, [contact.id])

    campaign = await client.mail.campaigns.create(
        name="Beta launch",
        subject="The beta is open",
        from_email="news@example.com",
        html="<p>Come and try it, {{firstName}}.</p>",
        audience_id=audience.id,
    )
    sent = await client.mail.campaigns.send(id=campaign.id, send_now=True)
    print(f"✓ Campaign {campaign.id}: {sent.sent_count}/{sent.total_recipients} sent")

    stats = await client.mail.campaigns.get_stats(campaign.id)
    print(f"✓ Delivered: {stats.delivered}")


async def error_handling(client: Stack0):
    """Demonstrate the error hierarchy."""
    print("\n=== Error Handling ===")

    try:
        await client.mail.get("does-not-exist")
    except APIError as e:
        print(f"✓ API error {e.status_code}: {e.message}")
    except NetworkError as e:
        print(f"✓ Network error: {e}")

    try:
        await client.screenshots.capture_and_wait(url="https://example.com", timeout=0.5)
    except Stack0Error as e:
        print(f"✓ Caught {type(e).__name__}: {e}")


async def main():
    """Run all advanced examples."""
    print("Stack0 SDK - Advanced Examples")
    print("=" * 40)

    urls = [
        "https://example.com",
        "https://example.org",
        "https://example.net",
    ]

    async with Stack0() as client:
        await concurrent_captures(client, urls)
        await batch_extraction(client, urls)
        await monitoring_schedule(client)
        await newsletter_campaign(client)
        await error_handling(client)

    print("\n✓ All examples completed!")


if __name__ == "__main__":
    asyncio.run(main())
