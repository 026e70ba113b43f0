"""
Tests for the completion poller and the "and wait" helpers built on it.
"""

import asyncio
import time

import pytest

from stack0.core.polling import (
    DEFAULT_BATCH_POLL_INTERVAL,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_TIMEOUT,
    poll_until,
    resolve_duration,
)
from stack0.exceptions import JobFailedError, JobTimeoutError
from stack0.models import BatchJobStatus
from stack0.screenshots import ScreenshotStatus


class Job:
    def __init__(self, status, error=None):
        self.status = status
        self.error = error


def sequence_of(*statuses):
    """A ``get`` callable that walks through ``statuses`` and counts calls."""
    calls = {"start": 0, "get": 0}
    remaining = list(statuses)

    async def start():
        calls["start"] += 1
        return "job_1"

    async def get(job_id):
        assert job_id == "job_1"
        calls["get"] += 1
        status = remaining.pop(0) if len(remaining) > 1 else remaining[0]
        return Job(status, error="Page load failed" if status == "failed" else None)

    return start, get, calls


class TestResolveDuration:
    def test_unset_uses_default(self):
        assert resolve_duration(None, DEFAULT_TIMEOUT) == DEFAULT_TIMEOUT

    def test_non_positive_uses_default(self):
        assert resolve_duration(0, DEFAULT_POLL_INTERVAL) == DEFAULT_POLL_INTERVAL
        assert resolve_duration(-1, DEFAULT_POLL_INTERVAL) == DEFAULT_POLL_INTERVAL

    def test_positive_is_kept(self):
        assert resolve_duration(0.25, DEFAULT_BATCH_POLL_INTERVAL) == 0.25


class TestPollUntil:
    @pytest.mark.asyncio
    async def test_returns_on_success(self):
        start, get, calls = sequence_of("pending", "processing", "completed")

        job = await poll_until(
            start,
            get,
            is_success=lambda job: job.status == "completed",
            is_failure=lambda job: job.status == "failed",
            poll_interval=0.001,
            timeout=1,
        )

        assert job.status == "completed"
        assert calls == {"start": 1, "get": 3}

    @pytest.mark.asyncio
    async def test_raises_on_failure_with_job_error(self):
        start, get, calls = sequence_of("pending", "failed")

        with pytest.raises(JobFailedError) as exc_info:
            await poll_until(
                start,
                get,
                is_success=lambda job: job.status == "completed",
                is_failure=lambda job: job.status == "failed",
                failure_message=lambda job: job.error or "Screenshot failed",
                poll_interval=0.001,
                timeout=1,
            )

        assert str(exc_info.value) == "Page load failed"
        assert exc_info.value.job.status == "failed"
        assert calls["get"] == 2

    @pytest.mark.asyncio
    async def test_times_out(self):
        start, get, calls = sequence_of("processing")

        began = time.monotonic()
        with pytest.raises(JobTimeoutError) as exc_info:
            await poll_until(
                start,
                get,
                is_success=lambda job: job.status == "completed",
                timeout_message="Screenshot timed out",
                poll_interval=0.01,
                timeout=0.05,
            )
        elapsed = time.monotonic() - began

        assert str(exc_info.value) == "stack0: timeout: Screenshot timed out"
        assert 0.05 <= elapsed < 1
        assert calls["start"] == 1
        assert calls["get"] >= 2

    @pytest.mark.asyncio
    async def test_cancellation_interrupts_sleep(self):
        start, get, calls = sequence_of("processing")

        task = asyncio.ensure_future(
            poll_until(
                start,
                get,
                is_success=lambda job: job.status == "completed",
                poll_interval=5,
                timeout=60,
            )
        )
        await asyncio.sleep(0.03)

        began = time.monotonic()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert time.monotonic() - began < 1
        assert calls["get"] == 1

    @pytest.mark.asyncio
    async def test_transport_errors_are_not_retried(self):
        async def start():
            return "job_1"

        async def get(job_id):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await poll_until(start, get, is_success=lambda job: True, timeout=1)


class TestScreenshotAndWait:
    @pytest.mark.asyncio
    async def test_capture_and_wait(self, client, transport):
        transport.queue_many(
            {"id": "ss_1", "status": "pending"},
            {"id": "ss_1", "status": "processing"},
            {"id": "ss_1", "status": "completed", "imageUrl": "https://img.test/ss_1.png"},
        )

        shot = await client.screenshots.capture_and_wait(
            url="https://example.com", poll_interval=0.001, timeout=1
        )

        assert shot.image_url == "https://img.test/ss_1.png"
        assert [r.method for r in transport.requests] == ["POST", "GET", "GET"]
        assert transport.requests[0].url.path == "/webdata/screenshots"
        assert transport.requests[1].url.path == "/webdata/screenshots/ss_1"

    @pytest.mark.asyncio
    async def test_capture_and_wait_scopes_polls(self, client, transport):
        transport.queue_many(
            {"id": "ss_1", "status": "pending"},
            {"id": "ss_1", "status": "completed"},
        )

        await client.screenshots.capture_and_wait(
            url="https://example.com",
            environment="production",
            project_id="prj_1",
            poll_interval=0.001,
        )

        params = transport.requests[1].url.params
        assert params["environment"] == "production"
        assert params["projectId"] == "prj_1"

    @pytest.mark.asyncio
    async def test_capture_failure(self, client, transport):
        transport.queue_many(
            {"id": "ss_1", "status": "pending"},
            {"id": "ss_1", "status": "failed", "error": "Page load failed"},
        )

        with pytest.raises(JobFailedError) as exc_info:
            await client.screenshots.capture_and_wait(
                url="https://example.com", poll_interval=0.001
            )

        assert exc_info.value.message == "Page load failed"

    @pytest.mark.asyncio
    async def test_capture_failure_without_error(self, client, transport):
        transport.queue_many(
            {"id": "ss_1", "status": "pending"},
            {"id": "ss_1", "status": "failed"},
        )

        with pytest.raises(JobFailedError, match="Screenshot failed"):
            await client.screenshots.capture_and_wait(
                url="https://example.com", poll_interval=0.001
            )

    @pytest.mark.asyncio
    async def test_unknown_status_keeps_polling(self, client, transport):
        transport.queue_many(
            {"id": "ss_1", "status": "pending"},
            {"id": "ss_1", "status": "queued"},
            {"id": "ss_1", "status": "completed", "imageUrl": "https://img.test/ss_1.png"},
        )

        shot = await client.screenshots.capture_and_wait(
            url="https://example.com", poll_interval=0.001, timeout=1
        )

        assert shot.status == ScreenshotStatus.COMPLETED
        assert shot.image_url == "https://img.test/ss_1.png"
        assert [r.method for r in transport.requests] == ["POST", "GET", "GET"]


class TestExtractAndWait:
    @pytest.mark.asyncio
    async def test_extract_and_wait(self, client, transport):
        transport.queue_many(
            {"id": "ex_1", "status": "pending"},
            {"id": "ex_1", "status": "completed", "markdown": "# Example"},
        )

        result = await client.extraction.extract_and_wait(
            url="https://example.com", mode="markdown", poll_interval=0.001
        )

        assert result.markdown == "# Example"
        assert transport.requests[0].url.path == "/webdata/extractions"
        assert transport.requests[1].url.path == "/webdata/extractions/ex_1"

    @pytest.mark.asyncio
    async def test_unknown_status_keeps_polling(self, client, transport):
        transport.queue_many(
            {"id": "ex_1", "status": "pending"},
            {"id": "ex_1", "status": "rendering"},
            {"id": "ex_1", "status": "completed", "markdown": "# Example"},
        )

        result = await client.extraction.extract_and_wait(
            url="https://example.com", poll_interval=0.001, timeout=1
        )

        assert result.markdown == "# Example"
        assert len(transport.requests) == 3

    @pytest.mark.asyncio
    async def test_extract_timeout(self, client, transport):
        transport.queue(json_body={"id": "ex_1", "status": "pending"})

        # Unqueued polls fall back to ``{}``, so keep answering "processing".
        for _ in range(50):
            transport.queue(json_body={"id": "ex_1", "status": "processing"})

        with pytest.raises(JobTimeoutError, match="Extraction timed out"):
            await client.extraction.extract_and_wait(
                url="https://example.com", poll_interval=0.01, timeout=0.05
            )


class TestBatchAndWait:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", ["completed", "failed", "cancelled"])
    async def test_any_terminal_status_returns(self, client, transport, status):
        transport.queue_many(
            {"id": "batch_1", "status": "pending", "totalUrls": 2},
            {"id": "batch_1", "status": "processing"},
            {"id": "batch_1", "status": status, "failedUrls": 1},
        )

        job = await client.screenshots.batch_and_wait(
            urls=["https://a.test", "https://b.test"], poll_interval=0.001
        )

        assert job.status == BatchJobStatus(status)
        assert job.failed_urls == 1
        assert transport.requests[0].url.path == "/webdata/batch/screenshots"
        assert transport.requests[1].url.path == "/webdata/batch/batch_1"

    @pytest.mark.asyncio
    async def test_batch_timeout(self, client, transport):
        transport.queue(json_body={"id": "batch_1", "status": "pending"})
        for _ in range(50):
            transport.queue(json_body={"id": "batch_1", "status": "processing"})

        with pytest.raises(JobTimeoutError, match="Batch job timed out"):
            await client.extraction.batch_and_wait(
                urls=["https://a.test"], poll_interval=0.01, timeout=0.05
            )

    @pytest.mark.asyncio
    async def test_unknown_status_is_not_terminal(self, client, transport):
        transport.queue_many(
            {"id": "batch_1", "status": "pending"},
            {"id": "batch_1", "status": "queued"},
            {"id": "batch_1", "status": "completed"},
        )

        job = await client.screenshots.batch_and_wait(
            urls=["https://a.test"], poll_interval=0.001, timeout=1
        )

        assert job.status == BatchJobStatus.COMPLETED
        assert len(transport.requests) == 3
