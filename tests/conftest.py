import json

import httpx
import pytest
import pytest_asyncio

from stack0 import Settings, Stack0

BASE_URL = "https://api.test"


class RecordingTransport:
    """Mock transport that records requests and replays queued responses.

    With nothing queued every request is answered ``200 {}``.
    """

    def __init__(self):
        self.requests = []
        self._responses = []
        self.mock = httpx.MockTransport(self._handle)

    def queue(self, status_code=200, json_body=None, text=None):
        self._responses.append((status_code, json_body, text))

    def queue_many(self, *bodies):
        for body in bodies:
            self.queue(json_body=body)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(200, json={})
        status_code, json_body, text = self._responses.pop(0)
        if text is not None:
            return httpx.Response(status_code, text=text)
        return httpx.Response(status_code, json=json_body if json_body is not None else {})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        content = self.last.content
        return json.loads(content) if content else None


@pytest.fixture
def settings():
    return Settings(_env_file=None, api_key=None, cdn_url=None, debug=False)


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest_asyncio.fixture
async def client(transport, settings):
    async with Stack0(
        api_key="test-key",
        base_url=BASE_URL,
        cdn_url="https://cdn.test",
        settings=settings,
        transport=transport.mock,
    ) as client:
        yield client
