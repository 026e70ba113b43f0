"""
Root client for the Stack0 API.
"""

from typing import Optional

import httpx

from .cdn import CDNClient
from .config import Settings, get_settings
from .exceptions import ConfigurationError
from .extraction import ExtractionClient
from .http import HTTPClient
from .mail import MailClient
from .screenshots import ScreenshotsClient


class Stack0:
    """
    Entry point holding one client per API resource.

    All resource clients share a single connection pool; close the client
    (or use it as an async context manager) when done.

    Explicit arguments take precedence over ``STACK0_*`` environment
    variables and ``.env``.

    Example:
        >>> async with Stack0(api_key="sk_live_...") as client:
        ...     shot = await client.screenshots.capture_and_wait(url="https://example.com")
        ...     print(shot.image_url)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        cdn_url: Optional[str] = None,
        timeout: Optional[float] = None,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = settings or get_settings()
        if settings.debug:
            settings.setup_logging()

        api_key = api_key or settings.api_key
        if not api_key:
            raise ConfigurationError(
                "API key is required: pass api_key or set STACK0_API_KEY"
            )

        self.base_url = (base_url or settings.base_url).rstrip("/")
        self._http = HTTPClient(
            api_key,
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.timeout_seconds,
            transport=transport,
        )

        self.mail = MailClient(self._http)
        self.cdn = CDNClient(self._http, cdn_url=cdn_url or settings.cdn_url)
        self.screenshots = ScreenshotsClient(self._http)
        self.extraction = ExtractionClient(self._http)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        await self._http.close()
