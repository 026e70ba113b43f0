"""
Client for sending email and reading email history.
"""

from typing import Any, Optional

from ..config import get_logger
from ..core.query import with_query
from ..http import HTTPClient
from ..models import SuccessResponse, coerce_request
from .audiences import AudiencesClient
from .campaigns import CampaignsClient
from .contacts import ContactsClient
from .domains import DomainsClient
from .events import EventsClient
from .models import (
    EmailAnalyticsResponse,
    GetEmailResponse,
    HourlyAnalyticsResponse,
    ListEmailsRequest,
    ListEmailsResponse,
    ListSendersRequest,
    ListSendersResponse,
    ResendEmailResponse,
    SendBatchEmailRequest,
    SendBatchEmailResponse,
    SendBroadcastEmailRequest,
    SendBroadcastEmailResponse,
    SendEmailRequest,
    SendEmailResponse,
    TimeSeriesAnalyticsResponse,
)
from .sequences import SequencesClient
from .templates import TemplatesClient

logger = get_logger("mail")


class MailClient:
    """
    Transactional email plus the mail sub-resources.

    The sub-clients (``domains``, ``templates``, ``audiences``, ``contacts``,
    ``campaigns``, ``sequences``, ``events``) share this client's transport.

    Example:
        >>> sent = await client.mail.send(
        ...     from_="hi@example.com",
        ...     to="ada@example.com",
        ...     subject="Hello",
        ...     text="Hi Ada",
        ... )
        >>> print(sent.id, sent.status)
    """

    def __init__(self, http: HTTPClient):
        self._http = http
        self.domains = DomainsClient(http)
        self.templates = TemplatesClient(http)
        self.audiences = AudiencesClient(http)
        self.contacts = ContactsClient(http)
        self.campaigns = CampaignsClient(http)
        self.sequences = SequencesClient(http)
        self.events = EventsClient(http)

    async def send(
        self, request: Optional[SendEmailRequest] = None, **fields: Any
    ) -> SendEmailResponse:
        request = coerce_request(SendEmailRequest, request, fields)
        response = await self._http.post("/mail/send", request, SendEmailResponse)
        logger.debug("Sent email %s (%s)", response.id, response.status)
        return response

    async def send_batch(
        self, request: Optional[SendBatchEmailRequest] = None, **fields: Any
    ) -> SendBatchEmailResponse:
        """Send several distinct emails; ``data`` holds one result per email."""
        request = coerce_request(SendBatchEmailRequest, request, fields)
        return await self._http.post(
            "/mail/send/batch", request, SendBatchEmailResponse
        )

    async def send_broadcast(
        self, request: Optional[SendBroadcastEmailRequest] = None, **fields: Any
    ) -> SendBroadcastEmailResponse:
        """Send one email to many recipients, each receiving their own copy."""
        request = coerce_request(SendBroadcastEmailRequest, request, fields)
        return await self._http.post(
            "/mail/send/broadcast", request, SendBroadcastEmailResponse
        )

    async def get(self, id: str) -> GetEmailResponse:
        return await self._http.get(f"/mail/{id}", GetEmailResponse)

    async def list(
        self, request: Optional[ListEmailsRequest] = None, **filters: Any
    ) -> ListEmailsResponse:
        request = coerce_request(ListEmailsRequest, request, filters)
        return await self._http.get(
            with_query("/mail", request.to_query()), ListEmailsResponse
        )

    async def resend(self, id: str) -> ResendEmailResponse:
        return await self._http.post(f"/mail/{id}/resend", {}, ResendEmailResponse)

    async def cancel(self, id: str) -> SuccessResponse:
        """Cancel a scheduled email that has not been sent yet."""
        return await self._http.post(f"/mail/{id}/cancel", {}, SuccessResponse)

    async def get_analytics(self) -> EmailAnalyticsResponse:
        return await self._http.get("/mail/analytics", EmailAnalyticsResponse)

    async def get_time_series_analytics(
        self, days: Optional[int] = None
    ) -> TimeSeriesAnalyticsResponse:
        return await self._http.get(
            with_query("/mail/analytics/timeseries", {"days": days}),
            TimeSeriesAnalyticsResponse,
        )

    async def get_hourly_analytics(self) -> HourlyAnalyticsResponse:
        return await self._http.get("/mail/analytics/hourly", HourlyAnalyticsResponse)

    async def list_senders(
        self, request: Optional[ListSendersRequest] = None, **filters: Any
    ) -> ListSendersResponse:
        request = coerce_request(ListSendersRequest, request, filters)
        return await self._http.get(
            with_query("/mail/senders", request.to_query()), ListSendersResponse
        )
