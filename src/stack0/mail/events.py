"""
Custom events: definitions, tracking and occurrences.
"""

from typing import Any, Optional

from ..core.query import with_query
from ..http import HTTPClient
from ..models import SuccessResponse, coerce_request
from .sequence_models import (
    BatchTrackEventsRequest,
    BatchTrackEventsResponse,
    CreateEventRequest,
    EventAnalyticsResponse,
    ListEventOccurrencesRequest,
    ListEventOccurrencesResponse,
    ListEventsRequest,
    ListEventsResponse,
    MailEvent,
    TrackEventRequest,
    TrackEventResponse,
    UpdateEventRequest,
)


class EventsClient:
    def __init__(self, http: HTTPClient):
        self._http = http

    async def list(
        self, request: Optional[ListEventsRequest] = None, **filters: Any
    ) -> ListEventsResponse:
        request = coerce_request(ListEventsRequest, request, filters)
        return await self._http.get(
            with_query("/mail/events", request.to_query()), ListEventsResponse
        )

    async def get(self, id: str) -> MailEvent:
        return await self._http.get(f"/mail/events/{id}", MailEvent)

    async def create(
        self, request: Optional[CreateEventRequest] = None, **fields: Any
    ) -> MailEvent:
        request = coerce_request(CreateEventRequest, request, fields)
        return await self._http.post("/mail/events", request, MailEvent)

    async def update(
        self, request: Optional[UpdateEventRequest] = None, **fields: Any
    ) -> MailEvent:
        request = coerce_request(UpdateEventRequest, request, fields)
        return await self._http.put(f"/mail/events/{request.id}", request, MailEvent)

    async def delete(self, id: str) -> SuccessResponse:
        return await self._http.delete(f"/mail/events/{id}", SuccessResponse)

    async def track(
        self, request: Optional[TrackEventRequest] = None, **fields: Any
    ) -> TrackEventResponse:
        """Record one occurrence; matching sequences start for the contact."""
        request = coerce_request(TrackEventRequest, request, fields)
        return await self._http.post("/mail/events/track", request, TrackEventResponse)

    async def track_batch(
        self, request: Optional[BatchTrackEventsRequest] = None, **fields: Any
    ) -> BatchTrackEventsResponse:
        request = coerce_request(BatchTrackEventsRequest, request, fields)
        return await self._http.post(
            "/mail/events/track/batch", request, BatchTrackEventsResponse
        )

    async def list_occurrences(
        self, request: Optional[ListEventOccurrencesRequest] = None, **filters: Any
    ) -> ListEventOccurrencesResponse:
        request = coerce_request(ListEventOccurrencesRequest, request, filters)
        return await self._http.get(
            with_query("/mail/events/occurrences", request.to_query()),
            ListEventOccurrencesResponse,
        )

    async def get_analytics(self, id: str) -> EventAnalyticsResponse:
        return await self._http.get(
            f"/mail/events/analytics/{id}", EventAnalyticsResponse
        )
