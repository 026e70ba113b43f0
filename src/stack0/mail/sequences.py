"""
Automated sequences, their nodes, connections and entries.
"""

from typing import Any, Optional

from ..core.query import with_query
from ..http import HTTPClient
from ..models import SuccessResponse, coerce_request
from .sequence_models import (
    CreateConnectionRequest,
    CreateNodeRequest,
    CreateSequenceRequest,
    ListSequenceEntriesRequest,
    ListSequenceEntriesResponse,
    ListSequencesRequest,
    ListSequencesResponse,
    RemoveContactFromSequenceRequest,
    Sequence,
    SequenceAnalyticsResponse,
    SequenceConnection,
    SequenceEntry,
    SequenceNode,
    SequenceWithNodes,
    SetNodeBranchRequest,
    SetNodeEmailRequest,
    SetNodeExperimentRequest,
    SetNodeFilterRequest,
    SetNodeTimerRequest,
    UpdateNodePositionRequest,
    UpdateNodeRequest,
    UpdateSequenceRequest,
)


class SequencesClient:
    """Build and run sequences.

    Node configuration endpoints (``set_node_email``, ``set_node_timer``, ...)
    all take the owning ``sequence_id`` and the ``node_id`` on the request.
    """

    def __init__(self, http: HTTPClient):
        self._http = http

    async def list(
        self, request: Optional[ListSequencesRequest] = None, **filters: Any
    ) -> ListSequencesResponse:
        request = coerce_request(ListSequencesRequest, request, filters)
        return await self._http.get(
            with_query("/mail/sequences", request.to_query()), ListSequencesResponse
        )

    async def get(self, id: str) -> SequenceWithNodes:
        """A sequence together with its nodes and connections."""
        return await self._http.get(f"/mail/sequences/{id}", SequenceWithNodes)

    async def create(
        self, request: Optional[CreateSequenceRequest] = None, **fields: Any
    ) -> Sequence:
        request = coerce_request(CreateSequenceRequest, request, fields)
        return await self._http.post("/mail/sequences", request, Sequence)

    async def update(
        self, request: Optional[UpdateSequenceRequest] = None, **fields: Any
    ) -> Sequence:
        request = coerce_request(UpdateSequenceRequest, request, fields)
        return await self._http.put(f"/mail/sequences/{request.id}", request, Sequence)

    async def delete(self, id: str) -> SuccessResponse:
        return await self._http.delete(f"/mail/sequences/{id}", SuccessResponse)

    async def publish(self, id: str) -> SuccessResponse:
        return await self._action(id, "publish")

    async def pause(self, id: str) -> SuccessResponse:
        return await self._action(id, "pause")

    async def resume(self, id: str) -> SuccessResponse:
        return await self._action(id, "resume")

    async def archive(self, id: str) -> SuccessResponse:
        return await self._action(id, "archive")

    async def _action(self, id: str, action: str) -> SuccessResponse:
        return await self._http.post(
            f"/mail/sequences/{id}/{action}", {}, SuccessResponse
        )

    async def duplicate(self, id: str, name: Optional[str] = None) -> Sequence:
        body = {} if name is None else {"name": name}
        return await self._http.post(f"/mail/sequences/{id}/duplicate", body, Sequence)

    async def create_node(
        self, request: Optional[CreateNodeRequest] = None, **fields: Any
    ) -> SequenceNode:
        request = coerce_request(CreateNodeRequest, request, fields)
        return await self._http.post(
            f"/mail/sequences/{request.sequence_id}/nodes", request, SequenceNode
        )

    async def update_node(
        self, request: Optional[UpdateNodeRequest] = None, **fields: Any
    ) -> SequenceNode:
        request = coerce_request(UpdateNodeRequest, request, fields)
        return await self._http.put(
            self._node_path(request.sequence_id, request.node_id), request, SequenceNode
        )

    async def update_node_position(
        self, request: Optional[UpdateNodePositionRequest] = None, **fields: Any
    ) -> SequenceNode:
        request = coerce_request(UpdateNodePositionRequest, request, fields)
        path = self._node_path(request.sequence_id, request.node_id) + "/position"
        return await self._http.put(path, request, SequenceNode)

    async def delete_node(self, sequence_id: str, node_id: str) -> SuccessResponse:
        return await self._http.delete(
            self._node_path(sequence_id, node_id), SuccessResponse
        )

    async def set_node_email(
        self, request: Optional[SetNodeEmailRequest] = None, **fields: Any
    ) -> SequenceNode:
        request = coerce_request(SetNodeEmailRequest, request, fields)
        return await self._configure_node(request, "email")

    async def set_node_timer(
        self, request: Optional[SetNodeTimerRequest] = None, **fields: Any
    ) -> SequenceNode:
        request = coerce_request(SetNodeTimerRequest, request, fields)
        return await self._configure_node(request, "timer")

    async def set_node_filter(
        self, request: Optional[SetNodeFilterRequest] = None, **fields: Any
    ) -> SequenceNode:
        request = coerce_request(SetNodeFilterRequest, request, fields)
        return await self._configure_node(request, "filter")

    async def set_node_branch(
        self, request: Optional[SetNodeBranchRequest] = None, **fields: Any
    ) -> SequenceNode:
        request = coerce_request(SetNodeBranchRequest, request, fields)
        return await self._configure_node(request, "branch")

    async def set_node_experiment(
        self, request: Optional[SetNodeExperimentRequest] = None, **fields: Any
    ) -> SequenceNode:
        request = coerce_request(SetNodeExperimentRequest, request, fields)
        return await self._configure_node(request, "experiment")

    async def _configure_node(self, request: Any, kind: str) -> SequenceNode:
        path = f"{self._node_path(request.sequence_id, request.node_id)}/{kind}"
        return await self._http.put(path, request, SequenceNode)

    @staticmethod
    def _node_path(sequence_id: str, node_id: str) -> str:
        return f"/mail/sequences/{sequence_id}/nodes/{node_id}"

    async def create_connection(
        self, request: Optional[CreateConnectionRequest] = None, **fields: Any
    ) -> SequenceConnection:
        request = coerce_request(CreateConnectionRequest, request, fields)
        return await self._http.post(
            f"/mail/sequences/{request.sequence_id}/connections",
            request,
            SequenceConnection,
        )

    async def delete_connection(
        self, sequence_id: str, connection_id: str
    ) -> SuccessResponse:
        return await self._http.delete(
            f"/mail/sequences/{sequence_id}/connections/{connection_id}",
            SuccessResponse,
        )

    async def list_entries(
        self, request: Optional[ListSequenceEntriesRequest] = None, **filters: Any
    ) -> ListSequenceEntriesResponse:
        request = coerce_request(ListSequenceEntriesRequest, request, filters)
        return await self._http.get(
            with_query(
                f"/mail/sequences/{request.sequence_id}/entries", request.to_query()
            ),
            ListSequenceEntriesResponse,
        )

    async def add_contact(self, sequence_id: str, contact_id: str) -> SequenceEntry:
        return await self._http.post(
            f"/mail/sequences/{sequence_id}/add-contact",
            {"contactId": contact_id},
            SequenceEntry,
        )

    async def remove_contact(
        self, request: Optional[RemoveContactFromSequenceRequest] = None, **fields: Any
    ) -> SuccessResponse:
        request = coerce_request(RemoveContactFromSequenceRequest, request, fields)
        return await self._http.post(
            f"/mail/sequences/{request.sequence_id}/remove-contact",
            request,
            SuccessResponse,
        )

    async def get_analytics(self, id: str) -> SequenceAnalyticsResponse:
        return await self._http.get(
            f"/mail/sequences/{id}/analytics", SequenceAnalyticsResponse
        )
