"""
Data models for automated sequences and the events that trigger them.

A sequence is a graph: nodes (emails, timers, filters, branches, ...) joined
by connections. Contacts enter at the trigger node and move along the
connections; each contact's progress is a ``SequenceEntry``.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from ..models import Environment, RequestModel, ResponseModel
from .contact_models import MailContact


class SequenceStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    PAUSED = "paused"
    ARCHIVED = "archived"


class SequenceTriggerType(str, Enum):
    MANUAL = "manual"
    EVENT_RECEIVED = "event_received"
    CONTACT_ADDED = "contact_added"
    API = "api"
    SCHEDULED = "scheduled"


class SequenceTriggerFrequency(str, Enum):
    ONCE = "once"
    ALWAYS = "always"


class SequenceNodeType(str, Enum):
    TRIGGER = "trigger"
    EMAIL = "email"
    TIMER = "timer"
    FILTER = "filter"
    BRANCH = "branch"
    EXPERIMENT = "experiment"
    EXIT = "exit"
    ADD_TO_LIST = "add_to_list"
    UPDATE_CONTACT = "update_contact"


class ConnectionType(str, Enum):
    DEFAULT = "default"
    YES = "yes"
    NO = "no"
    BRANCH = "branch"
    VARIANT = "variant"


class SequenceEntryStatus(str, Enum):
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"
    STOPPED = "stopped"
    FAILED = "failed"


class Sequence(ResponseModel):
    id: str
    organization_id: Optional[str] = None
    environment: Optional[str] = None
    name: str = ""
    description: Optional[str] = None
    trigger_type: Optional[SequenceTriggerType] = None
    trigger_frequency: Optional[SequenceTriggerFrequency] = None
    trigger_config: Optional[Dict[str, Any]] = None
    audience_filter_id: Optional[str] = None
    status: Optional[SequenceStatus] = None
    total_entered: int = 0
    total_completed: int = 0
    total_active: int = 0
    published_at: Optional[datetime] = None
    paused_at: Optional[datetime] = None
    archived_at: Optional[datetime] = None
    created_by_user_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SequenceNode(ResponseModel):
    id: str
    loop_id: Optional[str] = None
    node_type: Optional[SequenceNodeType] = None
    name: str = ""
    position_x: float = 0
    position_y: float = 0
    sort_order: int = 0
    config: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SequenceConnection(ResponseModel):
    id: str
    loop_id: Optional[str] = None
    source_node_id: str = ""
    target_node_id: str = ""
    connection_type: Optional[ConnectionType] = None
    label: Optional[str] = None
    created_at: Optional[datetime] = None


class SequenceWithNodes(Sequence):
    nodes: List[SequenceNode] = Field(default_factory=list)
    connections: List[SequenceConnection] = Field(default_factory=list)


class CreateSequenceRequest(RequestModel):
    environment: Optional[Environment] = None
    name: str
    description: Optional[str] = None
    trigger_type: SequenceTriggerType
    trigger_frequency: Optional[SequenceTriggerFrequency] = None
    trigger_config: Optional[Dict[str, Any]] = None
    audience_filter_id: Optional[str] = None


class UpdateSequenceRequest(RequestModel):
    id: str = Field(exclude=True)
    name: Optional[str] = None
    description: Optional[str] = None
    trigger_type: Optional[SequenceTriggerType] = None
    trigger_frequency: Optional[SequenceTriggerFrequency] = None
    trigger_config: Optional[Dict[str, Any]] = None
    audience_filter_id: Optional[str] = None


class ListSequencesRequest(RequestModel):
    environment: Optional[Environment] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    search: Optional[str] = None
    status: Optional[SequenceStatus] = None
    trigger_type: Optional[SequenceTriggerType] = None


class ListSequencesResponse(ResponseModel):
    sequences: List[Sequence] = Field(default_factory=list)
    total: int = 0
    limit: int = 0
    offset: int = 0


class CreateNodeRequest(RequestModel):
    sequence_id: str = Field(exclude=True)
    node_type: SequenceNodeType
    name: str
    position_x: float
    position_y: float
    sort_order: Optional[int] = None
    config: Optional[Dict[str, Any]] = None


class UpdateNodeRequest(RequestModel):
    sequence_id: str = Field(exclude=True)
    node_id: str = Field(exclude=True)
    name: Optional[str] = None
    position_x: Optional[float] = None
    position_y: Optional[float] = None
    sort_order: Optional[int] = None
    config: Optional[Dict[str, Any]] = None


class UpdateNodePositionRequest(RequestModel):
    sequence_id: str = Field(exclude=True)
    node_id: str = Field(exclude=True)
    position_x: float
    position_y: float


class SetNodeEmailRequest(RequestModel):
    sequence_id: str = Field(exclude=True)
    node_id: str = Field(exclude=True)
    subject: Optional[str] = None
    preview_text: Optional[str] = None
    html: Optional[str] = None
    text: Optional[str] = None
    template_id: Optional[str] = None
    maily_json: Optional[Dict[str, Any]] = None
    from_email: Optional[str] = None
    from_name: Optional[str] = None
    reply_to: Optional[str] = None


class DelayUnit(str, Enum):
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"


class SetNodeTimerRequest(RequestModel):
    """Wait ``delay_amount`` units, optionally until a time of day."""

    sequence_id: str = Field(exclude=True)
    node_id: str = Field(exclude=True)
    delay_amount: int
    delay_unit: DelayUnit
    wait_until_time: Optional[str] = None
    wait_until_timezone: Optional[str] = None


class NonMatchAction(str, Enum):
    STOP = "stop"
    CONTINUE = "continue"


class SetNodeFilterRequest(RequestModel):
    sequence_id: str = Field(exclude=True)
    node_id: str = Field(exclude=True)
    conditions: Dict[str, Any]
    non_match_action: Optional[NonMatchAction] = None


class BranchCondition(RequestModel):
    name: str
    conditions: Dict[str, Any]


class SetNodeBranchRequest(RequestModel):
    sequence_id: str = Field(exclude=True)
    node_id: str = Field(exclude=True)
    branches: List[BranchCondition]
    has_default_branch: Optional[bool] = None


class ExperimentVariant(RequestModel):
    name: str
    weight: float


class SetNodeExperimentRequest(RequestModel):
    sequence_id: str = Field(exclude=True)
    node_id: str = Field(exclude=True)
    sample_size: Optional[int] = None
    variants: List[ExperimentVariant]


class CreateConnectionRequest(RequestModel):
    sequence_id: str = Field(exclude=True)
    source_node_id: str
    target_node_id: str
    connection_type: Optional[ConnectionType] = None
    label: Optional[str] = None


class SequenceEntry(ResponseModel):
    id: str
    loop_id: Optional[str] = None
    contact_id: str = ""
    current_node_id: Optional[str] = None
    status: Optional[SequenceEntryStatus] = None
    entered_at: Optional[datetime] = None
    exited_at: Optional[datetime] = None
    exit_reason: Optional[str] = None
    contact: Optional[MailContact] = None


class ListSequenceEntriesRequest(RequestModel):
    sequence_id: str = Field(exclude=True)
    status: Optional[SequenceEntryStatus] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


class ListSequenceEntriesResponse(ResponseModel):
    entries: List[SequenceEntry] = Field(default_factory=list)
    total: int = 0
    limit: int = 0
    offset: int = 0


class RemoveContactFromSequenceRequest(RequestModel):
    sequence_id: str = Field(exclude=True)
    entry_id: str
    reason: Optional[str] = None


class SequenceTotals(ResponseModel):
    total_entered: int = 0
    total_completed: int = 0
    total_active: int = 0


class NodeAnalytics(ResponseModel):
    node_id: str
    entered: int = 0
    exited: int = 0
    emails_sent: int = 0
    emails_delivered: int = 0
    emails_opened: int = 0
    emails_clicked: int = 0
    emails_bounced: int = 0
    passed: int = 0
    filtered: int = 0


class SequenceAnalyticsResponse(ResponseModel):
    sequence: Optional[SequenceTotals] = None
    status_breakdown: Dict[str, int] = Field(default_factory=dict)
    node_analytics: List[NodeAnalytics] = Field(default_factory=list)


class EventPropertyType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    OBJECT = "object"
    ARRAY = "array"


class EventProperty(RequestModel):
    name: str
    type: EventPropertyType
    description: Optional[str] = None
    required: Optional[bool] = None


class EventPropertiesSchema(RequestModel):
    properties: List[EventProperty] = Field(default_factory=list)


class MailEvent(ResponseModel):
    """A custom event definition, e.g. ``order_placed``."""

    id: str
    organization_id: Optional[str] = None
    project_id: Optional[str] = None
    environment: Optional[str] = None
    name: str = ""
    description: Optional[str] = None
    properties_schema: Optional[Dict[str, Any]] = None
    total_received: int = 0
    last_received_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CreateEventRequest(RequestModel):
    project_slug: Optional[str] = None
    environment: Optional[Environment] = None
    name: str
    description: Optional[str] = None
    properties_schema: Optional[EventPropertiesSchema] = None


class UpdateEventRequest(RequestModel):
    id: str = Field(exclude=True)
    name: Optional[str] = None
    description: Optional[str] = None
    properties_schema: Optional[EventPropertiesSchema] = None


class ListEventsRequest(RequestModel):
    project_slug: Optional[str] = None
    environment: Optional[Environment] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    search: Optional[str] = None


class ListEventsResponse(ResponseModel):
    events: List[MailEvent] = Field(default_factory=list)
    total: int = 0
    limit: int = 0
    offset: int = 0


class TrackEventRequest(RequestModel):
    """One occurrence of an event for a contact given by id or email."""

    environment: Optional[Environment] = None
    event_name: str
    contact_id: Optional[str] = None
    contact_email: Optional[str] = None
    properties: Optional[Dict[str, Any]] = None


class TrackEventResponse(ResponseModel):
    success: bool = False
    event_occurrence_id: Optional[str] = None
    error: Optional[str] = None


class BatchTrackEventInput(RequestModel):
    event_name: str
    contact_id: Optional[str] = None
    contact_email: Optional[str] = None
    properties: Optional[Dict[str, Any]] = None
    timestamp: Optional[datetime] = None


class BatchTrackEventsRequest(RequestModel):
    environment: Optional[Environment] = None
    events: List[BatchTrackEventInput]


class BatchTrackEventsResponse(ResponseModel):
    success: bool = False
    results: List[TrackEventResponse] = Field(default_factory=list)
    total_processed: int = 0
    total_failed: int = 0


class EventOccurrence(ResponseModel):
    id: str
    event_id: str = ""
    contact_id: str = ""
    properties: Optional[Dict[str, Any]] = None
    processed: bool = False
    processed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None


class ListEventOccurrencesRequest(RequestModel):
    event_id: Optional[str] = None
    contact_id: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


class ListEventOccurrencesResponse(ResponseModel):
    occurrences: List[EventOccurrence] = Field(default_factory=list)
    total: int = 0
    limit: int = 0
    offset: int = 0


class DailyCount(ResponseModel):
    date: str
    count: int = 0


class EventAnalyticsResponse(ResponseModel):
    total_received: int = 0
    last_received_at: Optional[datetime] = None
    unique_contacts: int = 0
    daily_counts: List[DailyCount] = Field(default_factory=list)
