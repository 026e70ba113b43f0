"""
Data models for audiences, contacts and campaigns.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from ..models import Environment, RequestModel, ResponseModel


class ContactStatus(str, Enum):
    SUBSCRIBED = "subscribed"
    UNSUBSCRIBED = "unsubscribed"
    BOUNCED = "bounced"
    COMPLAINED = "complained"


class CampaignStatus(str, Enum):
    DRAFT = "draft"
    SCHEDULED = "scheduled"
    SENDING = "sending"
    SENT = "sent"
    PAUSED = "paused"
    CANCELLED = "cancelled"
    FAILED = "failed"


class Audience(ResponseModel):
    """A named list of contacts that campaigns are sent to."""

    id: str
    organization_id: Optional[str] = None
    project_id: Optional[str] = None
    environment: Optional[str] = None
    name: str = ""
    description: Optional[str] = None
    total_contacts: int = 0
    subscribed_contacts: int = 0
    unsubscribed_contacts: int = 0
    created_by_user_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CreateAudienceRequest(RequestModel):
    environment: Optional[Environment] = None
    name: str
    description: Optional[str] = None


class UpdateAudienceRequest(RequestModel):
    id: str = Field(exclude=True)
    name: Optional[str] = None
    description: Optional[str] = None


class ListAudiencesRequest(RequestModel):
    environment: Optional[Environment] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    search: Optional[str] = None


class ListAudiencesResponse(ResponseModel):
    audiences: List[Audience] = Field(default_factory=list)
    total: int = 0
    limit: int = 0
    offset: int = 0


class AddContactsResponse(ResponseModel):
    success: bool = False
    added: int = 0


class RemoveContactsResponse(ResponseModel):
    success: bool = False
    removed: int = 0


class MailContact(ResponseModel):
    id: str
    organization_id: Optional[str] = None
    project_id: Optional[str] = None
    environment: Optional[str] = None
    email: str = ""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    status: str = ""
    subscribed_at: Optional[datetime] = None
    unsubscribed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AudienceContact(MailContact):
    added_at: Optional[datetime] = None


class CreateContactRequest(RequestModel):
    environment: Optional[Environment] = None
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class UpdateContactRequest(RequestModel):
    id: str = Field(exclude=True)
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    status: Optional[ContactStatus] = None


class ListContactsRequest(RequestModel):
    environment: Optional[Environment] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    search: Optional[str] = None
    status: Optional[ContactStatus] = None


class ListContactsResponse(ResponseModel):
    contacts: List[MailContact] = Field(default_factory=list)
    total: int = 0
    limit: int = 0
    offset: int = 0


class ListAudienceContactsRequest(RequestModel):
    """Filters for the contacts of one audience; ``id`` is the audience."""

    id: str = Field(exclude=True)
    environment: Optional[Environment] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    search: Optional[str] = None
    status: Optional[ContactStatus] = None


class ListAudienceContactsResponse(ResponseModel):
    contacts: List[AudienceContact] = Field(default_factory=list)
    total: int = 0
    limit: int = 0
    offset: int = 0


class ImportContactInput(RequestModel):
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class ImportContactsRequest(RequestModel):
    """Contacts to create in bulk, optionally added to ``audience_id`` as well."""

    environment: Optional[Environment] = None
    audience_id: Optional[str] = None
    contacts: List[ImportContactInput]


class ImportContactError(ResponseModel):
    email: str = ""
    error: str = ""


class ImportContactsResponse(ResponseModel):
    success: bool = False
    imported: int = 0
    skipped: int = 0
    errors: List[ImportContactError] = Field(default_factory=list)


class Campaign(ResponseModel):
    """
    A one-off email sent to an audience.

    Attributes:
        status: ``draft`` until sent or scheduled
        total_recipients: Audience size when sending started
        sent_count: Emails accepted so far
    """

    id: str
    organization_id: Optional[str] = None
    project_id: Optional[str] = None
    environment: Optional[str] = None
    name: str = ""
    subject: str = ""
    preview_text: Optional[str] = None
    from_email: str = ""
    from_name: Optional[str] = None
    reply_to: Optional[str] = None
    template_id: Optional[str] = None
    html: Optional[str] = None
    text: Optional[str] = None
    audience_id: Optional[str] = None
    status: str = ""
    scheduled_at: Optional[datetime] = None
    sent_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    total_recipients: int = 0
    sent_count: int = 0
    delivered_count: int = 0
    opened_count: int = 0
    clicked_count: int = 0
    bounced_count: int = 0
    failed_count: int = 0
    tags: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None
    created_by_user_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CreateCampaignRequest(RequestModel):
    environment: Optional[Environment] = None
    name: str
    subject: str
    preview_text: Optional[str] = None
    from_email: str
    from_name: Optional[str] = None
    reply_to: Optional[str] = None
    template_id: Optional[str] = None
    html: Optional[str] = None
    text: Optional[str] = None
    audience_id: Optional[str] = None
    scheduled_at: Optional[datetime] = None
    tags: Optional[List[str]] = None


class UpdateCampaignRequest(RequestModel):
    id: str = Field(exclude=True)
    name: Optional[str] = None
    subject: Optional[str] = None
    preview_text: Optional[str] = None
    from_email: Optional[str] = None
    from_name: Optional[str] = None
    reply_to: Optional[str] = None
    template_id: Optional[str] = None
    html: Optional[str] = None
    text: Optional[str] = None
    audience_id: Optional[str] = None
    scheduled_at: Optional[datetime] = None
    tags: Optional[List[str]] = None


class ListCampaignsRequest(RequestModel):
    environment: Optional[Environment] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    search: Optional[str] = None
    status: Optional[CampaignStatus] = None


class ListCampaignsResponse(ResponseModel):
    campaigns: List[Campaign] = Field(default_factory=list)
    total: int = 0
    limit: int = 0
    offset: int = 0


class SendCampaignRequest(RequestModel):
    """Send now, or at ``scheduled_at``."""

    id: str = Field(exclude=True)
    send_now: Optional[bool] = None
    scheduled_at: Optional[datetime] = None


class SendCampaignResponse(ResponseModel):
    success: bool = False
    sent_count: int = 0
    failed_count: int = 0
    total_recipients: int = 0


class CampaignStatsResponse(ResponseModel):
    total: int = 0
    sent: int = 0
    delivered: int = 0
    opened: int = 0
    clicked: int = 0
    bounced: int = 0
    failed: int = 0
    delivery_rate: float = 0
    open_rate: float = 0
    click_rate: float = 0
    bounce_rate: float = 0
