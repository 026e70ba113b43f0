"""
Data models for sending email, email history, analytics, senders and domains.

Address fields of a send request (``from``, ``to``, ``cc``, ``bcc``,
``reply_to``) hold a ``Recipient``: exactly one of ``SingleRecipient``,
``RecipientList`` or ``RawRecipient``. Plain strings, ``EmailAddress``
objects, dicts and lists are converted to the matching variant when the
request is built, so each variant has one JSON encoding.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import Field, field_validator, model_serializer

from ..models import Environment, RequestModel, ResponseModel, SortOrder, Stack0Model


class EmailStatus(str, Enum):
    PENDING = "pending"
    SENT = "sent"
    DELIVERED = "delivered"
    BOUNCED = "bounced"
    FAILED = "failed"
    DEFERRED = "deferred"
    OPENED = "opened"
    CLICKED = "clicked"
    COMPLAINED = "complained"
    UNSUBSCRIBED = "unsubscribed"


class EmailAddress(Stack0Model):
    """An address with an optional display name."""

    email: str
    name: Optional[str] = None

    @model_serializer
    def _serialize(self) -> Dict[str, Any]:
        data = {"email": self.email}
        if self.name:
            data["name"] = self.name
        return data


class SingleRecipient(Stack0Model):
    """One address, sent as ``{"email": ..., "name": ...}``."""

    address: EmailAddress

    @model_serializer
    def _serialize(self) -> Dict[str, Any]:
        return self.address.model_dump()


class RecipientList(Stack0Model):
    """Several recipients, sent as an array of address objects and strings."""

    addresses: List[Union[EmailAddress, str]]

    @model_serializer
    def _serialize(self) -> List[Any]:
        return [
            item if isinstance(item, str) else item.model_dump()
            for item in self.addresses
        ]


class RawRecipient(Stack0Model):
    """A preformatted address such as ``"Ada <ada@example.com>"``, sent as is."""

    value: str

    @model_serializer
    def _serialize(self) -> str:
        return self.value


Recipient = Union[SingleRecipient, RecipientList, RawRecipient]


def _to_address(value: Any) -> Union[EmailAddress, str]:
    if isinstance(value, (EmailAddress, str)):
        return value
    if isinstance(value, dict):
        return EmailAddress.model_validate(value)
    raise ValueError(f"Cannot use {type(value).__name__} as an email address")


def to_recipient(value: Any) -> Any:
    """Convert a string, address, dict or list into a ``Recipient`` variant."""
    if value is None or isinstance(value, (SingleRecipient, RecipientList, RawRecipient)):
        return value
    if isinstance(value, str):
        return RawRecipient(value=value)
    if isinstance(value, (EmailAddress, dict)):
        return SingleRecipient(address=_to_address(value))
    if isinstance(value, (list, tuple)):
        return RecipientList(addresses=[_to_address(item) for item in value])
    raise ValueError(f"Cannot use {type(value).__name__} as a recipient")


class Attachment(RequestModel):
    """A file attached to an email: base64 ``content`` or a fetchable ``path``."""

    filename: str
    content: str
    content_type: Optional[str] = None
    path: Optional[str] = None


class SendEmailRequest(RequestModel):
    """
    A single email.

    Example:
        >>> request = SendEmailRequest(
        ...     from_=EmailAddress(email="hi@example.com", name="Example"),
        ...     to=["ada@example.com", {"email": "alan@example.com"}],
        ...     subject="Welcome",
        ...     html="<p>Hello</p>",
        ... )
    """

    project_slug: Optional[str] = None
    environment: Optional[Environment] = None
    from_: Recipient = Field(alias="from")
    to: Recipient
    cc: Optional[Recipient] = None
    bcc: Optional[Recipient] = None
    reply_to: Optional[Recipient] = None
    subject: str
    html: Optional[str] = None
    text: Optional[str] = None
    template_id: Optional[str] = None
    template_variables: Optional[Dict[str, Any]] = None
    tags: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None
    attachments: Optional[List[Attachment]] = None
    headers: Optional[Dict[str, str]] = None
    scheduled_at: Optional[datetime] = None

    @field_validator("from_", "to", "cc", "bcc", "reply_to", mode="before")
    @classmethod
    def _coerce_recipients(cls, value: Any) -> Any:
        return to_recipient(value)


class SendEmailResponse(ResponseModel):
    id: str
    from_: str = Field(default="", alias="from")
    to: str = ""
    subject: str = ""
    status: str = ""
    created_at: Optional[datetime] = None


class SendBatchEmailRequest(RequestModel):
    project_slug: Optional[str] = None
    emails: List[SendEmailRequest]


class BatchEmailResult(ResponseModel):
    id: str = ""
    success: bool = False
    error: Optional[str] = None


class SendBatchEmailResponse(ResponseModel):
    success: bool = False
    data: List[BatchEmailResult] = Field(default_factory=list)


class SendBroadcastEmailRequest(RequestModel):
    """The same email sent individually to every address in ``to``."""

    project_slug: Optional[str] = None
    environment: Optional[Environment] = None
    from_: Recipient = Field(alias="from")
    to: RecipientList
    subject: str
    html: Optional[str] = None
    text: Optional[str] = None
    template_id: Optional[str] = None
    template_variables: Optional[Dict[str, Any]] = None
    tags: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None
    scheduled_at: Optional[datetime] = None

    @field_validator("from_", mode="before")
    @classmethod
    def _coerce_from(cls, value: Any) -> Any:
        return to_recipient(value)

    @field_validator("to", mode="before")
    @classmethod
    def _coerce_to(cls, value: Any) -> Any:
        if isinstance(value, (str, EmailAddress, dict)):
            value = [value]
        return to_recipient(value)


class SendBroadcastEmailResponse(ResponseModel):
    success: bool = False
    data: List[BatchEmailResult] = Field(default_factory=list)
    count: int = 0
    total_requested: Optional[int] = None
    limited_by_quota: Optional[bool] = None


class GetEmailResponse(ResponseModel):
    id: str
    from_: str = Field(default="", alias="from")
    to: str = ""
    subject: str = ""
    status: str = ""
    html: Optional[str] = None
    text: Optional[str] = None
    tags: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
    sent_at: Optional[datetime] = None
    delivered_at: Optional[datetime] = None
    opened_at: Optional[datetime] = None
    clicked_at: Optional[datetime] = None
    bounced_at: Optional[datetime] = None
    provider_message_id: Optional[str] = None


class ListEmailsRequest(RequestModel):
    project_slug: Optional[str] = None
    environment: Optional[Environment] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    status: Optional[EmailStatus] = None
    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    subject: Optional[str] = None
    tag: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    sort_by: Optional[str] = None
    sort_order: Optional[SortOrder] = None


class Email(ResponseModel):
    id: str
    from_: str = Field(default="", alias="from")
    to: str = ""
    subject: str = ""
    status: str = ""
    cc: Optional[str] = None
    reply_to: Optional[str] = None
    message_id: Optional[str] = None
    tags: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
    delivered_at: Optional[datetime] = None
    opened_at: Optional[datetime] = None
    clicked_at: Optional[datetime] = None
    bounced_at: Optional[datetime] = None
    provider_message_id: Optional[str] = None


class ListEmailsResponse(ResponseModel):
    emails: List[Email] = Field(default_factory=list)
    total: int = 0
    limit: int = 0
    offset: int = 0


class ResendResult(ResponseModel):
    id: str = ""
    success: bool = False
    error: Optional[str] = None


class ResendEmailResponse(ResponseModel):
    success: bool = False
    data: Optional[ResendResult] = None


class EmailAnalyticsResponse(ResponseModel):
    total: int = 0
    sent: int = 0
    delivered: int = 0
    bounced: int = 0
    failed: int = 0
    delivery_rate: float = 0
    open_rate: float = 0
    click_rate: float = 0


class TimeSeriesDataPoint(ResponseModel):
    date: str
    sent: int = 0
    delivered: int = 0
    opened: int = 0
    clicked: int = 0
    bounced: int = 0
    failed: int = 0


class TimeSeriesAnalyticsResponse(ResponseModel):
    data: List[TimeSeriesDataPoint] = Field(default_factory=list)


class HourlyAnalyticsDataPoint(ResponseModel):
    hour: int
    sent: int = 0
    delivered: int = 0
    opened: int = 0
    clicked: int = 0


class HourlyAnalyticsResponse(ResponseModel):
    data: List[HourlyAnalyticsDataPoint] = Field(default_factory=list)


class ListSendersRequest(RequestModel):
    project_slug: Optional[str] = None
    environment: Optional[Environment] = None
    search: Optional[str] = None


class Sender(ResponseModel):
    """A distinct ``from`` address with its delivery counts."""

    from_: str = Field(alias="from")
    total: int = 0
    sent: int = 0
    delivered: int = 0
    bounced: int = 0
    failed: int = 0


class ListSendersResponse(ResponseModel):
    senders: List[Sender] = Field(default_factory=list)


class DomainStatus(str, Enum):
    PENDING = "pending"
    VERIFIED = "verified"
    FAILED = "failed"


class DNSRecord(ResponseModel):
    type: str
    name: str
    value: str
    priority: Optional[int] = None


class Domain(ResponseModel):
    """
    A sending domain and the DNS records that prove ownership of it.

    Attributes:
        status: ``verified`` once every record resolves
        dkim_record: DKIM CNAME records to publish
        is_default: Used when ``from`` names no verified domain
    """

    id: str
    organization_id: Optional[str] = None
    domain: str = ""
    status: Optional[DomainStatus] = None
    dkim_record: Optional[List[DNSRecord]] = None
    spf_record: Optional[DNSRecord] = None
    dmarc_record: Optional[DNSRecord] = None
    verification_token: Optional[str] = None
    ses_verification_record: Optional[DNSRecord] = None
    is_default: bool = False
    verified_at: Optional[datetime] = None
    last_checked_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ListDomainsRequest(RequestModel):
    project_slug: str
    environment: Optional[Environment] = None


class AddDomainRequest(RequestModel):
    domain: str


class DomainDNSRecords(ResponseModel):
    domain: str = ""
    dkim_records: List[DNSRecord] = Field(default_factory=list)
    spf_record: Optional[DNSRecord] = None
    dmarc_record: Optional[DNSRecord] = None
    verification_token: str = ""
    ses_verification_record: Optional[DNSRecord] = None


class AddDomainResponse(ResponseModel):
    domain: Optional[Domain] = None
    dns_records: Optional[DomainDNSRecords] = None


class VerificationDetails(ResponseModel):
    domain_verified: bool = False
    dkim_verified: bool = False
    verification_status: str = ""
    dkim_status: str = ""


class GetDNSRecordsResponse(ResponseModel):
    domain: str = ""
    dkim_records: List[DNSRecord] = Field(default_factory=list)
    spf_record: Optional[DNSRecord] = None
    dmarc_record: Optional[DNSRecord] = None
    ses_verification_record: Optional[DNSRecord] = None
    status: Optional[DomainStatus] = None
    verified_at: Optional[datetime] = None
    verification_details: Optional[VerificationDetails] = None


class VerifyDomainResponse(ResponseModel):
    verified: bool = False
    message: str = ""


class Template(ResponseModel):
    id: str
    organization_id: Optional[str] = None
    environment: Optional[Environment] = None
    created_by_user_id: Optional[str] = None
    name: str = ""
    slug: str = ""
    description: Optional[str] = None
    subject: str = ""
    preview_text: Optional[str] = None
    html: str = ""
    text: Optional[str] = None
    maily_json: Optional[Dict[str, Any]] = None
    variables_schema: Optional[Dict[str, Any]] = None
    is_active: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CreateTemplateRequest(RequestModel):
    environment: Optional[Environment] = None
    name: str
    slug: str
    description: Optional[str] = None
    subject: str
    preview_text: Optional[str] = None
    html: str
    text: Optional[str] = None
    maily_json: Optional[Dict[str, Any]] = None
    variables_schema: Optional[Dict[str, Any]] = None
    is_active: Optional[bool] = None


class UpdateTemplateRequest(RequestModel):
    id: str = Field(exclude=True)
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    subject: Optional[str] = None
    preview_text: Optional[str] = None
    html: Optional[str] = None
    text: Optional[str] = None
    maily_json: Optional[Dict[str, Any]] = None
    variables_schema: Optional[Dict[str, Any]] = None
    is_active: Optional[bool] = None


class ListTemplatesRequest(RequestModel):
    environment: Optional[Environment] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    is_active: Optional[bool] = None
    search: Optional[str] = None


class ListTemplatesResponse(ResponseModel):
    templates: List[Template] = Field(default_factory=list)
    total: int = 0
    limit: int = 0
    offset: int = 0


class PreviewTemplateResponse(ResponseModel):
    subject: str = ""
    html: str = ""
    text: Optional[str] = None
