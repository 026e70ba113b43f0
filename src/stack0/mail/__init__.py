from .audiences import AudiencesClient
from .campaigns import CampaignsClient
from .client import MailClient
from .contacts import ContactsClient
from .domains import DomainsClient
from .events import EventsClient
from .sequences import SequencesClient
from .templates import TemplatesClient
from .models import (
    EmailStatus,
    EmailAddress,
    SingleRecipient,
    RecipientList,
    RawRecipient,
    Attachment,
    SendEmailRequest,
    SendEmailResponse,
    SendBatchEmailRequest,
    BatchEmailResult,
    SendBatchEmailResponse,
    SendBroadcastEmailRequest,
    SendBroadcastEmailResponse,
    GetEmailResponse,
    ListEmailsRequest,
    Email,
    ListEmailsResponse,
    ResendResult,
    ResendEmailResponse,
    EmailAnalyticsResponse,
    TimeSeriesDataPoint,
    TimeSeriesAnalyticsResponse,
    HourlyAnalyticsDataPoint,
    HourlyAnalyticsResponse,
    ListSendersRequest,
    Sender,
    ListSendersResponse,
    DomainStatus,
    DNSRecord,
    Domain,
    ListDomainsRequest,
    AddDomainRequest,
    DomainDNSRecords,
    AddDomainResponse,
    VerificationDetails,
    GetDNSRecordsResponse,
    VerifyDomainResponse,
    Template,
    CreateTemplateRequest,
    UpdateTemplateRequest,
    ListTemplatesRequest,
    ListTemplatesResponse,
    PreviewTemplateResponse,
    Recipient,
    to_recipient,
)
from .contact_models import (
    ContactStatus,
    CampaignStatus,
    Audience,
    CreateAudienceRequest,
    UpdateAudienceRequest,
    ListAudiencesRequest,
    ListAudiencesResponse,
    AddContactsResponse,
    RemoveContactsResponse,
    MailContact,
    AudienceContact,
    CreateContactRequest,
    UpdateContactRequest,
    ListContactsRequest,
    ListContactsResponse,
    ListAudienceContactsRequest,
    ListAudienceContactsResponse,
    ImportContactInput,
    ImportContactsRequest,
    ImportContactError,
    ImportContactsResponse,
    Campaign,
    CreateCampaignRequest,
    UpdateCampaignRequest,
    ListCampaignsRequest,
    ListCampaignsResponse,
    SendCampaignRequest,
    SendCampaignResponse,
    CampaignStatsResponse,
)
from .sequence_models import (
    SequenceStatus,
    SequenceTriggerType,
    SequenceTriggerFrequency,
    SequenceNodeType,
    ConnectionType,
    SequenceEntryStatus,
    Sequence,
    SequenceNode,
    SequenceConnection,
    SequenceWithNodes,
    CreateSequenceRequest,
    UpdateSequenceRequest,
    ListSequencesRequest,
    ListSequencesResponse,
    CreateNodeRequest,
    UpdateNodeRequest,
    UpdateNodePositionRequest,
    SetNodeEmailRequest,
    DelayUnit,
    SetNodeTimerRequest,
    NonMatchAction,
    SetNodeFilterRequest,
    BranchCondition,
    SetNodeBranchRequest,
    ExperimentVariant,
    SetNodeExperimentRequest,
    CreateConnectionRequest,
    SequenceEntry,
    ListSequenceEntriesRequest,
    ListSequenceEntriesResponse,
    RemoveContactFromSequenceRequest,
    SequenceTotals,
    NodeAnalytics,
    SequenceAnalyticsResponse,
    EventPropertyType,
    EventProperty,
    EventPropertiesSchema,
    MailEvent,
    CreateEventRequest,
    UpdateEventRequest,
    ListEventsRequest,
    ListEventsResponse,
    TrackEventRequest,
    TrackEventResponse,
    BatchTrackEventInput,
    BatchTrackEventsRequest,
    BatchTrackEventsResponse,
    EventOccurrence,
    ListEventOccurrencesRequest,
    ListEventOccurrencesResponse,
    DailyCount,
    EventAnalyticsResponse,
)

__all__ = [
    "MailClient",
    "AudiencesClient",
    "CampaignsClient",
    "ContactsClient",
    "DomainsClient",
    "EventsClient",
    "SequencesClient",
    "TemplatesClient",
    "EmailStatus",
    "EmailAddress",
    "SingleRecipient",
    "RecipientList",
    "RawRecipient",
    "Attachment",
    "SendEmailRequest",
    "SendEmailResponse",
    "SendBatchEmailRequest",
    "BatchEmailResult",
    "SendBatchEmailResponse",
    "SendBroadcastEmailRequest",
    "SendBroadcastEmailResponse",
    "GetEmailResponse",
    "ListEmailsRequest",
    "Email",
    "ListEmailsResponse",
    "ResendResult",
    "ResendEmailResponse",
    "EmailAnalyticsResponse",
    "TimeSeriesDataPoint",
    "TimeSeriesAnalyticsResponse",
    "HourlyAnalyticsDataPoint",
    "HourlyAnalyticsResponse",
    "ListSendersRequest",
    "Sender",
    "ListSendersResponse",
    "DomainStatus",
    "DNSRecord",
    "Domain",
    "ListDomainsRequest",
    "AddDomainRequest",
    "DomainDNSRecords",
    "AddDomainResponse",
    "VerificationDetails",
    "GetDNSRecordsResponse",
    "VerifyDomainResponse",
    "Template",
    "CreateTemplateRequest",
    "UpdateTemplateRequest",
    "ListTemplatesRequest",
    "ListTemplatesResponse",
    "PreviewTemplateResponse",
    "Recipient",
    "to_recipient",
    "ContactStatus",
    "CampaignStatus",
    "Audience",
    "CreateAudienceRequest",
    "UpdateAudienceRequest",
    "ListAudiencesRequest",
    "ListAudiencesResponse",
    "AddContactsResponse",
    "RemoveContactsResponse",
    "MailContact",
    "AudienceContact",
    "CreateContactRequest",
    "UpdateContactRequest",
    "ListContactsRequest",
    "ListContactsResponse",
    "ListAudienceContactsRequest",
    "ListAudienceContactsResponse",
    "ImportContactInput",
    "ImportContactsRequest",
    "ImportContactError",
    "ImportContactsResponse",
    "Campaign",
    "CreateCampaignRequest",
    "UpdateCampaignRequest",
    "ListCampaignsRequest",
    "ListCampaignsResponse",
    "SendCampaignRequest",
    "SendCampaignResponse",
    "CampaignStatsResponse",
    "SequenceStatus",
    "SequenceTriggerType",
    "SequenceTriggerFrequency",
    "SequenceNodeType",
    "ConnectionType",
    "SequenceEntryStatus",
    "Sequence",
    "SequenceNode",
    "SequenceConnection",
    "SequenceWithNodes",
    "CreateSequenceRequest",
    "UpdateSequenceRequest",
    "ListSequencesRequest",
    "ListSequencesResponse",
    "CreateNodeRequest",
    "UpdateNodeRequest",
    "UpdateNodePositionRequest",
    "SetNodeEmailRequest",
    "DelayUnit",
    "SetNodeTimerRequest",
    "NonMatchAction",
    "SetNodeFilterRequest",
    "BranchCondition",
    "SetNodeBranchRequest",
    "ExperimentVariant",
    "SetNodeExperimentRequest",
    "CreateConnectionRequest",
    "SequenceEntry",
    "ListSequenceEntriesRequest",
    "ListSequenceEntriesResponse",
    "RemoveContactFromSequenceRequest",
    "SequenceTotals",
    "NodeAnalytics",
    "SequenceAnalyticsResponse",
    "EventPropertyType",
    "EventProperty",
    "EventPropertiesSchema",
    "MailEvent",
    "CreateEventRequest",
    "UpdateEventRequest",
    "ListEventsRequest",
    "ListEventsResponse",
    "TrackEventRequest",
    "TrackEventResponse",
    "BatchTrackEventInput",
    "BatchTrackEventsRequest",
    "BatchTrackEventsResponse",
    "EventOccurrence",
    "ListEventOccurrencesRequest",
    "ListEventOccurrencesResponse",
    "DailyCount",
    "EventAnalyticsResponse",
]
