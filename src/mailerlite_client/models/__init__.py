"""
Typed request and response payloads.
"""
from .automations import (
    Automation,
    AutomationItem,
    AutomationList,
    AutomationSubscriber,
    AutomationSubscriberList,
    ListAutomationOptions,
    ListAutomationSubscriberOptions,
)
from .campaigns import (
    AbSettings,
    BValue,
    Campaign,
    CampaignEmail,
    CampaignItem,
    CampaignLanguage,
    CampaignLanguageList,
    CampaignList,
    CampaignSubscriber,
    CampaignSubscriberList,
    CreateCampaign,
    ListCampaignOptions,
    ListCampaignSubscriberOptions,
    Resend,
    ResendSettings,
    Schedule,
    ScheduleCampaign,
    UpdateCampaign,
)
from .common import ApiModel, ItemEnvelope, Links, ListEnvelope, ListOptions, Meta, RatePair
from .fields import FieldItem, FieldList, ListFieldOptions, SubscriberField
from .forms import Form, FormItem, FormList, ListFormOptions, ListFormSubscriberOptions
from .groups import Group, GroupItem, GroupList, ListGroupOptions, ListGroupSubscriberOptions
from .segments import ListSegmentOptions, ListSegmentSubscriberOptions, Segment, SegmentItem, SegmentList
from .subscribers import (
    ListSubscriberOptions,
    Subscriber,
    SubscriberCount,
    SubscriberItem,
    SubscriberList,
    SubscriberWrite,
)
from .timezones import Timezone, TimezoneList
from .webhooks import (
    CreateWebhookOptions,
    ListWebhookOptions,
    UpdateWebhookOptions,
    Webhook,
    WebhookItem,
    WebhookList,
)

__all__ = [
    # Common
    "ApiModel",
    "ItemEnvelope",
    "Links",
    "ListEnvelope",
    "ListOptions",
    "Meta",
    "RatePair",
    # Subscribers
    "ListSubscriberOptions",
    "Subscriber",
    "SubscriberCount",
    "SubscriberItem",
    "SubscriberList",
    "SubscriberWrite",
    # Groups
    "Group",
    "GroupItem",
    "GroupList",
    "ListGroupOptions",
    "ListGroupSubscriberOptions",
    # Segments
    "ListSegmentOptions",
    "ListSegmentSubscriberOptions",
    "Segment",
    "SegmentItem",
    "SegmentList",
    # Fields
    "FieldItem",
    "FieldList",
    "ListFieldOptions",
    "SubscriberField",
    # Forms
    "Form",
    "FormItem",
    "FormList",
    "ListFormOptions",
    "ListFormSubscriberOptions",
    # Campaigns
    "AbSettings",
    "BValue",
    "Campaign",
    "CampaignEmail",
    "CampaignItem",
    "CampaignLanguage",
    "CampaignLanguageList",
    "CampaignList",
    "CampaignSubscriber",
    "CampaignSubscriberList",
    "CreateCampaign",
    "ListCampaignOptions",
    "ListCampaignSubscriberOptions",
    "Resend",
    "ResendSettings",
    "Schedule",
    "ScheduleCampaign",
    "UpdateCampaign",
    # Automations
    "Automation",
    "AutomationItem",
    "AutomationList",
    "AutomationSubscriber",
    "AutomationSubscriberList",
    "ListAutomationOptions",
    "ListAutomationSubscriberOptions",
    # Webhooks
    "CreateWebhookOptions",
    "ListWebhookOptions",
    "UpdateWebhookOptions",
    "Webhook",
    "WebhookItem",
    "WebhookList",
    # Timezones
    "Timezone",
    "TimezoneList",
]
