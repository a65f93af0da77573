"""
Resource services: one per API area.
"""
from .automations import AutomationService
from .base import ResourceService
from .campaigns import CampaignService
from .fields import FieldService
from .forms import FormService
from .groups import GroupService
from .segments import SegmentService
from .subscribers import SubscriberService
from .timezones import TimezoneService
from .webhooks import WebhookService

__all__ = [
    "AutomationService",
    "CampaignService",
    "FieldService",
    "FormService",
    "GroupService",
    "ResourceService",
    "SegmentService",
    "SubscriberService",
    "TimezoneService",
    "WebhookService",
]
