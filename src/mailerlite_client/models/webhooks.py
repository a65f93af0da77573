"""
Webhook payloads.
"""
from typing import List, Optional

from pydantic import Field

from .common import ApiModel, ItemEnvelope, ListEnvelope, ListOptions


class Webhook(ApiModel):
    id: str
    name: str = ""
    url: str = ""
    events: List[str] = Field(default_factory=list)
    enabled: bool = False
    secret: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ListWebhookOptions(ListOptions):
    sort: str = ""


class CreateWebhookOptions(ApiModel):
    name: Optional[str] = None
    events: List[str]
    url: str


class UpdateWebhookOptions(ApiModel):
    webhook_id: str = Field(exclude=True)
    name: Optional[str] = None
    events: Optional[List[str]] = None
    url: Optional[str] = None
    enabled: Optional[bool] = None


class WebhookList(ListEnvelope[Webhook]):
    pass


class WebhookItem(ItemEnvelope[Webhook]):
    pass
