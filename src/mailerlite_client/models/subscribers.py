"""
Subscriber payloads.
"""
from typing import Any, Dict, List, Optional

from pydantic import Field

from .common import ApiModel, ItemEnvelope, ListEnvelope, ListOptions, RatePair


class SubscriberGroup(ApiModel):
    """Group summary embedded in a subscriber."""

    id: str
    name: str = ""
    active_count: int = 0
    sent_count: int = 0
    opens_count: int = 0
    open_rate: Optional[RatePair] = None
    clicks_count: int = 0
    click_rate: Optional[RatePair] = None
    unsubscribed_count: int = 0
    unconfirmed_count: int = 0
    bounced_count: int = 0
    junk_count: int = 0
    created_at: Optional[str] = None


class Subscriber(ApiModel):
    id: Optional[str] = None
    email: str
    status: Optional[str] = None
    source: Optional[str] = None
    sent: int = 0
    opens_count: int = 0
    clicks_count: int = 0
    open_rate: float = 0
    click_rate: float = 0
    ip_address: Any = None
    subscribed_at: Optional[str] = None
    unsubscribed_at: Any = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    fields: Dict[str, Any] = Field(default_factory=dict)
    groups: List[SubscriberGroup] = Field(default_factory=list)
    opted_in_at: Optional[str] = None
    optin_ip: Optional[str] = None


class SubscriberWrite(ApiModel):
    """Body for create and upsert."""

    email: str
    fields: Optional[Dict[str, Any]] = None
    groups: Optional[List[str]] = None
    status: Optional[str] = None
    subscribed_at: Optional[str] = None
    ip_address: Optional[str] = None
    opted_in_at: Optional[str] = None
    optin_ip: Optional[str] = None
    unsubscribed_at: Optional[str] = None


class SubscriberCount(ApiModel):
    total: int = 0


class ListSubscriberOptions(ListOptions):
    """Options for SubscriberService.list."""

    cursor: str = ""


class SubscriberList(ListEnvelope[Subscriber]):
    pass


class SubscriberItem(ItemEnvelope[Subscriber]):
    pass
