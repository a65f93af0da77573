"""
Group payloads.
"""
from typing import Optional

from pydantic import Field

from .common import ApiModel, ItemEnvelope, ListEnvelope, ListOptions, RatePair


class Group(ApiModel):
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


class ListGroupOptions(ListOptions):
    sort: str = ""


class ListGroupSubscriberOptions(ListOptions):
    group_id: str = Field(default="", exclude=True)


class GroupList(ListEnvelope[Group]):
    pass


class GroupItem(ItemEnvelope[Group]):
    pass
