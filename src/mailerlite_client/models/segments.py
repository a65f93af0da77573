"""
Segment payloads.
"""
from typing import Optional

from pydantic import Field

from .common import ApiModel, ItemEnvelope, ListEnvelope, ListOptions, RatePair


class Segment(ApiModel):
    id: str
    name: str = ""
    total: int = 0
    open_rate: Optional[RatePair] = None
    click_rate: Optional[RatePair] = None
    created_at: Optional[str] = None


class ListSegmentOptions(ListOptions):
    pass


class ListSegmentSubscriberOptions(ListOptions):
    """Segment subscribers page with a numeric ``after`` cursor."""

    segment_id: str = Field(default="", exclude=True)
    after: int = 0


class SegmentList(ListEnvelope[Segment]):
    pass


class SegmentItem(ItemEnvelope[Segment]):
    pass
