"""
Segment endpoints.
"""
from typing import Optional

from ..models.segments import ListSegmentOptions, ListSegmentSubscriberOptions, SegmentItem, SegmentList
from ..models.subscribers import SubscriberList
from .base import ResourceService, path_id

SEGMENT_ENDPOINT = "/segments"


class SegmentService(ResourceService):
    def list(self, options: Optional[ListSegmentOptions] = None):
        return self._dispatcher.execute("GET", SEGMENT_ENDPOINT, options, SegmentList)

    def update(self, segment_id: str, name: str):
        path = f"{SEGMENT_ENDPOINT}/{path_id(segment_id)}"
        return self._dispatcher.execute("PUT", path, {"name": name}, SegmentItem)

    def delete(self, segment_id: str):
        return self._dispatcher.execute("DELETE", f"{SEGMENT_ENDPOINT}/{path_id(segment_id)}")

    def subscribers(self, options: ListSegmentSubscriberOptions):
        path = f"{SEGMENT_ENDPOINT}/{path_id(options.segment_id)}/subscribers"
        return self._dispatcher.execute("GET", path, options, SubscriberList)
