"""
Subscriber endpoints.
"""
from typing import Optional

from ..models.subscribers import (
    ListSubscriberOptions,
    SubscriberCount,
    SubscriberItem,
    SubscriberList,
    SubscriberWrite,
)
from .base import ResourceService, path_id

SUBSCRIBER_ENDPOINT = "/subscribers"


class SubscriberService(ResourceService):
    def list(self, options: Optional[ListSubscriberOptions] = None):
        """List subscribers, newest first; cursor paginated."""
        return self._dispatcher.execute("GET", SUBSCRIBER_ENDPOINT, options, SubscriberList)

    def count(self):
        """Total subscriber count (``limit=0`` returns meta only)."""
        return self._dispatcher.execute("GET", f"{SUBSCRIBER_ENDPOINT}?limit=0", None, SubscriberCount)

    def get(self, subscriber_id: str = "", email: str = ""):
        """Fetch one subscriber by id or by email address."""
        key = subscriber_id or email
        return self._dispatcher.execute("GET", f"{SUBSCRIBER_ENDPOINT}/{path_id(key)}", None, SubscriberItem)

    def create(self, subscriber: SubscriberWrite):
        return self._dispatcher.execute("POST", SUBSCRIBER_ENDPOINT, subscriber, SubscriberItem)

    def update(self, subscriber: SubscriberWrite):
        """Upsert: the API matches on email and updates an existing subscriber."""
        return self._dispatcher.execute("POST", SUBSCRIBER_ENDPOINT, subscriber, SubscriberItem)

    def delete(self, subscriber_id: str):
        return self._dispatcher.execute("DELETE", f"{SUBSCRIBER_ENDPOINT}/{path_id(subscriber_id)}")
