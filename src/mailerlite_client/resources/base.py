"""
Base class for resource services.
"""
from typing import Union
from urllib.parse import quote

from ..core.dispatcher import AsyncDispatcher, SyncDispatcher

Dispatcher = Union[SyncDispatcher, AsyncDispatcher]


def path_id(value: str) -> str:
    """Escape an id (or email) for use as a single path segment."""
    if not value:
        raise ValueError("id must not be empty")
    return quote(str(value), safe="@")


class ResourceService:
    """
    Holds the dispatcher and knows only paths and payload shapes.

    Methods return whatever the dispatcher's ``execute`` returns, so the same
    service works for both the sync client (a ``(value, response)`` tuple)
    and the async client (an awaitable of that tuple).
    """

    def __init__(self, dispatcher: Dispatcher):
        self._dispatcher = dispatcher
