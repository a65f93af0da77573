"""
Shared response shapes: pagination links, meta and rate pairs.
"""
from typing import Any, Generic, List, Optional, TypeVar
from urllib.parse import parse_qs, urlparse

from pydantic import BaseModel, Field

from ..types import Filter

T = TypeVar("T")


class ApiModel(BaseModel):
    """Base for every payload; unknown keys are kept."""

    model_config = {"extra": "allow", "populate_by_name": True}


def _query_param(url: str, name: str) -> str:
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError(f"Invalid page URL: {url}")
    values = parse_qs(parsed.query).get(name)
    return values[0] if values else ""


class Links(ApiModel):
    """Pagination links returned with a list."""

    first: Optional[str] = None
    last: Optional[str] = None
    prev: Optional[str] = None
    next: Optional[str] = None

    def next_page_token(self) -> str:
        """Page token to request the next page, "" when there is none."""
        if not self.next:
            return ""
        return _query_param(self.next, "page_token")

    def prev_page_token(self) -> str:
        """Page token to request the previous page, "" when there is none."""
        if not self.prev:
            return ""
        return _query_param(self.prev, "page_token")

    def next_page(self) -> Optional[int]:
        """Page number of the next page for offset pagination."""
        if not self.next:
            return None
        page = _query_param(self.next, "page")
        return int(page) if page else None

    def is_last_page(self) -> bool:
        return not self.next


class MetaLink(ApiModel):
    url: Any = None
    label: str = ""
    active: bool = False


class Aggregations(ApiModel):
    total: int = 0
    draft: int = 0
    ready: int = 0
    sent: int = 0


class Counts(ApiModel):
    all: int = 0
    opened: int = 0
    unopened: int = 0
    clicked: int = 0
    unsubscribed: int = 0
    forwarded: int = 0
    hardbounced: int = 0
    softbounced: int = 0
    junk: int = 0


class Meta(ApiModel):
    """List metadata covering offset, cursor and string-cursor pagination."""

    # offset based
    current_page: int = 0
    from_: Optional[int] = Field(default=None, alias="from")
    last_page: int = 0
    links: List[MetaLink] = Field(default_factory=list)
    path: str = ""
    per_page: int = 0
    to: Optional[int] = None

    aggregations: Optional[Aggregations] = None
    counts: Optional[Counts] = None

    # cursor based
    count: int = 0
    last: int = 0

    total: int = 0
    total_unfiltered: Optional[int] = None

    # string cursor (subscribers)
    next_cursor: Optional[str] = None
    prev_cursor: Optional[str] = None


class RatePair(ApiModel):
    """A rate as both a number and a display string, e.g. open_rate."""

    float_: float = Field(default=0, alias="float")
    string: str = ""


class ListEnvelope(ApiModel, Generic[T]):
    """``{data: [...], links, meta}``"""

    data: List[T] = Field(default_factory=list)
    links: Optional[Links] = None
    meta: Optional[Meta] = None


class ItemEnvelope(ApiModel, Generic[T]):
    """``{data: {...}}``"""

    data: T


class ListOptions(BaseModel):
    """Common GET options; path-only fields are declared with ``exclude=True``."""

    filters: List[Filter] = Field(default_factory=list)
    page: int = 0
    limit: int = 0
