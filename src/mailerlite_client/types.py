"""
Type definitions for mailerlite_client.
"""
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict, Literal, Optional

# HTTP methods accepted by the dispatcher
HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]

BODY_METHODS = ("POST", "PUT", "DELETE")


@dataclass(frozen=True)
class RateWindow:
    """Rate limit state as reported by the most recent response headers."""

    limit: int = 0
    """Requests per minute the client is limited to"""

    remaining: int = 0
    """Requests left in the current minute"""

    retry_after: Optional[timedelta] = None
    """Wait advised by the server before calling again"""

    @property
    def retry_after_seconds(self) -> Optional[int]:
        if self.retry_after is None:
            return None
        return int(self.retry_after.total_seconds())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "limit": self.limit,
            "remaining": self.remaining,
            "retry_after": self.retry_after_seconds,
        }


@dataclass(frozen=True)
class Filter:
    """A single name/value predicate, sent as ``filter[name]=value``."""

    name: str
    value: Any


@dataclass
class ApiResponse:
    """Metadata of a response actually received from the API."""

    method: str
    url: str
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    rate: RateWindow = field(default_factory=RateWindow)
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")
