"""
Rate limit tracking from response headers.

The tracker keeps the window reported by the most recent response and decides
whether a call can be rejected locally, without touching the network.

Known quirk: there is no clock-based expiry. Once the window shows zero
remaining requests with a Retry-After, every call is rejected locally until
``update``/``set`` stores a window with remaining requests again.
"""
import logging
import threading
from datetime import timedelta
from typing import Mapping, Optional

from ..config import HEADER_RATE_LIMIT, HEADER_RATE_REMAINING, HEADER_RATE_RETRY_AFTER
from ..errors import RateLimitError
from ..types import RateWindow

logger = logging.getLogger("mailerlite_client.rate_tracker")

PREEMPTED_STATUS = 403


def get_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    value = headers.get(name)
    if value is None:
        lowered = name.lower()
        for key, candidate in headers.items():
            if key.lower() == lowered:
                return candidate
    return value


def _to_int(value: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        return 0


def parse_rate(headers: Mapping[str, str]) -> RateWindow:
    """Build a RateWindow from response headers; absent headers stay zero/None."""
    limit = 0
    remaining = 0
    retry_after: Optional[timedelta] = None

    value = get_header(headers, HEADER_RATE_LIMIT)
    if value:
        limit = _to_int(value)

    value = get_header(headers, HEADER_RATE_REMAINING)
    if value:
        remaining = _to_int(value)

    value = get_header(headers, HEADER_RATE_RETRY_AFTER)
    if value:
        # integer seconds
        retry_after = timedelta(seconds=_to_int(value))

    return RateWindow(limit=limit, remaining=remaining, retry_after=retry_after)


class RateTracker:
    """
    Holds the latest RateWindow for one client.

    All access goes through a lock held only for the read or the write.
    Concurrent updates are last-write-wins.
    """

    def __init__(self, initial: Optional[RateWindow] = None) -> None:
        self._lock = threading.Lock()
        self._window = initial or RateWindow()

    def snapshot(self) -> RateWindow:
        """Current window (immutable copy)."""
        with self._lock:
            return self._window

    def set(self, window: RateWindow) -> None:
        """Overwrite the window unconditionally."""
        with self._lock:
            self._window = window

    def update(self, headers: Mapping[str, str]) -> RateWindow:
        """Parse headers and overwrite the window; returns the parsed window."""
        window = parse_rate(headers)
        self.set(window)
        return window

    def check_before_dispatch(self, method: str, url: str) -> Optional[RateLimitError]:
        """
        Return a synthetic RateLimitError if the known window is exhausted.

        Args:
            method: HTTP method of the call about to be made
            url: Full URL of the call about to be made

        Returns:
            RateLimitError with status 403 semantics, or None to proceed
        """
        window = self.snapshot()
        if window.remaining == 0 and window.retry_after is not None:
            message = (
                f"API rate limit of {window.limit} still exceeded until "
                f"{window.retry_after_seconds}s, not making remote request."
            )
            logger.warning(f"check_before_dispatch: {method} {url} rejected locally: {message}")
            return RateLimitError(
                method=method,
                url=url,
                status_code=PREEMPTED_STATUS,
                rate=window,
                message=message,
                preempted=True,
            )
        return None
