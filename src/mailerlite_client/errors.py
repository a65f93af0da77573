"""
Error taxonomy for mailerlite_client.

Every failure surfaced by the dispatcher is one of these exceptions:

- ApiError: any non-2xx response (ValidationError, AuthError and
  RateLimitError refine it)
- TransportError: the network call itself failed
- RequestCancelledError: the caller's cancel signal fired
- DecodeError: a successful response could not be decoded
"""
from typing import Any, Dict, List, Optional

from .types import ApiResponse, RateWindow


class MailerLiteError(Exception):
    """Base class for every error raised by the client."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for JSON output."""
        return {"error": self.message, "type": type(self).__name__}


class ApiError(MailerLiteError):
    """The API answered with a non-success status."""

    def __init__(
        self,
        method: str,
        url: str,
        status_code: int,
        message: str = "",
        errors: Optional[Dict[str, List[str]]] = None,
        response: Optional[ApiResponse] = None,
    ):
        super().__init__(message)
        self.method = method
        self.url = url
        self.status_code = status_code
        self.errors: Dict[str, List[str]] = errors or {}
        self.response = response

    def __str__(self) -> str:
        return f"{self.method} {self.url}: {self.status_code} {self.message} {self.errors}"

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["method"] = self.method
        result["url"] = self.url
        result["status"] = self.status_code
        if self.errors:
            result["errors"] = self.errors
        return result


class ValidationError(ApiError):
    """422 with a per-field error map."""


class AuthError(ApiError):
    """401: the API key was rejected."""


class RateLimitError(ApiError):
    """
    Rate limit exhausted.

    Raised for a 429 reporting zero remaining requests, and locally (status
    403, ``preempted=True``) when the last known window is already exhausted.
    """

    def __init__(
        self,
        method: str,
        url: str,
        status_code: int,
        rate: RateWindow,
        message: str = "",
        response: Optional[ApiResponse] = None,
        preempted: bool = False,
    ):
        super().__init__(method, url, status_code, message, None, response)
        self.rate = rate
        self.preempted = preempted

    def __str__(self) -> str:
        retry = self.rate.retry_after_seconds
        retry_text = f"{retry}s" if retry is not None else "unknown"
        return f"{self.method} {self.url}: {self.status_code} {self.message} [retry after {retry_text}]"

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["rate"] = self.rate.to_dict()
        result["preempted"] = self.preempted
        return result


class TransportError(MailerLiteError):
    """The request never produced a response (DNS, connect, timeout...)."""

    def __init__(self, method: str, url: str, cause: Exception):
        super().__init__(f"{method} {url}: {type(cause).__name__}: {cause}")
        self.method = method
        self.url = url
        self.cause = cause


class RequestCancelledError(MailerLiteError):
    """The caller cancelled the request before a response arrived."""

    def __init__(self, method: str, url: str):
        super().__init__(f"{method} {url}: request cancelled")
        self.method = method
        self.url = url


class DecodeError(MailerLiteError):
    """Successful status, but the body does not match the expected type."""

    def __init__(self, message: str, response: ApiResponse, cause: Optional[Exception] = None):
        super().__init__(message)
        self.response = response
        self.cause = cause

    def __str__(self) -> str:
        return f"{self.response.method} {self.response.url}: {self.response.status_code} {self.message}"
