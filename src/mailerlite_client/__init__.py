"""
mailerlite_client - typed client for the MailerLite REST API, built on httpx.

Example:
    from mailerlite_client import MailerLite, Filter
    from mailerlite_client.models import ListSubscriberOptions

    with MailerLite(api_key="...") as ml:
        page, response = ml.subscribers.list(
            ListSubscriberOptions(filters=[Filter("status", "active")], limit=25)
        )
"""
from .client import AsyncMailerLite, MailerLite, create_async_client, create_client
from .config import API_VERSION, DEFAULT_BASE_URL, ClientConfig, TimeoutConfig
from .core import AsyncDispatcher, RateTracker, SyncDispatcher
from .errors import (
    ApiError,
    AuthError,
    DecodeError,
    MailerLiteError,
    RateLimitError,
    RequestCancelledError,
    TransportError,
    ValidationError,
)
from .types import ApiResponse, Filter, RateWindow
from .version import VERSION

__version__ = VERSION

__all__ = [
    # Clients
    "AsyncMailerLite",
    "MailerLite",
    "create_async_client",
    "create_client",
    # Dispatch
    "AsyncDispatcher",
    "RateTracker",
    "SyncDispatcher",
    # Config
    "API_VERSION",
    "DEFAULT_BASE_URL",
    "ClientConfig",
    "TimeoutConfig",
    # Errors
    "ApiError",
    "AuthError",
    "DecodeError",
    "MailerLiteError",
    "RateLimitError",
    "RequestCancelledError",
    "TransportError",
    "ValidationError",
    # Types
    "ApiResponse",
    "Filter",
    "RateWindow",
]
