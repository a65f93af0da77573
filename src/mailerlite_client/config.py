"""
Configuration for mailerlite_client.
"""
import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Union
from urllib.parse import urlparse

from .version import VERSION

logger = logging.getLogger("mailerlite_client.config")

API_VERSION = "2023-18-04"
DEFAULT_BASE_URL = "https://connect.mailerlite.com/api"
DEFAULT_USER_AGENT = f"mailerlite-client/{VERSION}"

HEADER_API_VERSION = "X-Version"
HEADER_RATE_LIMIT = "X-RateLimit-Limit"
HEADER_RATE_REMAINING = "X-RateLimit-Remaining"
HEADER_RATE_RETRY_AFTER = "Retry-After"

ENV_API_KEY = "MAILERLITE_API_KEY"
ENV_BASE_URL = "MAILERLITE_BASE_URL"
ENV_TRACE = "MAILERLITE_TRACE"


def mask_sensitive(value: Optional[str], visible_chars: int = 10) -> str:
    """Mask sensitive value for safe logging."""
    if value is None:
        return "<None>"
    if len(value) <= visible_chars:
        return "*" * len(value)
    return value[:visible_chars] + "*" * (len(value) - visible_chars)


def is_ssl_verify_disabled_by_env() -> bool:
    """
    Check if SSL verification is disabled via environment variables.

    Returns True if any of these are set:
    - NODE_TLS_REJECT_UNAUTHORIZED=0
    - SSL_CERT_VERIFY=0
    """
    node_tls = os.environ.get("NODE_TLS_REJECT_UNAUTHORIZED", "")
    ssl_cert_verify = os.environ.get("SSL_CERT_VERIFY", "")
    return node_tls == "0" or ssl_cert_verify == "0"


@dataclass
class TimeoutConfig:
    """Timeout configuration in seconds."""

    connect: float = 5.0
    read: float = 30.0
    write: float = 10.0


@dataclass
class ClientConfig:
    """Client configuration."""

    api_key: Optional[str] = None
    base_url: Optional[str] = None
    api_version: str = API_VERSION
    user_agent: str = DEFAULT_USER_AGENT
    timeout: Union[TimeoutConfig, float, None] = None
    headers: Dict[str, str] = field(default_factory=dict)
    trace: bool = False

    def __repr__(self) -> str:
        """Safe repr that masks the API key."""
        return (
            f"ClientConfig(api_key={mask_sensitive(self.api_key)!r}, "
            f"base_url={self.base_url!r}, "
            f"api_version={self.api_version!r}, "
            f"user_agent={self.user_agent!r}, "
            f"timeout={self.timeout!r}, "
            f"trace={self.trace!r})"
        )


DEFAULT_TIMEOUT = TimeoutConfig()


@dataclass
class ResolvedConfig:
    """Resolved client configuration with defaults applied."""

    api_key: str
    base_url: str
    api_version: str
    user_agent: str
    timeout: TimeoutConfig
    headers: Dict[str, str]
    trace: bool

    def __repr__(self) -> str:
        return (
            f"ResolvedConfig(api_key={mask_sensitive(self.api_key)!r}, "
            f"base_url={self.base_url!r}, "
            f"api_version={self.api_version!r}, "
            f"trace={self.trace!r})"
        )


def normalize_timeout(timeout: Union[TimeoutConfig, float, None]) -> TimeoutConfig:
    """Normalize timeout config."""
    if timeout is None:
        return DEFAULT_TIMEOUT
    if isinstance(timeout, (int, float)):
        return TimeoutConfig(connect=timeout, read=timeout, write=timeout)
    return timeout


def validate_config(config: ClientConfig) -> None:
    """Validate client configuration."""
    if not config.api_key:
        raise ValueError(f"api_key is required (or set {ENV_API_KEY})")

    if not config.base_url:
        raise ValueError("base_url is required")

    parsed = urlparse(config.base_url)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError(f"Invalid base_url: {config.base_url}")

    if config.api_key.startswith(("http://", "https://")):
        logger.error(
            f"ClientConfig: api_key appears to be a URL (starts with http). "
            f"This is likely a misconfiguration, got: {config.api_key[:30]}..."
        )


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1", "true", "yes", "on")


def resolve_config(config: Optional[ClientConfig] = None) -> ResolvedConfig:
    """Resolve client configuration with environment fallbacks and defaults."""
    config = config or ClientConfig()

    merged = ClientConfig(
        api_key=config.api_key or os.environ.get(ENV_API_KEY),
        base_url=config.base_url or os.environ.get(ENV_BASE_URL) or DEFAULT_BASE_URL,
        api_version=config.api_version or API_VERSION,
        user_agent=config.user_agent or DEFAULT_USER_AGENT,
        timeout=config.timeout,
        headers=dict(config.headers),
        trace=config.trace or _env_flag(ENV_TRACE),
    )
    validate_config(merged)

    return ResolvedConfig(
        api_key=merged.api_key,
        base_url=merged.base_url.rstrip("/"),
        api_version=merged.api_version,
        user_agent=merged.user_agent,
        timeout=normalize_timeout(merged.timeout),
        headers=merged.headers,
        trace=merged.trace,
    )
