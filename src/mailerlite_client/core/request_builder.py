"""
Request builder utilities for mailerlite_client.
"""
import json
import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel

from ..config import HEADER_API_VERSION, ResolvedConfig
from ..types import BODY_METHODS
from .query_encoder import QueryOptions, add_options

logger = logging.getLogger("mailerlite_client.request_builder")


def build_url(
    base_url: str,
    path: str,
    method: str = "GET",
    options: QueryOptions = None,
) -> str:
    """Build the full URL; GET options become the query string."""
    if path.startswith(("http://", "https://")):
        url = path
    elif not path:
        url = base_url
    else:
        if not path.startswith("/"):
            path = "/" + path
        url = f"{base_url.rstrip('/')}{path}"

    if method == "GET":
        url = add_options(url, options)

    return url


def build_auth_header(api_key: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {api_key}"}


def build_headers(
    config: ResolvedConfig,
    api_key: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
) -> Dict[str, str]:
    """
    Build request headers.

    Config-level extra headers go first so the protocol headers always win.
    """
    result = dict(config.headers)

    if headers:
        result.update(headers)

    if config.user_agent:
        result["User-Agent"] = config.user_agent
    result[HEADER_API_VERSION] = config.api_version
    result["Content-Type"] = "application/json"
    result["Accept"] = "application/json"
    result.update(build_auth_header(api_key or config.api_key))

    return result


def serialize_payload(payload: Any) -> Any:
    """Turn a payload into plain JSON-compatible data."""
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(payload, list):
        return [serialize_payload(item) for item in payload]
    return payload


def build_body(method: str, payload: Any = None) -> Optional[bytes]:
    """JSON body for POST/PUT/DELETE; GET never carries a body."""
    if method not in BODY_METHODS or payload is None:
        return None
    return json.dumps(serialize_payload(payload)).encode("utf-8")
