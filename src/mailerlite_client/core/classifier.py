"""
Response classification: success, or one of the typed API errors.
"""
import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..config import HEADER_RATE_REMAINING
from ..errors import ApiError, AuthError, RateLimitError, ValidationError
from ..types import ApiResponse
from .rate_tracker import get_header, parse_rate

logger = logging.getLogger("mailerlite_client.classifier")

STATUS_ACCEPTED = 202
STATUS_UNAUTHORIZED = 401
STATUS_UNPROCESSABLE = 422
STATUS_TOO_MANY_REQUESTS = 429


def is_success(status_code: int) -> bool:
    if status_code == STATUS_ACCEPTED:
        return True
    return 200 <= status_code <= 299


def _as_field_errors(raw: Any) -> Optional[Dict[str, List[str]]]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        return None
    result: Dict[str, List[str]] = {}
    for key, messages in raw.items():
        if not isinstance(messages, list) or not all(isinstance(m, str) for m in messages):
            return None
        result[str(key)] = list(messages)
    return result


def parse_error_body(body: bytes) -> Tuple[str, Dict[str, List[str]]]:
    """
    Best-effort extraction of ``{message, errors}`` from an error body.

    Anything that does not parse into that shape is returned whole as the
    message with an empty error map. Never raises.
    """
    if not body:
        return "", {}

    text = body.decode("utf-8", errors="replace")
    try:
        data = json.loads(text)
    except ValueError:
        return text, {}

    if not isinstance(data, dict):
        return text, {}

    message = data.get("message", "")
    errors = _as_field_errors(data.get("errors"))
    if not isinstance(message, str) or errors is None:
        return text, {}
    return message, errors


def classify_response(
    method: str,
    url: str,
    status_code: int,
    headers: Mapping[str, str],
    body: bytes,
    response: Optional[ApiResponse] = None,
) -> Optional[ApiError]:
    """
    Map a completed response to None (success) or a typed error.

    Args:
        method: Request method
        url: Request URL
        status_code: Response status
        headers: Response headers
        body: Raw response body
        response: Response metadata to attach to the error

    Returns:
        None on success, otherwise the ApiError subclass matching the status
    """
    if is_success(status_code):
        return None

    message, errors = parse_error_body(body)
    logger.debug(f"classify_response: {method} {url} status={status_code} message={message!r}")

    if status_code == STATUS_UNAUTHORIZED:
        return AuthError(method, url, status_code, message, errors, response)

    if status_code == STATUS_TOO_MANY_REQUESTS and get_header(headers, HEADER_RATE_REMAINING) == "0":
        return RateLimitError(
            method,
            url,
            status_code,
            rate=parse_rate(headers),
            message=message,
            response=response,
        )

    if status_code == STATUS_UNPROCESSABLE:
        return ValidationError(method, url, status_code, message, errors, response)

    return ApiError(method, url, status_code, message, errors, response)
