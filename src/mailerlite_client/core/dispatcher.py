"""
Dispatcher: the single choke point for every API call, built on httpx.

Call lifecycle:
    rate check -> (rejected locally | dispatched) -> (transport failed |
    response received) -> rate update -> classified -> (decoded | error)
"""
import asyncio
import json
import logging
from typing import Any, Dict, Optional, Tuple, Type, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .. import trace
from ..config import ClientConfig, ResolvedConfig, is_ssl_verify_disabled_by_env, mask_sensitive, resolve_config
from ..errors import DecodeError, RequestCancelledError, TransportError
from ..types import ApiResponse, HttpMethod
from .classifier import classify_response
from .rate_tracker import RateTracker
from .request_builder import build_body, build_headers, build_url

logger = logging.getLogger("mailerlite_client.dispatcher")

T = TypeVar("T")

ALLOWED_METHODS = ("GET", "POST", "PUT", "DELETE")


def _mask_headers_for_logging(headers: Dict[str, str]) -> Dict[str, str]:
    masked = dict(headers)
    for key in masked:
        if key.lower() == "authorization":
            masked[key] = mask_sensitive(masked[key], 15)
    return masked


def _httpx_timeout(config: ResolvedConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.timeout.connect,
        read=config.timeout.read,
        write=config.timeout.write,
        pool=config.timeout.connect,
    )


def decode_body(response: ApiResponse, result_type: Optional[Type[T]]) -> Optional[T]:
    """
    Decode a successful response body into ``result_type``.

    An empty body, or no result type, decodes to None.

    Raises:
        DecodeError: body is not JSON or does not validate against the type
    """
    if result_type is None or not response.body.strip():
        return None

    try:
        data = json.loads(response.body)
    except ValueError as e:
        raise DecodeError(f"Invalid JSON response: {e}", response, e) from e

    try:
        if isinstance(result_type, type) and issubclass(result_type, BaseModel):
            return result_type.model_validate(data)
        return TypeAdapter(result_type).validate_python(data)
    except PydanticValidationError as e:
        raise DecodeError(
            f"Response does not match {getattr(result_type, '__name__', result_type)}: {e}",
            response,
            e,
        ) from e


class _BaseDispatcher:
    """Request preparation and response handling shared by both dispatchers."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        rate_tracker: Optional[RateTracker] = None,
    ):
        self._config = resolve_config(config)
        self._api_key = self._config.api_key
        self._rate_tracker = rate_tracker or RateTracker()
        self._closed = False

    @property
    def config(self) -> ResolvedConfig:
        return self._config

    @property
    def rate_tracker(self) -> RateTracker:
        return self._rate_tracker

    @property
    def api_key(self) -> str:
        return self._api_key

    @api_key.setter
    def api_key(self, value: str) -> None:
        if not value:
            raise ValueError("api_key must not be empty")
        self._api_key = value

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("Client has been closed")

    def _prepare(
        self,
        method: HttpMethod,
        path: str,
        payload: Any,
    ) -> Tuple[str, str, Dict[str, str], Optional[bytes]]:
        self._ensure_open()
        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}. Must be one of: {ALLOWED_METHODS}")

        url = build_url(self._config.base_url, path, method, payload if method == "GET" else None)
        headers = build_headers(self._config, self._api_key)
        body = build_body(method, payload)

        logger.debug(f"{type(self).__name__}.execute: method={method}, url={url}")
        logger.debug(f"{type(self).__name__}.execute: headers={_mask_headers_for_logging(headers)}")
        return method, url, headers, body

    def _preflight(self, method: str, url: str) -> None:
        preempted = self._rate_tracker.check_before_dispatch(method, url)
        if preempted is not None:
            raise preempted

    def _trace_request(self, method: str, url: str, headers: Dict[str, str], body: Optional[bytes]) -> None:
        if self._config.trace:
            trace.print_request(method, url, headers, body)

    def _transport_failed(self, method: str, url: str, error: httpx.RequestError) -> TransportError:
        logger.error(f"{type(self).__name__}.execute: {method} {url} transport failure: {error!r}")
        return TransportError(method, url, error)

    def _handle_response(
        self,
        method: str,
        url: str,
        response: httpx.Response,
        result_type: Optional[Type[T]],
    ) -> Tuple[Optional[T], ApiResponse]:
        headers = dict(response.headers)
        body = response.content or b""

        # always, success or failure, before classifying
        rate = self._rate_tracker.update(headers)

        meta = ApiResponse(
            method=method,
            url=url,
            status_code=response.status_code,
            headers=headers,
            rate=rate,
            body=body,
        )
        logger.debug(
            f"{type(self).__name__}.execute: {method} {url} -> {meta.status_code} "
            f"(limit={rate.limit}, remaining={rate.remaining})"
        )
        if self._config.trace:
            trace.print_response(url, meta.status_code, headers, body)

        error = classify_response(method, url, meta.status_code, headers, body, meta)
        if error is not None:
            raise error

        return decode_body(meta, result_type), meta


class AsyncDispatcher(_BaseDispatcher):
    """Asynchronous dispatcher."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        httpx_client: Optional[httpx.AsyncClient] = None,
        rate_tracker: Optional[RateTracker] = None,
    ):
        super().__init__(config, rate_tracker)
        if httpx_client is not None:
            self._client = httpx_client
        else:
            self._client = httpx.AsyncClient(
                timeout=_httpx_timeout(self._config),
                verify=not is_ssl_verify_disabled_by_env(),
            )

    async def execute(
        self,
        method: HttpMethod,
        path: str,
        payload: Any = None,
        result_type: Optional[Type[T]] = None,
        cancel_event: Optional[asyncio.Event] = None,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[T], ApiResponse]:
        """
        Execute one API call.

        Args:
            method: GET, POST, PUT or DELETE
            path: Path relative to the API base (e.g. /subscribers)
            payload: Query options for GET, JSON body otherwise
            result_type: pydantic model (or type) to decode a successful body into
            cancel_event: Setting this event aborts the call
            timeout: Per-call timeout override in seconds

        Returns:
            (decoded value, response metadata)

        Raises:
            RateLimitError: rejected locally or by the API
            AuthError, ValidationError, ApiError: non-success status
            TransportError: no response was received
            RequestCancelledError: cancel_event fired first
            DecodeError: body does not match result_type
        """
        method, url, headers, body = self._prepare(method, path, payload)
        self._preflight(method, url)

        if cancel_event is not None and cancel_event.is_set():
            raise RequestCancelledError(method, url)

        self._trace_request(method, url, headers, body)

        extra: Dict[str, Any] = {}
        if timeout is not None:
            extra["timeout"] = timeout
        request = self._client.build_request(method, url, headers=headers, content=body, **extra)

        try:
            response = await self._send(request, method, url, cancel_event)
        except httpx.RequestError as e:
            raise self._transport_failed(method, url, e) from e

        return self._handle_response(method, url, response, result_type)

    async def _send(
        self,
        request: httpx.Request,
        method: str,
        url: str,
        cancel_event: Optional[asyncio.Event],
    ) -> httpx.Response:
        if cancel_event is None:
            return await self._client.send(request)

        send_task = asyncio.ensure_future(self._client.send(request))
        cancel_task = asyncio.ensure_future(cancel_event.wait())
        try:
            done, _ = await asyncio.wait(
                {send_task, cancel_task},
                return_when=asyncio.FIRST_COMPLETED,
            )
        except asyncio.CancelledError:
            send_task.cancel()
            await asyncio.gather(send_task, return_exceptions=True)
            raise
        finally:
            cancel_task.cancel()

        if send_task in done:
            return send_task.result()

        send_task.cancel()
        await asyncio.gather(send_task, return_exceptions=True)
        logger.info(f"AsyncDispatcher.execute: {method} {url} cancelled by caller")
        raise RequestCancelledError(method, url)

    async def close(self) -> None:
        """Close the dispatcher and its httpx client."""
        self._closed = True
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncDispatcher":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class SyncDispatcher(_BaseDispatcher):
    """Synchronous dispatcher."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        httpx_client: Optional[httpx.Client] = None,
        rate_tracker: Optional[RateTracker] = None,
    ):
        super().__init__(config, rate_tracker)
        if httpx_client is not None:
            self._client = httpx_client
        else:
            self._client = httpx.Client(
                timeout=_httpx_timeout(self._config),
                verify=not is_ssl_verify_disabled_by_env(),
            )

    def execute(
        self,
        method: HttpMethod,
        path: str,
        payload: Any = None,
        result_type: Optional[Type[T]] = None,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[T], ApiResponse]:
        """Execute one API call. Same contract as AsyncDispatcher.execute, without cancel_event."""
        method, url, headers, body = self._prepare(method, path, payload)
        self._preflight(method, url)
        self._trace_request(method, url, headers, body)

        extra: Dict[str, Any] = {}
        if timeout is not None:
            extra["timeout"] = timeout
        request = self._client.build_request(method, url, headers=headers, content=body, **extra)

        try:
            response = self._client.send(request)
        except httpx.RequestError as e:
            raise self._transport_failed(method, url, e) from e

        return self._handle_response(method, url, response, result_type)

    def close(self) -> None:
        """Close the dispatcher and its httpx client."""
        self._closed = True
        self._client.close()

    def __enter__(self) -> "SyncDispatcher":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
