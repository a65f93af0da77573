"""
Client facades: MailerLite (sync) and AsyncMailerLite (async).
"""
import logging
from typing import Dict, Optional, Union

import httpx

from .config import ClientConfig, TimeoutConfig
from .core.dispatcher import AsyncDispatcher, SyncDispatcher
from .core.rate_tracker import RateTracker
from .resources import (
    AutomationService,
    CampaignService,
    FieldService,
    FormService,
    GroupService,
    SegmentService,
    SubscriberService,
    TimezoneService,
    WebhookService,
)
from .types import RateWindow

logger = logging.getLogger("mailerlite_client.client")


def _build_config(
    api_key: Optional[str],
    base_url: Optional[str],
    timeout: Union[TimeoutConfig, float, None],
    headers: Optional[Dict[str, str]],
    trace: bool,
) -> ClientConfig:
    return ClientConfig(
        api_key=api_key,
        base_url=base_url,
        timeout=timeout,
        headers=headers or {},
        trace=trace,
    )


class _ClientFacade:
    """Wires one dispatcher into every resource service."""

    _dispatcher: Union[SyncDispatcher, AsyncDispatcher]

    def _init_services(self) -> None:
        self.subscribers = SubscriberService(self._dispatcher)
        self.groups = GroupService(self._dispatcher)
        self.segments = SegmentService(self._dispatcher)
        self.fields = FieldService(self._dispatcher)
        self.forms = FormService(self._dispatcher)
        self.campaigns = CampaignService(self._dispatcher)
        self.automations = AutomationService(self._dispatcher)
        self.webhooks = WebhookService(self._dispatcher)
        self.timezones = TimezoneService(self._dispatcher)

    @property
    def dispatcher(self) -> Union[SyncDispatcher, AsyncDispatcher]:
        return self._dispatcher

    @property
    def rate(self) -> RateWindow:
        """Rate window recorded from the most recent response."""
        return self._dispatcher.rate_tracker.snapshot()

    @property
    def api_key(self) -> str:
        return self._dispatcher.api_key

    @api_key.setter
    def api_key(self, value: str) -> None:
        self._dispatcher.api_key = value

    @property
    def base_url(self) -> str:
        return self._dispatcher.config.base_url


class MailerLite(_ClientFacade):
    """
    Synchronous MailerLite API client.

    Example:
        with MailerLite(api_key="...") as ml:
            subscribers, response = ml.subscribers.list(ListSubscriberOptions(limit=10))
            print(response.rate.remaining)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Union[TimeoutConfig, float, None] = None,
        headers: Optional[Dict[str, str]] = None,
        trace: bool = False,
        httpx_client: Optional[httpx.Client] = None,
        rate_tracker: Optional[RateTracker] = None,
        config: Optional[ClientConfig] = None,
    ):
        config = config or _build_config(api_key, base_url, timeout, headers, trace)
        self._dispatcher = SyncDispatcher(config, httpx_client, rate_tracker)
        self._init_services()
        logger.debug(f"MailerLite: created for {self.base_url}")

    def execute(self, method, path, payload=None, result_type=None, timeout=None):
        """Call any endpoint directly through the dispatcher."""
        return self._dispatcher.execute(method, path, payload, result_type, timeout=timeout)

    def close(self) -> None:
        self._dispatcher.close()

    def __enter__(self) -> "MailerLite":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class AsyncMailerLite(_ClientFacade):
    """
    Asynchronous MailerLite API client.

    Example:
        async with AsyncMailerLite(api_key="...") as ml:
            groups, response = await ml.groups.list()
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Union[TimeoutConfig, float, None] = None,
        headers: Optional[Dict[str, str]] = None,
        trace: bool = False,
        httpx_client: Optional[httpx.AsyncClient] = None,
        rate_tracker: Optional[RateTracker] = None,
        config: Optional[ClientConfig] = None,
    ):
        config = config or _build_config(api_key, base_url, timeout, headers, trace)
        self._dispatcher = AsyncDispatcher(config, httpx_client, rate_tracker)
        self._init_services()
        logger.debug(f"AsyncMailerLite: created for {self.base_url}")

    async def execute(self, method, path, payload=None, result_type=None, cancel_event=None, timeout=None):
        """Call any endpoint directly through the dispatcher."""
        return await self._dispatcher.execute(
            method, path, payload, result_type, cancel_event=cancel_event, timeout=timeout
        )

    async def close(self) -> None:
        await self._dispatcher.close()

    async def __aenter__(self) -> "AsyncMailerLite":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


def create_client(config: Optional[ClientConfig] = None, **kwargs) -> MailerLite:
    """Create a synchronous client; falls back to MAILERLITE_* env vars."""
    return MailerLite(config=config, **kwargs)


def create_async_client(config: Optional[ClientConfig] = None, **kwargs) -> AsyncMailerLite:
    """Create an asynchronous client; falls back to MAILERLITE_* env vars."""
    return AsyncMailerLite(config=config, **kwargs)
