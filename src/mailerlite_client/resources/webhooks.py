"""
Webhook endpoints.
"""
from typing import Optional

from ..models.webhooks import (
    CreateWebhookOptions,
    ListWebhookOptions,
    UpdateWebhookOptions,
    WebhookItem,
    WebhookList,
)
from .base import ResourceService, path_id

WEBHOOK_ENDPOINT = "/webhooks"


class WebhookService(ResourceService):
    def list(self, options: Optional[ListWebhookOptions] = None):
        return self._dispatcher.execute("GET", WEBHOOK_ENDPOINT, options, WebhookList)

    def get(self, webhook_id: str):
        return self._dispatcher.execute("GET", f"{WEBHOOK_ENDPOINT}/{path_id(webhook_id)}", None, WebhookItem)

    def create(self, webhook: CreateWebhookOptions):
        return self._dispatcher.execute("POST", WEBHOOK_ENDPOINT, webhook, WebhookItem)

    def update(self, webhook: UpdateWebhookOptions):
        path = f"{WEBHOOK_ENDPOINT}/{path_id(webhook.webhook_id)}"
        return self._dispatcher.execute("PUT", path, webhook, WebhookItem)

    def delete(self, webhook_id: str):
        return self._dispatcher.execute("DELETE", f"{WEBHOOK_ENDPOINT}/{path_id(webhook_id)}")
