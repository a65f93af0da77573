"""
Automation endpoints (read-only).
"""
from typing import Optional

from ..models.automations import (
    AutomationItem,
    AutomationList,
    AutomationSubscriberList,
    ListAutomationOptions,
    ListAutomationSubscriberOptions,
)
from .base import ResourceService, path_id

AUTOMATION_ENDPOINT = "/automations"


class AutomationService(ResourceService):
    def list(self, options: Optional[ListAutomationOptions] = None):
        return self._dispatcher.execute("GET", AUTOMATION_ENDPOINT, options, AutomationList)

    def get(self, automation_id: str):
        path = f"{AUTOMATION_ENDPOINT}/{path_id(automation_id)}"
        return self._dispatcher.execute("GET", path, None, AutomationItem)

    def subscribers(self, options: ListAutomationSubscriberOptions):
        """Activity of subscribers that entered ``options.automation_id``."""
        path = f"{AUTOMATION_ENDPOINT}/{path_id(options.automation_id)}/activity"
        return self._dispatcher.execute("GET", path, options, AutomationSubscriberList)
