"""
Timezone endpoint.
"""
from ..models.timezones import TimezoneList
from .base import ResourceService

TIMEZONE_ENDPOINT = "/timezones"


class TimezoneService(ResourceService):
    def list(self):
        return self._dispatcher.execute("GET", TIMEZONE_ENDPOINT, None, TimezoneList)
