"""
Group endpoints, including subscriber assignment.
"""
from typing import Optional

from ..models.groups import GroupItem, GroupList, ListGroupOptions, ListGroupSubscriberOptions
from ..models.subscribers import SubscriberList
from .base import ResourceService, path_id

GROUP_ENDPOINT = "/groups"


class GroupService(ResourceService):
    def list(self, options: Optional[ListGroupOptions] = None):
        return self._dispatcher.execute("GET", GROUP_ENDPOINT, options, GroupList)

    def create(self, name: str):
        return self._dispatcher.execute("POST", GROUP_ENDPOINT, {"name": name}, GroupItem)

    def update(self, group_id: str, name: str):
        return self._dispatcher.execute("PUT", f"{GROUP_ENDPOINT}/{path_id(group_id)}", {"name": name}, GroupItem)

    def delete(self, group_id: str):
        return self._dispatcher.execute("DELETE", f"{GROUP_ENDPOINT}/{path_id(group_id)}")

    def subscribers(self, options: ListGroupSubscriberOptions):
        """List the subscribers in ``options.group_id``."""
        path = f"{GROUP_ENDPOINT}/{path_id(options.group_id)}/subscribers"
        return self._dispatcher.execute("GET", path, options, SubscriberList)

    def assign(self, group_id: str, subscriber_id: str):
        path = f"/subscribers/{path_id(subscriber_id)}/groups/{path_id(group_id)}"
        return self._dispatcher.execute("POST", path, None, GroupItem)

    def unassign(self, group_id: str, subscriber_id: str):
        path = f"/subscribers/{path_id(subscriber_id)}/groups/{path_id(group_id)}"
        return self._dispatcher.execute("DELETE", path)
