"""
Custom subscriber field endpoints.
"""
from typing import Optional

from ..models.fields import FieldItem, FieldList, ListFieldOptions
from .base import ResourceService, path_id

FIELD_ENDPOINT = "/fields"


class FieldService(ResourceService):
    def list(self, options: Optional[ListFieldOptions] = None):
        return self._dispatcher.execute("GET", FIELD_ENDPOINT, options, FieldList)

    def create(self, name: str, field_type: str):
        """Create a field; ``field_type`` is one of text, number or date."""
        return self._dispatcher.execute("POST", FIELD_ENDPOINT, {"name": name, "type": field_type}, FieldItem)

    def update(self, field_id: str, name: str):
        return self._dispatcher.execute("PUT", f"{FIELD_ENDPOINT}/{path_id(field_id)}", {"name": name}, FieldItem)

    def delete(self, field_id: str):
        return self._dispatcher.execute("DELETE", f"{FIELD_ENDPOINT}/{path_id(field_id)}")
