"""
Form endpoints.
"""
from ..models.forms import FormItem, FormList, ListFormOptions, ListFormSubscriberOptions
from ..models.subscribers import SubscriberList
from .base import ResourceService, path_id

FORM_ENDPOINT = "/forms"


class FormService(ResourceService):
    def list(self, options: ListFormOptions):
        """List forms of ``options.type`` (popup, embedded or promotion)."""
        path = f"{FORM_ENDPOINT}/{path_id(options.type)}"
        return self._dispatcher.execute("GET", path, options, FormList)

    def get(self, form_id: str):
        return self._dispatcher.execute("GET", f"{FORM_ENDPOINT}/{path_id(form_id)}", None, FormItem)

    def update(self, form_id: str, name: str):
        return self._dispatcher.execute("PUT", f"{FORM_ENDPOINT}/{path_id(form_id)}", {"name": name}, FormItem)

    def delete(self, form_id: str):
        return self._dispatcher.execute("DELETE", f"{FORM_ENDPOINT}/{path_id(form_id)}")

    def subscribers(self, options: ListFormSubscriberOptions):
        path = f"{FORM_ENDPOINT}/{path_id(options.form_id)}/subscribers"
        return self._dispatcher.execute("GET", path, options, SubscriberList)
