"""
Custom field payloads.
"""
from .common import ApiModel, ItemEnvelope, ListEnvelope, ListOptions


class SubscriberField(ApiModel):
    id: str
    name: str = ""
    key: str = ""
    type: str = ""


class ListFieldOptions(ListOptions):
    sort: str = ""


class FieldList(ListEnvelope[SubscriberField]):
    pass


class FieldItem(ItemEnvelope[SubscriberField]):
    pass
