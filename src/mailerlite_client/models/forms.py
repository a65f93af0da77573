"""
Form payloads.
"""
from typing import Any, Dict, List, Optional

from pydantic import Field

from .common import ApiModel, ItemEnvelope, ListEnvelope, ListOptions, RatePair


class FormPermissions(ApiModel):
    update: bool = False


class Form(ApiModel):
    id: str
    type: str = ""
    slug: str = ""
    name: str = ""
    created_at: Optional[str] = None
    conversions_count: int = 0
    conversions_rate: Optional[RatePair] = None
    opens_count: int = 0
    settings: Dict[str, Any] = Field(default_factory=dict)
    last_registration_at: Any = None
    active: bool = False
    is_broken: bool = False
    has_content: bool = False
    can: Optional[FormPermissions] = None
    used_in_automations: bool = False
    warnings: List[Any] = Field(default_factory=list)
    double_optin: Any = None
    screenshot_url: Any = None


class ListFormOptions(ListOptions):
    """``type`` is a path segment: popup, embedded or promotion."""

    type: str = Field(default="", exclude=True)
    sort: str = ""


class ListFormSubscriberOptions(ListOptions):
    form_id: str = Field(default="", exclude=True)


class FormList(ListEnvelope[Form]):
    pass


class FormItem(ItemEnvelope[Form]):
    pass
