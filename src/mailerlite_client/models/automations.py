"""
Automation payloads.
"""
from typing import Any, List, Optional

from pydantic import Field

from .campaigns import Email
from .common import ApiModel, ItemEnvelope, ListEnvelope, ListOptions, RatePair


class TriggerData(ApiModel):
    track_ecommerce: bool = False
    repeatable: bool = False
    valid: bool = False


class AutomationEmailMeta(ApiModel):
    id: str = ""
    name: str = ""
    url: Any = None


class Condition(ApiModel):
    type: str = ""
    email_id: Optional[str] = None
    action: Optional[str] = None
    link_id: Any = None
    email: Optional[AutomationEmailMeta] = None


class Step(ApiModel):
    id: str = ""
    type: str = ""
    parent_id: Optional[str] = None
    unit: Optional[str] = None
    complete: bool = False
    created_at: Optional[str] = None
    yes_step_id: Optional[str] = None
    no_step_id: Optional[str] = None
    broken: bool = False
    updated_at: Optional[str] = None
    value: Any = None
    matching_type: Optional[str] = None
    description: str = ""
    name: Optional[str] = None
    subject: Optional[str] = None
    from_: Optional[str] = Field(default=None, alias="from")
    from_name: Optional[str] = None
    email_id: Optional[str] = None
    email: Optional[Email] = None
    conditions: Optional[List[Condition]] = None
    language_id: Optional[int] = None
    track_opens: bool = False
    google_analytics: Any = None
    tracking_was_disabled: bool = False


class AutomationGroupMeta(ApiModel):
    id: str = ""
    name: str = ""
    url: Any = None


class Trigger(ApiModel):
    id: str = ""
    type: str = ""
    group_id: Optional[str] = None
    group: Optional[AutomationGroupMeta] = None
    exclude_group_ids: List[Any] = Field(default_factory=list)
    excluded_groups: List[Any] = Field(default_factory=list)
    broken: bool = False


class AutomationStats(ApiModel):
    completed_subscribers_count: int = 0
    subscribers_in_queue_count: int = 0
    bounce_rate: Optional[RatePair] = None
    click_to_open_rate: Optional[RatePair] = None
    sent: int = 0
    opens_count: int = 0
    unique_opens_count: Any = None
    open_rate: Optional[RatePair] = None
    clicks_count: int = 0
    unique_clicks_count: Any = None
    click_rate: Optional[RatePair] = None
    unsubscribes_count: int = 0
    unsubscribe_rate: Optional[RatePair] = None
    spam_count: int = 0
    spam_rate: Optional[RatePair] = None
    hard_bounces_count: int = 0
    hard_bounce_rate: Optional[RatePair] = None
    soft_bounces_count: int = 0
    soft_bounce_rate: Optional[RatePair] = None


class Automation(ApiModel):
    id: str
    name: str = ""
    enabled: bool = False
    trigger_data: Optional[TriggerData] = None
    steps: List[Step] = Field(default_factory=list)
    triggers: List[Trigger] = Field(default_factory=list)
    complete: bool = False
    broken: bool = False
    warnings: List[Any] = Field(default_factory=list)
    emails_count: int = 0
    first_email_screenshot_url: Any = None
    stats: Optional[AutomationStats] = None
    created_at: Optional[str] = None
    has_banned_content: bool = False
    qualified_subscribers_count: int = 0


class AutomationSubscriberMeta(ApiModel):
    id: str = ""
    email: str = ""


class StepRun(ApiModel):
    id: str = ""
    step_id: str = ""
    description: str = ""
    scheduled_for: Optional[str] = None


class AutomationSubscriber(ApiModel):
    id: str
    status: str = ""
    date: Optional[str] = None
    reason: Any = None
    reason_description: Optional[str] = None
    subscriber: Optional[AutomationSubscriberMeta] = None
    step_runs: List[StepRun] = Field(default_factory=list, alias="stepRuns")
    next_step: Optional[Step] = Field(default=None, alias="nextStep")
    current_step: Optional[Step] = Field(default=None, alias="currentStep")


class ListAutomationOptions(ListOptions):
    pass


class ListAutomationSubscriberOptions(ListOptions):
    automation_id: str = Field(default="", exclude=True)


class AutomationList(ListEnvelope[Automation]):
    pass


class AutomationItem(ItemEnvelope[Automation]):
    pass


class AutomationSubscriberList(ListEnvelope[AutomationSubscriber]):
    pass
