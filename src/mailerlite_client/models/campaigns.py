"""
Campaign payloads.
"""
from typing import Any, List, Optional

from pydantic import Field

from .common import ApiModel, ItemEnvelope, ListEnvelope, ListOptions, RatePair
from .subscribers import Subscriber


class CampaignSettings(ApiModel):
    track_opens: Any = None
    use_google_analytics: Any = None
    ecommerce_tracking: Any = None


class CampaignFilter(ApiModel):
    operator: str = ""
    args: List[Any] = Field(default_factory=list)


class Stats(ApiModel):
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
    forwards_count: int = 0
    click_to_open_rate: Optional[RatePair] = None


class Email(ApiModel):
    id: str
    account_id: Optional[str] = None
    emailable_id: Optional[str] = None
    emailable_type: Optional[str] = None
    type: Optional[str] = None
    from_: Optional[str] = Field(default=None, alias="from")
    from_name: Optional[str] = None
    name: Optional[str] = None
    subject: Optional[str] = None
    plain_text: Optional[str] = None
    screenshot_url: Any = None
    preview_url: Any = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    is_designed: bool = False
    language_id: Any = None
    is_winner: bool = False
    stats: Optional[Stats] = None
    send_after: Any = None
    track_opens: bool = False


class Campaign(ApiModel):
    id: str
    account_id: Optional[str] = None
    name: str = ""
    type: str = ""
    status: str = ""
    missing_data: List[Any] = Field(default_factory=list)
    settings: Optional[CampaignSettings] = None
    filter: List[List[CampaignFilter]] = Field(default_factory=list)
    filter_for_humans: List[List[str]] = Field(default_factory=list)
    delivery_schedule: Optional[str] = None
    language_id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    scheduled_for: Optional[str] = None
    queued_at: Optional[str] = None
    started_at: Optional[str] = None
    finished_at: Optional[str] = None
    stopped_at: Any = None
    default_email_id: Optional[str] = None
    emails: List[Email] = Field(default_factory=list)
    used_in_automations: bool = False
    type_for_humans: Optional[str] = None
    stats: Optional[Stats] = None
    is_stopped: bool = False
    has_winner: Any = None
    winner_version_for_human: Any = None
    winner_sending_time_for_humans: Any = None
    winner_selected_manually_at: Any = None
    uses_ecommerce: bool = False
    uses_survey: bool = False
    can_be_scheduled: bool = False
    warnings: List[Any] = Field(default_factory=list)
    initial_created_at: Any = None
    is_currently_sending_out: bool = False


class CampaignEmail(ApiModel):
    """Email content sent when creating or updating a campaign."""

    subject: str
    from_name: str
    from_: str = Field(alias="from")
    content: Optional[str] = None


class BValue(ApiModel):
    subject: Optional[str] = None
    from_name: Optional[str] = None
    from_: Optional[str] = Field(default=None, alias="from")


class AbSettings(ApiModel):
    test_type: str
    select_winner_by: str
    after_time_amount: Optional[int] = None
    after_time_unit: Optional[str] = None
    test_split: Optional[int] = None
    b_value: Optional[BValue] = None


class ResendSettings(ApiModel):
    test_type: str
    select_winner_by: str
    b_value: Optional[BValue] = None


class CreateCampaign(ApiModel):
    name: str
    type: str
    emails: List[CampaignEmail]
    language_id: Optional[int] = None
    groups: Optional[List[str]] = None
    segments: Optional[List[str]] = None
    ab_settings: Optional[AbSettings] = None
    resend_settings: Optional[ResendSettings] = None


class UpdateCampaign(CreateCampaign):
    pass


class Schedule(ApiModel):
    date: str
    hours: str
    minutes: str
    timezone_id: Optional[int] = None


class Resend(ApiModel):
    delivery: str
    date: str
    hours: str
    minutes: str
    timezone_id: Optional[int] = None


class ScheduleCampaign(ApiModel):
    delivery: str
    schedule: Optional[Schedule] = None
    resend: Optional[Resend] = None


class CampaignSubscriber(ApiModel):
    id: str
    opens_count: int = 0
    clicks_count: int = 0
    subscriber: Optional[Subscriber] = None


class CampaignLanguage(ApiModel):
    id: str
    shortcode: str = ""
    iso639: str = ""
    name: str = ""
    direction: str = ""


class ListCampaignOptions(ListOptions):
    pass


class ListCampaignSubscriberOptions(ListOptions):
    """Subscriber activity report; sent as a POST body."""

    campaign_id: str = Field(default="", exclude=True)
    sort: str = ""


class CampaignList(ListEnvelope[Campaign]):
    pass


class CampaignItem(ItemEnvelope[Campaign]):
    pass


class CampaignSubscriberList(ListEnvelope[CampaignSubscriber]):
    pass


class CampaignLanguageList(ApiModel):
    data: List[CampaignLanguage] = Field(default_factory=list)
