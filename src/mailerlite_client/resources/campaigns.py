"""
Campaign endpoints.
"""
from typing import Optional

from ..core.query_encoder import encode_body_options
from ..models.campaigns import (
    CampaignItem,
    CampaignLanguageList,
    CampaignList,
    CampaignSubscriberList,
    CreateCampaign,
    ListCampaignOptions,
    ListCampaignSubscriberOptions,
    ScheduleCampaign,
    UpdateCampaign,
)
from .base import ResourceService, path_id

CAMPAIGN_ENDPOINT = "/campaigns"


class CampaignService(ResourceService):
    def list(self, options: Optional[ListCampaignOptions] = None):
        return self._dispatcher.execute("GET", CAMPAIGN_ENDPOINT, options, CampaignList)

    def get(self, campaign_id: str):
        return self._dispatcher.execute("GET", f"{CAMPAIGN_ENDPOINT}/{path_id(campaign_id)}", None, CampaignItem)

    def create(self, campaign: CreateCampaign):
        return self._dispatcher.execute("POST", CAMPAIGN_ENDPOINT, campaign, CampaignItem)

    def update(self, campaign_id: str, campaign: UpdateCampaign):
        path = f"{CAMPAIGN_ENDPOINT}/{path_id(campaign_id)}"
        return self._dispatcher.execute("PUT", path, campaign, CampaignItem)

    def schedule(self, campaign_id: str, schedule: ScheduleCampaign):
        path = f"{CAMPAIGN_ENDPOINT}/{path_id(campaign_id)}/schedule"
        return self._dispatcher.execute("POST", path, schedule, CampaignItem)

    def cancel(self, campaign_id: str):
        """Cancel a ready campaign; it goes back to draft."""
        path = f"{CAMPAIGN_ENDPOINT}/{path_id(campaign_id)}/cancel"
        return self._dispatcher.execute("POST", path, None, CampaignItem)

    def subscribers(self, options: ListCampaignSubscriberOptions):
        """
        Subscriber activity report for a sent campaign.

        This endpoint takes its options as a POST body, so filters go under
        ``filter`` as an object rather than into the query string.
        """
        path = f"{CAMPAIGN_ENDPOINT}/{path_id(options.campaign_id)}/reports/subscriber-activity"
        return self._dispatcher.execute("POST", path, encode_body_options(options), CampaignSubscriberList)

    def languages(self):
        return self._dispatcher.execute("GET", f"{CAMPAIGN_ENDPOINT}/languages", None, CampaignLanguageList)

    def delete(self, campaign_id: str):
        return self._dispatcher.execute("DELETE", f"{CAMPAIGN_ENDPOINT}/{path_id(campaign_id)}")
