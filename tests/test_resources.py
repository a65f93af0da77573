"""
Tests for the client facades and resource services.
"""
import json
from datetime import timedelta

import pytest
import respx
from httpx import Response

import httpx

from mailerlite_client import AsyncMailerLite, ClientConfig, Filter, MailerLite, RateLimitError, create_client
from mailerlite_client.constants import FORM_TYPE_POPUP, SORT_BY_NAME
from mailerlite_client.models import (
    CampaignEmail,
    CreateCampaign,
    CreateWebhookOptions,
    ListAutomationSubscriberOptions,
    ListCampaignSubscriberOptions,
    ListFormOptions,
    ListGroupSubscriberOptions,
    ListSegmentSubscriberOptions,
    ScheduleCampaign,
    SubscriberWrite,
    UpdateWebhookOptions,
)

BASE_URL = "https://connect.mailerlite.com/api"

GROUP = {"id": "7", "name": "News"}
SUBSCRIBER = {"id": "31", "email": "dummy@example.com", "status": "active"}
CAMPAIGN = {"id": "99", "name": "Spring", "type": "regular"}
WEBHOOK = {"id": "5", "name": "Hook", "url": "https://hooks.example.com", "events": ["subscriber.created"]}


@pytest.fixture
def ml(router):
    client = httpx.Client(transport=httpx.MockTransport(router.handler))
    with MailerLite(api_key="test-key", httpx_client=client) as ml:
        yield ml


class TestSubscribers:
    def test_list(self, ml, router):
        route = router.get(f"{BASE_URL}/subscribers").mock(return_value=Response(200, json={"data": [SUBSCRIBER]}))

        page, _ = ml.subscribers.list()

        assert page.data[0].id == "31"
        assert route.calls.last.request.url.query == b""

    def test_count(self, ml, router):
        route = router.get(f"{BASE_URL}/subscribers").mock(return_value=Response(200, json={"total": 42}))

        count, _ = ml.subscribers.count()

        assert count.total == 42
        assert route.calls.last.request.url.params["limit"] == "0"

    def test_get_by_email(self, ml, router):
        route = router.get(f"{BASE_URL}/subscribers/dummy@example.com").mock(
            return_value=Response(200, json={"data": SUBSCRIBER})
        )

        item, _ = ml.subscribers.get(email="dummy@example.com")

        assert route.called
        assert item.data.email == "dummy@example.com"

    def test_get_requires_key(self, ml):
        with pytest.raises(ValueError):
            ml.subscribers.get()

    def test_upsert(self, ml, router):
        route = router.post(f"{BASE_URL}/subscribers").mock(return_value=Response(200, json={"data": SUBSCRIBER}))

        ml.subscribers.update(SubscriberWrite(email="dummy@example.com", fields={"city": "Vilnius"}))

        body = json.loads(route.calls.last.request.content)
        assert body == {"email": "dummy@example.com", "fields": {"city": "Vilnius"}}

    def test_delete(self, ml, router):
        route = router.delete(f"{BASE_URL}/subscribers/31").mock(return_value=Response(204))

        value, response = ml.subscribers.delete("31")

        assert route.called
        assert value is None
        assert response.status_code == 204


class TestGroups:
    def test_create(self, ml, router):
        route = router.post(f"{BASE_URL}/groups").mock(return_value=Response(201, json={"data": GROUP}))

        item, _ = ml.groups.create("News")

        assert json.loads(route.calls.last.request.content) == {"name": "News"}
        assert item.data.name == "News"

    def test_update(self, ml, router):
        route = router.put(f"{BASE_URL}/groups/7").mock(return_value=Response(200, json={"data": GROUP}))
        ml.groups.update("7", "News")
        assert route.called

    def test_subscribers(self, ml, router):
        route = router.get(f"{BASE_URL}/groups/7/subscribers").mock(
            return_value=Response(200, json={"data": [SUBSCRIBER]})
        )

        ml.groups.subscribers(ListGroupSubscriberOptions(group_id="7", filters=[Filter("status", "active")]))

        assert dict(route.calls.last.request.url.params) == {"filter[status]": "active"}

    def test_assign_and_unassign(self, ml, router):
        assign = router.post(f"{BASE_URL}/subscribers/31/groups/7").mock(
            return_value=Response(200, json={"data": GROUP})
        )
        unassign = router.delete(f"{BASE_URL}/subscribers/31/groups/7").mock(return_value=Response(204))

        group, _ = ml.groups.assign("7", "31")
        ml.groups.unassign("7", "31")

        assert assign.called
        assert group.data.name == "News"
        assert unassign.called


class TestOtherResources:
    def test_segment_subscribers(self, ml, router):
        route = router.get(f"{BASE_URL}/segments/3/subscribers").mock(return_value=Response(200, json={"data": []}))
        ml.segments.subscribers(ListSegmentSubscriberOptions(segment_id="3", limit=10))
        assert route.calls.last.request.url.params["limit"] == "10"

    def test_field_create(self, ml, router):
        route = router.post(f"{BASE_URL}/fields").mock(
            return_value=Response(201, json={"data": {"id": "1", "name": "City", "key": "city", "type": "text"}})
        )
        item, _ = ml.fields.create("City", "text")
        assert json.loads(route.calls.last.request.content) == {"name": "City", "type": "text"}
        assert item.data.key == "city"

    def test_forms_by_type(self, ml, router):
        route = router.get(f"{BASE_URL}/forms/popup").mock(return_value=Response(200, json={"data": []}))
        ml.forms.list(ListFormOptions(type=FORM_TYPE_POPUP, sort=SORT_BY_NAME))
        assert dict(route.calls.last.request.url.params) == {"sort": "name"}

    def test_campaign_create_and_schedule(self, ml, router):
        create = router.post(f"{BASE_URL}/campaigns").mock(return_value=Response(201, json={"data": CAMPAIGN}))
        schedule = router.post(f"{BASE_URL}/campaigns/99/schedule").mock(
            return_value=Response(200, json={"data": CAMPAIGN})
        )

        ml.campaigns.create(
            CreateCampaign(
                name="Spring",
                type="regular",
                emails=[CampaignEmail(subject="Hi", from_name="Shop", from_="shop@example.com")],
            )
        )
        ml.campaigns.schedule("99", ScheduleCampaign(delivery="instant"))

        assert json.loads(create.calls.last.request.content)["emails"][0]["from"] == "shop@example.com"
        assert json.loads(schedule.calls.last.request.content) == {"delivery": "instant"}

    def test_campaign_subscriber_activity(self, ml, router):
        route = router.post(f"{BASE_URL}/campaigns/99/reports/subscriber-activity").mock(
            return_value=Response(200, json={"data": []})
        )

        ml.campaigns.subscribers(
            ListCampaignSubscriberOptions(campaign_id="99", filters=[Filter("type", "opened")], limit=10)
        )

        body = json.loads(route.calls.last.request.content)
        assert body == {"filter": {"type": "opened"}, "limit": 10}

    def test_campaign_languages(self, ml, router):
        router.get(f"{BASE_URL}/campaigns/languages").mock(
            return_value=Response(200, json={"data": [{"id": "1", "shortcode": "en", "name": "English"}]})
        )
        languages, _ = ml.campaigns.languages()
        assert languages.data[0].shortcode == "en"

    def test_automation_activity(self, ml, router):
        route = router.get(f"{BASE_URL}/automations/12/activity").mock(return_value=Response(200, json={"data": []}))
        ml.automations.subscribers(
            ListAutomationSubscriberOptions(automation_id="12", filters=[Filter("status", "completed")])
        )
        assert route.calls.last.request.url.params["filter[status]"] == "completed"

    def test_webhooks(self, ml, router):
        create = router.post(f"{BASE_URL}/webhooks").mock(return_value=Response(201, json={"data": WEBHOOK}))
        update = router.put(f"{BASE_URL}/webhooks/5").mock(return_value=Response(200, json={"data": WEBHOOK}))

        ml.webhooks.create(CreateWebhookOptions(events=["subscriber.created"], url="https://hooks.example.com"))
        ml.webhooks.update(UpdateWebhookOptions(webhook_id="5", enabled=False))

        assert json.loads(create.calls.last.request.content) == {
            "events": ["subscriber.created"],
            "url": "https://hooks.example.com",
        }
        assert json.loads(update.calls.last.request.content) == {"enabled": False}

    def test_timezones(self, ml, router):
        router.get(f"{BASE_URL}/timezones").mock(
            return_value=Response(200, json={"data": [{"id": "1", "name": "Pacific/Midway", "offset": -39600}]})
        )
        zones, _ = ml.timezones.list()
        assert zones.data[0].offset == -39600


class TestFacade:
    def test_rate_snapshot(self, ml, router):
        router.get(f"{BASE_URL}/groups").mock(
            return_value=Response(200, json={"data": []}, headers={"X-RateLimit-Limit": "120", "X-RateLimit-Remaining": "80"})
        )
        ml.groups.list()
        assert ml.rate.limit == 120
        assert ml.rate.remaining == 80

    def test_api_key_swap(self, ml, router):
        route = router.get(f"{BASE_URL}/groups").mock(return_value=Response(200, json={"data": []}))

        ml.api_key = "second-key"
        ml.groups.list()

        assert ml.api_key == "second-key"
        assert route.calls.last.request.headers["Authorization"] == "Bearer second-key"

    def test_create_client_from_env(self, monkeypatch):
        monkeypatch.setenv("MAILERLITE_API_KEY", "env-key")
        monkeypatch.setenv("MAILERLITE_BASE_URL", "https://mock.local/api")

        with create_client() as ml:
            assert ml.api_key == "env-key"
            assert ml.base_url == "https://mock.local/api"

    def test_create_client_with_config(self):
        with create_client(ClientConfig(api_key="cfg-key")) as ml:
            assert ml.base_url == BASE_URL


class TestAsyncFacade:
    @pytest.mark.asyncio
    async def test_services_are_awaitable(self):
        router = respx.MockRouter()
        route = router.get(f"{BASE_URL}/groups").mock(return_value=Response(200, json={"data": [GROUP]}))
        client = httpx.AsyncClient(transport=httpx.MockTransport(router.async_handler))

        async with AsyncMailerLite(api_key="test-key", httpx_client=client) as ml:
            page, response = await ml.groups.list()

        assert route.called
        assert page.data[0].name == "News"
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_preempted_after_429(self):
        router = respx.MockRouter()
        route = router.get(f"{BASE_URL}/subscribers").mock(
            return_value=Response(
                429,
                json={"message": "Too Many Attempts."},
                headers={"X-RateLimit-Limit": "120", "X-RateLimit-Remaining": "0", "Retry-After": "59"},
            )
        )
        client = httpx.AsyncClient(transport=httpx.MockTransport(router.async_handler))

        async with AsyncMailerLite(api_key="test-key", httpx_client=client) as ml:
            with pytest.raises(RateLimitError):
                await ml.subscribers.list()
            with pytest.raises(RateLimitError) as exc:
                await ml.subscribers.list()

            assert exc.value.preempted is True
            assert ml.rate.retry_after == timedelta(seconds=59)

        assert route.call_count == 1
