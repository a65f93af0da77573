"""
Tests for query and filter encoding.
"""
from pydantic import Field

from mailerlite_client.core.query_encoder import (
    add_options,
    encode_body_options,
    encode_filters,
    encode_query,
    is_zero,
    to_query_string,
)
from mailerlite_client.models import (
    ListCampaignSubscriberOptions,
    ListFormOptions,
    ListGroupSubscriberOptions,
    ListSubscriberOptions,
)
from mailerlite_client.models.common import ListOptions
from mailerlite_client.types import Filter


class TestIsZero:
    def test_zero_values(self):
        for value in (None, "", 0, 0.0, False, [], {}):
            assert is_zero(value) is True

    def test_non_zero_values(self):
        for value in ("x", 1, -1, 0.5, True, ["a"]):
            assert is_zero(value) is False


class TestEncodeFilters:
    def test_keeps_order(self):
        pairs = encode_filters([Filter("status", "active"), Filter("email", "a@b.c")])
        assert pairs == [("filter[status]", "active"), ("filter[email]", "a@b.c")]

    def test_skips_zero_values(self):
        pairs = encode_filters([Filter("status", ""), Filter("name", "news")])
        assert pairs == [("filter[name]", "news")]

    def test_booleans_lowercase(self):
        assert encode_filters([Filter("enabled", True)]) == [("filter[enabled]", "true")]


class TestEncodeQuery:
    def test_none(self):
        assert encode_query(None) == []

    def test_all_zero_is_empty(self):
        assert encode_query(ListSubscriberOptions()) == []

    def test_model_fields_in_declaration_order(self):
        opts = ListSubscriberOptions(filters=[Filter("status", "active")], limit=10, cursor="abc")
        assert encode_query(opts) == [
            ("filter[status]", "active"),
            ("limit", "10"),
            ("cursor", "abc"),
        ]

    def test_path_only_fields_are_excluded(self):
        opts = ListGroupSubscriberOptions(group_id="42", page=2)
        assert encode_query(opts) == [("page", "2")]

    def test_form_type_not_in_query(self):
        opts = ListFormOptions(type="popup", sort="-name")
        assert encode_query(opts) == [("sort", "-name")]

    def test_mapping_options(self):
        pairs = encode_query({"filters": {"status": "unsubscribed"}, "limit": 5, "page": 0})
        assert pairs == [("filter[status]", "unsubscribed"), ("limit", "5")]

    def test_custom_options_model(self):
        class ListThingOptions(ListOptions):
            owner_id: str = Field(default="", exclude=True)
            include_archived: bool = False

        opts = ListThingOptions(owner_id="7", include_archived=True)
        assert encode_query(opts) == [("include_archived", "true")]


class TestToQueryString:
    def test_brackets_stay_literal(self):
        assert to_query_string([("filter[status]", "active")]) == "filter[status]=active"

    def test_values_are_escaped(self):
        assert to_query_string([("filter[email]", "a b@c.d")]) == "filter[email]=a+b%40c.d"


class TestAddOptions:
    def test_none_leaves_url_bare(self):
        url = "https://connect.mailerlite.com/api/subscribers"
        assert add_options(url, None) == url

    def test_all_zero_leaves_url_bare(self):
        url = "https://connect.mailerlite.com/api/subscribers"
        assert add_options(url, ListSubscriberOptions()) == url

    def test_appends_query(self):
        url = add_options(
            "https://connect.mailerlite.com/api/subscribers",
            ListSubscriberOptions(filters=[Filter("status", "active")]),
        )
        assert url == "https://connect.mailerlite.com/api/subscribers?filter[status]=active"

    def test_same_options_encode_identically(self):
        opts = ListSubscriberOptions(filters=[Filter("status", "active"), Filter("name", "x y")], limit=10)
        url = "https://connect.mailerlite.com/api/subscribers"

        assert encode_query(opts) == encode_query(opts)
        assert add_options(url, opts) == add_options(url, opts)
        assert opts.filters == [Filter("status", "active"), Filter("name", "x y")]

    def test_existing_query_comes_first(self):
        url = add_options("https://example.com/x?limit=0", {"page": 3})
        assert url == "https://example.com/x?limit=0&page=3"


class TestEncodeBodyOptions:
    def test_filters_nested_under_filter(self):
        opts = ListCampaignSubscriberOptions(
            campaign_id="99",
            filters=[Filter("type", "opened"), Filter("search", "")],
            limit=25,
        )
        assert encode_body_options(opts) == {"filter": {"type": "opened"}, "limit": 25}

    def test_none(self):
        assert encode_body_options(None) == {}
