"""
Sort keys and enumerated values accepted by list and create calls.
"""

SORT_BY_ID = "id"
SORT_BY_ID_DESCENDING = "-id"
SORT_BY_NAME = "name"
SORT_BY_NAME_DESCENDING = "-name"
SORT_BY_TYPE = "type"
SORT_BY_TYPE_DESCENDING = "-type"
SORT_BY_TOTAL = "total"
SORT_BY_TOTAL_DESCENDING = "-total"
SORT_BY_OPEN_RATE = "open_rate"
SORT_BY_OPEN_RATE_DESCENDING = "-open_rate"
SORT_BY_CLICK_RATE = "click_rate"
SORT_BY_CLICK_RATE_DESCENDING = "-click_rate"
SORT_BY_CONVERSIONS_COUNT = "conversions_count"
SORT_BY_CONVERSIONS_COUNT_DESCENDING = "-conversions_count"
SORT_BY_CONVERSION_RATE = "conversion_rate"
SORT_BY_CONVERSION_RATE_DESCENDING = "-conversion_rate"
SORT_BY_CLICKS_COUNT = "clicks_count"
SORT_BY_CLICKS_COUNT_DESCENDING = "-clicks_count"
SORT_BY_OPENS_COUNT = "opens_count"
SORT_BY_OPENS_COUNT_DESCENDING = "-opens_count"
SORT_BY_VISITORS = "visitors"
SORT_BY_VISITORS_DESCENDING = "-visitors"
SORT_BY_LAST_REGISTRATION_AT = "last_registration_at"
SORT_BY_LAST_REGISTRATION_AT_DESCENDING = "-last_registration_at"
SORT_BY_CREATED_AT = "created_at"
SORT_BY_CREATED_AT_DESCENDING = "-created_at"
SORT_BY_UPDATED_AT = "updated_at"
SORT_BY_UPDATED_AT_DESCENDING = "-updated_at"

FORM_TYPE_POPUP = "popup"
FORM_TYPE_EMBEDDED = "embedded"
FORM_TYPE_PROMOTION = "promotion"

CAMPAIGN_TYPE_REGULAR = "regular"
CAMPAIGN_TYPE_AB = "ab"
CAMPAIGN_TYPE_RESEND = "resend"

CAMPAIGN_SCHEDULE_TYPE_INSTANT = "instant"
CAMPAIGN_SCHEDULE_TYPE_SCHEDULED = "scheduled"
CAMPAIGN_SCHEDULE_TYPE_TIMEZONE = "timezone_based"
