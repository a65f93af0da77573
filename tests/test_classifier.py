"""
Tests for response classification.
"""
import pytest

from mailerlite_client.core.classifier import classify_response, is_success, parse_error_body
from mailerlite_client.errors import ApiError, AuthError, RateLimitError, ValidationError

URL = "https://connect.mailerlite.com/api/subscribers"


class TestIsSuccess:
    @pytest.mark.parametrize("status", [200, 201, 202, 204, 299])
    def test_success(self, status):
        assert is_success(status) is True

    @pytest.mark.parametrize("status", [199, 300, 301, 400, 404, 500])
    def test_failure(self, status):
        assert is_success(status) is False


class TestParseErrorBody:
    def test_message_and_errors(self):
        body = b'{"message":"The given data was invalid.","errors":{"email":["The email must be valid."]}}'
        message, errors = parse_error_body(body)
        assert message == "The given data was invalid."
        assert errors == {"email": ["The email must be valid."]}

    def test_not_json(self):
        assert parse_error_body(b"Bad Gateway") == ("Bad Gateway", {})

    def test_wrong_shape(self):
        assert parse_error_body(b'{"errors": "nope"}') == ('{"errors": "nope"}', {})

    def test_empty(self):
        assert parse_error_body(b"") == ("", {})


class TestClassifyResponse:
    def test_accepted_is_success(self):
        assert classify_response("POST", URL, 202, {}, b"") is None

    def test_ok_is_success(self):
        assert classify_response("GET", URL, 200, {}, b"{}") is None

    def test_unauthorized(self):
        error = classify_response("GET", URL, 401, {}, b'{"message":"Unauthenticated."}')
        assert isinstance(error, AuthError)
        assert error.message == "Unauthenticated."
        assert error.status_code == 401

    def test_unprocessable(self):
        body = b'{"message":"The given data was invalid.","errors":{"email":["The email must be a valid email address."]}}'
        error = classify_response("POST", URL, 422, {}, body)

        assert isinstance(error, ValidationError)
        assert isinstance(error, ApiError)
        assert list(error.errors) == ["email"]
        assert "422" in str(error)

    def test_rate_limited(self):
        headers = {"X-RateLimit-Limit": "120", "X-RateLimit-Remaining": "0", "Retry-After": "59"}
        error = classify_response("GET", URL, 429, headers, b'{"message":"Too Many Attempts."}')

        assert isinstance(error, RateLimitError)
        assert error.preempted is False
        assert error.rate.retry_after_seconds == 59
        assert str(error).endswith("[retry after 59s]")

    def test_429_with_remaining_is_generic(self):
        headers = {"X-RateLimit-Remaining": "5"}
        error = classify_response("GET", URL, 429, headers, b"")
        assert type(error) is ApiError

    def test_other_status(self):
        error = classify_response("GET", URL, 500, {}, b"oops")
        assert type(error) is ApiError
        assert error.message == "oops"
        assert error.errors == {}
