"""Unit tests for the HTTP transport."""

from __future__ import annotations

import json
from unittest.mock import patch

import httpx
import pytest

from github_manager.auth import NoAuth, TokenAuth, create_auth
from github_manager.exceptions import (
    AuthenticationError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ServerError,
)
from github_manager.utils.http import HTTPClient, HTTPResponse


def _client(config, handler) -> HTTPClient:
    return HTTPClient(config, create_auth(config.token), transport=httpx.MockTransport(handler))


class TestRequestHeaders:
    """Tests for the headers sent with every request."""

    def test_default_headers(self, config):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen.update(request.headers)
            return httpx.Response(200, json={})

        with _client(config, handler) as http:
            http.send_get("/app")

        assert seen["accept"] == "application/vnd.github+json"
        assert seen["x-github-api-version"] == "2022-11-28"
        assert seen["user-agent"] == "python-github-manager/1.0"
        assert seen["authorization"] == "Bearer test_token_12345"

    def test_anonymous_requests_have_no_authorization(self, unauthenticated_config):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen.update(request.headers)
            return httpx.Response(200, json={})

        with _client(unauthenticated_config, handler) as http:
            assert http.is_authenticated is False
            http.send_get("/repos/octocat/hello/issues")

        assert "authorization" not in seen

    def test_none_params_are_dropped(self, config):
        urls = []

        def handler(request: httpx.Request) -> httpx.Response:
            urls.append(request.url)
            return httpx.Response(200, json={})

        with _client(config, handler) as http:
            http.send_get("/repos/o/r/actions/artifacts", {"name": None, "page": 2})

        assert urls[0].params.get("page") == "2"
        assert "name" not in urls[0].params

    def test_json_body(self, config):
        bodies = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(201, json={"number": 1})

        with _client(config, handler) as http:
            response = http.send_post("/repos/o/r/issues", {"title": "Bug"})

        assert bodies == [{"title": "Bug"}]
        assert response.status_code == 201
        assert response.json() == {"number": 1}


class TestErrorMapping:
    """Tests for mapping error statuses onto exceptions."""

    @pytest.mark.parametrize(
        ("status_code", "error_type"),
        [(401, AuthenticationError), (404, NotFoundError)],
    )
    def test_client_errors(self, config, status_code, error_type):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json={"message": "nope"})

        with _client(config, handler) as http, pytest.raises(error_type, match="nope"):
            http.send_get("/app")

    def test_non_json_error_body(self, config):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="<html>Bad Gateway</html>")

        with _client(config, handler) as http, pytest.raises(ServerError) as exc_info:
            http.send_get("/app")

        assert exc_info.value.status_code == 502

    def test_connection_failure(self, config):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        with _client(config, handler) as http, pytest.raises(NetworkError, match="Connection failed"):
            http.send_get("/app")


class TestRetries:
    """Tests for retrying transient failures."""

    @patch("github_manager.utils.http.time.sleep")
    def test_retries_server_errors(self, mock_sleep, config):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if len(calls) < 3:
                return httpx.Response(503, json={"message": "unavailable"})
            return httpx.Response(200, json={"id": 1})

        with _client(config.with_overrides(max_retries=2), handler) as http:
            response = http.send_get("/app")

        assert response.json() == {"id": 1}
        assert len(calls) == 3
        assert mock_sleep.call_count == 2

    @patch("github_manager.utils.http.time.sleep")
    def test_gives_up_after_max_retries(self, mock_sleep, config):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(500, json={"message": "boom"})

        with _client(config.with_overrides(max_retries=1), handler) as http, pytest.raises(ServerError):
            http.send_get("/app")

        assert len(calls) == 2

    @patch("github_manager.utils.http.time.sleep")
    def test_no_retries_when_disabled(self, mock_sleep, config):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(500, json={"message": "boom"})

        with _client(config, handler) as http, pytest.raises(ServerError):
            http.send_get("/app")

        assert len(calls) == 1
        mock_sleep.assert_not_called()

    @patch("github_manager.utils.http.time.sleep")
    def test_rate_limit_waits_for_retry_after(self, mock_sleep, config):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if len(calls) == 1:
                return httpx.Response(429, json={"message": "slow down"}, headers={"Retry-After": "5"})
            return httpx.Response(200, json={})

        with _client(config.with_overrides(max_retries=1), handler) as http:
            http.send_get("/app")

        mock_sleep.assert_called_once_with(5.0)

    def test_client_errors_are_not_retried(self, config):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(404, json={"message": "Not Found"})

        with _client(config.with_overrides(max_retries=3), handler) as http, pytest.raises(NotFoundError):
            http.send_get("/app")

        assert len(calls) == 1


class TestRedirects:
    """Tests for reading redirect targets."""

    def test_location_is_exposed(self, config):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(302, headers={"Location": "https://pipelines.example.com/logs.zip"})

        with _client(config, handler) as http:
            response = http.send_get("/repos/o/r/actions/runs/1/logs", follow_redirects=False)

        assert response.status_code == 302
        assert response.location == "https://pipelines.example.com/logs.zip"


class TestHTTPResponse:
    """Tests for HTTPResponse."""

    def test_empty_body_parses_as_object(self):
        assert HTTPResponse("", 204).json() == {}

    def test_invalid_json_raises(self):
        with pytest.raises(ValueError):
            HTTPResponse("{oops", 200).json()

    def test_headers_are_case_insensitive(self):
        response = HTTPResponse("{}", 200, {"X-RateLimit-Remaining": "42", "Link": '<https://x>; rel="next"'})

        assert response.rate_limit_remaining == 42
        assert response.link_header == '<https://x>; rel="next"'


class TestAuthStrategies:
    """Tests for auth strategy selection."""

    def test_create_auth(self):
        assert isinstance(create_auth("ghp_token"), TokenAuth)
        assert isinstance(create_auth(None), NoAuth)
        assert isinstance(create_auth(""), NoAuth)

    def test_token_repr_is_masked(self):
        assert "ghp_secret" not in repr(TokenAuth("ghp_secret"))

    def test_blank_token_rejected(self):
        with pytest.raises(ValueError, match="Token cannot be empty"):
            TokenAuth("   ")
