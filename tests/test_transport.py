"""Tests for the Platform API transport."""

from unittest.mock import patch

import pytest
import requests

from tests.conftest import make_response
from vestalia import PlatformTransport, TransportError
from vestalia.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

HEADERS = {"X-Vestaboard-Api-Key": "key", "X-Vestaboard-Api-Secret": "hunter2"}


class TestPlatformTransportInitialization:
    """Test transport defaults."""

    def test_defaults(self):
        transport = PlatformTransport()
        assert transport.base_url == DEFAULT_BASE_URL
        assert transport.timeout == DEFAULT_TIMEOUT

    def test_trailing_slash_is_stripped(self):
        transport = PlatformTransport(base_url="http://localhost:8080/")
        assert transport.url("/subscriptions") == "http://localhost:8080/subscriptions"


class TestGet:
    """Test GET requests."""

    @patch("vestalia.transport.requests.get")
    def test_returns_json(self, mock_get):
        mock_get.return_value = make_response({"subscriptions": []})

        transport = PlatformTransport(base_url="http://api", timeout=5)
        result = transport.get("/subscriptions", HEADERS)

        assert result == {"subscriptions": []}
        mock_get.assert_called_once_with("http://api/subscriptions", headers=HEADERS, timeout=5)

    @patch("vestalia.transport.requests.get")
    def test_network_error(self, mock_get):
        cause = requests.ConnectionError("Name or service not known")
        mock_get.side_effect = cause

        with pytest.raises(TransportError) as exc_info:
            PlatformTransport().get("/subscriptions", HEADERS)

        assert exc_info.value.cause is cause
        assert exc_info.value.__cause__ is cause
        assert exc_info.value.status_code is None

    @patch("vestalia.transport.requests.get")
    def test_invalid_json(self, mock_get):
        mock_get.return_value = make_response(ValueError("Not JSON"))

        with pytest.raises(TransportError) as exc_info:
            PlatformTransport().get("/subscriptions", HEADERS)

        assert isinstance(exc_info.value.cause, ValueError)


class TestPost:
    """Test POST requests."""

    @patch("vestalia.transport.requests.post")
    def test_sends_json_body(self, mock_post):
        mock_post.return_value = make_response({"message": {}})

        transport = PlatformTransport(base_url="http://api")
        transport.post("/subscriptions/abc/message", HEADERS, {"text": "Hi"})

        call_args = mock_post.call_args
        assert call_args.args[0] == "http://api/subscriptions/abc/message"
        assert call_args.kwargs["json"] == {"text": "Hi"}
        assert call_args.kwargs["headers"]["Content-Type"] == "application/json"
        assert call_args.kwargs["headers"]["X-Vestaboard-Api-Key"] == "key"

    @patch("vestalia.transport.requests.post")
    def test_http_error_with_json(self, mock_post):
        mock_post.return_value = make_response({"error": "Invalid message"}, status_code=400)

        with pytest.raises(TransportError) as exc_info:
            PlatformTransport().post("/subscriptions/abc/message", HEADERS, {"text": "Hi"})

        assert exc_info.value.status_code == 400
        assert isinstance(exc_info.value.cause, requests.HTTPError)

    @patch("vestalia.transport.requests.post")
    def test_http_error_without_json(self, mock_post):
        mock_post.return_value = make_response(ValueError("Not JSON"), status_code=500)

        with pytest.raises(TransportError) as exc_info:
            PlatformTransport().post("/subscriptions/abc/message", HEADERS, {"text": "Hi"})

        assert exc_info.value.status_code == 500

    @patch("vestalia.transport.requests.post")
    def test_rate_limit_is_a_transport_error(self, mock_post, caplog):
        mock_post.return_value = make_response({}, status_code=429)

        with pytest.raises(TransportError):
            PlatformTransport().post("/subscriptions/abc/message", HEADERS, {"text": "Hi"})

        assert "rate limit" in caplog.text

    @patch("vestalia.transport.requests.post")
    def test_error_logs_do_not_include_credentials(self, mock_post, caplog):
        mock_post.side_effect = requests.Timeout("timed out")

        with pytest.raises(TransportError):
            PlatformTransport().post("/subscriptions/abc/message", HEADERS, {"text": "Hi"})

        assert "hunter2" not in caplog.text
