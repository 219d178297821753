"""Unit tests for the usage endpoint client."""

import socket
import urllib.error

import pytest

from claude_usage_line.errors import NetworkError, ParseError, RequestTimeoutError
from claude_usage_line.utils.usage_api import (
    OAUTH_BETA_HEADER,
    USAGE_URL,
    fetch_usage,
    parse_usage,
)


@pytest.mark.unit
class TestFetchUsage:
    """Tests for fetch_usage with urlopen mocked."""

    def test_sends_authenticated_get(self, mock_urlopen, sample_usage_payload):
        calls = mock_urlopen(sample_usage_payload)

        fetch_usage("sk-ant-oat01-token", timeout=3.0)

        assert len(calls) == 1
        request = calls[0]["request"]
        assert request.full_url == USAGE_URL
        assert request.get_method() == "GET"
        assert request.data is None
        assert request.get_header("Authorization") == "Bearer sk-ant-oat01-token"
        assert request.get_header("Anthropic-beta") == OAUTH_BETA_HEADER
        assert request.get_header("Content-type") == "application/json"
        assert calls[0]["timeout"] == 3.0

    def test_parses_windows(self, mock_urlopen, sample_usage_payload):
        mock_urlopen(sample_usage_payload)

        snapshot = fetch_usage("token")

        assert snapshot.five_hour.utilization == 45.2
        assert snapshot.seven_day.utilization == 92.0
        assert snapshot.five_hour.resets_at == sample_usage_payload["five_hour"]["resets_at"]

    def test_http_error_status(self, mock_urlopen):
        error = urllib.error.HTTPError(USAGE_URL, 401, "Unauthorized", {}, None)
        mock_urlopen(error=error)

        with pytest.raises(NetworkError) as exc_info:
            fetch_usage("token")

        assert exc_info.value.status == 401

    def test_non_200_success_status(self, mock_urlopen):
        mock_urlopen(body=b"", status=204)

        with pytest.raises(NetworkError) as exc_info:
            fetch_usage("token")

        assert exc_info.value.status == 204

    def test_connection_failure(self, mock_urlopen):
        mock_urlopen(error=urllib.error.URLError(ConnectionRefusedError("refused")))

        with pytest.raises(NetworkError):
            fetch_usage("token")

    @pytest.mark.parametrize(
        "error",
        [
            socket.timeout("timed out"),
            TimeoutError("timed out"),
            urllib.error.URLError(socket.timeout("timed out")),
        ],
    )
    def test_timeout(self, mock_urlopen, error):
        mock_urlopen(error=error)

        with pytest.raises(RequestTimeoutError):
            fetch_usage("token", timeout=0.5)

    def test_non_json_body(self, mock_urlopen):
        mock_urlopen(body=b"<html>Bad gateway</html>")

        with pytest.raises(ParseError):
            fetch_usage("token")


@pytest.mark.unit
class TestParseUsage:
    """Tests for response body validation."""

    def test_missing_and_null_windows_are_empty(self):
        snapshot = parse_usage(b'{"five_hour": null}')

        assert snapshot.five_hour.utilization is None
        assert snapshot.five_hour.resets_at is None
        assert snapshot.seven_day.utilization is None

    def test_null_reset_time(self):
        snapshot = parse_usage(b'{"five_hour": {"utilization": 0, "resets_at": null}}')

        assert snapshot.five_hour.utilization == 0
        assert snapshot.five_hour.resets_at is None

    def test_ignores_unknown_fields(self):
        snapshot = parse_usage(
            b'{"seven_day": {"utilization": 12.5, "resets_at": null, "extra": 1}, '
            b'"extra_usage": {"is_enabled": false}}'
        )

        assert snapshot.seven_day.utilization == 12.5

    @pytest.mark.parametrize(
        "body",
        [
            b"[]",
            b'"text"',
            b'{"five_hour": {"utilization": "lots"}}',
            b"\xff\xfe",
            b'{"five_hour": {"utilization": NaN}}',
            b'{"seven_day": {"utilization": Infinity}}',
        ],
    )
    def test_rejects_wrong_shape(self, body):
        with pytest.raises(ParseError):
            parse_usage(body)
