"""Client for the Claude OAuth usage endpoint."""

import http.client
import json
import socket
import urllib.error
import urllib.request

from typing import Any

from pydantic import ValidationError

from ..errors import NetworkError, ParseError, RequestTimeoutError
from ..types import UsageSnapshot
from .debug import debug_log

USAGE_URL = "https://api.anthropic.com/api/oauth/usage"
OAUTH_BETA_HEADER = "oauth-2025-04-20"
DEFAULT_TIMEOUT_SECONDS = 3.0


def build_request(token: str) -> urllib.request.Request:
    """Build the authenticated GET request for the usage endpoint."""
    return urllib.request.Request(
        USAGE_URL,
        headers={
            "Authorization": f"Bearer {token}",
            "anthropic-beta": OAUTH_BETA_HEADER,
            "Content-Type": "application/json",
        },
        method="GET",
    )


def parse_usage(body: bytes) -> UsageSnapshot:
    """Parse a usage response body.

    Raises:
        ParseError: If the body is not JSON or not a usage object
    """
    try:
        data: Any = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ParseError(f"Usage response is not valid JSON: {e}") from e

    try:
        return UsageSnapshot.model_validate(data)
    except ValidationError as e:
        raise ParseError(f"Unexpected usage response shape: {e}") from e


def fetch_usage(token: str, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> UsageSnapshot:
    """Fetch current subscription usage with a single GET request.

    Args:
        token: OAuth access token
        timeout: Seconds to wait before aborting the request

    Returns:
        Parsed usage snapshot

    Raises:
        NetworkError: Non-200 status or connection failure
        RequestTimeoutError: No response within the timeout
        ParseError: Malformed response body
    """
    request = build_request(token)
    debug_log(f"GET {USAGE_URL} (timeout {timeout}s)")

    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            status = response.status
            body = response.read()
    except urllib.error.HTTPError as e:
        raise NetworkError(f"HTTP {e.code}", status=e.code) from e
    except urllib.error.URLError as e:
        if isinstance(e.reason, (TimeoutError, socket.timeout)):
            raise RequestTimeoutError(f"No response within {timeout}s") from e
        raise NetworkError(f"Request failed: {e.reason}") from e
    except (TimeoutError, socket.timeout) as e:
        raise RequestTimeoutError(f"No response within {timeout}s") from e
    except (OSError, http.client.HTTPException, ValueError) as e:
        raise NetworkError(f"Request failed: {e}") from e

    if status != 200:
        raise NetworkError(f"HTTP {status}", status=status)

    debug_log(f"Usage response: {len(body)} bytes")
    return parse_usage(body)
