"""Utilities for reading the Claude Code OAuth access token."""

import json
import subprocess
import sys

from pathlib import Path
from typing import Any, Optional

from .debug import debug_log

__all__ = [
    "KEYCHAIN_SERVICE",
    "extract_access_token",
    "get_credentials_path",
    "get_token",
    "read_credentials_file",
    "read_keychain_secret",
]

KEYCHAIN_SERVICE = "Claude Code-credentials"
KEYCHAIN_TIMEOUT_SECONDS = 5


def get_credentials_path() -> Path:
    """Get path to Claude credentials file."""
    return Path.home() / ".claude" / ".credentials.json"


def read_keychain_secret() -> Optional[str]:
    """Read the Claude Code secret from the macOS keychain.

    Returns:
        Raw secret text, or None if the lookup failed
    """
    if sys.platform != "darwin":
        return None

    try:
        result = subprocess.run(
            ["security", "find-generic-password", "-s", KEYCHAIN_SERVICE, "-w"],
            capture_output=True,
            text=True,
            timeout=KEYCHAIN_TIMEOUT_SECONDS,
        )
    except (OSError, UnicodeDecodeError, subprocess.TimeoutExpired) as e:
        debug_log(f"Keychain lookup failed: {e}")
        return None

    if result.returncode != 0:
        debug_log(
            f"Keychain lookup exited with {result.returncode}: {result.stderr.strip()}"
        )
        return None

    return result.stdout.strip() or None


def read_credentials_file() -> Optional[str]:
    """Read the credentials file Claude Code writes on Linux.

    Returns:
        Raw file contents, or None if missing or unreadable
    """
    credentials_path = get_credentials_path()

    if not credentials_path.exists():
        debug_log(f"Credentials file not found: {credentials_path}")
        return None

    try:
        with open(credentials_path, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        debug_log(f"Failed to read {credentials_path}: {e}")
        return None


def extract_access_token(secret: str) -> Optional[str]:
    """Pull claudeAiOauth.accessToken out of a stored secret.

    Args:
        secret: JSON document as stored by Claude Code

    Returns:
        Access token, or None if the document is malformed or has no token
    """
    try:
        data: Any = json.loads(secret)
    except json.JSONDecodeError as e:
        debug_log(f"Stored credentials are not valid JSON: {e}")
        return None

    if not isinstance(data, dict):
        debug_log("Stored credentials are not a JSON object")
        return None

    oauth_data = data.get("claudeAiOauth")
    if not oauth_data or not isinstance(oauth_data, dict):
        debug_log("Stored credentials have no claudeAiOauth entry")
        return None

    token = oauth_data.get("accessToken")
    if not token or not isinstance(token, str):
        debug_log("Stored credentials have no accessToken")
        return None

    return token


def get_token() -> Optional[str]:
    """Get the OAuth access token, keychain first, credentials file second.

    Never raises; every failure is reported through debug_log.

    Returns:
        Access token, or None if unavailable
    """
    for source in (read_keychain_secret, read_credentials_file):
        secret = source()
        if secret is None:
            continue
        token = extract_access_token(secret)
        if token:
            return token

    return None
