import io
import json

from datetime import datetime, timedelta, timezone

import pytest

from claude_usage_line.utils import debug


def pytest_configure(config):
    """Register custom test markers."""
    config.addinivalue_line("markers", "unit: Unit tests that do not perform real I/O")
    config.addinivalue_line("markers", "integration: Integration tests with mocked I/O")
    config.addinivalue_line("markers", "performance: Benchmarks using pytest-benchmark")


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path):
    """Keep tests away from the real config dir, credentials and debug state."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.delenv(debug.DEBUG_ENV_VAR, raising=False)
    monkeypatch.setattr(debug, "_debug_enabled", False)


@pytest.fixture
def iso_in():
    """Factory for ISO-8601 timestamps relative to now."""

    def _iso_in(**delta) -> str:
        return (datetime.now(timezone.utc) + timedelta(**delta)).isoformat()

    return _iso_in


@pytest.fixture
def sample_usage_payload(iso_in):
    """Usage response with a calm session window and a busy week."""
    return {
        "five_hour": {"utilization": 45.2, "resets_at": iso_in(hours=3)},
        "seven_day": {"utilization": 92.0, "resets_at": iso_in(days=2, minutes=30)},
        "seven_day_opus": None,
    }


class FakeResponse(io.BytesIO):
    """Minimal stand-in for the object urlopen returns."""

    def __init__(self, body: bytes, status: int = 200):
        super().__init__(body)
        self.status = status


@pytest.fixture
def mock_urlopen(monkeypatch):
    """Factory fixture that replaces urlopen and records the requests made."""
    calls = []

    def _mock_urlopen(payload=None, status: int = 200, body: bytes = None, error=None):
        if body is None:
            body = json.dumps(payload).encode("utf-8")

        def fake_urlopen(request, timeout=None):
            calls.append({"request": request, "timeout": timeout})
            if error is not None:
                raise error
            return FakeResponse(body, status)

        monkeypatch.setattr(
            "claude_usage_line.utils.usage_api.urllib.request.urlopen", fake_urlopen
        )
        return calls

    return _mock_urlopen
