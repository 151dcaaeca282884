"""Shared fixtures for integration tests."""

import os

import pytest

from airquery import API_URL

# Skip all integration tests unless RUN_AIRQUERY_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_AIRQUERY_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_AIRQUERY_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def live_options():
    missing = [name for name in ("AIRQUERY_KEY", "AIRQUERY_BASE", "AIRQUERY_TABLE") if not os.environ.get(name)]
    if missing:
        pytest.skip(f"Missing environment variables: {', '.join(missing)}")
    return {
        "url": os.environ.get("AIRQUERY_URL", API_URL),
        "key": os.environ["AIRQUERY_KEY"],
        "base": os.environ["AIRQUERY_BASE"],
    }


@pytest.fixture
def live_table(live_options):
    return os.environ["AIRQUERY_TABLE"]
