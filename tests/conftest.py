"""Pytest configuration and shared fixtures for card-issuing-client tests."""

import pytest


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear client-related environment variables before each test.

    This prevents a developer's real API key or a previously loaded .env file
    from leaking into configuration tests.
    """
    import os

    test_prefixes = ("TEST_", "CARD_ISSUING_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield
