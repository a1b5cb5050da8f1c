"""Testing utilities for code built on the client.

Example:
    ```python
    import httpx

    from card_issuing_client.testing import create_mock_client


    async def test_lists_cards():
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"data": [], "page": 1, "total_entries": 0, "total_pages": 1})

        async with create_mock_client(handler) as client:
            page = await client.cards.list()
        assert page.data == []
    ```
"""

from collections.abc import Callable
from typing import Any

import httpx

from card_issuing_client.client import CardIssuingClient
from card_issuing_client.config import ClientConfig

TEST_API_KEY = "test-api-key"
TEST_BASE_URL = "https://api.example.com/v1"


def create_mock_client(handler: Callable[[httpx.Request], httpx.Response], **config_overrides: Any) -> CardIssuingClient:
    """Create a client whose requests are answered by ``handler``.

    Args:
        handler: Function receiving each request and returning the response.
        **config_overrides: Fields of :class:`ClientConfig` to override.
    """
    config = ClientConfig(
        api_key=config_overrides.pop("api_key", TEST_API_KEY),
        base_url=config_overrides.pop("base_url", TEST_BASE_URL),
        **config_overrides,
    )
    return CardIssuingClient(config, transport=httpx.MockTransport(handler))


__all__ = ["TEST_API_KEY", "TEST_BASE_URL", "create_mock_client"]
