"""Async client for the card-issuing API."""

import logging
from typing import Any

import httpx

from card_issuing_client import __version__
from card_issuing_client.config import ClientConfig
from card_issuing_client.errors import raise_for_status
from card_issuing_client.params import to_json_body
from card_issuing_client.query import QueryEncoder
from card_issuing_client.services import CardService, TransactionService

logger = logging.getLogger(__name__)


class CardIssuingClient:
    """Entry point for the card-issuing API.

    Holds one :class:`httpx.AsyncClient` and exposes the resource services.
    Configuration comes from ``config`` or, when omitted, from
    :meth:`ClientConfig.from_env` called with ``config_overrides``.

    Args:
        config: Fully built configuration.
        transport: Optional transport, e.g. ``httpx.MockTransport`` in tests.
        **config_overrides: Passed to :meth:`ClientConfig.from_env`.

    Example:
        ```python
        async with CardIssuingClient(environment="sandbox") as client:
            page = await client.cards.list(CardListParams(page_size=10))
        ```
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        **config_overrides: Any,
    ) -> None:
        self.config = config if config is not None else ClientConfig.from_env(**config_overrides)
        self._encoder = QueryEncoder(self.config.query_settings)
        self._http = httpx.AsyncClient(
            base_url=self.config.base_url + "/",
            timeout=self.config.timeout,
            transport=transport,
            headers={
                "Authorization": self.config.api_key,
                "Accept": "application/json",
                "User-Agent": f"card-issuing-client/{__version__}",
            },
        )
        self.cards = CardService(self)
        self.transactions = TransactionService(self)

    async def __aenter__(self) -> "CardIssuingClient":
        await self._http.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self._http.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._http.aclose()

    def encode_query(self, query: Any) -> httpx.QueryParams | None:
        """Encode a request record with the configured query settings."""
        pairs = self._encoder.encode(query)
        return pairs.to_query_params() if pairs else None

    def build_url(self, path: str, query: Any = None) -> str:
        """Return the absolute URL for ``path`` with ``query`` encoded."""
        url = self._http.base_url.join(path.lstrip("/"))
        params = self.encode_query(query)
        if params is not None:
            url = url.copy_with(params=params)
        return str(url)

    async def request(self, method: str, path: str, *, query: Any = None, body: Any = None) -> Any:
        """Send a request and return the decoded JSON response.

        Args:
            method: HTTP method.
            path: Path relative to the base URL, already interpolated.
            query: Request record encoded into the query string.
            body: Request record encoded as the JSON body.

        Returns:
            Decoded JSON, or None for an empty response.

        Raises:
            APIError subclass for non-2xx responses.
        """
        params = self.encode_query(query)
        json_body = to_json_body(body) if body is not None else None

        logger.debug(f"{method} {path} params={params} body_keys={sorted(json_body) if json_body else []}")
        response = await self._http.request(method, path.lstrip("/"), params=params, json=json_body)
        raise_for_status(response)

        if not response.content:
            return None
        return response.json()
