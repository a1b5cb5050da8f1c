"""Card Issuing Client - async Python client for a card-issuing platform.

This library provides:
- Typed request records with query-string and JSON body encoding
- Per-resource services (cards, transactions) over httpx
- Page-number pagination helpers
- Configuration from arguments, environment variables and .env files

Example:
    ```python
    from card_issuing_client import CardIssuingClient
    from card_issuing_client.params import CardListParams

    async with CardIssuingClient(environment="sandbox") as client:
        page = await client.cards.list(CardListParams(page_size=25))
        async for card in page.auto_paging_iter():
            print(card.token, card.state)
    ```
"""

__version__ = "0.1.0"

from card_issuing_client.client import CardIssuingClient  # noqa: E402
from card_issuing_client.config import ClientConfig  # noqa: E402

__all__ = ["CardIssuingClient", "ClientConfig", "__version__"]
