"""Cards resource."""

from typing import Any

from card_issuing_client.models import Card
from card_issuing_client.pagination import Page
from card_issuing_client.params import (
    CardEmbedParams,
    CardListParams,
    CardNewParams,
    CardProvisionParams,
    CardReissueParams,
    CardUpdateParams,
)
from card_issuing_client.services.base import APIResource, expand_path


class CardService(APIResource):
    """Create, read and manage cards."""

    async def get(self, card_token: str) -> Card:
        """Get a single card."""
        body = await self._client.request("GET", expand_path("cards/{card_token}", card_token=card_token))
        return Card.from_dict(body)

    async def list(self, params: CardListParams | None = None) -> Page[Card]:
        """List cards. Use ``auto_paging_iter()`` on the result to walk every page."""
        params = params if params is not None else CardListParams()
        body = await self._client.request("GET", "cards", query=params)
        return Page.from_response(body, item_factory=Card.from_dict, params=params, fetch=self.list)

    async def create(self, params: CardNewParams) -> Card:
        """Create a new virtual or physical card."""
        body = await self._client.request("POST", "cards", body=params)
        return Card.from_dict(body)

    async def update(self, params: CardUpdateParams) -> Card:
        """Update the specified properties of a card."""
        body = await self._client.request("PATCH", expand_path("cards/{card_token}", params), body=params)
        return Card.from_dict(body)

    async def provision(self, params: CardProvisionParams) -> dict[str, Any]:
        """Provision a card into a digital wallet."""
        return await self._client.request("POST", expand_path("cards/{card_token}/provision", params), body=params)

    async def reissue(self, params: CardReissueParams) -> Card:
        """Reissue a physical card with a new card number."""
        body = await self._client.request("POST", expand_path("cards/{card_token}/reissue", params), body=params)
        return Card.from_dict(body)

    def embed_url(self, params: CardEmbedParams) -> str:
        """Build the URL of the embedded card UI. No request is sent."""
        return self._client.build_url("embed/card", params)
