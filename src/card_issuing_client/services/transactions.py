"""Transactions resource and sandbox simulations."""

from typing import Any

from card_issuing_client.models import Transaction
from card_issuing_client.pagination import Page
from card_issuing_client.params import (
    TransactionListParams,
    TransactionSimulateAuthorizationParams,
    TransactionSimulateClearingParams,
    TransactionSimulateReturnParams,
    TransactionSimulateVoidParams,
)
from card_issuing_client.services.base import APIResource, expand_path


class TransactionService(APIResource):
    """Read transactions and simulate card network events."""

    async def get(self, transaction_token: str) -> Transaction:
        """Get a specific transaction."""
        path = expand_path("transactions/{transaction_token}", transaction_token=transaction_token)
        body = await self._client.request("GET", path)
        return Transaction.from_dict(body)

    async def list(self, params: TransactionListParams | None = None) -> Page[Transaction]:
        """List transactions."""
        params = params if params is not None else TransactionListParams()
        body = await self._client.request("GET", "transactions", query=params)
        return Page.from_response(body, item_factory=Transaction.from_dict, params=params, fetch=self.list)

    async def simulate_authorization(self, params: TransactionSimulateAuthorizationParams) -> dict[str, Any]:
        """Simulate an authorization request from a merchant acquirer."""
        return await self._client.request("POST", "simulate/authorize", body=params)

    async def simulate_clearing(self, params: TransactionSimulateClearingParams) -> dict[str, Any]:
        """Clear an existing authorization."""
        return await self._client.request("POST", "simulate/clearing", body=params)

    async def simulate_return(self, params: TransactionSimulateReturnParams) -> dict[str, Any]:
        """Return (refund) an amount back to a card."""
        return await self._client.request("POST", "simulate/return", body=params)

    async def simulate_void(self, params: TransactionSimulateVoidParams) -> dict[str, Any]:
        """Void a pending authorization."""
        return await self._client.request("POST", "simulate/void", body=params)
