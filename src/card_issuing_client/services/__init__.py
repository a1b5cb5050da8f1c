"""Resource services."""

from card_issuing_client.services.cards import CardService
from card_issuing_client.services.transactions import TransactionService

__all__ = ["CardService", "TransactionService"]
