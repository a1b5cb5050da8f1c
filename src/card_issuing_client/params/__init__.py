"""Request parameter records."""

from card_issuing_client.params.body import to_json_body
from card_issuing_client.params.cards import (
    CardEmbedParams,
    CardListParams,
    CardNewParams,
    CardProvisionParams,
    CardReissueParams,
    CardState,
    CardType,
    CardUpdateParams,
    DigitalWallet,
    ShippingMethod,
    SpendLimitDuration,
)
from card_issuing_client.params.shared import ShippingAddress
from card_issuing_client.params.transactions import (
    SimulateVoidType,
    TransactionListParams,
    TransactionResult,
    TransactionSimulateAuthorizationParams,
    TransactionSimulateClearingParams,
    TransactionSimulateReturnParams,
    TransactionSimulateVoidParams,
)

__all__ = [
    "CardEmbedParams",
    "CardListParams",
    "CardNewParams",
    "CardProvisionParams",
    "CardReissueParams",
    "CardState",
    "CardType",
    "CardUpdateParams",
    "DigitalWallet",
    "ShippingAddress",
    "ShippingMethod",
    "SimulateVoidType",
    "SpendLimitDuration",
    "TransactionListParams",
    "TransactionResult",
    "TransactionSimulateAuthorizationParams",
    "TransactionSimulateClearingParams",
    "TransactionSimulateReturnParams",
    "TransactionSimulateVoidParams",
    "to_json_body",
]
