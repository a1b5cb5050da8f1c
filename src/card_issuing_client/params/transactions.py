"""Request records for the transactions resource."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from card_issuing_client.query.fields import Format, NotGivenOr, param, required


class TransactionResult(StrEnum):
    APPROVED = "APPROVED"
    DECLINED = "DECLINED"


class SimulateVoidType(StrEnum):
    AUTHORIZATION_EXPIRY = "AUTHORIZATION_EXPIRY"
    AUTHORIZATION_REVERSAL = "AUTHORIZATION_REVERSAL"


@dataclass(kw_only=True)
class TransactionListParams:
    """Query parameters for listing transactions."""

    account_token: NotGivenOr[str] = param("account_token")
    card_token: NotGivenOr[str] = param("card_token")
    result: NotGivenOr[TransactionResult] = param("result")
    begin: NotGivenOr[datetime] = param("begin", format=Format.DATE_TIME)
    end: NotGivenOr[datetime] = param("end", format=Format.DATE_TIME)
    page: NotGivenOr[int] = param("page")
    page_size: NotGivenOr[int] = param("page_size")


@dataclass(kw_only=True)
class TransactionSimulateAuthorizationParams:
    """Simulated authorization request from a merchant acquirer."""

    amount: int = required("amount")
    descriptor: str = required("descriptor")
    pan: str = required("pan")
    mcc: NotGivenOr[str] = param("mcc")
    merchant_acceptor_id: NotGivenOr[str] = param("merchant_acceptor_id")
    merchant_amount: NotGivenOr[int] = param("merchant_amount")
    merchant_currency: NotGivenOr[str] = param("merchant_currency")
    partial_approval_capable: NotGivenOr[bool] = param("partial_approval_capable")


@dataclass(kw_only=True)
class TransactionSimulateClearingParams:
    """Clears an existing authorization. Omitting ``amount`` clears the full amount."""

    token: str = required("token")
    amount: NotGivenOr[int] = param("amount")


@dataclass(kw_only=True)
class TransactionSimulateReturnParams:
    """Returns an amount back to a card."""

    amount: int = required("amount")
    descriptor: str = required("descriptor")
    pan: str = required("pan")


@dataclass(kw_only=True)
class TransactionSimulateVoidParams:
    """Voids a pending authorization. Omitting ``amount`` voids the full amount."""

    token: str = required("token")
    amount: NotGivenOr[int] = param("amount")
    type: NotGivenOr[SimulateVoidType] = param("type")
