"""Request records for the cards resource."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from card_issuing_client.params.shared import ShippingAddress
from card_issuing_client.query.fields import Format, NotGivenOr, param, required


class SpendLimitDuration(StrEnum):
    ANNUALLY = "ANNUALLY"
    FOREVER = "FOREVER"
    MONTHLY = "MONTHLY"
    TRANSACTION = "TRANSACTION"


class CardType(StrEnum):
    VIRTUAL = "VIRTUAL"
    PHYSICAL = "PHYSICAL"
    MERCHANT_LOCKED = "MERCHANT_LOCKED"
    SINGLE_USE = "SINGLE_USE"


class CardState(StrEnum):
    CLOSED = "CLOSED"
    OPEN = "OPEN"
    PAUSED = "PAUSED"


class ShippingMethod(StrEnum):
    STANDARD = "STANDARD"
    STANDARD_WITH_TRACKING = "STANDARD_WITH_TRACKING"
    EXPEDITED = "EXPEDITED"


class DigitalWallet(StrEnum):
    APPLE_PAY = "APPLE_PAY"
    GOOGLE_PAY = "GOOGLE_PAY"
    SAMSUNG_PAY = "SAMSUNG_PAY"


@dataclass(kw_only=True)
class CardListParams:
    """Query parameters for listing cards."""

    # Returns cards associated with the specified account.
    account_token: NotGivenOr[str] = param("account_token")
    # Only cards created after this time. UTC.
    begin: NotGivenOr[datetime] = param("begin", format=Format.DATE_TIME)
    # Only cards created before this time. UTC.
    end: NotGivenOr[datetime] = param("end", format=Format.DATE_TIME)
    page: NotGivenOr[int] = param("page")
    page_size: NotGivenOr[int] = param("page_size")


@dataclass(kw_only=True)
class CardEmbedParams:
    """Query parameters of the embedded card UI URL."""

    # Base64 encoded JSON of an EmbedRequest.
    embed_request: str = required("embed_request")
    # SHA256 HMAC of embed_request with base64 digest.
    hmac: str = required("hmac")


@dataclass(kw_only=True)
class CardNewParams:
    """Body of a card creation request."""

    type: CardType = required("type")
    account_token: NotGivenOr[str] = param("account_token")
    card_program_token: NotGivenOr[str] = param("card_program_token")
    exp_month: NotGivenOr[str] = param("exp_month")
    exp_year: NotGivenOr[str] = param("exp_year")
    funding_token: NotGivenOr[str] = param("funding_token")
    memo: NotGivenOr[str] = param("memo")
    # Amount in cents. 0 removes a prior limit.
    spend_limit: NotGivenOr[int] = param("spend_limit")
    spend_limit_duration: NotGivenOr[SpendLimitDuration] = param("spend_limit_duration")
    state: NotGivenOr[CardState] = param("state")
    pin: NotGivenOr[str] = param("pin")
    digital_card_art_token: NotGivenOr[str] = param("digital_card_art_token")
    product_id: NotGivenOr[str] = param("product_id")
    shipping_address: NotGivenOr[ShippingAddress] = param("shipping_address")
    shipping_method: NotGivenOr[ShippingMethod] = param("shipping_method")


@dataclass(kw_only=True)
class CardUpdateParams:
    """Body of a card update request. ``card_token`` goes in the URL path."""

    card_token: str = required("card_token", path=True)
    funding_token: NotGivenOr[str] = param("funding_token")
    memo: NotGivenOr[str] = param("memo")
    spend_limit: NotGivenOr[int] = param("spend_limit")
    spend_limit_duration: NotGivenOr[SpendLimitDuration] = param("spend_limit_duration")
    auth_rule_token: NotGivenOr[str] = param("auth_rule_token")
    state: NotGivenOr[CardState] = param("state")
    pin: NotGivenOr[str] = param("pin")
    digital_card_art_token: NotGivenOr[str] = param("digital_card_art_token")


@dataclass(kw_only=True)
class CardProvisionParams:
    """Body of a digital wallet provisioning request."""

    card_token: str = required("card_token", path=True)
    digital_wallet: NotGivenOr[DigitalWallet] = param("digital_wallet")
    # Required for APPLE_PAY. Sent as base64.
    nonce: NotGivenOr[bytes] = param("nonce", format=Format.BINARY)
    nonce_signature: NotGivenOr[bytes] = param("nonce_signature", format=Format.BINARY)
    certificate: NotGivenOr[bytes] = param("certificate", format=Format.BINARY)


@dataclass(kw_only=True)
class CardReissueParams:
    """Body of a card reissue request."""

    card_token: str = required("card_token", path=True)
    # Previous address is used when omitted.
    shipping_address: NotGivenOr[ShippingAddress] = param("shipping_address")
    shipping_method: NotGivenOr[ShippingMethod] = param("shipping_method")
    product_id: NotGivenOr[str] = param("product_id")
