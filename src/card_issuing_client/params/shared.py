"""Records shared between resources."""

from dataclasses import dataclass

from card_issuing_client.query.fields import NotGivenOr, param, required


@dataclass(kw_only=True)
class ShippingAddress:
    """Postal address for physical card shipments."""

    first_name: str = required("first_name")
    last_name: str = required("last_name")
    address1: str = required("address1")
    address2: NotGivenOr[str] = param("address2")
    city: str = required("city")
    state: str = required("state")
    postal_code: str = required("postal_code")
    country: str = required("country")
    email: NotGivenOr[str] = param("email")
    phone_number: NotGivenOr[str] = param("phone_number")
