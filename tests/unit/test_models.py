"""Tests for response records."""

from datetime import UTC, datetime

import pytest

from card_issuing_client.models import Card, Transaction


@pytest.mark.unit
def test_card_from_dict():
    card = Card.from_dict(
        {
            "token": "card-1",
            "last_four": "4242",
            "state": "OPEN",
            "type": "VIRTUAL",
            "created": "2023-03-01T10:00:00Z",
            "pin_status": "OK",
        }
    )

    assert card.token == "card-1"
    assert card.last_four == "4242"
    assert card.created == datetime(2023, 3, 1, 10, 0, tzinfo=UTC)
    assert card.memo is None
    assert card.extra == {"pin_status": "OK"}


@pytest.mark.unit
def test_unparseable_timestamp_becomes_none():
    card = Card.from_dict({"token": "card-1", "created": "yesterday"})

    assert card.created is None


@pytest.mark.unit
def test_transaction_from_dict_defaults():
    """Missing keys fall back to defaults."""
    transaction = Transaction.from_dict({"token": "txn-1", "amount": 1500, "result": "APPROVED"})

    assert transaction.token == "txn-1"
    assert transaction.amount == 1500
    assert transaction.events == []
    assert transaction.extra == {}
