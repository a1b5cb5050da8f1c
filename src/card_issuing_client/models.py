"""Response records."""

import logging
from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Self

logger = logging.getLogger(__name__)


def _parse_datetime(value: Any) -> datetime | None:
    if not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        logger.debug(f"Unparseable timestamp {value!r}")
        return None


class _Record:
    """Shared ``from_dict`` for response records.

    Known keys become attributes; keys the record does not declare are kept
    in ``extra`` so newer API fields are not lost.
    """

    _datetime_fields: frozenset[str] = frozenset()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        known = {f.name for f in fields(cls)} - {"extra"}  # type: ignore[arg-type]
        kwargs: dict[str, Any] = {}
        for name in known:
            if name not in data:
                continue
            value = data[name]
            kwargs[name] = _parse_datetime(value) if name in cls._datetime_fields else value
        extra = {k: v for k, v in data.items() if k not in known}
        return cls(**kwargs, extra=extra)


@dataclass
class Card(_Record):
    """A card as returned by the API."""

    token: str = ""
    account_token: str | None = None
    card_program_token: str | None = None
    created: datetime | None = None
    exp_month: str | None = None
    exp_year: str | None = None
    funding: dict[str, Any] | None = None
    last_four: str | None = None
    memo: str | None = None
    pan: str | None = None
    spend_limit: int | None = None
    spend_limit_duration: str | None = None
    state: str | None = None
    type: str | None = None
    extra: dict[str, Any] = field(default_factory=dict, repr=False)

    _datetime_fields = frozenset({"created"})


@dataclass
class Transaction(_Record):
    """A card transaction as returned by the API."""

    token: str = ""
    account_token: str | None = None
    card_token: str | None = None
    amount: int | None = None
    settled_amount: int | None = None
    created: datetime | None = None
    result: str | None = None
    status: str | None = None
    merchant: dict[str, Any] | None = None
    events: list[dict[str, Any]] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict, repr=False)

    _datetime_fields = frozenset({"created"})
