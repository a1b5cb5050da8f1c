"""Struct-to-query-string encoding.

Turns a request record (a dataclass declared with
:func:`~card_issuing_client.query.fields.param`) into ordered
``(key, value)`` pairs. Nested records, mappings and sequences are flattened
according to :class:`~card_issuing_client.query.settings.QuerySettings`.

The encoder never raises on malformed input. Absent values, values it cannot
classify and values without a usable key are left out of the result.

Example:
    ```python
    from card_issuing_client.query import ArrayFormat, QuerySettings, encode

    pairs = encode(params, QuerySettings(array_format=ArrayFormat.REPEAT))
    httpx.get(url, params=pairs.to_query_params())
    ```
"""

import base64
import logging
import math
from collections.abc import Iterable, Mapping
from datetime import UTC, date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Protocol, runtime_checkable
from uuid import UUID

from card_issuing_client.query.fields import Format, is_absent
from card_issuing_client.query.pairs import QueryPairs
from card_issuing_client.query.reflect import is_record, iter_query_fields
from card_issuing_client.query.settings import DEFAULT_SETTINGS, ArrayFormat, QuerySettings

logger = logging.getLogger(__name__)

Pairs = list[tuple[str, str]]


@runtime_checkable
class SupportsURLQuery(Protocol):
    """A value that produces its own query pairs.

    The encoder calls :meth:`url_query` instead of walking the value, then
    nests the produced keys under the key the value sits at.
    """

    def url_query(self) -> "QueryPairs | Mapping[str, Any] | Iterable[tuple[str, str]]": ...


def format_scalar(value: Any, format: Format = Format.DEFAULT) -> str | None:
    """Format a scalar to its query text, or return None if it is not a scalar.

    Args:
        value: Value to format.
        format: Formatting hint of the field the value came from.

    Returns:
        The canonical text, or None for non-scalar and non-finite values.
    """
    if isinstance(value, Enum):
        return format_scalar(value.value, format)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, Decimal):
        return f"{value:f}" if value.is_finite() else None
    if isinstance(value, str):
        return value
    if isinstance(value, datetime):
        return _format_datetime(value, format)
    if isinstance(value, date):
        if format is Format.DATE_TIME:
            return f"{value.isoformat()}T00:00:00Z"
        return value.isoformat()
    if isinstance(value, (bytes, bytearray, memoryview)):
        if format is Format.BINARY:
            return base64.b64encode(value).decode("ascii")
        return base64.urlsafe_b64encode(value).decode("ascii")
    if isinstance(value, UUID):
        return str(value)
    return None


def _format_float(value: float) -> str | None:
    if not math.isfinite(value):
        return None
    if value.is_integer():
        return str(int(value))
    # repr() gives the shortest round-tripping digits; Decimal drops the exponent
    return format(Decimal(repr(value)), "f")


def _format_datetime(value: datetime, format: Format) -> str:
    # Naive datetimes are taken to be UTC already
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    value = value.astimezone(UTC)
    if format is Format.DATE:
        return value.date().isoformat()
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")


def _well_formed_pairs(produced: Iterable[Any]) -> Pairs:
    """Keep the ``(key, value)`` items of a custom encoding that can be sent.

    Items that are not two-element pairs, keys that are not non-empty strings
    and values that are absent or not scalars are dropped.
    """
    pairs: Pairs = []
    for item in produced:
        if not isinstance(item, (tuple, list)) or len(item) != 2:
            logger.debug(f"Dropping malformed custom pair {item!r}")
            continue
        key, value = item
        if not isinstance(key, str) or not key or is_absent(value):
            continue
        text = format_scalar(value)
        if text is None:
            logger.debug(f"Dropping custom value of type {type(value).__name__} at {key!r}")
            continue
        pairs.append((key, text))
    return pairs


class QueryEncoder:
    """Recursive query encoder bound to one set of settings.

    Instances hold no mutable state and are safe to share between threads.

    Args:
        settings: Nested and array formatting rules.
    """

    def __init__(self, settings: QuerySettings = DEFAULT_SETTINGS) -> None:
        self.settings = settings

    def encode(self, value: Any) -> QueryPairs:
        """Encode ``value`` into query pairs.

        An absent or unencodable top-level value yields empty pairs.
        """
        if is_absent(value):
            return QueryPairs()
        return QueryPairs(self._encode("", value, Format.DEFAULT))

    def _encode(self, key: str, value: Any, format: Format) -> Pairs:
        if is_absent(value):
            return []
        # A class that defines url_query() is not an instance of the protocol
        if isinstance(value, SupportsURLQuery) and not isinstance(value, type):
            return self._encode_custom(key, value)

        text = format_scalar(value, format)
        if text is not None:
            if not key:
                logger.debug(f"Dropping scalar {value!r} without a key")
                return []
            return [(key, text)]

        if is_record(value):
            return self._encode_record(key, value)
        if isinstance(value, Mapping):
            return self._encode_mapping(key, value, format)
        if isinstance(value, (list, tuple)):
            return self._encode_sequence(key, value, format)

        logger.debug(f"Dropping unencodable value of type {type(value).__name__} at {key!r}")
        return []

    def _encode_custom(self, key: str, value: SupportsURLQuery) -> Pairs:
        produced = value.url_query()
        if produced is None:
            return []
        if isinstance(produced, Mapping):
            produced = QueryPairs.from_mapping(produced)
        elif isinstance(produced, (str, bytes, bytearray)):
            logger.debug(f"Dropping custom encoding at {key!r}: url_query() returned {type(produced).__name__}")
            return []
        try:
            pairs = QueryPairs(_well_formed_pairs(produced))
        except TypeError:
            logger.debug(f"Dropping custom encoding at {key!r}: url_query() returned {type(produced).__name__}")
            return []
        return list(pairs.prefixed(key, self.settings))

    def _encode_record(self, prefix: str, record: Any) -> Pairs:
        pairs: Pairs = []
        for descriptor, value in iter_query_fields(record):
            pairs.extend(self._encode(self.settings.join(prefix, descriptor.key), value, descriptor.format))
        return pairs

    def _encode_mapping(self, prefix: str, mapping: Mapping[Any, Any], format: Format) -> Pairs:
        pairs: Pairs = []
        for raw_key, value in mapping.items():
            key = format_scalar(raw_key)
            if not key:
                logger.debug(f"Dropping mapping entry with unusable key {raw_key!r}")
                continue
            pairs.extend(self._encode(self.settings.join(prefix, key), value, format))
        return pairs

    def _encode_sequence(self, key: str, items: list[Any] | tuple[Any, ...], format: Format) -> Pairs:
        if not key:
            logger.debug("Dropping sequence without a key")
            return []

        array_format = self.settings.array_format
        if array_format is ArrayFormat.COMMA:
            return self._encode_comma(key, items, format)

        pairs: Pairs = []
        for index, item in enumerate(items):
            if array_format is ArrayFormat.REPEAT:
                item_key = key
            elif array_format is ArrayFormat.INDICES:
                item_key = self.settings.index_key(key, index)
            else:
                item_key = f"{key}[]"
            pairs.extend(self._encode(item_key, item, format))
        return pairs

    def _encode_comma(self, key: str, items: list[Any] | tuple[Any, ...], format: Format) -> Pairs:
        # Only scalar elements can be comma-joined; nested values are omitted
        texts = []
        for item in items:
            if is_absent(item):
                continue
            text = format_scalar(item, format)
            if text is None:
                logger.debug(f"Dropping non-scalar element of type {type(item).__name__} from {key!r}")
                continue
            texts.append(text)
        if not texts:
            return []
        return [(key, ",".join(texts))]


def encode(value: Any, settings: QuerySettings = DEFAULT_SETTINGS) -> QueryPairs:
    """Encode ``value`` into query pairs using ``settings``."""
    return QueryEncoder(settings).encode(value)


def encode_default(value: Any) -> QueryPairs:
    """Encode ``value`` with bracket nesting and comma-joined arrays."""
    return QueryEncoder().encode(value)
