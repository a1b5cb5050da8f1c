"""JSON request bodies from request records."""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from card_issuing_client.query.encoder import format_scalar
from card_issuing_client.query.fields import Format, is_absent
from card_issuing_client.query.reflect import is_record, iter_fields


def to_json_body(params: Any) -> dict[str, Any]:
    """Build the JSON body for a request record.

    Absent fields and path parameters are left out. Timestamps, dates, UUIDs,
    decimals and bytes become strings the same way they do in a query string.
    """
    if is_absent(params):
        return {}
    return {
        descriptor.key: _to_json(value, descriptor.format)
        for descriptor, value in iter_fields(params)
        if not descriptor.path
    }


def _to_json(value: Any, format: Format) -> Any:
    if isinstance(value, Enum):
        return _to_json(value.value, format)
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if is_record(value):
        return to_json_body(value)
    if isinstance(value, Mapping):
        return {str(k): _to_json(v, format) for k, v in value.items() if not is_absent(v)}
    if isinstance(value, (list, tuple)):
        return [_to_json(item, format) for item in value if not is_absent(item)]
    text = format_scalar(value, format)
    return text if text is not None else str(value)
