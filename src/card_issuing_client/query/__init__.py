"""Query-string encoding for request records.

Example:
    ```python
    from card_issuing_client.query import NestedFormat, QuerySettings, encode

    pairs = encode(params, QuerySettings(nested_format=NestedFormat.DOTS))
    ```
"""

from card_issuing_client.query.encoder import (
    QueryEncoder,
    SupportsURLQuery,
    encode,
    encode_default,
    format_scalar,
)
from card_issuing_client.query.fields import NOT_GIVEN, Format, NotGiven, NotGivenOr, is_absent, param, required
from card_issuing_client.query.pairs import QueryPairs
from card_issuing_client.query.reflect import FieldDescriptor, describe, path_params
from card_issuing_client.query.settings import DEFAULT_SETTINGS, ArrayFormat, NestedFormat, QuerySettings

__all__ = [
    "DEFAULT_SETTINGS",
    "NOT_GIVEN",
    "ArrayFormat",
    "FieldDescriptor",
    "Format",
    "NestedFormat",
    "NotGiven",
    "NotGivenOr",
    "QueryEncoder",
    "QueryPairs",
    "QuerySettings",
    "SupportsURLQuery",
    "describe",
    "encode",
    "encode_default",
    "format_scalar",
    "is_absent",
    "param",
    "path_params",
    "required",
]
