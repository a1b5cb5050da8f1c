"""Field annotations for request records.

Request records are plain dataclasses. Each field is declared with
:func:`param`, which stores the wire key and encoding hints in the field
metadata. Optional fields default to :data:`NOT_GIVEN` so that "unset" is
distinguishable from a falsy value such as ``0``, ``False`` or ``""``.

Example:
    ```python
    from dataclasses import dataclass
    from datetime import datetime

    from card_issuing_client.query.fields import NOT_GIVEN, Format, NotGivenOr, param


    @dataclass
    class ListParams:
        account_token: NotGivenOr[str] = param("account_token")
        begin: NotGivenOr[datetime] = param("begin", format=Format.DATE_TIME)
    ```
"""

import dataclasses
from enum import Enum
from typing import Any, Final, Literal, TypeVar

T = TypeVar("T")

METADATA_KEY: Final = "query"


class NotGiven:
    """Sentinel type for a field the caller did not set."""

    _instance: "NotGiven | None" = None

    def __new__(cls) -> "NotGiven":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> str:
        return "NOT_GIVEN"

    def __reduce__(self) -> str:
        return "NOT_GIVEN"


NOT_GIVEN: Final = NotGiven()

NotGivenOr = T | NotGiven


def is_absent(value: Any) -> bool:
    """Return True for values that are never encoded (unset or null)."""
    return value is None or isinstance(value, NotGiven)


class Format(Enum):
    """Scalar formatting hint attached to a field."""

    DEFAULT = "default"
    DATE = "date"
    DATE_TIME = "date-time"
    BINARY = "binary"


@dataclasses.dataclass(frozen=True)
class FieldOptions:
    """Encoding options stored in a dataclass field's metadata."""

    key: str | None = None
    format: Format = Format.DEFAULT
    path: bool = False
    omit_empty: bool = False
    skip: bool = False


def param(
    key: str | None = None,
    *,
    format: Format = Format.DEFAULT,
    path: bool = False,
    omit_empty: bool = False,
    skip: bool = False,
    default: Any = NOT_GIVEN,
    default_factory: Any = dataclasses.MISSING,
) -> Any:
    """Declare a request field.

    Args:
        key: Wire name of the field. Defaults to the attribute name.
        format: Scalar formatting hint.
        path: The field is interpolated into the URL path and is never
            part of the query string or the JSON body.
        omit_empty: Skip the field when it holds an empty value.
        skip: Never encode the field.
        default: Default value (``NOT_GIVEN`` unless stated).
        default_factory: Factory for mutable defaults.
    """
    options = FieldOptions(key=key, format=format, path=path, omit_empty=omit_empty, skip=skip)
    if default_factory is not dataclasses.MISSING:
        return dataclasses.field(default_factory=default_factory, metadata={METADATA_KEY: options})
    return dataclasses.field(default=default, metadata={METADATA_KEY: options})


def required(key: str | None = None, *, format: Format = Format.DEFAULT, path: bool = False) -> Any:
    """Declare a field the caller must always provide."""
    return dataclasses.field(metadata={METADATA_KEY: FieldOptions(key=key, format=format, path=path)})
