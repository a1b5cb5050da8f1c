"""Field reflection for request records.

Walks the declared fields of a dataclass and decides, per field, whether it
takes part in query encoding and under which key. Descriptors are computed
once per type and cached.
"""

import dataclasses
import logging
from collections.abc import Iterator, Mapping, Sized
from decimal import Decimal
from enum import Enum
from functools import lru_cache
from typing import Any

from card_issuing_client.query.fields import METADATA_KEY, FieldOptions, Format, is_absent

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class FieldDescriptor:
    """Encoding view of a single declared field."""

    name: str
    key: str
    format: Format = Format.DEFAULT
    path: bool = False
    omit_empty: bool = False


@lru_cache(maxsize=None)
def describe(cls: type) -> tuple[FieldDescriptor, ...]:
    """Return the ordered field descriptors of a dataclass type.

    Fields marked ``skip`` and fields whose key is empty are left out.
    Fields declared without :func:`~card_issuing_client.query.fields.param`
    use their attribute name as key.
    """
    descriptors = []
    for field in dataclasses.fields(cls):
        options = field.metadata.get(METADATA_KEY, FieldOptions())
        if options is False:
            continue
        if not isinstance(options, FieldOptions):
            logger.debug(f"Ignoring unknown query metadata on {cls.__name__}.{field.name}")
            options = FieldOptions()
        if options.skip:
            continue
        key = field.name if options.key is None else options.key
        if not key:
            continue
        descriptors.append(
            FieldDescriptor(
                name=field.name,
                key=key,
                format=options.format,
                path=options.path,
                omit_empty=options.omit_empty,
            )
        )
    return tuple(descriptors)


def is_record(value: Any) -> bool:
    """True for dataclass instances (not dataclass types)."""
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def is_empty(value: Any) -> bool:
    """True for zero values: ``""``, ``0``, ``False`` and empty collections.

    Enum members are judged by their value.
    """
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, (bool, int, float, Decimal, str, bytes, bytearray)):
        return not value
    if isinstance(value, Sized) and not is_record(value):
        return len(value) == 0
    return False


def iter_fields(obj: Any) -> Iterator[tuple[FieldDescriptor, Any]]:
    """Yield ``(descriptor, value)`` for every field that carries a value.

    Absent values are dropped, and so are empty values of ``omit_empty`` fields.
    Path parameters are included; callers filter on ``descriptor.path``.
    """
    for descriptor in describe(type(obj)):
        value = getattr(obj, descriptor.name)
        if is_absent(value):
            continue
        if descriptor.omit_empty and is_empty(value):
            continue
        yield descriptor, value


def iter_query_fields(obj: Any) -> Iterator[tuple[FieldDescriptor, Any]]:
    """Yield the fields of ``obj`` that belong in the query string."""
    for descriptor, value in iter_fields(obj):
        if not descriptor.path:
            yield descriptor, value


def path_params(obj: Any) -> Mapping[str, Any]:
    """Return the path-parameter values of ``obj`` keyed by wire key."""
    return {descriptor.key: value for descriptor, value in iter_fields(obj) if descriptor.path}
