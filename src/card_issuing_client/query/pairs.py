"""Ordered query pairs, the output of query encoding."""

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, overload

import httpx

from card_issuing_client.query.fields import is_absent
from card_issuing_client.query.settings import DEFAULT_SETTINGS, QuerySettings


class QueryPairs(Sequence[tuple[str, str]]):
    """Immutable, ordered sequence of ``(key, value)`` string pairs.

    Keys may repeat and their order is preserved, which matters for the
    repeat and brackets array formats. Percent-encoding happens only when the
    pairs are turned into a query string (``str(pairs)`` or
    :meth:`to_query_params`).

    Example:
        ```python
        pairs = QueryPairs([("page", "2"), ("state", "OPEN")])
        str(pairs)  # "page=2&state=OPEN"
        ```
    """

    __slots__ = ("_pairs",)

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()) -> None:
        self._pairs: tuple[tuple[str, str], ...] = tuple((str(k), str(v)) for k, v in pairs)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "QueryPairs":
        """Build pairs from a mapping whose values are strings or lists of strings.

        Absent values (None or NOT_GIVEN), alone or inside a list, add no pair.
        """
        pairs = []
        for key, value in mapping.items():
            if is_absent(value):
                continue
            if isinstance(value, (list, tuple)):
                pairs.extend((key, item) for item in value if not is_absent(item))
            else:
                pairs.append((key, value))
        return cls(pairs)

    @overload
    def __getitem__(self, index: int) -> tuple[str, str]: ...

    @overload
    def __getitem__(self, index: slice) -> "QueryPairs": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return QueryPairs(self._pairs[index])
        return self._pairs[index]

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._pairs)

    def __add__(self, other: Iterable[tuple[str, str]]) -> "QueryPairs":
        return QueryPairs((*self._pairs, *other))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QueryPairs):
            return self._pairs == other._pairs
        if isinstance(other, (list, tuple)):
            return list(self._pairs) == [tuple(pair) for pair in other]
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._pairs)

    def __repr__(self) -> str:
        return f"QueryPairs({list(self._pairs)!r})"

    def __str__(self) -> str:
        return str(self.to_query_params())

    def keys(self) -> list[str]:
        """Distinct keys in first-seen order."""
        return list(dict.fromkeys(key for key, _ in self._pairs))

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the first value stored under ``key``."""
        for pair_key, value in self._pairs:
            if pair_key == key:
                return value
        return default

    def get_list(self, key: str) -> list[str]:
        """Return every value stored under ``key`` in order."""
        return [value for pair_key, value in self._pairs if pair_key == key]

    def to_dict(self) -> dict[str, list[str]]:
        """Group values by key, keeping first-seen key order."""
        grouped: dict[str, list[str]] = {}
        for key, value in self._pairs:
            grouped.setdefault(key, []).append(value)
        return grouped

    def to_query_params(self) -> httpx.QueryParams:
        """Convert to :class:`httpx.QueryParams` for use as request params."""
        return httpx.QueryParams(list(self._pairs))

    def prefixed(self, prefix: str, settings: QuerySettings = DEFAULT_SETTINGS) -> "QueryPairs":
        """Nest every key under ``prefix`` using the settings' nested format.

        A key that already carries a bracket suffix keeps it, so ``a[b]``
        under ``x`` becomes ``x[a][b]``. Pairs with an empty key are dropped.
        """
        if not prefix:
            return self
        nested = []
        for key, value in self._pairs:
            if not key:
                continue
            head, bracket, rest = key.partition("[")
            nested.append((settings.join(prefix, head) + bracket + rest, value))
        return QueryPairs(nested)
