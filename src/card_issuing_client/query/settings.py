"""Formatting rules for query encoding."""

from dataclasses import dataclass
from enum import Enum


class NestedFormat(Enum):
    """How a nested key is joined onto its parent key."""

    BRACKETS = "brackets"  # parent[child]
    DOTS = "dots"  # parent.child


class ArrayFormat(Enum):
    """How a sequence is spread over query pairs."""

    COMMA = "comma"  # n=1,2,3
    REPEAT = "repeat"  # n=1&n=2&n=3
    INDICES = "indices"  # n[0]=1&n[1]=2
    BRACKETS = "brackets"  # n[]=1&n[]=2


@dataclass(frozen=True)
class QuerySettings:
    """Immutable encoder configuration.

    Example:
        ```python
        settings = QuerySettings(nested_format=NestedFormat.DOTS, array_format=ArrayFormat.REPEAT)
        ```
    """

    nested_format: NestedFormat = NestedFormat.BRACKETS
    array_format: ArrayFormat = ArrayFormat.COMMA

    def join(self, prefix: str, key: str) -> str:
        """Compute the child key for ``key`` under ``prefix``."""
        if not prefix:
            return key
        if self.nested_format is NestedFormat.DOTS:
            return f"{prefix}.{key}"
        return f"{prefix}[{key}]"

    def index_key(self, prefix: str, index: int) -> str:
        """Compute the key of a sequence element for the indices array format."""
        if self.nested_format is NestedFormat.DOTS:
            return f"{prefix}.{index}"
        return f"{prefix}[{index}]"


DEFAULT_SETTINGS = QuerySettings()
