"""Shared plumbing for resource services."""

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from card_issuing_client.query import format_scalar, path_params

if TYPE_CHECKING:
    from card_issuing_client.client import CardIssuingClient


def quote_segment(value: Any) -> str:
    """Percent-quote a value for use as a single path segment."""
    text = format_scalar(value)
    return quote(text if text is not None else str(value), safe="")


def expand_path(template: str, params: Any = None, **segments: Any) -> str:
    """Fill ``{name}`` placeholders from path-parameter fields and ``segments``."""
    values = dict(path_params(params)) if params is not None else {}
    values.update(segments)
    return template.format(**{key: quote_segment(value) for key, value in values.items()})


class APIResource:
    """Base class for services bound to a client."""

    def __init__(self, client: "CardIssuingClient") -> None:
        self._client = client
