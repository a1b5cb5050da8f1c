"""Error response body models."""

from dataclasses import dataclass
from typing import Any

import httpx


@dataclass
class ErrorBody:
    """Error payload returned by the card-issuing API.

    The API answers failures with ``{"message": ..., "debugging_request_id": ...}``.
    Any other top-level members are kept in ``extra``.
    """

    message: str | None = None
    debugging_request_id: str | None = None
    extra: dict[str, Any] | None = None

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ErrorBody | None":
        """Parse the error payload of an HTTP response.

        Args:
            response: HTTP response object

        Returns:
            ErrorBody, or None if the body is not a JSON object with a known member
        """
        try:
            data = response.json()
        except (ValueError, TypeError, AttributeError):
            # Empty body, HTML error page, or no content at all
            return None

        if not isinstance(data, dict):
            return None
        if "message" not in data and "debugging_request_id" not in data:
            return None

        extra = {k: v for k, v in data.items() if k not in ("message", "debugging_request_id")}
        message = data.get("message")
        request_id = data.get("debugging_request_id")
        return cls(
            message=str(message) if message is not None else None,
            debugging_request_id=str(request_id) if request_id is not None else None,
            extra=extra or None,
        )

    def to_exception_message(self, status_code: int) -> str:
        """Convert the payload to an exception message."""
        message = f"HTTP {status_code}: {self.message}" if self.message else f"HTTP {status_code}"
        if self.debugging_request_id:
            message += f" (debugging_request_id: {self.debugging_request_id})"
        return message
