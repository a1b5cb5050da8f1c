"""Error handling utilities for HTTP responses."""

import logging

import httpx

from card_issuing_client.errors.exceptions import (
    APIError,
    AuthenticationError,
    BadRequestError,
    ClientError,
    ConflictError,
    InternalServerError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    UnprocessableEntityError,
)
from card_issuing_client.errors.models import ErrorBody

logger = logging.getLogger(__name__)

STATUS_EXCEPTIONS: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: RateLimitError,
}


def raise_for_status(response: httpx.Response) -> None:
    """Raise the matching exception for an HTTP error response.

    Args:
        response: HTTP response object

    Raises:
        APIError subclass based on status code
    """
    if response.is_success:
        return

    status_code = response.status_code
    body = ErrorBody.from_response(response)

    if status_code in STATUS_EXCEPTIONS:
        exc_class = STATUS_EXCEPTIONS[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = InternalServerError
    else:
        exc_class = APIError

    if body:
        message = body.to_exception_message(status_code)
    else:
        response_text = response.text[:200]
        message = f"HTTP {status_code}: {response_text}" if response_text else f"HTTP {status_code}"

    logger.debug(f"Request failed with {exc_class.__name__}: {message}")

    if exc_class is RateLimitError:
        retry_after = None
        if "retry-after" in response.headers:
            try:
                retry_after = int(response.headers["retry-after"])
            except (ValueError, TypeError):
                # HTTP-date form is not interpreted here
                retry_after = None
        raise RateLimitError(
            message,
            retry_after=retry_after,
            status_code=status_code,
            response=response,
            body=body,
        )

    raise exc_class(message, status_code=status_code, response=response, body=body)
