"""Build VertexAI errors from httpx transport failures and error responses."""

from __future__ import annotations

import json
from typing import Any

import httpx
from pydantic import ValidationError

from vertexai_sdk.errors.base import VertexAIError
from vertexai_sdk.errors.params import BadResponseParams, FetchErrorParams
from vertexai_sdk.errors.registry import create_error
from vertexai_sdk.telemetry.logger import get_logger
from vertexai_sdk.types.errors import ErrorDetails

logger = get_logger(__name__)


def fetch_error(url: str, exc: BaseException) -> VertexAIError:
    """Create a FETCH_ERROR for a request that never got a response.

    Args:
        url: Requested URL
        exc: The exception raised by the transport (usually httpx.HTTPError)

    Returns:
        VertexAIError to raise, typically ``from exc``
    """
    message = str(exc) or type(exc).__name__
    logger.debug("Request failed", url=url, error=type(exc).__name__)
    return create_error(FetchErrorParams(url=url, message=message))


def bad_response_error(url: str, response: httpx.Response) -> VertexAIError:
    """Create a BAD_RESPONSE error from a non-2xx response.

    Reads Google API error envelopes of the form
    ``{"error": {"message": ..., "details": [...]}}``. When details are
    present they are appended to the message as compact JSON and kept as
    ``custom_data.error_details`` in the same order. Entries that do not fit
    :class:`ErrorDetails` are kept as received.

    Args:
        url: Requested URL
        response: The HTTP response

    Returns:
        VertexAIError to raise
    """
    message = ""
    error_details: list[Any] | None = None

    body = _read_json(response)
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        if isinstance(error.get("message"), str):
            message = error["message"]
        details = error.get("details")
        if isinstance(details, list):
            message += " " + json.dumps(details, separators=(",", ":"), ensure_ascii=False)
            error_details = [_to_error_details(d) for d in details]

    logger.debug(
        "Bad response",
        url=url,
        status=response.status_code,
        has_details=error_details is not None,
    )
    return create_error(
        BadResponseParams(
            url=url,
            status=response.status_code,
            status_text=response.reason_phrase,
            message=message,
            error_details=error_details,
        )
    )


def _to_error_details(detail: Any) -> Any:
    """Parse one detail entry, keeping it unchanged if it has another shape."""
    if not isinstance(detail, dict):
        return detail
    try:
        return ErrorDetails.model_validate(detail)
    except ValidationError:
        return detail


def _read_json(response: httpx.Response) -> Any:
    """Decode a response body as JSON, or None if it isn't JSON."""
    try:
        return response.json()
    except ValueError:
        return None
