"""
Response decoding and error classification

Turns a raw HTTP response into a decoded payload or raises the typed error
the response represents. Classification depends only on the status code,
the body, and the operation's table entry.
"""

import json
import logging
from typing import Any, Optional, Union

from checkbox_api.client.http_client import HttpResponse
from checkbox_api.client.routes import ContentKind, OperationSpec
from checkbox_api.exceptions import (
    ApiError,
    EmptyResponseError,
    InvalidCredentialsError,
    ValidationError,
)


logger = logging.getLogger(__name__)


def parse_json(body: Union[bytes, str, None]) -> Optional[Any]:
    """
    Parse a response body as JSON

    Returns:
        Decoded value, or None when the body is empty, not JSON, or the
        literal ``null``
    """
    if not body:
        return None
    try:
        return json.loads(body)
    except (ValueError, UnicodeDecodeError):
        return None


def _error_message(payload: Any, default: str) -> str:
    if isinstance(payload, dict):
        message = payload.get("message") or payload.get("detail")
        if isinstance(message, str) and message:
            return message
    return default


def decode_response(response: HttpResponse, spec: OperationSpec) -> Any:
    """
    Decode a response for the given operation

    Args:
        response: Raw transport response
        spec: Operation table entry

    Returns:
        Decoded JSON payload for JSON operations (None for an empty 2xx
        body), raw bytes for binary operations, text for text operations

    Raises:
        EmptyResponseError: Body empty and the operation requires content
        InvalidCredentialsError: HTTP 403
        ValidationError: HTTP 422, or JSON returned by a passthrough
            operation
        ApiError: Any other non-2xx status
    """
    payload = parse_json(response.content)

    # Emptiness wins over status classification
    if payload is None and spec.requires_content:
        raise EmptyResponseError(
            "Request returned an empty response", status_code=response.status
        )

    if spec.is_passthrough:
        if payload is not None:
            raise ValidationError(
                _error_message(payload, "API returned an error instead of content"),
                details=payload,
                status_code=response.status,
            )
        if not response.ok:
            raise ApiError(
                f"API request failed with status {response.status}",
                status_code=response.status,
                details=response.text or None,
            )
        if spec.content_kind is ContentKind.BINARY:
            return response.content
        return response.text

    if response.status == 403:
        raise InvalidCredentialsError(
            _error_message(payload, "Invalid credentials"),
            status_code=response.status,
            details=payload,
        )

    if response.status == 422:
        raise ValidationError(
            _error_message(payload, "Validation error"),
            details=payload,
            status_code=response.status,
        )

    if not response.ok:
        logger.debug(
            f"Unclassified error response {response.status} [{response.request_id}]"
        )
        raise ApiError(
            _error_message(payload, f"API request failed with status {response.status}"),
            status_code=response.status,
            details=payload if payload is not None else (response.text or None),
        )

    return payload
