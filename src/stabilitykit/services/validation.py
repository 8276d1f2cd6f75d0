"""Classify raw HTTP responses into decoded results or typed errors."""

import json
import logging
from typing import Callable, TypeVar

import httpx
from pydantic import ValidationError

from ..errors import ResponseDecodeError, StabilityAPIError, StatusCodeError
from ..models.responses import APIErrorBody

logger = logging.getLogger(__name__)

T = TypeVar("T")


def raise_for_api_error(response: httpx.Response) -> None:
    """Raise the typed error for a non-200 response.

    A body that decodes as an error payload yields StabilityAPIError with the
    server's message. Anything else (HTML gateway pages, empty bodies, other
    JSON shapes) yields StatusCodeError with only the status code.
    """
    status_code = response.status_code
    try:
        error = APIErrorBody.model_validate_json(response.content)
    except ValidationError:
        logger.warning(f"Request failed with status {status_code} and an undecodable body")
        raise StatusCodeError(status_code) from None

    logger.warning(f"Request failed with status {status_code}: {error.name}: {error.message}")
    raise StabilityAPIError(
        error.message, status_code=status_code, error_id=error.id, name=error.name
    )


def parse_response(response: httpx.Response, decode: Callable[[bytes], T]) -> T:
    """Decode a successful response, or raise the matching error.

    Args:
        response: Raw HTTP response
        decode: Parses the body bytes into the expected schema

    Returns:
        The decoded value

    Raises:
        StabilityAPIError: Non-200 status with a structured error body
        StatusCodeError: Non-200 status with any other body
        ResponseDecodeError: 200 status, but the body does not match the schema
    """
    if response.status_code != 200:
        raise_for_api_error(response)

    try:
        return decode(response.content)
    except (ValidationError, json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Unexpected response schema: {e}")
        raise ResponseDecodeError(f"Unexpected response schema: {e}", 200) from e
