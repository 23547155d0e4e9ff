"""Map any failure of an invocation to one user-facing message.

Order matters and is fixed: cancellation first, then HTTP status rules,
then sniffing of the error text for transport failures.
"""

import json
import logging
from typing import Any

import httpx

from selection_translator.errors import (
    EmptyResponse,
    MalformedResponse,
    RequestCanceled,
    TranslationError,
)
from selection_translator.models import Provider
from selection_translator.providers import PROVIDERS

logger = logging.getLogger(__name__)

CANCELED = "Translation canceled: Request took too long"
FAILED_PREFIX = "Translation failed: "

RATE_LIMITED = "Rate limit exceeded. Please try again later."
AUTH_FAILED = "Authentication failed. Please check your API key in settings."
NETWORK_ERROR = "Network connection error. Please check your internet connection."
TIMED_OUT = "Request timed out. The service might be experiencing high load."
BAD_REQUEST = "Bad request (400)"
UNEXPECTED_FORMAT = "Unexpected response format"

INVALID_REQUEST_TYPE = "invalid_request_error"


def classify(provider: Provider, error: Any) -> str:
    """Return the message to show the user for a failed invocation."""
    if isinstance(error, RequestCanceled):
        return CANCELED
    if isinstance(error, MalformedResponse):
        return FAILED_PREFIX + UNEXPECTED_FORMAT
    if isinstance(error, EmptyResponse):
        return FAILED_PREFIX + str(error)
    if isinstance(error, TranslationError):
        # Validation failures already carry their final wording.
        return str(error)
    return FAILED_PREFIX + describe(provider, error)


def describe(provider: Provider, error: Any) -> str:
    """Describe a transport or HTTP status failure."""
    status = _status_code(error)
    if status is not None:
        return _describe_status(status, error.response)
    return _describe_transport(provider, error)


def _status_code(error: Any) -> int | None:
    response = getattr(error, "response", None)
    status = getattr(response, "status_code", None)
    return status if isinstance(status, int) else None


def _describe_status(status: int, response: httpx.Response) -> str:
    if status == 429:
        return RATE_LIMITED
    if status in (401, 403):
        return AUTH_FAILED
    if status == 400:
        detail = _describe_bad_request(response)
        if detail is not None:
            return detail
    return f"API error: Status code {status}"


def _describe_bad_request(response: httpx.Response) -> str | None:
    """Read the structured error object shared by all providers' 400 bodies.

    Returns None when the body parses but carries no error object.
    """
    try:
        data = response.json()
    except (ValueError, httpx.ResponseNotRead):
        logger.debug("Unparseable 400 body")
        return BAD_REQUEST

    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, dict):
        message = error.get("message")
        if error.get("type") == INVALID_REQUEST_TYPE:
            return f"Invalid request: {message}"
        return f"API error: {message or error.get('type') or json.dumps(error)}"
    if isinstance(error, str) and error:
        return f"API error: {error}"
    return None


def _describe_transport(provider: Provider, error: Any) -> str:
    if not isinstance(error, BaseException):
        return str(error)

    message = str(error)
    if isinstance(error, httpx.NetworkError) or "Network Error" in message:
        return NETWORK_ERROR
    if isinstance(error, httpx.TimeoutException) or "timeout" in message:
        return TIMED_OUT

    # The selected provider is checked first; the rest keep registry order.
    lowered = message.lower()
    endpoints = sorted(PROVIDERS.values(), key=lambda e: e.provider != provider)
    for endpoint in endpoints:
        if any(hint in lowered for hint in endpoint.hints):
            return f"{endpoint.label} API error: {message}"

    logger.debug("Unclassified failure: %r", error)
    return message or type(error).__name__
