"""Pull the translated text out of a provider's success body."""

from typing import Any

from selection_translator.errors import MalformedResponse
from selection_translator.models import Provider
from selection_translator.providers import lookup


def extract(provider: Provider, body: Any) -> str:
    """Return the translated text from a decoded response body, trimmed.

    Raises:
        MalformedResponse: If a field is missing, a sequence is empty, or a
            value has the wrong type.
    """
    endpoint = lookup(provider)
    try:
        text = endpoint.extract(body)
    except (KeyError, IndexError, TypeError) as exc:
        raise MalformedResponse(endpoint.provider, f"{type(exc).__name__}: {exc}") from exc

    if not isinstance(text, str):
        raise MalformedResponse(
            endpoint.provider, f"expected text, got {type(text).__name__}"
        )
    return text.strip()
