"""Turn a TranslationRequest into a ready-to-send HTTP request."""

import httpx

from selection_translator.models import TranslationRequest
from selection_translator.providers import lookup


def build(request: TranslationRequest) -> httpx.Request:
    """Build the provider-specific POST request.

    Raises:
        UnsupportedProvider: If the request names an unknown provider.
    """
    endpoint = lookup(request.provider)
    return httpx.Request(
        "POST",
        endpoint.url(request.model),
        headers=endpoint.build_headers(request.credential),
        json=endpoint.build_payload(
            request.credential,
            request.model,
            request.target_lang,
            request.source_text,
        ),
    )
