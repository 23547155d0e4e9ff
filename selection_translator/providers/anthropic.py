"""Anthropic Messages API."""

from typing import Any

from selection_translator.models import Provider
from selection_translator.providers.base import (
    MAX_OUTPUT_TOKENS,
    TEMPERATURE,
    AuthPlacement,
    ProviderEndpoint,
    build_instruction,
)

API_VERSION = "2023-06-01"


def _build_body(model: str, target_lang: str, source_text: str) -> dict[str, Any]:
    # The system prompt is a top-level field, not a message role.
    return {
        "model": model,
        "system": build_instruction(target_lang),
        "messages": [{"role": "user", "content": source_text}],
        "temperature": TEMPERATURE,
        "max_tokens": MAX_OUTPUT_TOKENS,
    }


def _extract(data: Any) -> Any:
    return data["content"][0]["text"]


ENDPOINT = ProviderEndpoint(
    provider=Provider.ANTHROPIC,
    url_template="https://api.anthropic.com/v1/messages",
    auth_placement=AuthPlacement.HEADER,
    auth_field="x-api-key",
    build_body=_build_body,
    extract=_extract,
    static_headers={"anthropic-version": API_VERSION},
    hints=("anthropic",),
)
