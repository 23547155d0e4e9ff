"""Grok (xAI): OpenAI-style chat completions."""

from typing import Any

from selection_translator.models import Provider
from selection_translator.providers.base import (
    MAX_OUTPUT_TOKENS,
    TEMPERATURE,
    AuthPlacement,
    ProviderEndpoint,
    build_instruction,
)


def _build_body(model: str, target_lang: str, source_text: str) -> dict[str, Any]:
    return {
        "model": model,
        "messages": [
            {"role": "system", "content": build_instruction(target_lang)},
            {"role": "user", "content": source_text},
        ],
        "temperature": TEMPERATURE,
        "max_tokens": MAX_OUTPUT_TOKENS,
    }


def _extract(data: Any) -> Any:
    return data["choices"][0]["message"]["content"]


ENDPOINT = ProviderEndpoint(
    provider=Provider.GROK,
    url_template="https://api.x.ai/v1/chat/completions",
    auth_placement=AuthPlacement.HEADER,
    auth_field="x-api-key",
    build_body=_build_body,
    extract=_extract,
    hints=("x.ai",),
)
