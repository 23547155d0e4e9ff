"""Google Gemini generateContent API.

Gemini has no system role, so the instruction is prepended to the
user's text in a single content part. The API key travels in the body.
"""

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
    prompt = (
        build_instruction(target_lang)
        + "\n\nTranslate the following text:\n\n"
        + source_text
    )
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generation_config": {
            "temperature": TEMPERATURE,
            "maxOutputTokens": MAX_OUTPUT_TOKENS,
        },
    }


def _extract(data: Any) -> Any:
    return data["candidates"][0]["content"]["parts"][0]["text"]


ENDPOINT = ProviderEndpoint(
    provider=Provider.GEMINI,
    url_template="https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent",
    auth_placement=AuthPlacement.BODY,
    auth_field="key",
    build_body=_build_body,
    extract=_extract,
    hints=("gemini", "googleapis"),
)
