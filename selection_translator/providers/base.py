"""Endpoint descriptor shared by every translation provider."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from selection_translator.models import Provider

TEMPERATURE = 0.3
MAX_OUTPUT_TOKENS = 4096

SYSTEM_PROMPT = (
    "You are a professional translator; please translate the user's text to {target_lang}, "
    "emphasizing natural expression, clarity, accuracy, and fluency; "
    "don't add any explanations or comments."
)

BodyBuilder = Callable[[str, str, str], dict[str, Any]]
Extractor = Callable[[Any], Any]


def build_instruction(target_lang: str) -> str:
    """Return the translator instruction for the given target language."""
    return SYSTEM_PROMPT.format(target_lang=target_lang)


class AuthPlacement(str, Enum):
    """Where a provider expects the credential."""

    HEADER = "header"
    BODY = "body"


@dataclass(frozen=True)
class ProviderEndpoint:
    """Static recipe for talking to one provider.

    Args:
        provider: Provider this descriptor belongs to.
        url_template: Endpoint URL; ``{model}`` is substituted when present.
        auth_placement: Whether the credential travels in a header or the JSON body.
        auth_field: Header name or body field carrying the credential.
        build_body: (model, target_lang, source_text) -> JSON body without credential.
        extract: Navigates a decoded success body to the raw translated value.
        static_headers: Extra headers sent on every request.
        hints: Lower-case substrings identifying this provider in error messages.
    """

    provider: Provider
    url_template: str
    auth_placement: AuthPlacement
    auth_field: str
    build_body: BodyBuilder
    extract: Extractor
    static_headers: dict[str, str] = field(default_factory=dict)
    hints: tuple[str, ...] = ()

    @property
    def label(self) -> str:
        return self.provider.label

    def url(self, model: str) -> str:
        return self.url_template.format(model=model)

    def build_headers(self, credential: str) -> dict[str, str]:
        headers = {"Content-Type": "application/json", **self.static_headers}
        if self.auth_placement is AuthPlacement.HEADER:
            headers[self.auth_field] = credential
        return headers

    def build_payload(
        self, credential: str, model: str, target_lang: str, source_text: str
    ) -> dict[str, Any]:
        body = self.build_body(model, target_lang, source_text)
        if self.auth_placement is AuthPlacement.BODY:
            body[self.auth_field] = credential
        return body
