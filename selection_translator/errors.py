"""Failures raised inside the translation core.

Transport and HTTP status failures are not wrapped: they reach the
classifier as the httpx exceptions that produced them.
"""

from selection_translator.models import Provider


class TranslationError(Exception):
    """Base class for all core failures."""


class EmptyInput(TranslationError):
    def __init__(self) -> None:
        super().__init__("No text selected")


class MissingCredential(TranslationError):
    def __init__(self, provider: Provider) -> None:
        self.provider = provider
        super().__init__(f"Please set {provider.label} API Key in extension settings")


class UnsupportedProvider(TranslationError):
    def __init__(self, provider: object) -> None:
        self.provider = provider
        super().__init__(f"Unsupported provider: {provider}")


class RequestCanceled(TranslationError):
    """The in-flight request was canceled after exceeding its time budget."""

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(f"Translation request canceled after {timeout:g}s")


class EmptyResponse(TranslationError):
    def __init__(self) -> None:
        super().__init__("Empty response")


class MalformedResponse(TranslationError):
    """The success body does not have the provider's expected shape."""

    def __init__(self, provider: Provider, detail: str) -> None:
        self.provider = provider
        self.detail = detail
        super().__init__(f"Unexpected {provider.value} response format: {detail}")


class UnsupportedOption(TranslationError):
    """A model or target language outside the known combinations."""
