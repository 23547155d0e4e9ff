"""Value objects exchanged between the host, the orchestrator and the providers."""

from dataclasses import dataclass, field
from enum import Enum


class Provider(str, Enum):
    """Closed set of supported translation backends."""

    GROK = "grok"
    ANTHROPIC = "anthropic"
    GEMINI = "gemini"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class DisplayMode(str, Enum):
    DISPLAY = "display"
    DISPLAY_AND_COPY = "displayAndCopy"


# Models offered per provider; the first entry is the default.
PROVIDER_MODELS: dict[Provider, tuple[str, ...]] = {
    Provider.GROK: ("grok-2-1212",),
    Provider.ANTHROPIC: (
        "claude-3-5-sonnet-20240620",
        "claude-3-opus-20240229",
        "claude-3-sonnet-20240229",
        "claude-3-haiku-20240307",
    ),
    Provider.GEMINI: ("gemini-1.5-pro", "gemini-1.5-flash"),
}

TARGET_LANGUAGES: tuple[str, ...] = (
    "English", "Chinese", "Spanish", "Arabic", "French", "Russian",
    "Portuguese", "German", "Japanese", "Hindi", "Korean", "Italian",
    "Dutch", "Turkish", "Vietnamese", "Polish", "Thai", "Swedish",
)

DEFAULT_TARGET_LANG = "Chinese"


@dataclass(frozen=True)
class TranslationOptions:
    """User configuration bundle supplied by the host.

    Args:
        provider: Selected backend.
        credentials: API key per provider (may be blank).
        models: Selected model per provider.
        target_lang: One of TARGET_LANGUAGES.
        display_mode: Whether a successful result is also copied.
    """

    provider: Provider = Provider.GROK
    credentials: dict[Provider, str] = field(default_factory=dict)
    models: dict[Provider, str] = field(default_factory=dict)
    target_lang: str = DEFAULT_TARGET_LANG
    display_mode: DisplayMode = DisplayMode.DISPLAY

    @property
    def credential(self) -> str:
        return self.credentials.get(self.provider, "")

    @property
    def model(self) -> str:
        return self.models.get(self.provider) or PROVIDER_MODELS[self.provider][0]


@dataclass(frozen=True)
class TranslationRequest:
    """One translation invocation, already validated by the orchestrator."""

    provider: Provider
    credential: str
    model: str
    target_lang: str
    source_text: str

    def __repr__(self) -> str:
        # Keep the credential out of logs and tracebacks.
        return (
            f"TranslationRequest(provider={self.provider.value!r}, model={self.model!r}, "
            f"target_lang={self.target_lang!r}, source_text={self.source_text!r})"
        )


@dataclass(frozen=True)
class TranslationResult:
    """Outcome of an invocation: translated text on success, a message otherwise."""

    success: bool
    text: str

    @classmethod
    def ok(cls, text: str) -> "TranslationResult":
        return cls(success=True, text=text)

    @classmethod
    def failed(cls, message: str) -> "TranslationResult":
        return cls(success=False, text=message)
