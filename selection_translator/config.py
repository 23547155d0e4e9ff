"""Environment variable loading with defaults."""

import os
from pathlib import Path

from dotenv import load_dotenv

from selection_translator.models import (
    DEFAULT_TARGET_LANG,
    PROVIDER_MODELS,
    TARGET_LANGUAGES,
    DisplayMode,
    Provider,
    TranslationOptions,
)

# Load .envdefault first (base defaults), then .env (overrides)
_base_dir = Path(__file__).resolve().parent.parent
load_dotenv(_base_dir / ".envdefault")
load_dotenv(_base_dir / ".env", override=True)

# Provider selection
TRANSLATION_PROVIDER: str = os.environ.get("TRANSLATION_PROVIDER", Provider.GROK.value)

# Credentials (never logged)
GROK_API_KEY: str = os.environ.get("GROK_API_KEY", "")
ANTHROPIC_API_KEY: str = os.environ.get("ANTHROPIC_API_KEY", "")
GEMINI_API_KEY: str = os.environ.get("GEMINI_API_KEY", "")

# Models
GROK_MODEL: str = os.environ.get("GROK_MODEL", PROVIDER_MODELS[Provider.GROK][0])
ANTHROPIC_MODEL: str = os.environ.get(
    "ANTHROPIC_MODEL", PROVIDER_MODELS[Provider.ANTHROPIC][0]
)
GEMINI_MODEL: str = os.environ.get("GEMINI_MODEL", PROVIDER_MODELS[Provider.GEMINI][0])

# Output
TARGET_LANG: str = os.environ.get("TARGET_LANG", DEFAULT_TARGET_LANG)
DISPLAY_MODE: str = os.environ.get("DISPLAY_MODE", DisplayMode.DISPLAY.value)

# Fixed budget for one HTTP exchange
REQUEST_TIMEOUT_SECONDS: float = 30.0

# Logging
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")


def _choice(name: str, value: str, allowed) -> str:
    if value not in allowed:
        raise ValueError(f"Invalid {name} '{value}'. Available: {list(allowed)}")
    return value


def load_options(
    provider: str | None = None,
    target_lang: str | None = None,
    display_mode: str | None = None,
) -> TranslationOptions:
    """Build the option bundle from the environment.

    Explicit arguments override the corresponding environment values.

    Raises:
        ValueError: If a provider, model, language or display mode is unknown.
    """
    provider_name = _choice(
        "provider",
        provider or TRANSLATION_PROVIDER,
        [p.value for p in Provider],
    )
    models = {
        Provider.GROK: GROK_MODEL,
        Provider.ANTHROPIC: ANTHROPIC_MODEL,
        Provider.GEMINI: GEMINI_MODEL,
    }
    for key, model in models.items():
        _choice(f"{key.value} model", model, PROVIDER_MODELS[key])

    return TranslationOptions(
        provider=Provider(provider_name),
        credentials={
            Provider.GROK: GROK_API_KEY,
            Provider.ANTHROPIC: ANTHROPIC_API_KEY,
            Provider.GEMINI: GEMINI_API_KEY,
        },
        models=models,
        target_lang=_choice("target language", target_lang or TARGET_LANG, TARGET_LANGUAGES),
        display_mode=DisplayMode(
            _choice(
                "display mode",
                display_mode or DISPLAY_MODE,
                [m.value for m in DisplayMode],
            )
        ),
    )
