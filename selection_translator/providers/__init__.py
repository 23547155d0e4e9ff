from selection_translator.errors import UnsupportedProvider
from selection_translator.models import Provider
from selection_translator.providers import anthropic, gemini, grok
from selection_translator.providers.base import AuthPlacement, ProviderEndpoint

PROVIDERS: dict[Provider, ProviderEndpoint] = {
    Provider.GROK: grok.ENDPOINT,
    Provider.ANTHROPIC: anthropic.ENDPOINT,
    Provider.GEMINI: gemini.ENDPOINT,
}


def check_registry(registry: dict[Provider, ProviderEndpoint]) -> None:
    """Every enum member must have a descriptor; a gap is a programming error."""
    missing = set(Provider) - set(registry)
    if missing:
        raise RuntimeError(
            f"Provider registry is incomplete: missing {sorted(p.value for p in missing)}"
        )


check_registry(PROVIDERS)


def lookup(provider: Provider | str) -> ProviderEndpoint:
    """Return the endpoint descriptor for a provider."""
    try:
        provider = Provider(provider)
    except ValueError:
        raise UnsupportedProvider(provider) from None
    return PROVIDERS[provider]


__all__ = ["PROVIDERS", "AuthPlacement", "ProviderEndpoint", "check_registry", "lookup"]
