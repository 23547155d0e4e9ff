"""Tests for building the option bundle from configuration."""

import pytest

from selection_translator import config
from selection_translator.models import DisplayMode, Provider


@pytest.fixture
def env(monkeypatch):
    """Pin every configuration value so the host environment cannot leak in."""
    values = {
        "TRANSLATION_PROVIDER": "anthropic",
        "GROK_API_KEY": "grok-key",
        "ANTHROPIC_API_KEY": "claude-key",
        "GEMINI_API_KEY": "",
        "GROK_MODEL": "grok-2-1212",
        "ANTHROPIC_MODEL": "claude-3-opus-20240229",
        "GEMINI_MODEL": "gemini-1.5-flash",
        "TARGET_LANG": "Japanese",
        "DISPLAY_MODE": "display",
    }
    for name, value in values.items():
        monkeypatch.setattr(config, name, value)
    return monkeypatch


class TestLoadOptions:
    """load_options() maps configuration onto TranslationOptions."""

    def test_values_from_config(self, env):
        options = config.load_options()
        assert options.provider is Provider.ANTHROPIC
        assert options.credential == "claude-key"
        assert options.model == "claude-3-opus-20240229"
        assert options.target_lang == "Japanese"
        assert options.display_mode is DisplayMode.DISPLAY

    def test_overrides(self, env):
        options = config.load_options(
            provider="gemini", target_lang="Thai", display_mode="displayAndCopy"
        )
        assert options.provider is Provider.GEMINI
        assert options.model == "gemini-1.5-flash"
        assert options.target_lang == "Thai"
        assert options.display_mode is DisplayMode.DISPLAY_AND_COPY

    def test_missing_key_is_not_a_config_error(self, env):
        """Blank credentials surface per invocation, not at load time."""
        assert config.load_options(provider="gemini").credential == ""

    def test_unknown_provider(self, env):
        with pytest.raises(ValueError, match="provider 'openai'"):
            config.load_options(provider="openai")

    def test_model_not_offered_by_provider(self, env):
        env.setattr(config, "GEMINI_MODEL", "grok-2-1212")
        with pytest.raises(ValueError, match="gemini model"):
            config.load_options()

    def test_unknown_language(self, env):
        with pytest.raises(ValueError, match="target language 'Klingon'"):
            config.load_options(target_lang="Klingon")

    def test_unknown_display_mode(self, env):
        env.setattr(config, "DISPLAY_MODE", "popup")
        with pytest.raises(ValueError, match="display mode"):
            config.load_options()

    def test_timeout_budget(self):
        assert config.REQUEST_TIMEOUT_SECONDS == 30.0
