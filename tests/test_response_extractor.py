"""Tests for extracting the translated text from provider success bodies."""

import pytest

from selection_translator.errors import MalformedResponse
from selection_translator.models import Provider
from selection_translator.response_extractor import extract


def _success_body(provider: Provider, text: str) -> dict:
    if provider is Provider.GROK:
        return {"choices": [{"message": {"role": "assistant", "content": text}}]}
    if provider is Provider.ANTHROPIC:
        return {"content": [{"type": "text", "text": text}]}
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class TestExtract:
    """Successful extraction per provider shape."""

    @pytest.mark.parametrize("provider", list(Provider))
    def test_extracts_and_trims(self, provider):
        assert extract(provider, _success_body(provider, "  Bonjour \n")) == "Bonjour"

    def test_only_first_choice_used(self):
        body = {
            "choices": [
                {"message": {"content": "first"}},
                {"message": {"content": "second"}},
            ]
        }
        assert extract(Provider.GROK, body) == "first"

    def test_identifier_accepted(self):
        assert extract("anthropic", _success_body(Provider.ANTHROPIC, "ok")) == "ok"


class TestMalformed:
    """Unexpected shapes raise MalformedResponse, never anything else."""

    def test_empty_choices(self):
        with pytest.raises(MalformedResponse):
            extract(Provider.GROK, {"choices": []})

    def test_missing_content(self):
        with pytest.raises(MalformedResponse):
            extract(Provider.ANTHROPIC, {"id": "msg_1"})

    def test_missing_parts(self):
        with pytest.raises(MalformedResponse):
            extract(Provider.GEMINI, {"candidates": [{"content": {}}]})

    def test_empty_candidates(self):
        with pytest.raises(MalformedResponse):
            extract(Provider.GEMINI, {"candidates": []})

    def test_wrong_container_type(self):
        with pytest.raises(MalformedResponse):
            extract(Provider.GROK, {"choices": "not a list"})

    def test_non_dict_body(self):
        with pytest.raises(MalformedResponse):
            extract(Provider.ANTHROPIC, ["unexpected"])

    def test_non_string_text(self):
        with pytest.raises(MalformedResponse):
            extract(Provider.ANTHROPIC, {"content": [{"text": None}]})

    def test_error_names_provider(self):
        with pytest.raises(MalformedResponse) as exc_info:
            extract(Provider.GEMINI, {})
        assert exc_info.value.provider is Provider.GEMINI
