"""Tests for the command-line host."""

import io

import pytest

from selection_translator import config, main


class TestConsoleHost:
    """ConsoleHost output and clipboard behaviour."""

    def test_show_text(self):
        stream = io.StringIO()
        main.ConsoleHost(stream).show_text("你好")
        assert stream.getvalue() == "你好\n"

    def test_copy_without_clipboard_tool(self, monkeypatch, caplog):
        monkeypatch.setattr(main.shutil, "which", lambda name: None)
        main.ConsoleHost(io.StringIO()).copy_text("text")
        assert "No clipboard tool found" in caplog.text

    def test_copy_uses_first_available_tool(self, monkeypatch):
        runs = []
        monkeypatch.setattr(
            main.shutil, "which", lambda name: "/usr/bin/wl-copy" if name == "wl-copy" else None
        )
        monkeypatch.setattr(main.subprocess, "run", lambda cmd, **kwargs: runs.append((cmd, kwargs)))
        main.ConsoleHost(io.StringIO()).copy_text("héllo")
        assert runs[0][0] == ["wl-copy"]
        assert runs[0][1]["input"] == "héllo".encode("utf-8")


class TestMain:
    """main() wiring without network access."""

    @pytest.fixture(autouse=True)
    def offline(self, monkeypatch):
        monkeypatch.setattr(config, "TRANSLATION_PROVIDER", "grok")
        monkeypatch.setattr(config, "GROK_API_KEY", "")
        monkeypatch.setattr(config, "TARGET_LANG", "Chinese")
        monkeypatch.setattr(config, "DISPLAY_MODE", "display")

    def test_invalid_provider(self):
        assert main.main(["--provider", "openai", "Hello"]) == 2

    def test_missing_key_reported(self, capsys):
        assert main.main(["Hello", "world"]) == 1
        assert capsys.readouterr().out == "Please set Grok API Key in extension settings\n"

    def test_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("   \n"))
        assert main.main([]) == 1
        assert capsys.readouterr().out == "No text selected\n"
