"""Entry point: translate text from the command line or stdin."""

import argparse
import asyncio
import logging
import shutil
import subprocess
import sys

logger = logging.getLogger(__name__)

# First available tool wins.
CLIPBOARD_COMMANDS: list[list[str]] = [
    ["pbcopy"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
]


class ConsoleHost:
    """Host that prints results and copies them with the system clipboard tool."""

    def __init__(self, stream=None) -> None:
        self.stream = stream or sys.stdout

    def show_text(self, text: str) -> None:
        print(text, file=self.stream)

    def copy_text(self, text: str) -> None:
        for command in CLIPBOARD_COMMANDS:
            if shutil.which(command[0]) is None:
                continue
            try:
                subprocess.run(command, input=text.encode("utf-8"), check=True, timeout=5)
            except (OSError, subprocess.SubprocessError):
                logger.warning("Clipboard command %s failed", command[0])
                continue
            return
        logger.warning("No clipboard tool found, result not copied")


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="selection-translator",
        description="Translate text with Grok, Claude or Gemini.",
    )
    parser.add_argument("text", nargs="*", help="Text to translate (default: read stdin).")
    parser.add_argument("--provider", help="grok, anthropic or gemini.")
    parser.add_argument("--target-lang", help="Target language name, e.g. Chinese.")
    parser.add_argument(
        "--copy", action="store_true", help="Also copy the translation to the clipboard."
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the command-line translator."""
    from selection_translator import config
    from selection_translator.orchestrator import Orchestrator

    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stderr,
    )

    args = _parse_args(argv)
    try:
        options = config.load_options(
            provider=args.provider,
            target_lang=args.target_lang,
            display_mode="displayAndCopy" if args.copy else None,
        )
    except ValueError as exc:
        logger.error("%s", exc)
        return 2

    text = " ".join(args.text) if args.text else sys.stdin.read()
    logger.debug(
        "Translating with provider=%s model=%s target=%s",
        options.provider.value,
        options.model,
        options.target_lang,
    )

    result = asyncio.run(Orchestrator().run(text, options, ConsoleHost()))
    return 0 if result.success else 1


if __name__ == "__main__":
    raise SystemExit(main())
