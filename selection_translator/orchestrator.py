"""Single entry point for one translation invocation.

Sequence: validate -> build -> send (under a time budget) -> extract,
or classify on any failure. Every invocation ends with exactly one
message shown to the host.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

import httpx

from selection_translator import request_builder, response_extractor
from selection_translator.config import REQUEST_TIMEOUT_SECONDS
from selection_translator.error_classifier import classify
from selection_translator.errors import (
    EmptyInput,
    EmptyResponse,
    MalformedResponse,
    MissingCredential,
    RequestCanceled,
    TranslationError,
    UnsupportedOption,
)
from selection_translator.models import (
    PROVIDER_MODELS,
    TARGET_LANGUAGES,
    DisplayMode,
    Provider,
    TranslationOptions,
    TranslationRequest,
    TranslationResult,
)
from selection_translator.providers import lookup

logger = logging.getLogger(__name__)


class Host(Protocol):
    """Environment that supplied the selection and renders the outcome."""

    def show_text(self, text: str) -> None: ...

    def copy_text(self, text: str) -> None: ...


class State(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SENDING = "sending"
    EXTRACTING = "extracting"
    CLASSIFYING_ERROR = "classifying_error"
    DONE = "done"


@dataclass
class Invocation:
    """Per-invocation state; never shared between invocations."""

    provider: Provider | str
    state: State = State.IDLE

    def advance(self, state: State) -> None:
        logger.debug(
            "[orchestrator] provider=%s state=%s->%s",
            getattr(self.provider, "value", self.provider),
            self.state.value,
            state.value,
        )
        self.state = state


class Orchestrator:
    """Runs translation invocations against the configured provider.

    Args:
        client: Optional shared httpx client (tests inject a mock transport).
            When omitted, each invocation opens and closes its own client.
        timeout: Wall-clock budget for the HTTP exchange, in seconds. On
            expiry the in-flight request is canceled.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        self._client = client
        self.timeout = timeout

    async def run(
        self, text: str, options: TranslationOptions, host: Host
    ) -> TranslationResult:
        """Translate ``text`` and deliver exactly one outcome to ``host``."""
        invocation = Invocation(provider=options.provider)
        try:
            invocation.advance(State.VALIDATING)
            request = self._validate(text, options)

            invocation.advance(State.SENDING)
            response = await self._send(request_builder.build(request))

            invocation.advance(State.EXTRACTING)
            translated = self._extract(request.provider, response)
            result = TranslationResult.ok(translated)
        except (TranslationError, httpx.HTTPError) as exc:
            invocation.advance(State.CLASSIFYING_ERROR)
            result = TranslationResult.failed(classify(options.provider, exc))
            self._log_failure(invocation, exc)
        except Exception as exc:
            invocation.advance(State.CLASSIFYING_ERROR)
            logger.exception("[orchestrator] unexpected failure")
            result = TranslationResult.failed(classify(options.provider, exc))

        invocation.advance(State.DONE)
        self._deliver(result, options, host)
        return result

    @staticmethod
    def _validate(text: str, options: TranslationOptions) -> TranslationRequest:
        endpoint = lookup(options.provider)
        source_text = (text or "").strip()
        if not source_text:
            raise EmptyInput()

        credential = (options.credential or "").strip()
        if not credential:
            raise MissingCredential(endpoint.provider)

        model = options.model
        if model not in PROVIDER_MODELS[endpoint.provider]:
            raise UnsupportedOption(f"Unsupported {endpoint.label} model: {model}")
        if options.target_lang not in TARGET_LANGUAGES:
            raise UnsupportedOption(f"Unsupported target language: {options.target_lang}")

        return TranslationRequest(
            provider=endpoint.provider,
            credential=credential,
            model=model,
            target_lang=options.target_lang,
            source_text=source_text,
        )

    async def _send(self, request: httpx.Request) -> httpx.Response:
        if self._client is not None:
            return await self._send_with(self._client, request)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await self._send_with(client, request)

    async def _send_with(
        self, client: httpx.AsyncClient, request: httpx.Request
    ) -> httpx.Response:
        # wait_for cancels the send task on expiry, which aborts the request.
        try:
            response = await asyncio.wait_for(client.send(request), timeout=self.timeout)
        except asyncio.TimeoutError:
            raise RequestCanceled(self.timeout) from None
        response.raise_for_status()
        return response

    @staticmethod
    def _extract(provider: Provider, response: httpx.Response) -> str:
        if not response.content.strip():
            raise EmptyResponse()
        try:
            body = response.json()
        except ValueError as exc:
            raise MalformedResponse(provider, "body is not JSON") from exc
        if body is None or body == "":
            raise EmptyResponse()
        return response_extractor.extract(provider, body)

    @staticmethod
    def _log_failure(invocation: Invocation, exc: Exception) -> None:
        provider = getattr(invocation.provider, "value", invocation.provider)
        if isinstance(exc, (EmptyInput, MissingCredential, UnsupportedOption)):
            logger.info("[orchestrator] provider=%s not sent: %s", provider, exc)
        elif isinstance(exc, MalformedResponse):
            logger.warning(
                "[orchestrator] provider=%s failed to parse response: %s",
                provider,
                exc,
                exc_info=exc,
            )
        elif isinstance(exc, httpx.HTTPStatusError):
            logger.warning(
                "[orchestrator] provider=%s API error: %s %s",
                provider,
                exc.response.status_code,
                exc.response.reason_phrase,
            )
        else:
            logger.warning("[orchestrator] provider=%s failed: %s", provider, exc)

    @staticmethod
    def _deliver(
        result: TranslationResult, options: TranslationOptions, host: Host
    ) -> None:
        host.show_text(result.text)
        if result.success and options.display_mode == DisplayMode.DISPLAY_AND_COPY:
            host.copy_text(result.text)
