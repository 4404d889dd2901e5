"""Gemini client: one grounded ``generateContent`` call per question."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Self

import httpx

from internet_grounding._http import JSON_HEADERS
from internet_grounding.config import GeminiConfig
from internet_grounding.errors import GroundingError, TransportError
from internet_grounding.rendering import render_error, render_response
from internet_grounding.request import build_endpoint, build_request_body

if TYPE_CHECKING:
    from types import TracebackType

log = logging.getLogger(__name__)


class GeminiClient:
    """Ask Gemini questions grounded with Google Search and URL context.

    Each :meth:`ask` issues exactly one POST and never retries. Every failure
    surfaces to the caller as a :class:`~internet_grounding.errors.GroundingError`.

    Example:
        async with GeminiClient(GeminiConfig(model_id="gemini-2.5-flash")) as client:
            print(await client.ask("What is the capital of France?"))
    """

    def __init__(
        self,
        config: GeminiConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Create a client. Pass *http_client* to share or fake the transport."""
        self.config = config
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=config.timeout_s)

    @classmethod
    def from_env(cls, *, http_client: httpx.AsyncClient | None = None) -> Self:
        """Resolve configuration from the environment.

        Raises ConfigurationError before any HTTP client is created.
        """
        return cls(GeminiConfig(), http_client=http_client)

    async def ask(self, prompt: str) -> str:
        """Return the rendered grounded answer for *prompt*.

        Raises:
            TransportError: No HTTP response was received.
            HTTPStatusError: Upstream returned a non-2xx status.
            PayloadShapeError: The 2xx body could not be interpreted.
        """
        # GeminiConfig guarantees key and model id are present.
        config = self.config
        url = build_endpoint(str(config.base_url), str(config.model_id))
        log.info(
            "Gemini request: model=%s prompt_chars=%d", config.model_id, len(prompt)
        )

        # CancelledError is not an httpx error and propagates to the host.
        try:
            response = await self._http_client.post(
                url,
                params={"key": str(config.api_key)},
                content=build_request_body(prompt),
                headers=JSON_HEADERS,
            )
        except httpx.RequestError as e:
            detail = str(e) or type(e).__name__
            err = TransportError(f"Error calling Gemini API: {detail}")
            log.error("Error calling Gemini API: %s", detail)
            raise err from e

        log.info("Gemini response: status=%s", response.status_code)
        body = response.content

        if not response.is_success:
            err = render_error(response.status_code, body)
            log.error("%s", err)
            raise err

        try:
            return render_response(body)
        except GroundingError as e:
            log.error("%s", e)
            raise

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
