"""Test helpers (small, reusable doubles and payload builders).

Keep this file tiny and purpose-built: upstream payloads are built here so
individual tests only spell out the fields they care about.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
import json
from typing import Any

import httpx

Handler = Callable[[httpx.Request], httpx.Response]


@dataclass
class RecordingTransport:
    """Fake upstream that records every request it receives.

    The handler decides the reply; ``requests`` lets tests assert exactly how
    many calls were made (zero included).
    """

    handler: Handler
    requests: list[httpx.Request] = field(default_factory=list)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def calls(self) -> int:
        return len(self.requests)

    def last_json(self) -> Any:
        return json.loads(self.requests[-1].content)

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self._handle))


def reply(
    status_code: int = 200, payload: Any = None, *, content: bytes | None = None
) -> Handler:
    """Build a handler that always answers with the given status and body."""

    def handler(request: httpx.Request) -> httpx.Response:
        del request
        if content is not None:
            return httpx.Response(status_code, content=content)
        return httpx.Response(status_code, json=payload)

    return handler


def candidate(
    text: str | None = None,
    *,
    grounding: dict[str, Any] | None = None,
    url_context: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build one upstream candidate; omitted sections stay absent."""
    cand: dict[str, Any] = {}
    if text is not None:
        cand["content"] = {"role": "model", "parts": [{"text": text}]}
    if grounding is not None:
        cand["groundingMetadata"] = grounding
    if url_context is not None:
        cand["urlContextMetadata"] = url_context
    return cand


def response_body(*candidates: dict[str, Any]) -> bytes:
    """Serialize a ``generateContent`` response with the given candidates."""
    return json.dumps({"candidates": list(candidates)}).encode("utf-8")
