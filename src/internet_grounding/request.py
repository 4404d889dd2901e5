"""Request building for grounded ``generateContent`` calls."""

from __future__ import annotations

from dataclasses import dataclass
import json
from typing import Any

from internet_grounding._http import GENERATE_CONTENT_PATH

# Fixed sampling and output format for every grounded call.
GENERATION_CONFIG: dict[str, Any] = {"temperature": 0, "responseMimeType": "text/plain"}

# Capability flags only: both tools take no parameters.
GROUNDING_TOOLS: tuple[str, ...] = ("url_context", "google_search")


@dataclass(frozen=True)
class GenerationRequest:
    """A single-turn user request with both grounding tools enabled."""

    prompt: str
    temperature: int = 0
    response_mime_type: str = "text/plain"
    tools: tuple[str, ...] = GROUNDING_TOOLS

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready request document."""
        return {
            "contents": [{"role": "user", "parts": [{"text": self.prompt}]}],
            "generationConfig": {
                "temperature": self.temperature,
                "responseMimeType": self.response_mime_type,
            },
            "tools": [{name: {}} for name in self.tools],
        }


def build_request(prompt: str) -> GenerationRequest:
    """Build the request for *prompt*. Empty prompts are forwarded as-is."""
    return GenerationRequest(
        prompt=prompt,
        temperature=GENERATION_CONFIG["temperature"],
        response_mime_type=GENERATION_CONFIG["responseMimeType"],
    )


def build_request_body(prompt: str) -> bytes:
    """Serialize the request for *prompt* to UTF-8 JSON."""
    return json.dumps(build_request(prompt).to_payload()).encode("utf-8")


def build_endpoint(base_url: str, model_id: str) -> str:
    """Return the ``generateContent`` URL for *model_id*, without credentials."""
    return base_url.rstrip("/") + GENERATE_CONTENT_PATH.format(model_id=model_id)
