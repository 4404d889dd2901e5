"""internet-grounding: Gemini answers grounded with Google Search and URL context.

Public API:
    - ask(): Single grounded question
    - GeminiClient: Reusable client for many questions
    - GeminiConfig: Configuration dataclass
    - GroundingServer: Host-facing tool and resource facade
    - render_response() / render_error(): Pure response and error rendering
"""

from __future__ import annotations

import logging

from internet_grounding.client import GeminiClient
from internet_grounding.config import GeminiConfig
from internet_grounding.errors import (
    ConfigurationError,
    ErrorKind,
    GroundingError,
    HTTPStatusError,
    PayloadShapeError,
    TransportError,
)
from internet_grounding.rendering import (
    UNEXPECTED_FORMAT_MESSAGE,
    render_error,
    render_response,
)
from internet_grounding.request import build_request, build_request_body
from internet_grounding.server import GroundingServer, ToolResult, ToolSpec

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("internet-grounding")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("internet_grounding").addHandler(logging.NullHandler())


async def ask(prompt: str, *, config: GeminiConfig | None = None) -> str:
    """Ask one grounded question and return the rendered report.

    Args:
        prompt: The question to send.
        config: Configuration; resolved from the environment when omitted.

    Example:
        text = await ask("What is the capital of France?")
        print(text)
    """
    async with GeminiClient(config or GeminiConfig()) as client:
        return await client.ask(prompt)


__all__ = [
    "UNEXPECTED_FORMAT_MESSAGE",
    "ConfigurationError",
    "ErrorKind",
    "GeminiClient",
    "GeminiConfig",
    "GroundingError",
    "GroundingServer",
    "HTTPStatusError",
    "PayloadShapeError",
    "ToolResult",
    "ToolSpec",
    "TransportError",
    "__version__",
    "ask",
    "build_request",
    "build_request_body",
    "render_error",
    "render_response",
]
