"""Host-facing facade: the ask_gemini tool and the static resources.

A host process (a stdio tool server, a CLI, a test) lists tools and
resources and invokes them by name. Typed errors from the client are turned
into display strings here, so hosts always get text back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import TYPE_CHECKING, Any

from internet_grounding.errors import ErrorKind, GroundingError
from internet_grounding.resources import RESOURCES, Resource, get_resource

if TYPE_CHECKING:
    from collections.abc import Mapping

    from internet_grounding.client import GeminiClient

log = logging.getLogger(__name__)

ASK_GEMINI = "ask_gemini"
ASK_GEMINI_DESCRIPTION = (
    "Gemini will be grounded with Google Search to provide more accurate answers."
)


@dataclass(frozen=True)
class ToolSpec:
    """Description of an invocable tool."""

    name: str
    description: str
    input_schema: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ToolResult:
    """Outcome of a tool call: rendered text, or an error message."""

    text: str
    is_error: bool = False
    error_kind: ErrorKind | None = None


ASK_GEMINI_SPEC = ToolSpec(
    name=ASK_GEMINI,
    description=ASK_GEMINI_DESCRIPTION,
    input_schema={
        "type": "object",
        "properties": {"prompt": {"type": "string"}},
        "required": ["prompt"],
    },
)


class GroundingServer:
    """Expose one grounded question tool plus read-only resources."""

    def __init__(self, client: GeminiClient) -> None:
        self.client = client

    def list_tools(self) -> list[ToolSpec]:
        return [ASK_GEMINI_SPEC]

    def list_resources(self) -> list[Resource]:
        return list(RESOURCES)

    def read_resource(self, name: str) -> str:
        """Return the text of resource *name*; raises KeyError when unknown."""
        return get_resource(name).text

    async def ask_gemini(self, prompt: str) -> str:
        """Ask a grounded question. Raises GroundingError on failure."""
        return await self.client.ask(prompt)

    async def call_tool(self, name: str, arguments: Mapping[str, Any]) -> ToolResult:
        """Invoke tool *name*, folding classified failures into the result."""
        if name != ASK_GEMINI:
            return ToolResult(text=f"Unknown tool: {name}", is_error=True)

        prompt = arguments.get("prompt")
        if not isinstance(prompt, str):
            return ToolResult(
                text="Missing required string argument: prompt", is_error=True
            )

        try:
            text = await self.ask_gemini(prompt)
        except GroundingError as e:
            log.debug("ask_gemini failed (%s): %s", e.kind.value, e)
            return ToolResult(text=str(e), is_error=True, error_kind=e.kind)
        return ToolResult(text=text)
