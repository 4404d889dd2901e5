"""Static text resources offered to hosts alongside the ask_gemini tool."""

from __future__ import annotations

from dataclasses import dataclass
import json

from internet_grounding.request import GENERATION_CONFIG


@dataclass(frozen=True)
class Resource:
    """A parameterless, read-only text resource."""

    name: str
    description: str
    text: str
    mime_type: str = "text/plain"

    @property
    def uri(self) -> str:
        return f"resource://internet-grounding/{self.name}"


RESOURCES: tuple[Resource, ...] = (
    Resource(
        name="direct_text",
        description="A direct text resource",
        text="This is a direct resource",
    ),
    Resource(
        name="gemini_prompt_template",
        description="A template for Gemini API prompts",
        text="Generate content about {topic} with detailed information and references.",
    ),
    Resource(
        name="gemini_url_context_tool",
        description="Explanation of the 'url_context' tool for Gemini API grounding",
        text=(
            "The 'url_context' tool allows the Gemini API to ground responses "
            "based on content from specified URLs."
        ),
    ),
    Resource(
        name="gemini_google_search_tool",
        description="Explanation of the 'google_search' tool for Gemini API grounding",
        text=(
            "The 'google_search' tool enables the Gemini API to perform Google "
            "searches for grounding information."
        ),
    ),
    Resource(
        name="gemini_default_config",
        description="Default configuration settings for Gemini API",
        text=json.dumps(GENERATION_CONFIG),
        mime_type="application/json",
    ),
    Resource(
        name="grounding_info",
        description="Explanation of grounding information format from Gemini API",
        text=(
            "Grounding information includes web search queries, grounding chunks "
            "(URIs and titles), and supporting text segments."
        ),
    ),
)

_BY_NAME: dict[str, Resource] = {r.name: r for r in RESOURCES}


def get_resource(name: str) -> Resource:
    """Return the resource called *name*.

    Raises:
        KeyError: No resource has that name.
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        known = ", ".join(sorted(_BY_NAME))
        raise KeyError(f"Unknown resource {name!r} (known: {known})") from None
