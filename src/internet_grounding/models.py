"""Response models mirroring the Gemini ``generateContent`` JSON schema.

Upstream guarantees no structure, so every field is optional and absence is
a normal state. Wire names are camelCase; unknown keys are ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class _WireModel(BaseModel):
    model_config = {"extra": "ignore", "frozen": True, "populate_by_name": True}


class Part(_WireModel):
    """A piece of generated content."""

    text: str | None = None


class Content(_WireModel):
    """Generated content; only the first part is rendered."""

    parts: list[Part | None] | None = None
    role: str | None = None


class Web(_WireModel):
    """A cited web source."""

    uri: str | None = None
    title: str | None = None


class GroundingChunk(_WireModel):
    """One source backing a grounded answer."""

    web: Web | None = None


class Segment(_WireModel):
    """A span of the answer text."""

    text: str | None = None


class GroundingSupport(_WireModel):
    """A segment of the answer tied to grounding chunks."""

    segment: Segment | None = None


class GroundingMetadata(_WireModel):
    """Search grounding attached to a candidate."""

    web_search_queries: list[str | None] | None = Field(
        default=None, alias="webSearchQueries"
    )
    grounding_chunks: list[GroundingChunk | None] | None = Field(
        default=None, alias="groundingChunks"
    )
    grounding_supports: list[GroundingSupport | None] | None = Field(
        default=None, alias="groundingSupports"
    )


class UrlMetadata(_WireModel):
    """A URL fetched by the url_context tool."""

    retrieved_url: str | None = Field(default=None, alias="retrievedUrl")


class UrlContextMetadata(_WireModel):
    """URL-context grounding attached to a candidate."""

    url_metadata: list[UrlMetadata | None] | None = Field(
        default=None, alias="urlMetadata"
    )


class Candidate(_WireModel):
    """One generated answer. Only the first candidate is ever rendered."""

    content: Content | None = None
    grounding_metadata: GroundingMetadata | None = Field(
        default=None, alias="groundingMetadata"
    )
    url_context_metadata: UrlContextMetadata | None = Field(
        default=None, alias="urlContextMetadata"
    )


class GenerationResponse(_WireModel):
    """Root of a successful ``generateContent`` response."""

    candidates: list[Candidate | None] | None = None
