"""Render Gemini responses into text reports and classified errors.

Successful bodies become a multi-section plain-text report::

    Main Text:
    <answer>

    Grounding Information:
    Web Search Queries:
    - <query>
    Grounding Chunks:
    - URI: <uri>, Title: <title>
    Grounding Supports:
    - Text: <segment>

    URL Context Metadata:
    Retrieved URLs:
    - <url>

Sections degrade independently: a missing sub-structure drops its lines,
never the whole call. Error bodies become :class:`HTTPStatusError` carrying
the upstream ``error.message`` when one can be found.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from internet_grounding._http import AUTH_STATUS_CODES
from internet_grounding.config import API_KEY_ENV_VAR
from internet_grounding.errors import HTTPStatusError, PayloadShapeError
from internet_grounding.models import Candidate, GenerationResponse

if TYPE_CHECKING:
    from internet_grounding.models import GroundingMetadata, UrlContextMetadata

log = logging.getLogger(__name__)

UNEXPECTED_FORMAT_MESSAGE = "Gemini API returned an unexpected successful response format."


def _text(value: str | None) -> str:
    return "" if value is None else value


def _describe_validation_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    loc = ".".join(str(p) for p in first.get("loc", ())) or "<root>"
    extra = f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""
    return f"{loc}: {first.get('msg', 'invalid value')}{extra}"


def parse_response(body: bytes | str) -> GenerationResponse | None:
    """Parse a successful response body.

    Returns *None* for a JSON ``null`` document. Raises
    :class:`PayloadShapeError` for invalid JSON or an envelope that does not
    fit :class:`GenerationResponse`.
    """
    try:
        raw: Any = json.loads(body)
    except (ValueError, RecursionError) as e:
        raise PayloadShapeError(
            f"Failed to parse successful Gemini API response: {e}"
        ) from e

    if raw is None:
        return None
    try:
        return GenerationResponse.model_validate(raw)
    except ValidationError as e:
        raise PayloadShapeError(
            "Gemini API response did not match the expected format: "
            f"{_describe_validation_error(e)}"
        ) from e


def _main_text_lines(candidate: Candidate) -> list[str]:
    parts = candidate.content.parts if candidate.content is not None else None
    first = parts[0] if parts else None
    if first is None or not first.text:
        return []
    return ["Main Text:", first.text]


def _grounding_lines(metadata: GroundingMetadata | None) -> list[str]:
    # Presence of the object, not its content, gates the section header.
    if metadata is None:
        return []
    lines = ["\nGrounding Information:"]

    if metadata.web_search_queries:
        lines.append("Web Search Queries:")
        lines.extend(f"- {_text(query)}" for query in metadata.web_search_queries)

    if metadata.grounding_chunks:
        lines.append("Grounding Chunks:")
        for chunk in metadata.grounding_chunks:
            if chunk is None or chunk.web is None:
                continue
            lines.append(f"- URI: {_text(chunk.web.uri)}, Title: {_text(chunk.web.title)}")

    if metadata.grounding_supports:
        lines.append("Grounding Supports:")
        for support in metadata.grounding_supports:
            if support is None or support.segment is None:
                continue
            lines.append(f"- Text: {_text(support.segment.text)}")

    return lines


def _url_context_lines(metadata: UrlContextMetadata | None) -> list[str]:
    if metadata is None or not metadata.url_metadata:
        return []
    lines = ["\nURL Context Metadata:", "Retrieved URLs:"]
    for entry in metadata.url_metadata:
        if entry is None or not entry.retrieved_url:
            continue
        lines.append(f"- {entry.retrieved_url}")
    return lines


def render_candidate(candidate: Candidate) -> str:
    """Render one candidate, or return the sentinel when nothing is renderable."""
    lines = [
        *_main_text_lines(candidate),
        *_grounding_lines(candidate.grounding_metadata),
        *_url_context_lines(candidate.url_context_metadata),
    ]
    if not lines:
        return UNEXPECTED_FORMAT_MESSAGE
    return "".join(f"{line}\n" for line in lines)


def render_response(body: bytes | str) -> str:
    """Render a 2xx ``generateContent`` body into a text report.

    Only the first candidate is consulted. An absent or empty candidate list,
    or a null first entry, returns :data:`UNEXPECTED_FORMAT_MESSAGE` rather
    than raising.

    Raises:
        PayloadShapeError: The body is not JSON or does not fit the envelope.
    """
    response = parse_response(body)
    candidates = response.candidates if response is not None else None
    if not candidates or candidates[0] is None:
        log.warning("Gemini response had no usable candidates")
        return UNEXPECTED_FORMAT_MESSAGE
    return render_candidate(candidates[0])


def _auth_hint(status_code: int, upstream_message: str | None) -> str | None:
    """Generate a hint for auth errors where naming the env var is useful."""
    lowered = (upstream_message or "").lower()
    if status_code in AUTH_STATUS_CODES or (
        status_code == 400 and ("api key" in lowered or "api_key" in lowered)
    ):
        return f"Check credentials/permissions (try setting {API_KEY_ENV_VAR} or --api-key)."
    return None


def render_error(status_code: int, body: bytes | str) -> HTTPStatusError:
    """Classify a non-2xx response. Never raises; malformed bodies degrade.

    Looks for the conventional ``{"error": {"message": ...}}`` envelope.
    """
    try:
        raw: Any = json.loads(body)
    except (ValueError, RecursionError) as e:
        log.debug("Failed to parse Gemini error body (status=%s): %s", status_code, e)
        return HTTPStatusError(
            f"Gemini API HTTP Error ({status_code}): "
            "Failed to parse error details from response body.",
            status_code=status_code,
            hint=_auth_hint(status_code, None),
        )

    error = raw.get("error") if isinstance(raw, dict) else None
    upstream_message = error.get("message") if isinstance(error, dict) else None
    if isinstance(upstream_message, str):
        return HTTPStatusError(
            f"Gemini API Error ({status_code}): {upstream_message}",
            status_code=status_code,
            upstream_message=upstream_message,
            hint=_auth_hint(status_code, upstream_message),
        )

    return HTTPStatusError(
        f"Gemini API HTTP Error: {status_code}",
        status_code=status_code,
        hint=_auth_hint(status_code, None),
    )
