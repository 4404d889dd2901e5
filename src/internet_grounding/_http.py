"""Small HTTP-related constants shared across internet-grounding.

This module is intentionally tiny to avoid circular imports and drift.
"""

from __future__ import annotations

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com"
GENERATE_CONTENT_PATH = "/v1beta/models/{model_id}:generateContent"
JSON_HEADERS: dict[str, str] = {"Content-Type": "application/json"}

# Statuses whose error body usually points at a bad or missing key.
AUTH_STATUS_CODES: frozenset[int] = frozenset({401, 403})
