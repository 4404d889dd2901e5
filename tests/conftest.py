"""Pytest configuration and fixtures.

Provides environment isolation, logging configuration, marker-driven API
test skipping, and client fixtures over a recording fake transport. Fixtures
marked autouse run for every test.
"""

from __future__ import annotations

from contextlib import suppress
import logging
import os

import pytest

from internet_grounding.client import GeminiClient
from internet_grounding.config import GeminiConfig
from tests.helpers import Handler, RecordingTransport

TEST_API_KEY = "test-key"
TEST_MODEL_ID = "gemini-test"

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_gemini_env(request, monkeypatch):
    """Clear GEMINI_* env vars so configuration tests start from nothing.

    Opt-out: @pytest.mark.allow_env_pollution or @pytest.mark.api
    """
    if request.node.get_closest_marker("allow_env_pollution") or (
        "api" in request.node.keywords
    ):
        return

    for key in list(os.environ.keys()):
        if key.startswith("GEMINI_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


# =============================================================================
# Pytest Hooks
# =============================================================================

API_TESTS_REASON = "API tests require ENABLE_API_TESTS=1"


def _api_tests_enabled() -> bool:
    return bool(os.getenv("ENABLE_API_TESTS"))


def pytest_collection_modifyitems(items):
    """Automatically skip API tests when not explicitly enabled."""
    if _api_tests_enabled():
        return
    skip_api = pytest.mark.skip(reason=API_TESTS_REASON)
    for item in items:
        if "api" in item.keywords:
            item.add_marker(skip_api)


# =============================================================================
# Client Fixtures
# =============================================================================


@pytest.fixture
def gemini_config() -> GeminiConfig:
    """Return a fully specified config that never touches the environment."""
    return GeminiConfig(api_key=TEST_API_KEY, model_id=TEST_MODEL_ID)


@pytest.fixture
def make_client(gemini_config: GeminiConfig):
    """Return a factory building a GeminiClient over a RecordingTransport."""

    def factory(handler: Handler) -> tuple[GeminiClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        client = GeminiClient(gemini_config, http_client=transport.http_client())
        return client, transport

    return factory


@pytest.fixture
def gemini_api_key():
    """Return GEMINI_API_KEY or skip the test if unavailable."""
    key = os.getenv("GEMINI_API_KEY")
    if not key:
        pytest.skip("GEMINI_API_KEY not set")
    return key


@pytest.fixture
def gemini_test_model():
    """Return the model to use for Gemini API tests."""
    return os.getenv("GEMINI_MODEL_ID") or "gemini-2.5-flash"
