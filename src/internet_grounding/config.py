"""Configuration: frozen GeminiConfig resolved once, at startup."""

from __future__ import annotations

from dataclasses import dataclass
import math
import os

from dotenv import load_dotenv

from internet_grounding._http import DEFAULT_BASE_URL
from internet_grounding.errors import ConfigurationError

load_dotenv()

API_KEY_ENV_VAR = "GEMINI_API_KEY"
MODEL_ID_ENV_VAR = "GEMINI_MODEL_ID"
BASE_URL_ENV_VAR = "GEMINI_BASE_URL"
TIMEOUT_ENV_VAR = "GEMINI_TIMEOUT_S"

DEFAULT_TIMEOUT_S = 60.0


def _env_str(name: str) -> str | None:
    value = os.environ.get(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class GeminiConfig:
    """Immutable configuration for grounded Gemini calls.

    Values left as *None* are auto-resolved from the environment
    (``GEMINI_API_KEY``, ``GEMINI_MODEL_ID``, ``GEMINI_BASE_URL``,
    ``GEMINI_TIMEOUT_S``). The API key and model id are required; a missing
    one raises :class:`ConfigurationError` here, before any network activity.

    Example:
        config = GeminiConfig(model_id="gemini-2.5-flash")
        # API key is automatically resolved from GEMINI_API_KEY
    """

    api_key: str | None = None
    model_id: str | None = None
    base_url: str | None = None
    timeout_s: float | None = None

    def __post_init__(self) -> None:
        """Auto-resolve from the environment and validate."""
        api_key = self.api_key.strip() if self.api_key else None
        if not api_key:
            api_key = _env_str(API_KEY_ENV_VAR)
        object.__setattr__(self, "api_key", api_key)

        model_id = self.model_id.strip() if self.model_id else None
        if not model_id:
            model_id = _env_str(MODEL_ID_ENV_VAR)
        object.__setattr__(self, "model_id", model_id)

        base_url = self.base_url or _env_str(BASE_URL_ENV_VAR) or DEFAULT_BASE_URL
        base_url = base_url.strip().rstrip("/")
        if not base_url.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"base_url must be an http:// or https:// URL, got {base_url!r}",
                hint=f"Set {BASE_URL_ENV_VAR} or --base-url to e.g. {DEFAULT_BASE_URL}.",
            )
        object.__setattr__(self, "base_url", base_url)

        if self.timeout_s is None:
            raw_timeout = _env_str(TIMEOUT_ENV_VAR)
            try:
                timeout_s = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT_S
            except ValueError as e:
                raise ConfigurationError(
                    f"{TIMEOUT_ENV_VAR} must be a number, got {raw_timeout!r}",
                    hint="Timeout is given in seconds, e.g. GEMINI_TIMEOUT_S=60.",
                ) from e
            object.__setattr__(self, "timeout_s", timeout_s)
        if self.timeout_s is not None and not (
            math.isfinite(self.timeout_s) and self.timeout_s > 0
        ):
            raise ConfigurationError(
                f"timeout_s must be a finite number > 0, got {self.timeout_s}",
                hint="Timeout is given in seconds.",
            )

        if not self.api_key or not self.model_id:
            missing = [
                name
                for name, value in (
                    (API_KEY_ENV_VAR, self.api_key),
                    (MODEL_ID_ENV_VAR, self.model_id),
                )
                if not value
            ]
            raise ConfigurationError(
                "Gemini API configuration is missing.",
                hint=(
                    f"Set {' and '.join(missing)} (environment or .env) "
                    "or pass --api-key/--model-id."
                ),
            )

    def __str__(self) -> str:
        """Return a redacted, developer-friendly representation."""
        return (
            f"GeminiConfig(model_id={self.model_id!r}, base_url={self.base_url!r}, "
            f"timeout_s={self.timeout_s!r}, "
            f"api_key={'[REDACTED]' if self.api_key else None})"
        )

    __repr__ = __str__
