"""Exception hierarchy for internet-grounding.

Every failure of a grounded call is classified into exactly one
:class:`ErrorKind`. Callers can branch on the exception type or on ``kind``;
``str(err)`` is always a display-ready message.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of a failed grounded call."""

    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    PAYLOAD_SHAPE = "payload_shape"


class GroundingError(Exception):
    """Base exception for all internet-grounding errors."""

    kind: ErrorKind

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    @property
    def message(self) -> str:
        """The display message, identical to ``str(err)``."""
        return str(self)

    @property
    def cause(self) -> BaseException | None:
        """The underlying error, when one was chained with ``raise ... from``."""
        return self.__cause__


class ConfigurationError(GroundingError):
    """API key or model id missing or invalid."""

    kind = ErrorKind.CONFIGURATION


class TransportError(GroundingError):
    """The request never produced an HTTP response (DNS, TLS, refused, timeout)."""

    kind = ErrorKind.TRANSPORT


class HTTPStatusError(GroundingError):
    """Upstream answered with a non-2xx status."""

    kind = ErrorKind.HTTP_STATUS

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        upstream_message: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.status_code = status_code
        self.upstream_message = upstream_message


class PayloadShapeError(GroundingError):
    """A successful response body could not be interpreted."""

    kind = ErrorKind.PAYLOAD_SHAPE
