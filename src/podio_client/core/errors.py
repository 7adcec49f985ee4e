from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from podio_client.models import APIErrorPayload


class PodioClientError(Exception):
    """Base error for client failures.

    ``kind`` is one of ``transport``, ``decode`` or ``api`` so callers can
    branch without isinstance chains.
    """

    kind: str = "client"


class PodioTransportError(PodioClientError):
    kind = "transport"


class PodioDecodeError(PodioClientError):
    kind = "decode"


class PodioAPIError(PodioClientError):
    """Non-2xx response whose body decoded as a Podio error document."""

    kind = "api"

    def __init__(self, payload: "APIErrorPayload", *, status_code: int):
        super().__init__(f"{payload.type}: {payload.description}")
        self.payload = payload
        self.status_code = status_code

    @property
    def error_type(self) -> str:
        return self.payload.type

    @property
    def description(self) -> str:
        return self.payload.description

    @property
    def detail(self) -> Any:
        return self.payload.detail

    @property
    def parameters(self) -> Any:
        return self.payload.parameters

    @property
    def propagate(self) -> bool:
        return self.payload.propagate

    @property
    def request_url(self) -> str:
        return self.payload.request.url

    @property
    def request_query(self) -> str:
        return self.payload.request.query_string


class PodioRawAPIError(PodioClientError):
    """Non-2xx response whose body is not a Podio error document.

    The message is the response body verbatim. Bytes that are not valid in
    the declared charset survive as surrogate escapes; ``body_bytes`` holds
    the body exactly as received.
    """

    kind = "api"

    def __init__(
        self, body: str, *, status_code: int, body_bytes: Optional[bytes] = None
    ):
        super().__init__(body)
        self.body = body
        self.status_code = status_code
        if body_bytes is None:
            body_bytes = body.encode("utf-8", "surrogateescape")
        self.body_bytes = body_bytes


def render_error(exc: PodioClientError) -> str:
    """Uniform one-line rendering: ``<kind>: <message>``."""
    message = str(exc)
    return f"{exc.kind}: {message}" if message else exc.kind


__all__ = [
    "PodioClientError",
    "PodioTransportError",
    "PodioDecodeError",
    "PodioAPIError",
    "PodioRawAPIError",
    "render_error",
]
