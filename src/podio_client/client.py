import json
import logging
import time
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import urlencode

import httpx
from pydantic import TypeAdapter, ValidationError

from .core.config import ClientConfig
from .core.errors import (
    PodioAPIError,
    PodioClientError,
    PodioDecodeError,
    PodioRawAPIError,
    PodioTransportError,
)
from .models import APIErrorPayload, Token

JSON_HEADERS = {"Content-Type": "application/json"}


def json_body(payload: Any) -> bytes:
    """Compact JSON encoding used for every request body."""
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode(
        "utf-8"
    )


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def error_from_response(resp: httpx.Response) -> PodioClientError:
    """
    Classify a non-2xx response.
    - Body decodes as a Podio error document -> PodioAPIError
    - Anything else -> PodioRawAPIError carrying the body text verbatim
    """
    try:
        payload = APIErrorPayload.model_validate_json(resp.content)
    except ValidationError:
        return raw_api_error(resp)
    return PodioAPIError(payload, status_code=resp.status_code)


def raw_api_error(resp: httpx.Response) -> PodioRawAPIError:
    return PodioRawAPIError(
        raw_body_text(resp), status_code=resp.status_code, body_bytes=resp.content
    )


def raw_body_text(resp: httpx.Response) -> str:
    """Decode a body without losing bytes.

    The declared charset is used when it decodes cleanly; otherwise UTF-8
    with surrogate escapes, so ``text.encode("utf-8", "surrogateescape")``
    gives back the original bytes.
    """
    charset = resp.charset_encoding or "utf-8"
    try:
        return resp.content.decode(charset)
    except (LookupError, UnicodeDecodeError):
        return resp.content.decode("utf-8", "surrogateescape")


def decode_body(resp: httpx.Response, out: Any) -> Any:
    try:
        return TypeAdapter(out).validate_json(resp.content)
    except ValidationError as exc:
        snippet = (resp.text or "")[:500]
        raise PodioDecodeError(
            f"Could not decode response from {resp.request.method} "
            f"{resp.request.url.path} as {_type_name(out)}: {snippet!r}"
        ) from exc


def _type_name(out: Any) -> str:
    return getattr(out, "__name__", None) or repr(out)


class PodioClient:
    """
    Shared HTTP client for the Podio REST API.
    - Holds the Token it was constructed with and never mutates it
    - Every call is one synchronous round trip; no retries, no refresh
    - Resource functions in podio_client.resources build on request()
    """

    def __init__(
        self,
        token: Token,
        *,
        config: Optional[ClientConfig] = None,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.Client] = None,
    ):
        if not isinstance(token, Token):
            raise TypeError("token must be a podio_client.models.Token")

        config = config or ClientConfig()
        if base_url is not None or timeout_seconds is not None:
            config = ClientConfig(
                base_url=base_url if base_url is not None else config.base_url,
                token_url=config.token_url,
                timeout_seconds=(
                    timeout_seconds
                    if timeout_seconds is not None
                    else config.timeout_seconds
                ),
            )

        self.token = token
        self.config = config
        self.log = logger or logging.getLogger("podio_client.client")

        self._owns_http = http is None
        self.http = http or httpx.Client(
            headers={"Accept": "application/json"},
            timeout=config.timeout_seconds,
        )

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "PodioClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _auth_header(self) -> Dict[str, str]:
        return {"Authorization": f"OAuth2 {self.token.access_token}"}

    def request(
        self,
        method: str,
        path: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        content: Optional[Union[bytes, str]] = None,
        data: Optional[Mapping[str, Any]] = None,
        files: Optional[Mapping[str, Any]] = None,
        out: Any = None,
    ) -> Any:
        """
        Core request method.
        - ``out`` is a model class or typing form (e.g. ``List[Space]``)
        - Sends ``Authorization: OAuth2 <access_token>`` on every call
        - Raises PodioTransportError on network/timeout errors
        - Raises PodioAPIError / PodioRawAPIError on non-2xx responses
        - Raises PodioDecodeError if a 2xx body does not decode into ``out``
        - Returns the decoded ``out`` value, or None when ``out`` is None
        """
        method = method.upper()
        url = f"{self.base_url}{path}"

        merged: Dict[str, str] = dict(headers or {})
        merged.update(self._auth_header())

        resp = self._send(
            method,
            url,
            path=path,
            headers=merged,
            content=content,
            data=data,
            files=files,
        )

        if not is_success(resp.status_code):
            raise error_from_response(resp)

        if out is None:
            return None
        return decode_body(resp, out)

    def _send(
        self, method: str, url: str, *, path: str, **kwargs: Any
    ) -> httpx.Response:
        start = time.perf_counter()
        try:
            # Response.content is fully read by the non-streaming API.
            resp = self.http.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            self.log.debug(
                "podio.request",
                extra={
                    "method": method,
                    "path": path,
                    "status": "exception",
                    "error_kind": "transport",
                },
            )
            raise PodioTransportError(
                f"Network error calling {method} {path}: {exc}"
            ) from exc

        duration_ms = int((time.perf_counter() - start) * 1000)
        self.log.debug(
            "podio.request",
            extra={
                "method": method,
                "path": path,
                "status": resp.status_code,
                "duration_ms": duration_ms,
            },
        )
        return resp

    def download(self, link: str) -> bytes:
        """
        Fetch a pre-signed file link.
        The token travels as an ``oauth_token`` query parameter, never as an
        Authorization header.
        """
        url = append_query(link, {"oauth_token": self.token.access_token})
        # Log the bare link; the signed URL carries the token.
        resp = self._send("GET", url, path=link.split("?", 1)[0])
        if not is_success(resp.status_code):
            raise error_from_response(resp)
        return resp.content


def append_query(link: str, params: Mapping[str, str]) -> str:
    """Append ``params`` to ``link`` using ``&`` if it already has a query."""
    base, sep, fragment = link.partition("#")
    if not params:
        return link
    query = urlencode(params)
    if "?" in base:
        joiner = "" if base.endswith(("?", "&")) else "&"
    else:
        joiner = "?"
    return f"{base}{joiner}{query}{sep}{fragment}"


__all__ = [
    "PodioClient",
    "append_query",
    "error_from_response",
    "raw_api_error",
    "raw_body_text",
    "decode_body",
    "is_success",
    "json_body",
    "JSON_HEADERS",
]
