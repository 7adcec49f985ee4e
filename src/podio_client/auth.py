"""OAuth2 token acquisition (password and app grants)."""

import json
import logging
from typing import Dict, Optional

import httpx
from pydantic import ValidationError

from .client import PodioClient, error_from_response, is_success, raw_api_error
from .core.config import ClientConfig, load_credentials, load_env_config
from .core.errors import PodioAPIError, PodioDecodeError, PodioTransportError
from .models import APIErrorPayload, Token

log = logging.getLogger("podio_client.auth")


def auth_with_user_credentials(
    client_id: str,
    client_secret: str,
    username: str,
    password: str,
    *,
    config: Optional[ClientConfig] = None,
    http: Optional[httpx.Client] = None,
) -> Token:
    return _request_token(
        {
            "grant_type": "password",
            "username": username,
            "password": password,
            "client_id": client_id,
            "client_secret": client_secret,
        },
        config=config,
        http=http,
    )


def auth_with_app_credentials(
    client_id: str,
    client_secret: str,
    app_id: int,
    app_token: str,
    *,
    config: Optional[ClientConfig] = None,
    http: Optional[httpx.Client] = None,
) -> Token:
    return _request_token(
        {
            "grant_type": "app",
            "app_id": str(int(app_id)),
            "app_token": app_token,
            "client_id": client_id,
            "client_secret": client_secret,
        },
        config=config,
        http=http,
    )


def _request_token(
    form: Dict[str, str],
    *,
    config: Optional[ClientConfig],
    http: Optional[httpx.Client],
) -> Token:
    """
    POST a form-encoded grant to the token endpoint.
    - Non-2xx responses are classified like PodioClient.request
    - A 2xx body carrying ``error`` and no ``access_token`` raises PodioAPIError
    """
    config = config or ClientConfig()
    grant_type = form["grant_type"]

    owns_http = http is None
    http = http or httpx.Client(timeout=config.timeout_seconds)
    try:
        resp = http.post(
            config.token_url, data=form, headers={"Accept": "application/json"}
        )
    except httpx.HTTPError as exc:
        log.debug(
            "podio.token",
            extra={"grant_type": grant_type, "status": "exception"},
        )
        raise PodioTransportError(
            f"Network error requesting {grant_type} token: {exc}"
        ) from exc
    finally:
        if owns_http:
            http.close()

    log.debug(
        "podio.token", extra={"grant_type": grant_type, "status": resp.status_code}
    )

    if not is_success(resp.status_code):
        raise error_from_response(resp)

    try:
        raw = json.loads(resp.content)
    except ValueError as exc:
        raise PodioDecodeError(
            f"Token endpoint returned non-JSON body: {(resp.text or '')[:500]!r}"
        ) from exc

    # Some OAuth servers answer 200 with an error document.
    if isinstance(raw, dict) and raw.get("error") and not raw.get("access_token"):
        try:
            payload = APIErrorPayload.model_validate(raw)
        except ValidationError:
            raise raw_api_error(resp) from None
        raise PodioAPIError(payload, status_code=resp.status_code)

    try:
        return Token.model_validate(raw)
    except ValidationError as exc:
        raise PodioDecodeError(f"Token response did not match Token: {exc}") from exc


def create_client_from_env(
    config: Optional[ClientConfig] = None, **kwargs
) -> PodioClient:
    """
    Authenticate with credentials from the environment and return a client.
    App credentials win over username/password when both are present.
    """
    config = config or load_env_config()
    creds = load_credentials()

    missing = [n for n in ("PODIO_CLIENT_ID", "PODIO_CLIENT_SECRET") if n not in creds]
    if missing:
        raise ValueError(f"Missing {' or '.join(missing)} in environment.")

    client_id = creds["PODIO_CLIENT_ID"]
    client_secret = creds["PODIO_CLIENT_SECRET"]

    if "PODIO_APP_ID" in creds and "PODIO_APP_TOKEN" in creds:
        try:
            app_id = int(creds["PODIO_APP_ID"])
        except ValueError as exc:
            raise ValueError("PODIO_APP_ID must be an integer.") from exc
        token = auth_with_app_credentials(
            client_id, client_secret, app_id, creds["PODIO_APP_TOKEN"], config=config
        )
    elif "PODIO_USERNAME" in creds and "PODIO_PASSWORD" in creds:
        token = auth_with_user_credentials(
            client_id,
            client_secret,
            creds["PODIO_USERNAME"],
            creds["PODIO_PASSWORD"],
            config=config,
        )
    else:
        raise ValueError(
            "Missing PODIO_APP_ID/PODIO_APP_TOKEN or "
            "PODIO_USERNAME/PODIO_PASSWORD in environment."
        )

    return PodioClient(token, config=config, **kwargs)


__all__ = [
    "auth_with_user_credentials",
    "auth_with_app_credentials",
    "create_client_from_env",
]
