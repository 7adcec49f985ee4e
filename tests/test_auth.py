from urllib.parse import parse_qs

import httpx
import pytest
import respx
from httpx import Response
from podio_client.auth import auth_with_app_credentials, auth_with_user_credentials
from podio_client.core.config import ClientConfig
from podio_client.core.errors import (
    PodioAPIError,
    PodioDecodeError,
    PodioRawAPIError,
    PodioTransportError,
)

TOKEN_URL = "https://api.podio.com/oauth/token"

TOKEN_PAYLOAD = {
    "access_token": "acc",
    "token_type": "bearer",
    "expires_in": 28800,
    "refresh_token": "ref",
    "ref": {"type": "user", "id": 9},
}


def _form(request: httpx.Request) -> dict:
    return {k: v[0] for k, v in parse_qs(request.read().decode()).items()}


@respx.mock
def test_password_grant_posts_form_and_returns_token():
    route = respx.post(TOKEN_URL).mock(return_value=Response(200, json=TOKEN_PAYLOAD))

    token = auth_with_user_credentials("cid", "secret", "ada@example.com", "pw")

    assert token.access_token == "acc"
    assert token.refresh_token == "ref"
    req = route.calls[0].request
    assert req.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert "Authorization" not in req.headers
    assert _form(req) == {
        "grant_type": "password",
        "username": "ada@example.com",
        "password": "pw",
        "client_id": "cid",
        "client_secret": "secret",
    }


@respx.mock
def test_app_grant_posts_app_fields():
    route = respx.post(TOKEN_URL).mock(return_value=Response(200, json=TOKEN_PAYLOAD))

    token = auth_with_app_credentials("cid", "secret", 42, "apptok")

    assert token.token_type == "bearer"
    assert _form(route.calls[0].request) == {
        "grant_type": "app",
        "app_id": "42",
        "app_token": "apptok",
        "client_id": "cid",
        "client_secret": "secret",
    }


@respx.mock
def test_token_url_is_configurable():
    route = respx.post("https://auth.test/oauth/token").mock(
        return_value=Response(200, json=TOKEN_PAYLOAD)
    )

    auth_with_app_credentials(
        "cid",
        "secret",
        1,
        "t",
        config=ClientConfig(token_url="https://auth.test/oauth/token"),
    )

    assert route.called


@respx.mock
def test_injected_http_client_is_used_and_kept_open():
    respx.post(TOKEN_URL).mock(return_value=Response(200, json=TOKEN_PAYLOAD))
    http = httpx.Client()

    auth_with_user_credentials("cid", "secret", "u", "p", http=http)

    assert not http.is_closed
    http.close()


@respx.mock
def test_error_document_with_200_is_detected():
    respx.post(TOKEN_URL).mock(
        return_value=Response(
            200,
            json={"error": "invalid_grant", "error_description": "Bad credentials"},
        )
    )

    with pytest.raises(PodioAPIError) as exc:
        auth_with_user_credentials("cid", "secret", "u", "wrong")

    assert str(exc.value) == "invalid_grant: Bad credentials"
    assert exc.value.status_code == 200


@respx.mock
def test_error_status_is_classified_like_request():
    respx.post(TOKEN_URL).mock(
        return_value=Response(
            400,
            json={"error": "invalid_client", "error_description": "Unknown client"},
        )
    )

    with pytest.raises(PodioAPIError) as exc:
        auth_with_app_credentials("bad", "secret", 1, "t")

    assert exc.value.status_code == 400
    assert exc.value.error_type == "invalid_client"


@respx.mock
def test_non_json_error_status_is_raw():
    respx.post(TOKEN_URL).mock(return_value=Response(503, text="maintenance"))

    with pytest.raises(PodioRawAPIError) as exc:
        auth_with_app_credentials("cid", "secret", 1, "t")

    assert str(exc.value) == "maintenance"


@respx.mock
def test_non_json_success_is_decode_error():
    respx.post(TOKEN_URL).mock(return_value=Response(200, text="<html>"))

    with pytest.raises(PodioDecodeError):
        auth_with_user_credentials("cid", "secret", "u", "p")


@respx.mock
def test_transport_failure():
    respx.post(TOKEN_URL).mock(side_effect=httpx.ConnectError("refused"))

    with pytest.raises(PodioTransportError) as exc:
        auth_with_user_credentials("cid", "secret", "u", "p")

    assert isinstance(exc.value.__cause__, httpx.ConnectError)
    assert "secret" not in str(exc.value)


@respx.mock
def test_error_document_with_null_description_is_typed():
    respx.post(TOKEN_URL).mock(
        return_value=Response(
            200, content=b'{"error":"invalid_grant","error_description":null}'
        )
    )

    with pytest.raises(PodioAPIError) as exc:
        auth_with_user_credentials("cid", "secret", "u", "wrong")

    assert str(exc.value) == "invalid_grant: "


@respx.mock
def test_malformed_error_document_with_200_is_raw():
    body = b'{"error":"invalid_grant","error_propagate":"sometimes"}'
    respx.post(TOKEN_URL).mock(return_value=Response(200, content=body))

    with pytest.raises(PodioRawAPIError) as exc:
        auth_with_user_credentials("cid", "secret", "u", "wrong")

    assert exc.value.body_bytes == body
    assert str(exc.value) == body.decode()
