import json
from pathlib import Path

import pytest
from podio_client import PodioClient, Token

BASE_URL = "https://api.test"


def load_fixture(name: str) -> dict:
    p = Path(__file__).parent / "fixtures" / name
    with open(p, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def token() -> Token:
    return Token(
        access_token="T1",
        token_type="bearer",
        expires_in=28800,
        refresh_token="R1",
    )


@pytest.fixture
def client(token):
    with PodioClient(token, base_url=BASE_URL) as cl:
        yield cl
