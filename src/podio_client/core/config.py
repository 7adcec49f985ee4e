from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://api.podio.com"
DEFAULT_TOKEN_URL = "https://api.podio.com/oauth/token"
DEFAULT_TIMEOUT_SECONDS = 30.0

CREDENTIAL_VARS = (
    "PODIO_CLIENT_ID",
    "PODIO_CLIENT_SECRET",
    "PODIO_USERNAME",
    "PODIO_PASSWORD",
    "PODIO_APP_ID",
    "PODIO_APP_TOKEN",
)


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    token_url: str = DEFAULT_TOKEN_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "base_url", (self.base_url or "").rstrip("/"))
        if not self.base_url:
            raise ValueError("base_url must be provided.")
        if not self.token_url:
            raise ValueError("token_url must be provided.")
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")


def load_env_config(*, use_dotenv: bool = True) -> ClientConfig:
    """Build a ClientConfig from PODIO_* environment variables (optional .env)."""
    if use_dotenv:
        load_dotenv()
    base_url = os.getenv("PODIO_BASE_URL", "").strip() or DEFAULT_BASE_URL
    token_url = os.getenv("PODIO_TOKEN_URL", "").strip() or DEFAULT_TOKEN_URL
    raw_timeout = os.getenv("PODIO_TIMEOUT_SECONDS", "").strip()
    try:
        timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT_SECONDS
    except ValueError as exc:
        raise ValueError(
            f"PODIO_TIMEOUT_SECONDS must be a number, got {raw_timeout!r}"
        ) from exc
    return ClientConfig(base_url=base_url, token_url=token_url, timeout_seconds=timeout)


def load_credentials(*, use_dotenv: bool = True) -> Dict[str, str]:
    """Return the PODIO_* credential variables that are set, keyed by name."""
    if use_dotenv:
        load_dotenv()
    creds: Dict[str, str] = {}
    for name in CREDENTIAL_VARS:
        val = os.getenv(name, "").strip()
        if val:
            creds[name] = val
    return creds


__all__ = [
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_TOKEN_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "load_env_config",
    "load_credentials",
]
