"""Transport-agnostic surface for podio_client: errors, config, logging."""

from .config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_TOKEN_URL,
    ClientConfig,
    load_credentials,
    load_env_config,
)
from .errors import (
    PodioAPIError,
    PodioClientError,
    PodioDecodeError,
    PodioRawAPIError,
    PodioTransportError,
    render_error,
)
from .logging import LogfmtFormatter, setup_logging

__all__ = [
    # Exceptions
    "PodioClientError",
    "PodioTransportError",
    "PodioDecodeError",
    "PodioAPIError",
    "PodioRawAPIError",
    "render_error",
    # Config helpers
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_TOKEN_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "load_env_config",
    "load_credentials",
    # Logging
    "LogfmtFormatter",
    "setup_logging",
]
