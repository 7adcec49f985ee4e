"""podio_client package exports."""

from .auth import (
    auth_with_app_credentials,
    auth_with_user_credentials,
    create_client_from_env,
)
from .client import PodioClient
from .core import (
    ClientConfig,
    PodioAPIError,
    PodioClientError,
    PodioDecodeError,
    PodioRawAPIError,
    PodioTransportError,
    render_error,
    setup_logging,
)
from .models import (
    APIErrorPayload,
    App,
    Comment,
    Field,
    File,
    Item,
    ItemList,
    Organization,
    Space,
    Token,
    Value,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "PodioClient",
    "ClientConfig",
    "create_client_from_env",
    "setup_logging",
    # Auth
    "auth_with_user_credentials",
    "auth_with_app_credentials",
    # Exceptions
    "PodioClientError",
    "PodioTransportError",
    "PodioDecodeError",
    "PodioAPIError",
    "PodioRawAPIError",
    "render_error",
    # Models
    "Token",
    "Organization",
    "Space",
    "App",
    "Item",
    "Field",
    "Value",
    "ItemList",
    "File",
    "Comment",
    "APIErrorPayload",
]
