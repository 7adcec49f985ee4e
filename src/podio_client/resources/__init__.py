"""One function per Podio endpoint; each delegates to PodioClient.request."""

from .apps import get_app, get_app_by_space_id_and_slug, get_apps
from .comments import create_comment, get_comments
from .files import (
    attach_file,
    create_file,
    delete_file,
    get_file,
    get_file_contents,
    get_files,
    replace_file,
)
from .items import (
    create_item,
    get_item,
    get_item_by_app_item_id,
    get_item_by_external_id,
    get_items,
    update_item,
)
from .organizations import (
    get_organization,
    get_organization_by_slug,
    get_organizations,
)
from .spaces import get_space, get_space_by_org_id_and_slug, get_spaces

__all__ = [
    # Organizations
    "get_organizations",
    "get_organization",
    "get_organization_by_slug",
    # Spaces
    "get_spaces",
    "get_space",
    "get_space_by_org_id_and_slug",
    # Apps
    "get_apps",
    "get_app",
    "get_app_by_space_id_and_slug",
    # Items
    "get_items",
    "get_item",
    "get_item_by_app_item_id",
    "get_item_by_external_id",
    "create_item",
    "update_item",
    # Comments
    "create_comment",
    "get_comments",
    # Files
    "get_files",
    "get_file",
    "get_file_contents",
    "create_file",
    "replace_file",
    "attach_file",
    "delete_file",
]
