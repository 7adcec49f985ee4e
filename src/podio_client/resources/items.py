from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from podio_client.client import JSON_HEADERS, PodioClient, json_body
from podio_client.models import CreatedItem, Item, ItemList

from ._paths import segment, with_query

# Filter responses omit item fields unless asked for explicitly.
ITEM_LIST_FIELDS = "items.fields(files)"


def get_items(client: PodioClient, app_id: int) -> ItemList:
    """
    Filter an app's items with the default filter.
    Returns a single page: ``filtered``/``total`` counts and no cursor.
    """
    path = with_query(f"/item/app/{segment(app_id)}/filter", fields=ITEM_LIST_FIELDS)
    return client.request("POST", path, out=ItemList)


def get_item_by_app_item_id(
    client: PodioClient, app_id: int, formatted_app_item_id: str
) -> Item:
    path = f"/app/{segment(app_id)}/item/{segment(formatted_app_item_id)}"
    return client.request("GET", path, out=Item)


def get_item_by_external_id(
    client: PodioClient, app_id: int, external_id: str
) -> Item:
    path = f"/item/app/{segment(app_id)}/external_id/{segment(external_id)}"
    return client.request("GET", path, out=Item)


def get_item(client: PodioClient, item_id: int) -> Item:
    path = with_query(f"/item/{segment(item_id)}", fields="files")
    return client.request("GET", path, out=Item)


def create_item(
    client: PodioClient,
    app_id: int,
    external_id: Optional[str],
    fields: Mapping[str, Any],
) -> int:
    """
    Create an item and return its ``item_id``.
    ``external_id`` is only sent when non-empty.
    """
    payload: Dict[str, Any] = {"fields": dict(fields)}
    if external_id:
        payload["external_id"] = external_id

    created = client.request(
        "POST",
        f"/item/app/{segment(app_id)}",
        headers=JSON_HEADERS,
        content=json_body(payload),
        out=CreatedItem,
    )
    return created.item_id


def update_item(client: PodioClient, item_id: int, fields: Mapping[str, Any]) -> None:
    client.request(
        "PUT",
        f"/item/{segment(item_id)}",
        headers=JSON_HEADERS,
        content=json_body({"fields": dict(fields)}),
    )
