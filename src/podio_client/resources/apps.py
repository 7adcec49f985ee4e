from __future__ import annotations

from typing import List

from podio_client.client import PodioClient
from podio_client.models import App

from ._paths import segment, with_query

# "micro" keeps app payloads down to id/name/url_label.
APP_VIEW = "micro"


def get_apps(client: PodioClient, space_id: int) -> List[App]:
    path = with_query(f"/app/space/{segment(space_id)}", view=APP_VIEW)
    return client.request("GET", path, out=List[App])


def get_app(client: PodioClient, app_id: int) -> App:
    path = with_query(f"/app/{segment(app_id)}", view=APP_VIEW)
    return client.request("GET", path, out=App)


def get_app_by_space_id_and_slug(client: PodioClient, space_id: int, slug: str) -> App:
    return client.request(
        "GET", f"/app/space/{segment(space_id)}/{segment(slug)}", out=App
    )
