from __future__ import annotations

from typing import List

from podio_client.client import PodioClient
from podio_client.models import Space

from ._paths import segment


def get_spaces(client: PodioClient, org_id: int) -> List[Space]:
    return client.request("GET", f"/org/{segment(org_id)}/space", out=List[Space])


def get_space(client: PodioClient, space_id: int) -> Space:
    return client.request("GET", f"/space/{segment(space_id)}", out=Space)


def get_space_by_org_id_and_slug(client: PodioClient, org_id: int, slug: str) -> Space:
    return client.request(
        "GET", f"/space/org/{segment(org_id)}/{segment(slug)}", out=Space
    )
