from __future__ import annotations

from typing import List

from podio_client.client import PodioClient
from podio_client.models import Organization

from ._paths import segment, with_query


def get_organizations(client: PodioClient) -> List[Organization]:
    return client.request("GET", "/org", out=List[Organization])


def get_organization(client: PodioClient, org_id: int) -> Organization:
    return client.request("GET", f"/org/{segment(org_id)}", out=Organization)


def get_organization_by_slug(client: PodioClient, slug: str) -> Organization:
    path = with_query("/org/url", org_slug=slug)
    return client.request("GET", path, out=Organization)
