from __future__ import annotations

from typing import List, Union

from podio_client.client import JSON_HEADERS, PodioClient, json_body
from podio_client.models import Comment

from ._paths import segment


def _comment_path(ref_type: str, ref_id: Union[int, str]) -> str:
    return f"/comment/{segment(ref_type)}/{segment(ref_id)}/"


def create_comment(
    client: PodioClient, ref_type: str, ref_id: Union[int, str], text: str
) -> Comment:
    """Post a comment on the object identified by ``ref_type``/``ref_id``."""
    return client.request(
        "POST",
        _comment_path(ref_type, ref_id),
        headers=JSON_HEADERS,
        content=json_body({"value": text}),
        out=Comment,
    )


def get_comments(
    client: PodioClient, ref_type: str, ref_id: Union[int, str]
) -> List[Comment]:
    return client.request("GET", _comment_path(ref_type, ref_id), out=List[Comment])
