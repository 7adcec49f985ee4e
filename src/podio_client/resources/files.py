from __future__ import annotations

from typing import List

from podio_client.client import JSON_HEADERS, PodioClient, json_body
from podio_client.models import File

from ._paths import segment


def get_files(client: PodioClient) -> List[File]:
    return client.request("GET", "/file", out=List[File])


def get_file(client: PodioClient, file_id: int) -> File:
    return client.request("GET", f"/file/{segment(file_id)}", out=File)


def get_file_contents(client: PodioClient, link: str) -> bytes:
    """
    Download a file from its ``link``.
    Links are pre-signed URLs outside the API origin; the token is passed as
    ``oauth_token`` in the query string instead of a header.
    """
    return client.download(link)


def create_file(client: PodioClient, name: str, contents: bytes) -> File:
    """
    Upload ``contents`` as a new file.
    Multipart parts: ``source`` (the content, sent with filename ``name``)
    and ``filename``.
    """
    return client.request(
        "POST",
        "/file",
        files={"source": (name, contents, "application/octet-stream")},
        data={"filename": name},
        out=File,
    )


def replace_file(client: PodioClient, old_file_id: int, new_file_id: int) -> None:
    client.request(
        "POST",
        f"/file/{segment(new_file_id)}/replace",
        headers=JSON_HEADERS,
        content=json_body({"old_file_id": int(old_file_id)}),
    )


def attach_file(client: PodioClient, file_id: int, ref_type: str, ref_id: int) -> None:
    client.request(
        "POST",
        f"/file/{segment(file_id)}/attach",
        headers=JSON_HEADERS,
        content=json_body({"ref_type": ref_type, "ref_id": int(ref_id)}),
    )


def delete_file(client: PodioClient, file_id: int) -> None:
    client.request("DELETE", f"/file/{segment(file_id)}")
