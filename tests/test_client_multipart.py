import respx
from httpx import Response
from podio_client.resources.files import create_file

BASE_URL = "https://api.test"


@respx.mock
def test_create_file_sends_multipart(client):
    route = respx.post(f"{BASE_URL}/file").mock(
        return_value=Response(
            200, json={"file_id": 77, "name": "notes.txt", "size": 5}
        )
    )

    f = create_file(client, "notes.txt", b"hello")

    assert f.id == 77
    req = route.calls[0].request
    assert req.headers["Content-Type"].startswith("multipart/form-data; boundary=")
    assert req.headers["Authorization"] == "OAuth2 T1"
    body = req.read()
    assert b'name="source"; filename="notes.txt"' in body
    assert b'name="filename"' in body
    assert b"hello" in body


@respx.mock
def test_create_file_binary_content(client):
    route = respx.post(f"{BASE_URL}/file").mock(
        return_value=Response(200, json={"file_id": 78})
    )

    payload = bytes(range(256))
    create_file(client, "blob.bin", payload)

    assert payload in route.calls[0].request.read()
