"""Tests for HTTP-based adapters."""

import asyncio

import httpx
import pytest

from nutritrack.adapters.blob_host_client import HttpxBlobHostClient
from nutritrack.domain.errors import UpstreamServiceError


def test_blob_host_client_posts_multipart_file() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="https://0x0.st/abc123.jpg\n")

    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    client = HttpxBlobHostClient(
        upload_url="https://0x0.st", http_client=async_client
    )

    text = asyncio.run(client.upload_file("meal.jpg", b"jpeg-bytes", "image/jpeg"))

    assert text == "https://0x0.st/abc123.jpg\n"
    assert seen[0].method == "POST"
    assert seen[0].headers["content-type"].startswith("multipart/form-data")
    body = seen[0].content
    assert b'name="file"; filename="meal.jpg"' in body
    assert b"jpeg-bytes" in body


def test_blob_host_client_raises_on_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="busy")

    transport = httpx.MockTransport(handler)
    client = HttpxBlobHostClient(
        upload_url="https://0x0.st",
        http_client=httpx.AsyncClient(transport=transport),
    )

    with pytest.raises(UpstreamServiceError):
        asyncio.run(client.upload_file("meal.jpg", b"x", None))


def test_blob_host_client_raises_on_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    transport = httpx.MockTransport(handler)
    client = HttpxBlobHostClient(
        upload_url="https://0x0.st",
        http_client=httpx.AsyncClient(transport=transport),
    )

    with pytest.raises(UpstreamServiceError):
        asyncio.run(client.upload_file("meal.jpg", b"x", "image/png"))
