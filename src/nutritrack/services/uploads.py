"""Image upload forwarding to the external file host."""

from dataclasses import dataclass
from typing import Protocol
from urllib.parse import urlsplit

from nutritrack.domain.errors import ClientInputError, UpstreamServiceError
from nutritrack.domain.records import UploadedFile


class BlobHostClient(Protocol):
    """Interface for the anonymous file host."""

    async def upload_file(
        self, filename: str, content: bytes, content_type: str | None
    ) -> str:
        """Upload a file and return the host's raw reference text."""


@dataclass
class UploadService:
    """Forwards uploaded files and returns a canonical URL."""

    client: BlobHostClient
    base_url: str

    async def upload(self, file: UploadedFile | None) -> str:
        """Upload a file and return its fully-qualified URL."""
        if file is None or not file.content:
            raise ClientInputError("No file uploaded.")
        raw = await self.client.upload_file(
            file.filename or "upload", file.content, file.content_type
        )
        return normalize_reference(raw, self.base_url)


def normalize_reference(raw: str, base_url: str) -> str:
    """Strip line breaks and any URL prefix, then prefix the canonical host."""
    reference = raw.replace("\r", "").replace("\n", "").strip()
    parts = urlsplit(reference)
    if parts.scheme and parts.netloc:
        reference = parts.path
        if parts.query:
            reference = f"{reference}?{parts.query}"
    reference = reference.lstrip("/")
    if not reference:
        raise UpstreamServiceError("Upload failed: empty reference from file host.")
    return f"{base_url.rstrip('/')}/{reference}"
