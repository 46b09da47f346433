"""Anonymous file host upload client."""

import logging
from dataclasses import dataclass

import httpx

from nutritrack.domain.errors import UpstreamServiceError
from nutritrack.services.uploads import BlobHostClient

logger = logging.getLogger(__name__)


@dataclass
class HttpxBlobHostClient(BlobHostClient):
    """File host client using httpx multipart uploads."""

    upload_url: str
    http_client: httpx.AsyncClient
    timeout: float = 30.0

    @classmethod
    def create(cls, upload_url: str, timeout: float = 30.0) -> "HttpxBlobHostClient":
        """Create a file host client with a managed httpx session."""
        return cls(
            upload_url=upload_url, http_client=httpx.AsyncClient(), timeout=timeout
        )

    async def upload_file(
        self, filename: str, content: bytes, content_type: str | None
    ) -> str:
        """Post the file as multipart form data and return the response text."""
        files = {
            "file": (filename, content, content_type or "application/octet-stream")
        }
        try:
            response = await self.http_client.post(
                self.upload_url, files=files, timeout=self.timeout
            )
        except httpx.HTTPError as exc:
            logger.exception("File host request failed", extra={"file_name": filename})
            raise UpstreamServiceError("Upload failed.") from exc
        if not response.is_success:
            logger.warning(
                "File host rejected upload",
                extra={"status_code": response.status_code, "file_name": filename},
            )
            raise UpstreamServiceError("Upload failed.")
        return response.text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
