"""HTTP client posting export documents to a spreadsheet web app."""

import json
from dataclasses import dataclass

import httpx

from nutritrack.services.export import ExportClient


@dataclass
class HttpxExportClient(ExportClient):
    """HTTPX-backed export client."""

    http_client: httpx.AsyncClient
    timeout: float = 30.0

    @classmethod
    def create(cls, timeout: float = 30.0) -> "HttpxExportClient":
        """Create an export client with a managed httpx session."""
        return cls(
            http_client=httpx.AsyncClient(follow_redirects=True), timeout=timeout
        )

    async def post_document(self, url: str, document: dict[str, object]) -> None:
        """POST the document as plain-text JSON, which web apps accept without CORS."""
        response = await self.http_client.post(
            url,
            content=json.dumps(document, ensure_ascii=False).encode("utf-8"),
            headers={"Content-Type": "text/plain;charset=utf-8"},
            timeout=self.timeout,
        )
        response.raise_for_status()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
