import httpx

from .config import API_BASE


class UpstreamError(Exception):
    """A request to the content API failed or returned something unusable."""


class EduverseClient:
    """
    Read-only client for the Eduverse content API.

    No auth, no retries; timeouts are whatever httpx uses by default.
    Every endpoint answers with a `{"data": [...]}` envelope.
    """

    def __init__(self, api_base: str = API_BASE, transport=None):
        self.api_base = api_base.rstrip("/")
        self._http = httpx.AsyncClient(transport=transport)

    async def _get(self, path: str) -> dict:
        url = f"{self.api_base}{path}"
        try:
            response = await self._http.get(url)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise UpstreamError(f"GET {url} failed: {e}") from e

        if not isinstance(payload, dict):
            raise UpstreamError(f"GET {url} returned {type(payload).__name__}, expected an object")
        return payload

    async def _get_data(self, path: str) -> list:
        payload = await self._get(path)
        data = payload.get("data")
        if data is None:
            return []
        if not isinstance(data, list):
            raise UpstreamError(f"GET {self.api_base}{path} returned data of type {type(data).__name__}, expected a list")
        return data

    async def list_batches(self) -> dict:
        """Raw batch catalog document, passed through untouched."""
        return await self._get("/batches")

    async def list_subjects(self, batch_id: str) -> list:
        return await self._get_data(f"/batches/{batch_id}")

    async def list_content(self, batch_id: str, subject_id, content_type: str) -> list:
        return await self._get_data(f"/{batch_id}/subjects/{subject_id}/{content_type}")

    async def aclose(self) -> None:
        await self._http.aclose()
