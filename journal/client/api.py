"""
Journal — HTTP API Client
==========================

What:  Async client for the /api/entries endpoints.
How:   Wraps an httpx.AsyncClient. Successful responses are parsed into
       EntryResponse; any non-2xx response raises ApiError carrying the
       status code and the server's error message. Transport failures
       propagate as httpx.HTTPError.
Who:   EntryForm and EntryList controllers, scripts, and tests (which pass
       an httpx.AsyncClient built on ASGITransport).

Example:
    async with EntriesClient("http://localhost:8080") as api:
        entry = await api.add_entry(title="Trip", notes="Fun", photo_url="http://x/y.jpg")
        await api.remove_entry(entry.entry_id)
"""

import logging
from typing import Any, List, Optional, Union

import httpx

from journal.config import settings
from journal.schemas.entry import EntryResponse

logger = logging.getLogger(__name__)

EntryId = Union[int, str]


class ApiError(Exception):
    """
    A non-success HTTP response from the journal API.

    Attributes:
        status_code:  HTTP status of the response
        message:      The server's `message` field, or the reason phrase
    """

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class EntriesClient:
    """Thin async wrapper over the entries REST surface."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        # An injected client is owned by the caller and is not closed here
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            transport=transport,
        )

    async def __aenter__(self) -> "EntriesClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    # ── Operations ────────────────────────────────────────────────────────

    async def list_entries(self) -> List[EntryResponse]:
        data = await self._request("GET", "/api/entries")
        return [EntryResponse.model_validate(item) for item in data]

    async def read_entry(self, entry_id: EntryId) -> EntryResponse:
        data = await self._request("GET", f"/api/entries/{entry_id}")
        return EntryResponse.model_validate(data)

    async def add_entry(self, title: str, notes: str, photo_url: str) -> EntryResponse:
        data = await self._request(
            "POST",
            "/api/entries",
            json={"title": title, "notes": notes, "photoUrl": photo_url},
        )
        return EntryResponse.model_validate(data)

    async def update_entry(
        self, entry_id: EntryId, title: str, notes: str, photo_url: str
    ) -> EntryResponse:
        data = await self._request(
            "PUT",
            f"/api/entries/{entry_id}",
            json={"title": title, "notes": notes, "photoUrl": photo_url},
        )
        return EntryResponse.model_validate(data)

    async def remove_entry(self, entry_id: EntryId) -> EntryResponse:
        data = await self._request("DELETE", f"/api/entries/{entry_id}")
        return EntryResponse.model_validate(data)

    # ── Internals ─────────────────────────────────────────────────────────

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        response = await self._http.request(method, url, **kwargs)
        if response.is_success:
            return response.json()

        message = response.reason_phrase
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            message = body["message"]

        logger.debug("%s %s failed: %d %s", method, url, response.status_code, message)
        raise ApiError(response.status_code, message)
