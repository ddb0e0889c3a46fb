"""Async client for the Notion REST API."""

from typing import Any, Self

import httpx
import structlog

from github_notion_sync.synchronize.pagination import Page
from github_notion_sync.utils.constants import DEFAULT_NOTION_API_URL, DEFAULT_NOTION_VERSION, NOTION_PAGE_SIZE

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class NotionClientError(Exception):
    """Base exception for Notion client errors."""


class NotionAPIError(NotionClientError):
    """Raised when the Notion API answers with a non-success status."""

    def __init__(self, status_code: int, code: str | None, message: str, url: str | None = None) -> None:
        """Initialize the error with the HTTP status and Notion's error body."""
        super().__init__(f"Notion API error {status_code} ({code or 'unknown'}): {message}")
        self.status_code = status_code
        self.code = code
        self.message = message
        self.url = url


class NotionClient:
    """Async HTTP client for the Notion API.

    Must be used as an async context manager, which owns the underlying
    `httpx.AsyncClient`.
    """

    def __init__(
        self,
        api_key: str,
        api_url: str = DEFAULT_NOTION_API_URL,
        notion_version: str = DEFAULT_NOTION_VERSION,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Notion client.

        Args:
            api_key: Integration token used as the bearer credential
            api_url: Base URL for the Notion API
            notion_version: Value of the Notion-Version header
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used to stub the API in tests
        """
        self.api_key = api_key
        self.api_url = api_url.rstrip("/")
        self.notion_version = notion_version
        self.timeout = timeout
        self.transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> Self:
        """Enter async context."""
        self._client = httpx.AsyncClient(
            base_url=self.api_url,
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Notion-Version": self.notion_version,
                "Content-Type": "application/json",
            },
            timeout=self.timeout,
            transport=self.transport,
        )
        return self

    async def __aexit__(self, *args: object) -> None:
        """Exit async context."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get the HTTP client."""
        if self._client is None:
            raise NotionClientError("Client not initialized. Use async context manager.")
        return self._client

    async def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        response = await self.client.request(method, path, **kwargs)
        if response.is_success:
            return response.json()

        try:
            error_data = response.json()
        except ValueError:
            error_data = {}
        code = error_data.get("code")
        message = error_data.get("message") or response.reason_phrase
        logger.error(
            "Notion API request failed",
            method=method,
            path=path,
            status_code=response.status_code,
            code=code,
            message=message,
        )
        raise NotionAPIError(response.status_code, code, message, url=str(response.url))

    async def query_database(self, database_id: str, start_cursor: str | None = None, page_size: int = NOTION_PAGE_SIZE) -> Page[dict[str, Any]]:
        """Query one page of records from a database."""
        body: dict[str, Any] = {"page_size": page_size}
        if start_cursor:
            body["start_cursor"] = start_cursor
        data = await self._request("POST", f"/databases/{database_id}/query", json=body)
        return Page(items=data.get("results", []), next_cursor=data.get("next_cursor"))

    async def list_users(self, start_cursor: str | None = None, page_size: int = NOTION_PAGE_SIZE) -> Page[dict[str, Any]]:
        """List one page of workspace users."""
        params: dict[str, Any] = {"page_size": page_size}
        if start_cursor:
            params["start_cursor"] = start_cursor
        data = await self._request("GET", "/users", params=params)
        return Page(items=data.get("results", []), next_cursor=data.get("next_cursor"))

    async def create_page(self, database_id: str, properties: dict[str, Any]) -> dict[str, Any]:
        """Create a page in a database."""
        return await self._request(
            "POST",
            "/pages",
            json={"parent": {"database_id": database_id}, "properties": properties},
        )

    async def update_page(self, page_id: str, properties: dict[str, Any]) -> dict[str, Any]:
        """Update the properties of an existing page."""
        return await self._request("PATCH", f"/pages/{page_id}", json={"properties": properties})
