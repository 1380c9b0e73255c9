"""Confluence REST client.

This module provides a thin synchronous wrapper around the Confluence REST
API (``/rest/api``) built on httpx. The client is created once at startup,
shared by all tool components and closed on shutdown. Tool calls run in
worker threads, so the client is synchronous.
"""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

API_PATH = "/rest/api"
USER_AGENT = "confluence-mcp-server/0.1.0"


class ConfluenceError(Exception):
    """Raised when a Confluence API request fails.

    Attributes:
        status_code: HTTP status code, or None for transport failures
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ConfluenceClient:
    """Client for the Confluence spaces, content and search APIs.

    Attributes:
        base_url: The Confluence base URL (e.g., "https://example.atlassian.net/wiki")
        _client: The underlying httpx.Client instance
    """

    def __init__(
        self,
        base_url: str,
        api_token: str = "",
        username: str | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the Confluence client.

        Args:
            base_url: The Confluence base URL
            api_token: API token. Sent as a bearer token, or as the basic-auth
                password when ``username`` is given.
            username: Optional username for basic authentication
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")

        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }
        auth = None
        if username:
            auth = httpx.BasicAuth(username, api_token)
        elif api_token.strip():
            headers["Authorization"] = f"Bearer {api_token.strip()}"
        else:
            logger.warning("No Confluence API token configured; requests are anonymous")

        self._client = httpx.Client(
            base_url=self.base_url,
            headers=headers,
            auth=auth,
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )
        logger.info(f"ConfluenceClient initialized with base URL: {self.base_url}")

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send a request and return the decoded JSON body.

        Raises:
            ConfluenceError: On transport errors and non-2xx responses
        """
        url = f"{API_PATH}{path}"
        if params:
            params = {k: v for k, v in params.items() if v is not None and v != []}
        logger.debug(f"Making {method} request to: {url} params={params}")

        try:
            response = self._client.request(method, url, params=params, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"Confluence API error for {method} {url}: {status}")
            raise ConfluenceError(
                f"Confluence API returned {status} for {method} {url}",
                status_code=status,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Confluence request {method} {url} failed: {e}")
            raise ConfluenceError(f"Confluence request failed: {e}") from e

        return response.json()

    def list_spaces(
        self,
        keys: list[str] | None = None,
        space_type: str | None = None,
        status: str | None = None,
        limit: int | None = None,
        start: int | None = None,
    ) -> dict[str, Any]:
        """List spaces, optionally filtered by keys, type and status."""
        return self._request(
            "GET",
            "/space",
            params={
                "spaceKey": keys,
                "type": space_type,
                "status": status,
                "limit": limit,
                "start": start,
                "expand": "description.plain",
            },
        )

    def get_space(self, space_key: str) -> dict[str, Any]:
        return self._request(
            "GET", f"/space/{space_key}", params={"expand": "description.plain,homepage"}
        )

    def list_pages(
        self,
        space_key: str | None = None,
        title: str | None = None,
        status: str | None = None,
        limit: int | None = None,
        start: int | None = None,
    ) -> dict[str, Any]:
        """List pages, optionally filtered by space, exact title and status."""
        return self._request(
            "GET",
            "/content",
            params={
                "type": "page",
                "spaceKey": space_key,
                "title": title,
                "status": status,
                "limit": limit,
                "start": start,
                "expand": "space,version",
            },
        )

    def get_page(self, page_id: str, body_format: str = "storage") -> dict[str, Any]:
        return self._request(
            "GET",
            f"/content/{page_id}",
            params={"expand": f"body.{body_format},space,version,ancestors"},
        )

    def create_page(
        self,
        space_key: str,
        title: str,
        content: str,
        parent_id: str | None = None,
        representation: str = "storage",
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "type": "page",
            "title": title,
            "space": {"key": space_key},
            "body": {representation: {"value": content, "representation": representation}},
        }
        if parent_id:
            payload["ancestors"] = [{"id": parent_id}]
        return self._request("POST", "/content", json=payload)

    def update_page(
        self,
        page_id: str,
        title: str,
        content: str,
        version: int,
        representation: str = "storage",
    ) -> dict[str, Any]:
        """Replace a page's title and body.

        Args:
            version: The new version number (current version + 1)
        """
        payload = {
            "id": page_id,
            "type": "page",
            "title": title,
            "version": {"number": version},
            "body": {representation: {"value": content, "representation": representation}},
        }
        return self._request("PUT", f"/content/{page_id}", json=payload)

    def search(
        self, cql: str, limit: int | None = None, start: int | None = None
    ) -> dict[str, Any]:
        """Run a CQL search."""
        return self._request(
            "GET", "/search", params={"cql": cql, "limit": limit, "start": start}
        )

    def close(self) -> None:
        self._client.close()
        logger.debug("ConfluenceClient closed")
