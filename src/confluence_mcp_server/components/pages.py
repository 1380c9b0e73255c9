"""Tools for Confluence pages."""

import logging
from typing import Any

from confluence_mcp_server.components.formatting import format_results_header, page_link
from confluence_mcp_server.confluence import ConfluenceClient
from confluence_mcp_server.tools import ai_tool

logger = logging.getLogger(__name__)


class ConfluencePagesTools:
    """Page listing, retrieval, creation and update."""

    def __init__(self, client: ConfluenceClient, default_limit: int = 25) -> None:
        self.client = client
        self.default_limit = default_limit

    @ai_tool(name="list-pages", description="List Confluence pages with optional filtering")
    def list_pages(
        self,
        space_key: str | None = None,
        title: str | None = None,
        status: str | None = None,
        limit: int | None = None,
    ) -> str:
        logger.debug(f"list-pages called with space_key={space_key} title={title}")
        response = self.client.list_pages(
            space_key=space_key,
            title=title,
            status=status,
            limit=limit or self.default_limit,
        )
        pages = response.get("results", [])

        lines = [format_results_header("pages", pages, response)]
        for page in pages:
            space = (page.get("space") or {}).get("key", "?")
            version = (page.get("version") or {}).get("number", "?")
            lines.append(
                f"- {page.get('title')} (ID: {page.get('id')}, space: {space}, version: {version})"
            )
        return "\n".join(lines)

    @ai_tool(
        name="get-page",
        description="Get detailed information about a specific Confluence page",
    )
    def get_page(self, page_id: str, body_format: str | None = None) -> str:
        if not page_id:
            raise ValueError("page_id is required")

        body_format = body_format or "storage"
        page = self.client.get_page(page_id, body_format=body_format)
        body = ((page.get("body") or {}).get(body_format) or {}).get("value", "")

        lines = [f"# {page.get('title')}", *self._describe(page)]
        ancestors = page.get("ancestors") or []
        if ancestors:
            lines.append("Path: " + " > ".join(a.get("title", "?") for a in ancestors))
        lines.extend(["", body])
        return "\n".join(lines)

    @ai_tool(name="create-page", description="Create a new page in Confluence")
    def create_page(
        self,
        space_key: str,
        title: str,
        content: str,
        parent_id: str | None = None,
        representation: str | None = None,
    ) -> str:
        if not space_key or not title:
            raise ValueError("space_key and title are required")

        page = self.client.create_page(
            space_key=space_key,
            title=title,
            content=content or "",
            parent_id=parent_id,
            representation=representation or "storage",
        )
        logger.info(f"Created page {page.get('id')} in space {space_key}")
        return "\n".join([f"Created page: {page.get('title')}", *self._describe(page)])

    @ai_tool(name="update-page", description="Update an existing page in Confluence")
    def update_page(
        self,
        page_id: str,
        title: str | None = None,
        content: str | None = None,
        version: int | None = None,
        representation: str | None = None,
    ) -> str:
        """Update a page. Without an explicit version, the current version is bumped."""
        if not page_id:
            raise ValueError("page_id is required")

        representation = representation or "storage"
        if version is None or title is None or content is None:
            current = self.client.get_page(page_id, body_format=representation)
            if version is None:
                version = (current.get("version") or {}).get("number", 0) + 1
            if title is None:
                title = current.get("title", "")
            if content is None:
                content = ((current.get("body") or {}).get(representation) or {}).get(
                    "value", ""
                )

        page = self.client.update_page(
            page_id=page_id,
            title=title,
            content=content,
            version=version,
            representation=representation,
        )
        logger.info(f"Updated page {page_id} to version {version}")
        return "\n".join([f"Updated page: {page.get('title')}", *self._describe(page)])

    def _describe(self, page: dict[str, Any]) -> list[str]:
        lines = [
            f"ID: {page.get('id')}",
            f"Space: {(page.get('space') or {}).get('key', '?')}",
            f"Version: {(page.get('version') or {}).get('number', '?')}",
            f"Status: {page.get('status', 'unknown')}",
        ]
        link = page_link(self.client.base_url, page)
        if link:
            lines.append(f"URL: {link}")
        return lines
