"""Tools for Confluence CQL search."""

import logging

from confluence_mcp_server.components.formatting import format_results_header, page_link
from confluence_mcp_server.confluence import ConfluenceClient
from confluence_mcp_server.tools import ai_tool

logger = logging.getLogger(__name__)


class ConfluenceSearchTools:
    """CQL search across spaces."""

    def __init__(self, client: ConfluenceClient, default_limit: int = 25) -> None:
        self.client = client
        self.default_limit = default_limit

    @ai_tool(
        name="search",
        description="Search Confluence content using CQL (Confluence Query Language)",
    )
    def search(self, cql: str, limit: int | None = None) -> str:
        if not cql:
            raise ValueError("cql is required")

        logger.debug(f"search called with cql={cql!r}")
        response = self.client.search(cql, limit=limit or self.default_limit)
        results = response.get("results", [])

        lines = [format_results_header("results", results, response)]
        for result in results:
            content = result.get("content") or {}
            title = result.get("title") or content.get("title", "?")
            line = f"- {title}"
            if content.get("id"):
                line += f" (ID: {content['id']}, type: {content.get('type', '?')})"
            link = page_link(self.client.base_url, result)
            if link:
                line += f" {link}"
            lines.append(line)
            excerpt = (result.get("excerpt") or "").strip()
            if excerpt:
                lines.append(f"  {excerpt}")
        return "\n".join(lines)
