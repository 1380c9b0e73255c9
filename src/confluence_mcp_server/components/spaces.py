"""Tools for Confluence spaces."""

import logging

from confluence_mcp_server.components.formatting import format_results_header
from confluence_mcp_server.confluence import ConfluenceClient
from confluence_mcp_server.tools import ai_tool

logger = logging.getLogger(__name__)


class ConfluenceSpacesTools:
    """Space listing and lookup."""

    def __init__(self, client: ConfluenceClient, default_limit: int = 25) -> None:
        self.client = client
        self.default_limit = default_limit

    @ai_tool(
        name="list-spaces",
        description="List Confluence spaces, optionally filtered by key, type and status",
    )
    def list_spaces(
        self,
        keys: list[str] | None = None,
        space_type: str | None = None,
        status: str | None = None,
        limit: int | None = None,
    ) -> str:
        logger.debug(f"list-spaces called with keys={keys} type={space_type} status={status}")
        response = self.client.list_spaces(
            keys=keys,
            space_type=space_type,
            status=status,
            limit=limit or self.default_limit,
        )
        spaces = response.get("results", [])

        lines = [format_results_header("spaces", spaces, response)]
        for space in spaces:
            lines.append(
                f"- {space.get('key')}: {space.get('name')} "
                f"(type: {space.get('type', 'unknown')}, status: {space.get('status', 'unknown')})"
            )
        return "\n".join(lines)

    @ai_tool(name="get-space", description="Get details about a Confluence space by key")
    def get_space(self, space_key: str) -> str:
        if not space_key:
            raise ValueError("space_key is required")

        space = self.client.get_space(space_key)
        plain = (space.get("description") or {}).get("plain") or {}
        description = plain.get("value") or ""
        homepage = space.get("homepage") or {}

        lines = [
            f"# {space.get('name')} ({space.get('key')})",
            f"ID: {space.get('id')}",
            f"Type: {space.get('type', 'unknown')}",
            f"Status: {space.get('status', 'unknown')}",
        ]
        if homepage:
            lines.append(f"Homepage: {homepage.get('title')} (ID: {homepage.get('id')})")
        if description:
            lines.extend(["", description])
        return "\n".join(lines)
