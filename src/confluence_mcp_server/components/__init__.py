"""Business components exposing Confluence operations as tools.

Each component is a plain class whose ``@ai_tool`` methods are picked up by
the discovery scanner at startup.
"""

from confluence_mcp_server.components.pages import ConfluencePagesTools
from confluence_mcp_server.components.search import ConfluenceSearchTools
from confluence_mcp_server.components.spaces import ConfluenceSpacesTools
from confluence_mcp_server.confluence import ConfluenceClient

__all__ = [
    "ConfluencePagesTools",
    "ConfluenceSearchTools",
    "ConfluenceSpacesTools",
    "build_components",
]


def build_components(client: ConfluenceClient, default_limit: int = 25) -> list[object]:
    """Create the component instances handed to tool discovery."""
    return [
        ConfluenceSpacesTools(client, default_limit=default_limit),
        ConfluencePagesTools(client, default_limit=default_limit),
        ConfluenceSearchTools(client, default_limit=default_limit),
    ]
