"""CLI entry point for confluence-mcp-server.

This module provides the command-line interface for starting the server.
It can be invoked as `confluence-mcp-server` (via the script entry point) or
`python -m confluence_mcp_server`.
"""

import argparse
import logging
import sys

import uvicorn

from confluence_mcp_server import __version__, create_app
from confluence_mcp_server.config import ConfluenceMcpSettings


def main() -> None:
    """Main entry point for the confluence-mcp-server CLI.

    Parses command-line arguments and starts the uvicorn server with the
    FastAPI application.
    """
    parser = argparse.ArgumentParser(
        prog="confluence-mcp-server",
        description="MCP server exposing Confluence operations as discoverable tools",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"confluence-mcp-server {__version__}",
    )

    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to bind the server to (default: 127.0.0.1, can be set via CONFLUENCE_MCP_HOST)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind the server to (default: 8080, can be set via CONFLUENCE_MCP_PORT)",
    )

    parser.add_argument(
        "--confluence-url",
        type=str,
        default=None,
        help="Confluence base URL (can be set via CONFLUENCE_MCP_CONFLUENCE_BASE_URL)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO, can be set via CONFLUENCE_MCP_LOG_LEVEL)",
    )

    args = parser.parse_args()

    # Build settings, CLI args override environment variables
    settings_kwargs = {}
    if args.host is not None:
        settings_kwargs["host"] = args.host
    if args.port is not None:
        settings_kwargs["port"] = args.port
    if args.confluence_url is not None:
        settings_kwargs["confluence_base_url"] = args.confluence_url
    if args.log_level is not None:
        settings_kwargs["log_level"] = args.log_level

    settings = ConfluenceMcpSettings(**settings_kwargs)

    # Log to stderr so stdout stays free for protocol traffic
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )

    # Create the FastAPI app
    app = create_app(settings=settings)

    # Start uvicorn
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    sys.exit(main())
