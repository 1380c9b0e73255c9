"""Configuration module for confluence-mcp-server using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from confluence_mcp_server.tools.discovery import DEFAULT_EXCLUDED_MODULE_PREFIXES


class ConfluenceMcpSettings(BaseSettings):
    """Main configuration settings for confluence-mcp-server.

    All settings can be overridden via environment variables with the
    CONFLUENCE_MCP_ prefix. For example, CONFLUENCE_MCP_CONFLUENCE_BASE_URL
    will override the confluence_base_url setting.
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8080

    # Confluence
    confluence_base_url: str = "http://localhost:8090"
    confluence_username: str | None = None
    confluence_api_token: str = ""
    confluence_timeout_seconds: float = 30.0
    default_page_limit: int = 25

    # Tool discovery
    excluded_module_prefixes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDED_MODULE_PREFIXES)
    )

    # MCP protocol
    protocol_version: str = "2025-03-26"

    # CORS
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="CONFLUENCE_MCP_")
