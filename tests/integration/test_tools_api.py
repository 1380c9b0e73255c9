"""Integration tests for the REST tools API."""

import pytest

from confluence_mcp_server.confluence import ConfluenceError

CONFLUENCE_TOOLS = [
    "create-page",
    "get-page",
    "get-space",
    "list-pages",
    "list-spaces",
    "search",
    "update-page",
]


@pytest.mark.asyncio
async def test_list_tools(async_client):
    """Test listing every discovered Confluence tool."""
    response = await async_client.get("/api/v1/tools")

    assert response.status_code == 200
    tools = response.json()["tools"]
    assert sorted(t["name"] for t in tools) == CONFLUENCE_TOOLS
    for tool in tools:
        assert tool["description"]
        assert tool["input_schema"]["type"] == "object"


@pytest.mark.asyncio
async def test_get_tool(async_client):
    """Test retrieving a single tool definition."""
    response = await async_client.get("/api/v1/tools/get-page")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "get-page"
    assert data["return_direct"] is False
    assert data["input_schema"]["properties"]["page_id"] == {
        "type": "string",
        "description": "Parameter page_id of type str",
    }
    assert data["input_schema"]["required"] == ["page_id", "body_format"]


@pytest.mark.asyncio
async def test_get_tool_not_found(async_client):
    """Test 404 for an unknown tool."""
    response = await async_client.get("/api/v1/tools/delete-everything")

    assert response.status_code == 404
    assert "not found" in response.json()["detail"].lower()


@pytest.mark.asyncio
async def test_call_tool_success(async_client, mock_confluence_client):
    """Test calling a tool with a JSON argument body."""
    response = await async_client.post(
        "/api/v1/tools/list-spaces/call",
        content='{"limit": "2"}',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["tool"] == "list-spaces"
    assert data["is_error"] is False
    assert data["result"].startswith("Found 2 spaces:")
    assert "- OPS: Operations" in data["result"]
    mock_confluence_client.list_spaces.assert_called_once_with(
        keys=None, space_type=None, status=None, limit=2
    )


@pytest.mark.asyncio
async def test_call_tool_empty_body(async_client, mock_confluence_client):
    """Test that an empty body is treated as an empty argument object."""
    response = await async_client.post("/api/v1/tools/search/call")

    assert response.status_code == 200
    data = response.json()
    assert data["is_error"] is True
    assert data["result"] == "Error executing tool: cql is required"
    mock_confluence_client.search.assert_not_called()


@pytest.mark.asyncio
async def test_call_tool_malformed_body(async_client, mock_confluence_client):
    """Test that a malformed body degrades to no arguments instead of failing."""
    response = await async_client.post(
        "/api/v1/tools/list-spaces/call", content="{not json"
    )

    assert response.status_code == 200
    assert response.json()["is_error"] is False
    mock_confluence_client.list_spaces.assert_called_once_with(
        keys=None, space_type=None, status=None, limit=10
    )


@pytest.mark.asyncio
async def test_call_tool_failure_is_reported_in_band(async_client, mock_confluence_client):
    """Test that a Confluence failure comes back as error text with status 200."""
    mock_confluence_client.get_space.side_effect = ConfluenceError(
        "Confluence API returned 403 for GET /rest/api/space/SECRET", status_code=403
    )

    response = await async_client.post(
        "/api/v1/tools/get-space/call", json={"space_key": "SECRET"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["is_error"] is True
    assert data["result"] == (
        "Error executing tool: Confluence API returned 403 for GET /rest/api/space/SECRET"
    )


@pytest.mark.asyncio
async def test_call_tool_not_found(async_client):
    """Test 404 when calling an unknown tool."""
    response = await async_client.post("/api/v1/tools/missing/call", json={})

    assert response.status_code == 404
