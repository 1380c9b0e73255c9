"""Plain-text helpers shared by the tool components."""

from typing import Any


def format_results_header(noun: str, results: list[Any], response: dict[str, Any]) -> str:
    """Build the summary line above a result list.

    Includes the total size when Confluence reports one and it differs from
    the number of results on this page.
    """
    if not results:
        return f"No {noun} found."

    header = f"Found {len(results)} {noun}"
    total = response.get("totalSize", response.get("size"))
    if isinstance(total, int) and total > len(results):
        header += f" (of {total})"
    return header + ":"


def page_link(base_url: str, item: dict[str, Any]) -> str | None:
    """Resolve the web UI link of a page or search result, if present."""
    links = item.get("_links") or {}
    webui = links.get("webui")
    if not webui:
        return None
    return f"{base_url}{webui}"
