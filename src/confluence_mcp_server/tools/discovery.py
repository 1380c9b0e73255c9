"""Tool discovery over component instances.

The discovery scanner walks the component instances it is handed, picks out
methods carrying the ``@ai_tool`` marker and builds one ToolDefinition per
marked method. Discovery runs once at startup and populates a ToolRegistry.
"""

import logging
from typing import Any, Iterable

from confluence_mcp_server.tools.definition import ToolDefinition
from confluence_mcp_server.tools.marker import ToolMarker, get_marker
from confluence_mcp_server.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDED_MODULE_PREFIXES: tuple[str, ...] = (
    "fastapi.",
    "starlette.",
    "pydantic.",
    "unittest.mock",
)


class ToolDiscoveryService:
    """Scans component instances for ``@ai_tool`` methods.

    Attributes:
        excluded_module_prefixes: Candidates whose class lives in a module
            starting with one of these prefixes are skipped entirely. This
            keeps framework objects and generated proxies out of the scan.
    """

    def __init__(
        self,
        excluded_module_prefixes: Iterable[str] = DEFAULT_EXCLUDED_MODULE_PREFIXES,
    ) -> None:
        self.excluded_module_prefixes = tuple(excluded_module_prefixes)

    def scan(self, candidates: Iterable[Any]) -> list[ToolDefinition]:
        """Build tool definitions for every marked method of every candidate.

        A failure while inspecting one candidate is logged and the scan moves
        on to the next candidate.

        Args:
            candidates: Component instances to inspect.

        Returns:
            list[ToolDefinition]: Definitions in discovery order. Names may
            repeat; the registry keeps the last one.
        """
        definitions: list[ToolDefinition] = []

        for candidate in candidates:
            candidate_type = type(candidate)
            if self.is_excluded(candidate_type):
                logger.debug(f"Skipping excluded candidate: {candidate_type.__qualname__}")
                continue

            try:
                found = self._scan_candidate(candidate)
            except Exception as e:
                logger.warning(
                    f"Skipping candidate {candidate_type.__qualname__} due to error: {e}"
                )
                continue

            definitions.extend(found)

        return definitions

    def discover(self, registry: ToolRegistry, candidates: Iterable[Any]) -> int:
        """Run discovery into ``registry`` and mark it ready.

        Args:
            registry: A registry in the UNINITIALIZED state.
            candidates: Component instances to inspect.

        Returns:
            int: Number of definitions registered, counting overwritten ones.

        Raises:
            RegistryStateError: If the registry has already been populated.
        """
        logger.info("Starting @ai_tool discovery...")
        registry.begin_discovery()

        definitions = self.scan(candidates)
        for definition in definitions:
            registry.register(definition)

        registry.mark_ready()
        logger.info(f"@ai_tool discovery completed. Found {len(definitions)} tools.")
        return len(definitions)

    def is_excluded(self, candidate_type: type) -> bool:
        module = candidate_type.__module__ or ""
        return module.startswith(self.excluded_module_prefixes)

    def _scan_candidate(self, candidate: Any) -> list[ToolDefinition]:
        definitions = []
        for attribute, marker in _marked_members(type(candidate)):
            method = getattr(candidate, attribute)
            definition = _build_definition(method, attribute, marker)
            definitions.append(definition)
            logger.info(
                f"Registered @ai_tool: {definition.name} - {definition.description} "
                f"(method: {type(candidate).__name__}.{attribute})"
            )
        return definitions


def _marked_members(candidate_type: type) -> list[tuple[str, ToolMarker]]:
    """Marked attributes of a class in declaration order, subclasses overriding."""
    members: dict[str, Any] = {}
    for klass in reversed(candidate_type.__mro__):
        for attribute, value in vars(klass).items():
            members[attribute] = value

    marked = []
    for attribute, value in members.items():
        marker = get_marker(value)
        if marker is not None:
            marked.append((attribute, marker))
    return marked


def _build_definition(method: Any, attribute: str, marker: ToolMarker) -> ToolDefinition:
    return ToolDefinition.from_callable(
        method,
        name=marker.name or attribute,
        description=marker.description,
        return_direct=marker.return_direct,
    )
