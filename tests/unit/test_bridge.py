"""Unit tests for the ToolBridge invocation path."""

import asyncio
import logging

import pytest

from confluence_mcp_server.tools import (
    ToolDiscoveryService,
    ToolNotFoundError,
    ToolOutcome,
    ToolRegistry,
    ai_tool,
)
from confluence_mcp_server.tools.bridge import ToolBridge


class Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("cannot render")


class AwkwardResults:
    """Tools whose return values cannot be turned into text."""

    @ai_tool(name="tuple-keys")
    def tuple_keys(self) -> dict:
        return {(1, 2): "x"}

    @ai_tool(name="circular")
    def circular(self) -> list:
        items: list = []
        items.append(items)
        return items

    @ai_tool(name="unprintable")
    def unprintable(self) -> Unprintable:
        return Unprintable()


@pytest.fixture
def awkward_bridge():
    registry = ToolRegistry()
    ToolDiscoveryService().discover(registry, [AwkwardResults()])
    return ToolBridge(registry)


class TestParseInput:
    @pytest.mark.parametrize("raw", [None, "", "   ", b"", "null"])
    def test_empty_input_is_empty_mapping(self, raw):
        assert ToolBridge.parse_input(raw) == {}

    @pytest.mark.parametrize("raw", ["not json", "{", '{"a": }', "[1, 2]", '"text"', "42"])
    def test_malformed_or_non_object_input_is_empty_mapping(self, raw, caplog):
        with caplog.at_level(logging.WARNING):
            assert ToolBridge.parse_input(raw) == {}

    def test_object_input_keeps_key_order(self):
        parsed = ToolBridge.parse_input('{"b": 1, "a": [true, null]}')

        assert parsed == {"b": 1, "a": [True, None]}
        assert list(parsed) == ["b", "a"]

    def test_bytes_input(self):
        assert ToolBridge.parse_input(b'{"message": "hi"}') == {"message": "hi"}


class TestCall:
    def test_echo_round_trip(self, echo_bridge):
        assert echo_bridge.call("echo", '{"message": "hello"}') == "hello"

    def test_echo_with_empty_object_returns_null(self, echo_bridge):
        assert echo_bridge.call("echo", "{}") == "null"

    def test_malformed_input_proceeds_with_no_arguments(self, echo_bridge):
        assert echo_bridge.call("echo", "not json") == "null"

    def test_matches_direct_invocation(self, echo_bridge, echo_tools):
        assert echo_bridge.call("add", '{"a": 2, "b": 40}') == str(echo_tools.add(2, 40))

    def test_numeric_strings_are_coerced(self, echo_bridge):
        assert echo_bridge.call("add", '{"a": "2", "b": 3.9}') == "5"

    def test_string_target_stringifies(self, echo_bridge):
        assert echo_bridge.call("echo", '{"message": 12}') == "12"

    def test_boolean_coercion(self, echo_bridge):
        assert echo_bridge.call("flag", '{"enabled": true}') == "on"
        assert echo_bridge.call("flag", '{"enabled": "TRUE"}') == "on"
        assert echo_bridge.call("flag", '{"enabled": "nope"}') == "off"

    def test_passthrough_types(self, echo_bridge):
        result = echo_bridge.call(
            "describe",
            '{"count": "3", "ratio": 0.5, "tags": ["x", "y"], "extra": {"k": 1}}',
        )

        assert result == "3|0.5|['x', 'y']|{'k': 1}"

    def test_none_result_is_null(self, echo_bridge):
        assert echo_bridge.call("nothing", "") == "null"

    def test_idempotent_for_side_effect_free_tool(self, echo_bridge):
        first = echo_bridge.call("add", '{"a": 1, "b": 1}')
        second = echo_bridge.call("add", '{"a": 1, "b": 1}')

        assert first == second == "2"

    def test_async_tool_is_awaited(self, echo_bridge):
        assert echo_bridge.call("slow-echo", '{"message": "hi"}') == "async:hi"

    def test_unknown_tool_raises(self, echo_bridge):
        with pytest.raises(ToolNotFoundError):
            echo_bridge.call("missing", "{}")


class TestFailures:
    def test_method_exception_becomes_error_text(self, echo_bridge, caplog):
        with caplog.at_level(logging.ERROR):
            result = echo_bridge.call("fail", '{"reason": "quota exceeded"}')

        assert result == "Error executing tool: quota exceeded"
        assert "Error executing @ai_tool fail" in caplog.text

    def test_coercion_failure_becomes_error_text(self, echo_bridge):
        result = echo_bridge.call("add", '{"a": "one", "b": 2}')

        assert result.startswith("Error executing tool: ")
        assert "one" in result

    def test_missing_arguments_never_raise(self, echo_bridge):
        # add(None, None) fails inside the method; the bridge reports it as text
        result = echo_bridge.call("add", "{}")

        assert result.startswith("Error executing tool: ")

    def test_empty_exception_message_uses_type_name(self, echo_bridge):
        result = echo_bridge.call("fail", '{"reason": ""}')

        assert result == "Error executing tool: RuntimeError"

    @pytest.mark.parametrize("tool_name", ["tuple-keys", "circular", "unprintable"])
    def test_unrenderable_result_becomes_error_text(self, awkward_bridge, tool_name):
        """Test that a result which cannot be turned into text is still a string."""
        result = awkward_bridge.call(tool_name, "{}")

        assert isinstance(result, str)
        assert result.startswith("Error executing tool: ")

    def test_unrenderable_result_outcome(self, awkward_bridge):
        outcome = awkward_bridge.execute("unprintable", "{}")

        assert outcome.ok is False
        assert outcome.error == "cannot render"
        assert outcome.render() == "Error executing tool: cannot render"

    @pytest.mark.asyncio
    async def test_async_tool_inside_running_loop_is_reported(self, echo_bridge):
        # A running event loop in the calling thread cannot be blocked on
        result = echo_bridge.call("slow-echo", '{"message": "hi"}')

        assert result.startswith("Error executing tool: ")


class TestExecute:
    def test_success_outcome(self, echo_bridge):
        outcome = echo_bridge.execute("flag", '{"enabled": false}')

        assert outcome == ToolOutcome(
            tool_name="flag", ok=True, value="off", text="off", return_direct=True
        )
        assert outcome.render() == "off"

    def test_failure_outcome(self, echo_bridge):
        outcome = echo_bridge.execute("fail", '{"reason": "boom"}')

        assert outcome.ok is False
        assert outcome.error == "boom"
        assert outcome.value is None
        assert outcome.render() == "Error executing tool: boom"

    def test_raw_value_is_kept(self, echo_bridge):
        outcome = echo_bridge.execute("add", '{"a": 1, "b": 2}')

        assert outcome.value == 3
        assert outcome.render() == "3"


def test_concurrent_calls_share_registry(echo_bridge):
    """Test that calls from worker threads do not interfere."""

    async def run_all():
        return await asyncio.gather(
            *[
                asyncio.to_thread(echo_bridge.call, "add", f'{{"a": {i}, "b": {i}}}')
                for i in range(20)
            ]
        )

    results = asyncio.run(run_all())

    assert results == [str(i * 2) for i in range(20)]
