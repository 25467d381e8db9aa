"""Tests for tool registry."""

import pytest

from deckhand.execution.runner import CommandRunner
from deckhand.tools.base import Tool
from deckhand.tools.builtin import BashTool, create_builtin_registry
from deckhand.tools.models import ToolParameter, ToolResult
from deckhand.tools.registry import ToolRegistry


class SimpleTool(Tool):
    """Simple tool for testing."""

    @property
    def name(self) -> str:
        return "simple_tool"

    @property
    def description(self) -> str:
        return "A simple tool"

    @property
    def parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="input", type="string", description="Input", required=True
            )
        ]

    async def execute(self, **kwargs) -> ToolResult:
        return ToolResult(
            tool_call_id=kwargs.get("tool_call_id", "unknown"),
            output="Simple output",
        )


class TestToolRegistry:
    """Tests for ToolRegistry."""

    def test_register_and_get(self):
        """Test tool registration."""
        registry = ToolRegistry()
        tool = SimpleTool()

        registry.register(tool)

        assert registry.get("simple_tool") is tool
        assert "simple_tool" in registry
        assert len(registry) == 1

    def test_register_duplicate(self):
        """Test registering the same name twice."""
        registry = ToolRegistry()
        registry.register(SimpleTool())

        with pytest.raises(ValueError, match="already registered"):
            registry.register(SimpleTool())

    def test_get_missing(self):
        """Test getting an unknown tool."""
        registry = ToolRegistry()

        assert registry.get("nope") is None
        assert "nope" not in registry

    def test_get_tool_definitions(self):
        """Test descriptors for all tools."""
        registry = ToolRegistry()
        registry.register(SimpleTool())

        definitions = registry.get_tool_definitions()

        assert len(definitions) == 1
        assert definitions[0]["name"] == "simple_tool"
        assert definitions[0]["parameters"]["required"] == ["input"]

    def test_repr(self):
        registry = ToolRegistry()
        registry.register(SimpleTool())
        assert repr(registry) == "<ToolRegistry tools=[simple_tool]>"


class TestBuiltinRegistry:
    """Tests for the built-in tool set."""

    def test_builtin_tools_in_order(self):
        """Test the closed set of built-in tools."""
        registry = create_builtin_registry()

        assert registry.list_tool_names() == ["read_file", "write_file", "bash"]

    def test_runner_is_passed_to_bash(self):
        """Test the bash tool uses the supplied runner."""
        runner = CommandRunner(warning_timeout=5, max_output_bytes=100)
        registry = create_builtin_registry(runner)

        bash = registry.get("bash")
        assert isinstance(bash, BashTool)
        assert bash.runner is runner

    def test_descriptors(self):
        """Test descriptor declarations of the built-in tools."""
        definitions = {d["name"]: d for d in create_builtin_registry().get_tool_definitions()}

        assert definitions["read_file"]["parameters"]["required"] == ["path"]
        assert definitions["write_file"]["parameters"]["required"] == ["path", "content"]
        assert definitions["bash"]["parameters"]["required"] == ["command"]
        for definition in definitions.values():
            assert definition["parameters"]["type"] == "object"
            assert definition["description"]
