"""Base classes for tool implementation."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from deckhand.tools.models import ToolParameter, ToolResult


class ToolExecutionError(Exception):
    """Raised when tool execution fails at the infrastructure level."""

    def __init__(self, message: str, exit_code: Optional[int] = None):
        """Initialize error.

        Args:
            message: Display message handed back to the model
            exit_code: Optional exit code
        """
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class Tool(ABC):
    """Base class for all tools.

    A tool is a named, schema-described action the model may request.
    Each tool defines:
    - Name and description (for the model to decide when to use it)
    - Input parameters (rendered as a JSON schema)
    - Execution logic returning a ToolResult
    """

    def __init__(self):
        """Initialize the tool."""
        self._validate_definition()
        self._definition: dict[str, Any] | None = None

    @property
    @abstractmethod
    def name(self) -> str:
        """Tool name (must be unique)."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Description of what the tool does (for the model)."""

    @property
    @abstractmethod
    def parameters(self) -> list[ToolParameter]:
        """List of tool parameters."""

    def get_parameters_schema(self) -> dict[str, Any]:
        """Get JSON schema for tool input.

        Returns:
            Object schema with ``type``, ``properties`` and ``required``
        """
        properties: dict[str, Any] = {}
        required: list[str] = []

        for param in self.parameters:
            param_schema: dict[str, Any] = {
                "type": param.type,
                "description": param.description,
            }

            if param.enum:
                param_schema["enum"] = param.enum

            if param.default is not None:
                param_schema["default"] = param.default

            properties[param.name] = param_schema

            if param.required:
                required.append(param.name)

        return {
            "type": "object",
            "properties": properties,
            "required": required,
        }

    def get_tool_definition(self) -> dict[str, Any]:
        """Get the tool descriptor surfaced to the conversation engine.

        The descriptor is built once and a fresh copy is returned on every
        call, so callers can not alter the tool's declaration.

        Returns:
            ``{"name", "description", "parameters"}`` descriptor
        """
        if self._definition is None:
            self._definition = {
                "name": self.name,
                "description": self.description,
                "parameters": self.get_parameters_schema(),
            }
        parameters = self._definition["parameters"]
        return {
            "name": self._definition["name"],
            "description": self._definition["description"],
            "parameters": {
                "type": parameters["type"],
                "properties": {k: dict(v) for k, v in parameters["properties"].items()},
                "required": list(parameters["required"]),
            },
        }

    @abstractmethod
    async def execute(self, **kwargs) -> ToolResult:
        """Execute the tool with given parameters.

        Args:
            **kwargs: Tool parameters, plus the internal ``tool_call_id``

        Returns:
            ToolResult with output or error
        """

    def validate_input(self, **kwargs) -> None:
        """Validate input parameters.

        Args:
            **kwargs: Tool parameters

        Raises:
            ValueError: If parameters are invalid
        """
        param_names = {p.name for p in self.parameters}
        required_params = {p.name for p in self.parameters if p.required}

        provided = set(kwargs.keys())

        # Allow special internal parameters
        internal_params = {"tool_call_id"}

        unknown = provided - param_names - internal_params
        if unknown:
            raise ValueError(f"Unknown parameters: {', '.join(sorted(unknown))}")

        missing = required_params - provided
        if missing:
            raise ValueError(f"Missing required parameters: {', '.join(sorted(missing))}")

        for param in self.parameters:
            if param.type == "string" and param.name in kwargs:
                if not isinstance(kwargs[param.name], str):
                    raise ValueError(f"Parameter '{param.name}' must be a string")

    def _validate_definition(self) -> None:
        """Validate tool definition is correct.

        Raises:
            ValueError: If tool definition is invalid
        """
        if not self.name:
            raise ValueError("Tool name cannot be empty")

        if not self.description:
            raise ValueError("Tool description cannot be empty")

        param_names = [p.name for p in self.parameters]
        if len(param_names) != len(set(param_names)):
            raise ValueError("Parameter names must be unique")

    def __str__(self) -> str:
        """String representation."""
        return f"Tool({self.name})"

    def __repr__(self) -> str:
        """Representation."""
        return f"<Tool name={self.name}>"
