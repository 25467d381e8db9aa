"""
Pydantic configuration schema for deckhand.

This module defines all configuration models with validation.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MODEL = "anthropic/claude-sonnet-4-20250514"

DEFAULT_SYSTEM_PROMPT = """\
You are deckhand, an interactive coding assistant running in the terminal.

You have access to these tools:
- bash: Execute shell commands (runs in current working directory)
- read_file: Read file contents
- write_file: Create or modify files

Guidelines:
- Use bash to explore projects, run tests, git operations, etc.
- Read files before modifying them to understand context
- Be concise and focused on solving the user's problem
- When making changes, explain what you're doing briefly
"""

# =============================================================================
# Provider Configuration
# =============================================================================


class ProviderConfig(BaseModel):
    """Provider and model configuration."""

    model_config = ConfigDict(extra="allow")

    default: str = DEFAULT_MODEL
    aliases: dict[str, str] = Field(default_factory=dict)
    max_tokens: int = Field(default=8192, ge=1)
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)


# =============================================================================
# Agent Configuration
# =============================================================================


class AgentConfigSchema(BaseModel):
    """Conversation engine configuration."""

    model_config = ConfigDict(extra="allow")

    max_turns: int = Field(
        default=100,
        ge=1,
        description="Maximum model turns (tool round trips) per user turn",
    )
    system_prompt: str | None = DEFAULT_SYSTEM_PROMPT


# =============================================================================
# Tool Configuration
# =============================================================================


class ToolsConfig(BaseModel):
    """Command runner policy for the bash tool."""

    model_config = ConfigDict(extra="allow")

    shell: str = "bash"
    warning_timeout: float = Field(default=60.0, gt=0)
    max_output_bytes: int = Field(default=50 * 1024, ge=1)


# =============================================================================
# Logging Configuration
# =============================================================================


class LoggingConfig(BaseModel):
    """Diagnostic logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    file: Path | None = None


# =============================================================================
# Root Configuration Model
# =============================================================================


class Config(BaseModel):
    """
    Root configuration model for deckhand.

    Configuration can be loaded from YAML files and environment
    variables, merged in order of priority.
    """

    model_config = ConfigDict(extra="allow")

    providers: ProviderConfig = Field(default_factory=ProviderConfig)
    agent: AgentConfigSchema = Field(default_factory=AgentConfigSchema)
    tools: ToolsConfig = Field(default_factory=ToolsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def get_default_model(self) -> str:
        """Get the default model, resolving aliases if needed."""
        model = self.providers.default
        return self.providers.aliases.get(model, model)
