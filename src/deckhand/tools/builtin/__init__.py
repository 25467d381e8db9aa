"""Built-in tools for deckhand.

- read_file: read a UTF-8 text file
- write_file: create or overwrite a file, creating parent directories
- bash: run a shell command and capture its output
"""

from deckhand.tools.builtin.bash import BashTool
from deckhand.tools.builtin.file import ReadFileTool, WriteFileTool
from deckhand.tools.builtin.registry_utils import (
    create_builtin_registry,
    register_builtin_tools,
)

__all__ = [
    "BashTool",
    "ReadFileTool",
    "WriteFileTool",
    "create_builtin_registry",
    "register_builtin_tools",
]
