"""
Path utilities for deckhand.

Provides consistent path resolution for configuration files.
"""

import os
from pathlib import Path

CONFIG_FILE_NAME = "config.yaml"
PROJECT_DIR_NAME = ".deckhand"


def get_deckhand_home() -> Path:
    """
    Get the deckhand home directory.

    Resolution order:
    1. DECKHAND_HOME environment variable
    2. Default: ~/.deckhand

    Returns:
        Path to the deckhand home directory.
    """
    env_home = os.environ.get("DECKHAND_HOME")
    if env_home:
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".deckhand"


def get_global_config_path() -> Path:
    """
    Get the path to the global configuration file.

    Returns:
        Path to ~/.deckhand/config.yaml
    """
    return get_deckhand_home() / CONFIG_FILE_NAME


def find_project_config(start_path: Path | None = None) -> Path | None:
    """
    Find the project configuration file by traversing up the directory tree.

    Looks for .deckhand/config.yaml starting from the given path
    (or current directory) and moving up to the root.

    Args:
        start_path: Starting directory to search from. Defaults to cwd.

    Returns:
        Path to the project config if found, None otherwise.
    """
    current = Path.cwd() if start_path is None else Path(start_path).resolve()
    global_config = get_global_config_path().resolve()

    for directory in (current, *current.parents):
        project_config = directory / PROJECT_DIR_NAME / CONFIG_FILE_NAME
        if project_config.resolve() == global_config:
            continue
        if project_config.is_file():
            return project_config

    return None
