"""Storage utilities for deckhand."""

from deckhand.storage.paths import (
    find_project_config,
    get_deckhand_home,
    get_global_config_path,
)

__all__ = [
    "find_project_config",
    "get_deckhand_home",
    "get_global_config_path",
]
