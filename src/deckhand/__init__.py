"""
deckhand - terminal assistant

Lets a conversational model read files, write files and run shell
commands on the local machine, one turn at a time.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("deckhand")
except PackageNotFoundError:
    __version__ = "0.1.0"

__all__ = [
    "__version__",
]
