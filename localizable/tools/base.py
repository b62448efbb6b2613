"""Interfaces for the external command-line tools."""

from typing import Protocol


class TextSearcher(Protocol):
    """Recursive text search over strings files."""

    def search(self, root_dir: str, needle: str) -> str:
        """Return the raw line-oriented output of the search."""
        ...

    def cancel(self) -> None:
        """Stop a running search, if any."""
        ...


class PropertyListNormalizer(Protocol):
    """Rewrites a property list file in place as XML."""

    def normalize(self, file_path: str) -> None:
        ...
