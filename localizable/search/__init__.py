"""Substring location and project search."""

from .locator import find_spans, segment, highlight
from .results import parse_search_output, search_project, find_dependency_dir, load_preview

__all__ = [
    "find_spans",
    "segment",
    "highlight",
    "parse_search_output",
    "search_project",
    "find_dependency_dir",
    "load_preview",
]
