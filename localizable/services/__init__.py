"""Stateful command handlers for the search and convert workflows."""

from .search_service import SearchService, SearchState
from .convert_service import ConvertService, ConvertState
from .workspace import Workspace

__all__ = ["SearchService", "SearchState", "ConvertService", "ConvertState", "Workspace"]
