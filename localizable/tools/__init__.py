"""Wrappers for the external search and property list tools."""

from .base import TextSearcher, PropertyListNormalizer
from .grep_searcher import GrepSearcher
from .plutil_normalizer import PlutilNormalizer

__all__ = ["TextSearcher", "PropertyListNormalizer", "GrepSearcher", "PlutilNormalizer"]
