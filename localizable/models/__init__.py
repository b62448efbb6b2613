"""Data models for the localizable converter."""

from .strings_entry import PropertyEntry, ConversionResult
from .search_result import MatchSpan, Segment, SearchHit, FilePreview

__all__ = [
    "PropertyEntry",
    "ConversionResult",
    "MatchSpan",
    "Segment",
    "SearchHit",
    "FilePreview",
]
