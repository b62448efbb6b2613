"""Data models for search results and highlighted previews."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass(frozen=True)
class MatchSpan:
    """Half-open [start, end) range of a case-insensitive match."""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Segment:
    """A fragment of text, either plain or covered by a match."""

    text: str
    highlighted: bool = False


@dataclass(frozen=True)
class SearchHit:
    """A file found to contain the search text."""

    file_path: str
    snippet: str = ""

    @property
    def file_name(self) -> str:
        """Last path component, for display."""
        return Path(self.file_path).name


@dataclass
class FilePreview:
    """Content of a selected hit together with the spans to highlight."""

    file_path: str
    content: str
    spans: List[MatchSpan] = field(default_factory=list)

    @property
    def match_count(self) -> int:
        return len(self.spans)

    def segments(self) -> List[Segment]:
        """Split the content into plain and highlighted fragments."""
        from ..search.locator import segment

        return segment(self.content, self.spans)
