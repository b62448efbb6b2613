"""Case-insensitive match spans and highlighted segments."""

import re
from typing import List, Sequence

from ..models.search_result import MatchSpan, Segment


def find_spans(haystack: str, needle: str) -> List[MatchSpan]:
    """
    Locate every non-overlapping, case-insensitive occurrence of needle.

    The scan resumes at the end of each match, so touching matches are
    found but overlapping ones are not. An empty needle has no matches.
    """
    if not needle:
        return []

    pattern = re.compile(re.escape(needle), re.IGNORECASE)
    return [MatchSpan(m.start(), m.end()) for m in pattern.finditer(haystack)]


def segment(haystack: str, spans: Sequence[MatchSpan]) -> List[Segment]:
    """Split haystack into alternating plain and highlighted fragments."""
    segments = []
    position = 0

    for span in spans:
        if position < span.start:
            segments.append(Segment(haystack[position:span.start]))
        segments.append(Segment(haystack[span.start:span.end], highlighted=True))
        position = span.end

    if position < len(haystack):
        segments.append(Segment(haystack[position:]))

    return segments


def highlight(haystack: str, needle: str) -> List[Segment]:
    """Shortcut for segmenting haystack on the spans of needle."""
    return segment(haystack, find_spans(haystack, needle))
