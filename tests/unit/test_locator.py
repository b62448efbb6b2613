from __future__ import annotations

import pytest

from localizable.models import MatchSpan, Segment
from localizable.search.locator import find_spans, highlight, segment


@pytest.mark.parametrize("haystack", ["", "abc", "AAA"])
def test_empty_needle_has_no_matches(haystack: str) -> None:
    assert find_spans(haystack, "") == []


def test_overlapping_candidate_is_skipped() -> None:
    assert find_spans("AAA", "aa") == [MatchSpan(0, 2)]


def test_touching_matches_are_all_found() -> None:
    assert find_spans("abAB", "ab") == [MatchSpan(0, 2), MatchSpan(2, 4)]


def test_match_is_case_insensitive_and_offsets_index_original_text() -> None:
    haystack = '"title" = "Hello World";\n"subtitle" = "HELLO";'

    spans = find_spans(haystack, "hello")

    assert [haystack[s.start:s.end] for s in spans] == ["Hello", "HELLO"]
    assert all(span.length == 5 for span in spans)


def test_needle_is_matched_literally() -> None:
    assert find_spans("price: 5.00 or 5x00", "5.00") == [MatchSpan(7, 11)]


def test_spans_increase_without_overlap() -> None:
    spans = find_spans("na na nana banana", "na")

    for previous, current in zip(spans, spans[1:]):
        assert previous.end <= current.start
    assert len(spans) == 6


def test_segment_alternates_plain_and_highlighted_text() -> None:
    haystack = "Save or save as"

    assert segment(haystack, find_spans(haystack, "save")) == [
        Segment("Save", highlighted=True),
        Segment(" or "),
        Segment("save", highlighted=True),
        Segment(" as"),
    ]


def test_segment_omits_empty_plain_fragments() -> None:
    assert highlight("abab", "ab") == [
        Segment("ab", highlighted=True),
        Segment("ab", highlighted=True),
    ]


def test_segment_without_spans_returns_whole_text() -> None:
    assert segment("nothing here", []) == [Segment("nothing here")]
    assert segment("", []) == []


@pytest.mark.parametrize(
    ("haystack", "needle"),
    [
        ("Hello World", "o"),
        ('"a" = "b";\n"A" = "B";', '"a"'),
        ("AAAAA", "aa"),
        ("no match", "zzz"),
        ("ünïcode ÜNÏCODE", "ünï"),
    ],
)
def test_segments_recover_original_text(haystack: str, needle: str) -> None:
    fragments = highlight(haystack, needle)

    assert "".join(fragment.text for fragment in fragments) == haystack
