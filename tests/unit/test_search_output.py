from __future__ import annotations

from localizable.models import SearchHit
from localizable.search import parse_search_output

EN = "/work/App/Pods/Kit/en.lproj/Localizable.strings"
FR = "/work/App/Pods/Kit/fr.lproj/Localizable.strings"


def test_text_match_yields_path_and_snippet() -> None:
    raw = f'{EN}:"greeting" = "Hello World";\n'

    assert parse_search_output(raw) == [
        SearchHit(file_path=EN, snippet='"greeting" = "Hello World";')
    ]


def test_plain_and_binary_lines_for_same_file_deduplicate() -> None:
    raw = f'{EN}:"greeting" = "Hello";\nBinary file {EN} matches\n'

    hits = parse_search_output(raw)

    assert len(hits) == 1
    assert hits[0].file_path == EN
    assert hits[0].snippet == '"greeting" = "Hello";'


def test_binary_only_match_has_empty_snippet() -> None:
    hits = parse_search_output(f"Binary file {FR} matches\n")

    assert hits == [SearchHit(file_path=FR, snippet="")]


def test_results_keep_first_seen_order() -> None:
    raw = "\n".join(
        [
            f'{FR}:"a" = "x";',
            f'{EN}:"a" = "x";',
            f'{FR}:"b" = "x";',
        ]
    )

    assert [hit.file_path for hit in parse_search_output(raw)] == [FR, EN]


def test_whitespace_and_blank_lines_are_ignored() -> None:
    raw = f"\n   {EN}:  value  \n\n"

    assert parse_search_output(raw) == [SearchHit(file_path=EN, snippet="value")]


def test_lines_without_extension_are_skipped() -> None:
    raw = f"grep: warning: recursive search of stdin\n{EN}:x\n"

    assert [hit.file_path for hit in parse_search_output(raw)] == [EN]


def test_path_is_cut_after_first_extension_marker() -> None:
    raw = "/p/Res.strings/nested/InfoPlist.strings:key\n"

    assert parse_search_output(raw)[0].file_path == "/p/Res.strings"


def test_custom_extension() -> None:
    raw = "/p/Main.stringsdict:<key>x</key>\n"

    assert parse_search_output(raw, extension=".stringsdict")[0].file_path == "/p/Main.stringsdict"


def test_empty_output_has_no_hits() -> None:
    assert parse_search_output("") == []
