from __future__ import annotations

import threading
from pathlib import Path

import pytest

SAMPLE_PLIST = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
\t<key>Hello</key>
\t<string>World</string>
\t<key>cancel.button</key>
\t<string>Cancel</string>
</dict>
</plist>
"""


class FakeSearcher:
    """Returns canned output instead of running grep."""

    def __init__(self, output: str = "", error: Exception | None = None) -> None:
        self.output = output
        self.error = error
        self.calls: list[tuple[str, str]] = []
        self.cancelled = 0

    def search(self, root_dir: str, needle: str) -> str:
        self.calls.append((root_dir, needle))
        if self.error is not None:
            raise self.error
        return self.output

    def cancel(self) -> None:
        self.cancelled += 1


class BlockingSearcher(FakeSearcher):
    """Blocks until cancelled, then raises like the grep searcher does."""

    def __init__(self, output: str = "") -> None:
        super().__init__(output)
        self.started = threading.Event()
        self.released = threading.Event()

    def search(self, root_dir: str, needle: str) -> str:
        from localizable.errors import SearchCancelledError

        self.calls.append((root_dir, needle))
        if len(self.calls) == 1:
            self.started.set()
            self.released.wait(timeout=5)
            raise SearchCancelledError("Search cancelled")
        return self.output

    def cancel(self) -> None:
        super().cancel()
        self.released.set()


class FakeNormalizer:
    """Overwrites the file with fixed XML, like plutil -convert xml1 would."""

    def __init__(self, xml: str = SAMPLE_PLIST, error: Exception | None = None) -> None:
        self.xml = xml
        self.error = error
        self.calls: list[str] = []

    def normalize(self, file_path: str) -> None:
        self.calls.append(file_path)
        if self.error is not None:
            raise self.error
        Path(file_path).write_text(self.xml, encoding="utf-8")


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A project folder with a Pods folder holding two localization tables."""
    project = tmp_path / "App"
    en = project / "Pods" / "Kit" / "en.lproj"
    en.mkdir(parents=True)
    (en / "Localizable.strings").write_text(
        '"greeting" = "Hello World";\n"farewell" = "Goodbye";\n',
        encoding="utf-8",
    )
    fr = project / "Pods" / "Kit" / "fr.lproj"
    fr.mkdir(parents=True)
    (fr / "Localizable.strings").write_text(
        '"greeting" = "Bonjour";\n',
        encoding="utf-8",
    )
    return project


@pytest.fixture
def binary_strings(tmp_path: Path) -> Path:
    """Stand-in for a binary .strings file; FakeNormalizer replaces its content."""
    path = tmp_path / "in" / "Localizable.strings"
    path.parent.mkdir()
    path.write_bytes(b"bplist00\xd1\x01\x02")
    return path
