"""Data models for strings table conversion."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class PropertyEntry:
    """A single key/value pair taken from one property list dictionary."""

    key: str
    value: str

    def to_line(self) -> str:
        """Render the entry as a strings table line (no escaping)."""
        return f'"{self.key}" = "{self.value}";'


@dataclass
class ConversionResult:
    """Outcome of converting one binary .strings file."""

    source: Path
    destination: Path
    entry_count: int
