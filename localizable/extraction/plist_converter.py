"""Converter from XML property lists to plain-text strings tables."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List

from ..errors import FormatError, StorageError
from ..models.strings_entry import PropertyEntry

logger = logging.getLogger(__name__)

Document = ET.ElementTree


class PropertyListConverter:
    """Turns an XML property list into `"key" = "value";` lines."""

    ROOT_TAG = "plist"
    GROUP_TAG = "dict"
    KEY_TAG = "key"
    VALUE_TAG = "string"

    def parse(self, file_path: str) -> Document:
        """
        Parse an XML property list file.

        Args:
            file_path: Path to a property list already normalised to XML

        Returns:
            Parsed document

        Raises:
            StorageError: If the file cannot be read
            FormatError: If the content is not an XML property list
        """
        path = Path(file_path)
        try:
            content = path.read_bytes()
        except OSError as e:
            raise StorageError(f"Unable to read {path}: {e}") from e

        return self.parse_string(content)

    def parse_string(self, content) -> Document:
        """
        Parse XML property list content from a string or bytes.

        Raises:
            FormatError: If the content is not an XML property list
        """
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise FormatError(f"Invalid property list XML: {e}") from e

        if root.tag != self.ROOT_TAG:
            raise FormatError(f"Expected <{self.ROOT_TAG}> root element, got <{root.tag}>")

        return ET.ElementTree(root)

    def entries(self, document: Document) -> List[PropertyEntry]:
        """Collect key/value pairs from every top-level dictionary, in document order."""
        result = []

        for group_index, group in enumerate(document.getroot().findall(self.GROUP_TAG)):
            keys = group.findall(self.KEY_TAG)
            values = group.findall(self.VALUE_TAG)

            if len(keys) != len(values):
                logger.warning(
                    "Dictionary %d has %d keys and %d string values; extra elements ignored",
                    group_index, len(keys), len(values),
                )

            for key, value in zip(keys, values):
                result.append(PropertyEntry(key=key.text or "", value=value.text or ""))

        return result

    def convert(self, document: Document) -> str:
        """
        Convert a parsed property list to strings table text.

        Keys and values are written verbatim; embedded quotes or newlines
        are not escaped.
        """
        return self.render(self.entries(document))

    def render(self, entries: List[PropertyEntry]) -> str:
        """Join entries into strings table text, one line per entry."""
        return "".join(f"{entry.to_line()}\n" for entry in entries)
