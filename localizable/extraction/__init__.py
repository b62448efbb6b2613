"""Property list conversion and strings table output."""

from .plist_converter import PropertyListConverter
from .strings_writer import StringsWriter

__all__ = ["PropertyListConverter", "StringsWriter"]
