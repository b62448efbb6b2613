"""Error types raised by the converter and search pipeline."""

from typing import Optional


class LocalizableError(Exception):
    """Base class for every failure surfaced to a command handler."""


class FormatError(LocalizableError):
    """The property list (or a selected file) does not have the expected structure."""


class StorageError(LocalizableError):
    """Reading, writing or copying a user-selected path failed."""


class SearchError(LocalizableError):
    """The external search tool could not be launched or failed."""


class SearchCancelledError(SearchError):
    """The search was cancelled before the tool finished."""


class ProcessError(LocalizableError):
    """The external property list tool could not be launched or failed."""

    def __init__(self, message: str, returncode: Optional[int] = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
