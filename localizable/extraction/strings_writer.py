"""Writer for plain-text strings tables."""

import logging
import shutil
from pathlib import Path

from ..errors import StorageError

logger = logging.getLogger(__name__)


class StringsWriter:
    """Writes converted strings tables and copies source files."""

    def write(self, content: str, output_path: str) -> None:
        """
        Write strings table text to disk.

        Args:
            content: Text produced by the converter
            output_path: Path to write the file to

        Raises:
            StorageError: If the file cannot be written
        """
        path = Path(output_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise StorageError(f"Unable to write {path}: {e}") from e

        logger.debug("Wrote %d characters to %s", len(content), path)

    def copy(self, source_path: str, output_path: str) -> None:
        """Copy a source file to the output location, replacing any existing file."""
        source = Path(source_path)
        target = Path(output_path)
        if source.resolve() == target.resolve():
            return

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, target)
        except OSError as e:
            raise StorageError(f"Unable to copy {source} to {target}: {e}") from e

        logger.debug("Copied %s to %s", source, target)
