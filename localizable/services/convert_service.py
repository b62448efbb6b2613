"""Convert workflow: file selection and serialized conversions."""

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..config import Config, config as default_config
from ..errors import FormatError, LocalizableError
from ..extraction.plist_converter import PropertyListConverter
from ..extraction.strings_writer import StringsWriter
from ..models.strings_entry import ConversionResult
from ..tools.base import PropertyListNormalizer

logger = logging.getLogger(__name__)

SUCCESS_STATUS = "File successfully converted and saved."


@dataclass
class ConvertState:
    """Everything the convert view shows."""
    file_path: Optional[Path] = None
    status: str = ""
    last_result: Optional[ConversionResult] = None


class ConvertService:
    """
    Converts binary .strings files to plain-text strings tables.

    Conversions run in a worker thread, one at a time.
    """

    def __init__(
        self,
        normalizer: PropertyListNormalizer,
        converter: Optional[PropertyListConverter] = None,
        writer: Optional[StringsWriter] = None,
        config: Optional[Config] = None,
    ):
        self.normalizer = normalizer
        self.converter = converter or PropertyListConverter()
        self.writer = writer or StringsWriter()
        self.config = config or default_config
        self.state = ConvertState()
        self._lock = asyncio.Lock()

    def select_file(self, file_path: str) -> ConvertState:
        """
        Select the file to convert.

        Raises:
            FormatError: If the path does not have the strings extension
        """
        path = Path(file_path)
        if path.suffix != self.config.strings_extension:
            self.state.status = (
                f"Invalid file type. Please select a {self.config.strings_extension} file."
            )
            raise FormatError(self.state.status)

        self.state.file_path = path
        self.state.status = f"File selected: {path.name}"
        return self.state

    def default_destination(self) -> Optional[Path]:
        """Suggested output path next to the selected file."""
        if self.state.file_path is None:
            return None
        return self.state.file_path.with_name(self.config.default_output_name)

    async def convert(self, destination: Optional[str] = None) -> ConversionResult:
        """
        Convert the selected file and save it to destination.

        Raises:
            FormatError: If no file is selected or the property list is malformed
            StorageError: If copying, reading or writing fails
            ProcessError: If the property list tool fails
        """
        source = self.state.file_path
        if source is None:
            self.state.status = "No file selected"
            raise FormatError(self.state.status)

        target = Path(destination) if destination else self.default_destination()

        async with self._lock:
            try:
                result = await asyncio.to_thread(self.convert_file, str(source), str(target))
            except LocalizableError as e:
                self.state.status = f"Error during conversion: {e}"
                raise

        self.state.last_result = result
        self.state.status = SUCCESS_STATUS
        return result

    def convert_file(self, source_path: str, output_path: str) -> ConversionResult:
        """
        Copy source to output, normalise the copy to XML and rewrite it as text.

        The copy is left in place on failure; its content is then undefined.
        """
        logger.info("Converting %s -> %s", source_path, output_path)

        self.writer.copy(source_path, output_path)
        self.normalizer.normalize(output_path)

        document = self.converter.parse(output_path)
        entries = self.converter.entries(document)
        self.writer.write(self.converter.render(entries), output_path)

        return ConversionResult(
            source=Path(source_path),
            destination=Path(output_path),
            entry_count=len(entries),
        )
