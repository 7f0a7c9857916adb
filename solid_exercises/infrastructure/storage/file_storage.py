"""File-system backed reader and writer implementations."""
import logging
from pathlib import Path
from typing import Optional

from solid_exercises.domain.interfaces.reader import IReader
from solid_exercises.domain.interfaces.writer import IWriter
from solid_exercises.config.settings import Config


class FileReader(IReader):
    """
    Reads text files from the local file system.

    Follows Single Responsibility Principle - reading only.
    """

    def __init__(self, encoding: Optional[str] = None):
        """
        Initialize the reader.

        Args:
            encoding: Text encoding (defaults to Config.FILE_ENCODING)
        """
        self.encoding = encoding or Config.FILE_ENCODING
        self._logger = logging.getLogger(__name__)

    def read_file(self, file_path: str) -> str:
        """
        Read a text file.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = Path(file_path)
        if not path.is_file():
            self._logger.error(f"File not found: {file_path}")
            raise FileNotFoundError(f"File not found: {file_path}")

        content = path.read_text(encoding=self.encoding)
        self._logger.debug(f"Read {len(content)} characters from {file_path}")
        return content


class FileWriter(IWriter):
    """Writes text files to the local file system."""

    def __init__(self, encoding: Optional[str] = None):
        self.encoding = encoding or Config.FILE_ENCODING
        self._logger = logging.getLogger(__name__)

    def write_file(self, file_path: str, content: str) -> None:
        """Write a text file, creating parent directories as needed."""
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding=self.encoding)
        self._logger.debug(f"Wrote {len(content)} characters to {file_path}")
